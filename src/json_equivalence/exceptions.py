"""Exceptions raised while building values for comparison.

Comparisons themselves never raise: every divergence is reported through
``ComparisonResult``.  The only exceptional condition is input that cannot be
turned into a ``Value`` tree in the first place.
"""

from __future__ import annotations

__all__ = ["MalformedInputError"]


class MalformedInputError(ValueError):
    """Raised when a document cannot be converted into a ``Value`` tree.

    Covers invalid JSON text, duplicate object keys and numbers that do not
    denote a finite mathematical value (NaN, infinities).  A comparison whose
    input raised this error has no result and must be treated as failed.
    """
