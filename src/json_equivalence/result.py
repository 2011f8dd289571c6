"""ComparisonResult dataclass and MismatchKind taxonomy.

This module provides the result type returned by every comparison.  A result
is either a pass (no data) or a failure located by a path from the document
root and explained by a message holding both sub-values' textual forms.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_equivalence.tree.nodes import Value

__all__ = ["ComparisonResult", "MismatchKind", "PathSegment"]

# An object key or an array index
PathSegment = str | int


class MismatchKind(StrEnum):
    """Why two documents diverge at the reported path.

    - KIND_MISMATCH:     Different value kinds (e.g. object vs array).
    - VALUE_MISMATCH:    Same scalar kind, different value.
    - MISSING_FIELD:     An expected object key is absent from actual.
    - UNEXPECTED_FIELD:  An actual object key is absent from expected
                         (only when extra fields are not allowed).
    - LENGTH_MISMATCH:   Arrays of different lengths.
    - UNMATCHED_ELEMENT: Order-insensitive arrays where some expected element
                         has no compatible actual element left.
    """

    KIND_MISMATCH = auto()
    VALUE_MISMATCH = auto()
    MISSING_FIELD = auto()
    UNEXPECTED_FIELD = auto()
    LENGTH_MISMATCH = auto()
    UNMATCHED_ELEMENT = auto()


def _escape_pointer_token(segment: PathSegment) -> str:
    # RFC 6901: "~" must be escaped before "/"
    return str(segment).replace("~", "~0").replace("/", "~1")


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Outcome of one comparison.

    Attributes:
        kind:     ``None`` for a pass; the MismatchKind of the witness otherwise.
        path:     Keys and indices from the root to the divergent node.
        message:  Human-readable explanation naming both textual forms.
        expected: Expected sub-value at ``path`` (None for an unexpected field).
        actual:   Actual sub-value at ``path`` (None for a missing field).
        cause:    For UNMATCHED_ELEMENT, the failure of the nearest actual
                  candidate against the witness; None otherwise.
    """

    kind: MismatchKind | None = None
    path: tuple[PathSegment, ...] = ()
    message: str = ""
    expected: Value | None = None
    actual: Value | None = None
    cause: ComparisonResult | None = None

    @classmethod
    def success(cls) -> ComparisonResult:
        return cls()

    @classmethod
    def failure(
        cls,
        kind: MismatchKind,
        path: tuple[PathSegment, ...],
        message: str,
        expected: Value | None = None,
        actual: Value | None = None,
        cause: ComparisonResult | None = None,
    ) -> ComparisonResult:
        return cls(
            kind=kind,
            path=path,
            message=message,
            expected=expected,
            actual=actual,
            cause=cause,
        )

    def passed(self) -> bool:
        return self.kind is None

    def failed(self) -> bool:
        return self.kind is not None

    @property
    def root_cause(self) -> ComparisonResult:
        """The innermost failure reached by following ``cause`` links."""
        result = self
        while result.cause is not None:
            result = result.cause
        return result

    @property
    def pointer(self) -> str:
        """The failure path as an RFC 6901 JSON Pointer ("" is the root)."""
        return "".join("/" + _escape_pointer_token(segment) for segment in self.path)

    def describe(self) -> str:
        """Render the result for an assertion message.

        Failures read ``"<pointer>: <message>"`` with the root spelled ``/``.
        """
        if self.passed():
            return "documents are equivalent"
        return f"{self.pointer or '/'}: {self.message}"

    def __str__(self) -> str:
        return self.describe()
