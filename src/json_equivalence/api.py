"""Public API functions for json-equivalence.

This module provides the user-facing functions: compare, compare_json_text and
is_equivalent.  Each call creates a fresh JSONComparator to guarantee zero
global state between calls.
"""

from __future__ import annotations

from typing import Any

from json_equivalence.algorithm.config import ComparatorConfig
from json_equivalence.comparator import JSONComparator
from json_equivalence.result import ComparisonResult

__all__ = ["compare", "compare_json_text", "is_equivalent"]


def compare(
    expected: Any,
    actual: Any,
    config: ComparatorConfig | None = None,
) -> ComparisonResult:
    """Compare an actual JSON value against an expected one.

    Args:
        expected: Reference JSON value (dict, list, str, int, float, Decimal,
                  bool, None) or a pre-built ``Value``.
        actual:   JSON value under test.
        config:   Equivalence relation.  Defaults to ``ComparatorConfig()``
                  (ordered arrays, no extra fields) when None.

    Returns:
        A ``ComparisonResult``; query ``passed()`` and ``describe()``.
    """
    return JSONComparator(config=config).compare(expected, actual)


def compare_json_text(
    expected_text: str,
    actual_text: str,
    config: ComparatorConfig | None = None,
) -> ComparisonResult:
    """Parse two JSON documents and compare them.

    Raises:
        MalformedInputError: If either text is not a valid JSON document.
    """
    return JSONComparator(config=config).compare_text(expected_text, actual_text)


def is_equivalent(
    expected: Any,
    actual: Any,
    config: ComparatorConfig | None = None,
) -> bool:
    """Return True if *actual* is equivalent to *expected* under *config*."""
    return compare(expected, actual, config=config).passed()
