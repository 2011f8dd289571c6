"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Tiers cover wide order-insensitive arrays (where every expected element is
tried against every actual element) and deeply nested objects.
"""

from __future__ import annotations

from typing import Any

import pytest


def _make_records(count: int) -> list[dict[str, Any]]:
    return [{"id": i, "name": f"user_{i}", "tags": [i % 3, i % 5]} for i in range(count)]


def _make_reversed_pair(count: int) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Same records, actual in reverse order."""
    expected = _make_records(count)
    return expected, list(reversed(_make_records(count)))


def _make_nested(depth: int, width: int) -> dict[str, Any]:
    """Object tree of the given depth with ``width`` members per level."""
    if depth == 0:
        return {f"leaf_{i}": i for i in range(width)}
    return {f"level_{depth}_{i}": _make_nested(depth - 1, width) for i in range(width)}


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10_records_reversed() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    return _make_reversed_pair(10)


@pytest.fixture
def pair_100_records_reversed() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    return _make_reversed_pair(100)


@pytest.fixture
def pair_nested_objects() -> tuple[dict[str, Any], dict[str, Any]]:
    """3 levels x 6 members: ~1300 leaves, identical on both sides."""
    return _make_nested(3, 6), _make_nested(3, 6)
