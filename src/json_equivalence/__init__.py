"""JSON equivalence - structural comparison of JSON documents with located mismatches."""

from __future__ import annotations

from json_equivalence.algorithm.config import ComparatorConfig
from json_equivalence.api import compare, compare_json_text, is_equivalent
from json_equivalence.comparator import JSONComparator
from json_equivalence.exceptions import MalformedInputError
from json_equivalence.result import ComparisonResult, MismatchKind
from json_equivalence.tree import Value, ValueKind, parse_json

__version__: str = "0.1.0"
__all__: list[str] = [
    "ComparatorConfig",
    "ComparisonResult",
    "JSONComparator",
    "MalformedInputError",
    "MismatchKind",
    "Value",
    "ValueKind",
    "compare",
    "compare_json_text",
    "is_equivalent",
    "parse_json",
]
