"""algorithm subpackage: public API for the equivalence engine.

Provides the recursive engine, its configuration, and the order-insensitive
array matcher.  Import from this module (not from sub-modules directly) to
stay on the stable public interface.

Example::

    from json_equivalence.algorithm import ComparatorConfig, EquivalenceEngine
    from json_equivalence.tree import parse_json

    engine = EquivalenceEngine(ComparatorConfig().with_extra_fields_allowed())
    result = engine.compare(parse_json('{"b": 7}'), parse_json('{"a": 3, "b": 7}'))
    # result.passed() is True
"""

from __future__ import annotations

from json_equivalence.algorithm.config import ComparatorConfig
from json_equivalence.algorithm.engine import EquivalenceEngine, compare_values
from json_equivalence.algorithm.matcher import ArrayMatch, ArrayMatcher

__all__ = [
    "ArrayMatch",
    "ArrayMatcher",
    "ComparatorConfig",
    "EquivalenceEngine",
    "compare_values",
]
