"""JSONComparator: orchestrator that wires ValueBuilder + EquivalenceEngine.

This is the wiring layer between raw documents and the engine.  It accepts
plain Python data, ``Value`` trees or JSON text, converts them with
``ValueBuilder``/``parse_json``, and delegates to ``EquivalenceEngine``.

Comparators are immutable: ``allowing_any_array_ordering()`` and
``allowing_extra_unexpected_fields()`` return new comparators, so a base
comparator can be shared and specialised per assertion.
"""

from __future__ import annotations

import logging
from typing import Any

from json_equivalence.algorithm.config import ComparatorConfig
from json_equivalence.algorithm.engine import EquivalenceEngine
from json_equivalence.result import ComparisonResult
from json_equivalence.tree.builder import ValueBuilder, parse_json

__all__ = ["JSONComparator"]

logger = logging.getLogger(__name__)


class JSONComparator:
    """Compares an actual JSON document against an expected one.

    Example::

        from json_equivalence.comparator import JSONComparator

        cmp = JSONComparator().allowing_any_array_ordering()
        result = cmp.compare({"fib": [0, 1, 1, 2, 3]}, {"fib": [3, 1, 0, 2, 1]})
        result.passed()   # True
    """

    def __init__(self, config: ComparatorConfig | None = None) -> None:
        self._config: ComparatorConfig = (
            config if config is not None else ComparatorConfig()
        )
        self._engine = EquivalenceEngine(self._config)
        self._builder = ValueBuilder()

    @property
    def config(self) -> ComparatorConfig:
        return self._config

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def allowing_any_array_ordering(self) -> JSONComparator:
        """Return a comparator that accepts array elements in any order.

        For example ``{"fib": [0, 1, 1, 2, 3]}`` then matches
        ``{"fib": [3, 1, 0, 2, 1]}``.
        """
        return JSONComparator(self._config.with_any_array_order())

    def allowing_extra_unexpected_fields(self) -> JSONComparator:
        """Return a comparator that ignores fields absent from the expected document.

        Array elements are still counted: expected ``[{"name": "John"}]`` does
        not match actual ``[{"name": "John"}, {"name": "Bob"}]``.
        """
        return JSONComparator(self._config.with_extra_fields_allowed())

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, expected: Any, actual: Any) -> ComparisonResult:
        """Compare two documents given as Python data or ``Value`` trees.

        Args:
            expected: The reference document.
            actual:   The document produced by the code under test.

        Returns:
            The engine's ``ComparisonResult``.

        Raises:
            TypeError: If either document is not JSON data.
            MalformedInputError: If either document holds a non-finite number.
        """
        result = self._engine.compare(
            self._builder.build(expected), self._builder.build(actual)
        )
        if result.failed():
            logger.debug(
                "JSON comparison failed at %s (%s)", result.pointer or "/", result.kind
            )
        return result

    def compare_text(self, expected_text: str, actual_text: str) -> ComparisonResult:
        """Parse two JSON texts and compare them.

        Raises:
            MalformedInputError: If either text is not a valid JSON document.
        """
        return self.compare(parse_json(expected_text), parse_json(actual_text))
