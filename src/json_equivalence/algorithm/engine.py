"""EquivalenceEngine: recursive structural equivalence over Value trees.

Traverses the expected and actual trees simultaneously and returns the first
point of divergence as a ``ComparisonResult``.

Dispatch order:
1. Kind mismatch      -> KIND_MISMATCH
2. NULL               -> always passes
3. BOOLEAN / STRING   -> exact equality
4. NUMBER             -> mathematical equality (3 == 3.0)
5. OBJECT             -> expected keys first, then unexpected keys
6. ARRAY              -> equal lengths, then positional or matched elements

The engine is a pure function of its inputs: it never mutates a Value, holds
no state between calls and never raises for well-formed trees within the
interpreter recursion limit (see ``EquivalenceEngine``).
"""

from __future__ import annotations

import json

from json_equivalence.algorithm.config import ComparatorConfig
from json_equivalence.algorithm.matcher import ArrayMatcher
from json_equivalence.result import ComparisonResult, MismatchKind, PathSegment
from json_equivalence.tree.nodes import Value, ValueKind

__all__ = ["EquivalenceEngine", "compare_values"]


class EquivalenceEngine:
    """Recursive equivalence check for two ``Value`` trees.

    Each nesting level costs two Python frames, so trees nested deeper than
    about half of ``sys.getrecursionlimit()`` raise ``RecursionError``.
    ``ValueBuilder`` and ``parse_json`` recurse as well, so the same bound
    applies to building the trees.

    Example::

        from json_equivalence.algorithm import ComparatorConfig, EquivalenceEngine
        from json_equivalence.tree import ValueBuilder

        builder = ValueBuilder()
        engine = EquivalenceEngine(ComparatorConfig().with_any_array_order())
        result = engine.compare(builder.build([5, 2, 1]), builder.build([1, 5, 2]))
        result.passed()   # True
    """

    def __init__(self, config: ComparatorConfig | None = None) -> None:
        """Initialise the engine.

        Args:
            config: Equivalence relation to apply.  Defaults to
                ``ComparatorConfig()`` (ordered arrays, no extra fields).
        """
        self._config = config if config is not None else ComparatorConfig()
        self._matcher = ArrayMatcher(self._compare)

    @property
    def config(self) -> ComparatorConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, expected: Value, actual: Value) -> ComparisonResult:
        """Compare two documents and return the first divergence, if any.

        Args:
            expected: Root of the expected document.
            actual:   Root of the actual document.

        Returns:
            A passing ``ComparisonResult``, or a failure whose path leads
            from the root to the witness.
        """
        return self._compare(expected, actual, ())

    # ------------------------------------------------------------------
    # Recursive dispatcher
    # ------------------------------------------------------------------

    def _compare(
        self, expected: Value, actual: Value, path: tuple[PathSegment, ...]
    ) -> ComparisonResult:
        if expected.kind != actual.kind:
            return ComparisonResult.failure(
                MismatchKind.KIND_MISMATCH,
                path,
                f"expected {expected.kind} {expected.to_json()} "
                f"but found {actual.kind} {actual.to_json()}",
                expected,
                actual,
            )

        kind = expected.kind

        if kind == ValueKind.NULL:
            return ComparisonResult.success()

        if kind in (ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING):
            # Decimal equality is mathematical: Decimal("3") == Decimal("3.0")
            if expected.scalar == actual.scalar:
                return ComparisonResult.success()
            return ComparisonResult.failure(
                MismatchKind.VALUE_MISMATCH,
                path,
                f"expected {expected.to_json()} but found {actual.to_json()}",
                expected,
                actual,
            )

        if kind == ValueKind.OBJECT:
            return self._compare_objects(expected, actual, path)

        return self._compare_arrays(expected, actual, path)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _compare_objects(
        self, expected: Value, actual: Value, path: tuple[PathSegment, ...]
    ) -> ComparisonResult:
        """Compare two OBJECT nodes.

        Expected keys are visited in expected order and checked before any
        unexpected key, so a missing or different field always wins over an
        extra one.
        """
        actual_members = dict(actual.fields)

        for key, exp_member in expected.fields:
            act_member = actual_members.get(key)
            if act_member is None:
                return ComparisonResult.failure(
                    MismatchKind.MISSING_FIELD,
                    (*path, key),
                    f"missing field {_quote(key)}: expected {exp_member.to_json()} "
                    f"in {actual.to_json()}",
                    exp_member,
                    None,
                )
            result = self._compare(exp_member, act_member, (*path, key))
            if result.failed():
                return result

        if self._config.allow_extra_fields:
            return ComparisonResult.success()

        expected_keys = set(expected.keys())
        for key, act_member in actual.fields:
            if key not in expected_keys:
                return ComparisonResult.failure(
                    MismatchKind.UNEXPECTED_FIELD,
                    (*path, key),
                    f"unexpected field {_quote(key)} with value {act_member.to_json()}: "
                    f"expected {expected.to_json()}",
                    None,
                    act_member,
                )

        return ComparisonResult.success()

    def _compare_arrays(
        self, expected: Value, actual: Value, path: tuple[PathSegment, ...]
    ) -> ComparisonResult:
        """Compare two ARRAY nodes.

        Lengths must match under every configuration; ``any_array_order``
        relaxes position only, never cardinality.
        """
        n_expected, n_actual = len(expected.items), len(actual.items)
        if n_expected != n_actual:
            return ComparisonResult.failure(
                MismatchKind.LENGTH_MISMATCH,
                path,
                f"array length mismatch: expected {n_expected}, actual {n_actual}: "
                f"expected {expected.to_json()} but found {actual.to_json()}",
                expected,
                actual,
            )

        if not self._config.any_array_order:
            for idx, (exp_item, act_item) in enumerate(
                zip(expected.items, actual.items, strict=True)
            ):
                result = self._compare(exp_item, act_item, (*path, idx))
                if result.failed():
                    return result
            return ComparisonResult.success()

        match = self._matcher.match(expected.items, actual.items, path)
        witness = match.witness
        if witness is None:
            return ComparisonResult.success()

        exp_item = expected.items[witness]
        message = (
            f"no match for expected element [{witness}] {exp_item.to_json()} "
            f"in {actual.to_json()}"
        )
        if match.compatible_count:
            message += (
                f"; its {match.compatible_count} compatible element(s) are "
                f"needed by other expected elements"
            )
        if match.nearest is not None and match.nearest_result is not None:
            message += (
                f"; nearest candidate [{match.nearest}] "
                f"{actual.items[match.nearest].to_json()} differs at "
                f"{match.nearest_result.describe()}"
            )

        return ComparisonResult.failure(
            MismatchKind.UNMATCHED_ELEMENT,
            path,
            message,
            exp_item,
            actual,
            cause=match.nearest_result,
        )


def _quote(key: str) -> str:
    return json.dumps(key, ensure_ascii=False)


def compare_values(
    expected: Value,
    actual: Value,
    config: ComparatorConfig | None = None,
) -> ComparisonResult:
    """Compare two ``Value`` trees under *config* with a fresh engine."""
    return EquivalenceEngine(config).compare(expected, actual)
