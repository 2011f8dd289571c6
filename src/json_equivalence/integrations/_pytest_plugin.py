"""pytest plugin exposing the ``assert_json_equivalent`` fixture.

Registered through the ``json_equivalence`` pytest11 entry point, so installing
the package is enough to make the fixture available.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_equivalence import ComparatorConfig, MalformedInputError, Value, compare
from json_equivalence.tree import ValueBuilder, parse_json


def _load(document: Any) -> Value:
    # Top-level strings are JSON text, never bare JSON string values
    if isinstance(document, (str, bytes)):
        return parse_json(document)
    return ValueBuilder().build(document)


@pytest.fixture(scope="session")
def assert_json_equivalent() -> Any:
    """Fixture that returns a callable JSON equivalence asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh JSONComparator per call).

    Usage in tests::

        def test_payload(assert_json_equivalent):
            assert_json_equivalent('{"b": 3, "arr": [1, 5, 2]}', {"arr": [5, 2, 1]},
                                   any_array_order=True, allow_extra_fields=True)

        def test_extra_field(assert_json_equivalent):
            with pytest.raises(AssertionError, match=r"unexpected field"):
                assert_json_equivalent({"foo": 3}, {})

    Returns:
        A callable ``_assert(actual, expected, *, any_array_order=False,
        allow_extra_fields=False, config=None) -> None`` that raises
        ``AssertionError`` when the documents are not equivalent.
    """

    def _assert(
        actual: Any,
        expected: Any,
        *,
        any_array_order: bool = False,
        allow_extra_fields: bool = False,
        config: ComparatorConfig | None = None,
    ) -> None:
        """Assert that two JSON documents are equivalent.

        Args:
            actual:   The actual JSON value (or JSON text) produced by the code
                      under test.
            expected: The expected/reference JSON value (or JSON text).
            any_array_order:    Accept array elements in any order.
            allow_extra_fields: Ignore object fields absent from *expected*.
            config:   Base ComparatorConfig; the keyword flags are applied on
                      top of it.

        Raises:
            AssertionError: When the documents diverge, with a message holding
                the failure path, both sub-values and both full documents.
                Also raised when either document is malformed JSON text.
        """
        cfg = config if config is not None else ComparatorConfig()
        if any_array_order:
            cfg = cfg.with_any_array_order()
        if allow_extra_fields:
            cfg = cfg.with_extra_fields_allowed()

        try:
            expected_value = _load(expected)
            actual_value = _load(actual)
        except MalformedInputError as exc:
            raise AssertionError(f"JSON documents could not be compared: {exc}") from exc

        result = compare(expected_value, actual_value, config=cfg)
        if result.failed():
            raise AssertionError(
                f"JSON documents not equivalent: {result.kind}\n"
                f"  at {result.describe()}\n"
                f"  actual:   {actual_value.to_json()}\n"
                f"  expected: {expected_value.to_json()}\n"
                f"  config:   {cfg}"
            )

    return _assert
