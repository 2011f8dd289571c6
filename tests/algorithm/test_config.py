"""Tests for ComparatorConfig frozen dataclass.

Covers:
- Default values (ordered arrays, no extra fields)
- Immutability (FrozenInstanceError on assignment)
- Combinators return new instances and leave the receiver unchanged
- Combinators compose in either order
- Validation: flags must be bools
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_equivalence.algorithm.config import ComparatorConfig

# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestComparatorConfigDefaults:
    def test_default_any_array_order(self) -> None:
        assert ComparatorConfig().any_array_order is False

    def test_default_allow_extra_fields(self) -> None:
        assert ComparatorConfig().allow_extra_fields is False

    def test_keyword_construction(self) -> None:
        config = ComparatorConfig(any_array_order=True, allow_extra_fields=True)
        assert config.any_array_order is True
        assert config.allow_extra_fields is True


class TestComparatorConfigImmutability:
    def test_assignment_raises(self) -> None:
        config = ComparatorConfig()
        with pytest.raises(FrozenInstanceError):
            config.any_array_order = True  # type: ignore[misc]

    def test_equal_configs_compare_equal(self) -> None:
        assert ComparatorConfig() == ComparatorConfig()
        assert hash(ComparatorConfig()) == hash(ComparatorConfig())


class TestComparatorConfigValidation:
    def test_non_bool_any_array_order_raises(self) -> None:
        with pytest.raises(TypeError, match="any_array_order"):
            ComparatorConfig(any_array_order=1)  # type: ignore[arg-type]

    def test_non_bool_allow_extra_fields_raises(self) -> None:
        with pytest.raises(TypeError, match="allow_extra_fields"):
            ComparatorConfig(allow_extra_fields="yes")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombinators:
    def test_with_any_array_order_sets_flag(self) -> None:
        config = ComparatorConfig().with_any_array_order()
        assert config.any_array_order is True
        assert config.allow_extra_fields is False

    def test_with_extra_fields_allowed_sets_flag(self) -> None:
        config = ComparatorConfig().with_extra_fields_allowed()
        assert config.allow_extra_fields is True
        assert config.any_array_order is False

    def test_receiver_is_unchanged(self) -> None:
        base = ComparatorConfig()
        base.with_any_array_order()
        base.with_extra_fields_allowed()
        assert base == ComparatorConfig()

    def test_returns_new_instance(self) -> None:
        base = ComparatorConfig()
        assert base.with_any_array_order() is not base

    def test_combinators_compose_in_any_order(self) -> None:
        a = ComparatorConfig().with_any_array_order().with_extra_fields_allowed()
        b = ComparatorConfig().with_extra_fields_allowed().with_any_array_order()
        assert a == b == ComparatorConfig(any_array_order=True, allow_extra_fields=True)

    def test_combinator_is_idempotent(self) -> None:
        config = ComparatorConfig().with_any_array_order()
        assert config.with_any_array_order() == config
