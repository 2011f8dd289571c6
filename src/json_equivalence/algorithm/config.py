"""ComparatorConfig: the two independent axes of the equivalence relation.

ComparatorConfig is a frozen (immutable) dataclass.  The combinators return
new instances, so a base configuration can be specialised per call site
without affecting anyone else holding it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class ComparatorConfig:
    """Immutable configuration for the equivalence engine.

    Both flags apply uniformly at every nesting level.

    Attributes:
        any_array_order: When True, array elements may appear in any order.
            Array lengths must still match.  Default False (index-for-index).
        allow_extra_fields: When True, object keys present only in the actual
            document are ignored.  Keys missing from actual are never
            tolerated.  Default False.
    """

    any_array_order: bool = False
    allow_extra_fields: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.any_array_order, bool):
            msg = f"any_array_order must be a bool, got {self.any_array_order!r}"
            raise TypeError(msg)
        if not isinstance(self.allow_extra_fields, bool):
            msg = f"allow_extra_fields must be a bool, got {self.allow_extra_fields!r}"
            raise TypeError(msg)

    def with_any_array_order(self) -> ComparatorConfig:
        """Return a copy that ignores array element order."""
        return replace(self, any_array_order=True)

    def with_extra_fields_allowed(self) -> ComparatorConfig:
        """Return a copy that tolerates extra fields in actual objects."""
        return replace(self, allow_extra_fields=True)
