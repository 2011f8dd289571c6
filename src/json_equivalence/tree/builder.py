"""ValueBuilder and parse_json: turn Python data or JSON text into Value trees.

Uses recursive dispatch to convert dicts, lists and scalar values into a
tree of immutable ``Value`` nodes.  Object member order is preserved because
mismatch reporting for unexpected fields follows the actual document's order.

``parse_json`` keeps numbers as ``Decimal`` so that the literal written in the
document ("3.0" vs "3") survives into mismatch messages, and rejects
documents that the engine cannot reason about (duplicate keys, NaN,
Infinity) with ``MalformedInputError``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from json_equivalence.exceptions import MalformedInputError
from json_equivalence.tree.nodes import Value

__all__ = ["JsonValue", "ValueBuilder", "parse_json"]

# Type alias for plain Python JSON data accepted by the builder
JsonValue = (
    dict[str, Any] | list[Any] | tuple[Any, ...] | str | int | float | Decimal | bool | None
)


@dataclass
class ValueBuilder:
    """Converts plain Python JSON data into a ``Value`` tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    ``Value`` instances are passed through unchanged, so callers can mix
    pre-built trees and raw data.

    Example::
        builder = ValueBuilder()
        value = builder.build({"fib": [0, 1, 1, 2]})
        value.to_json()   # '{"fib":[0,1,1,2]}'
    """

    def build(self, value: JsonValue | Value) -> Value:
        """Convert a JSON value to a ``Value`` tree.

        Args:
            value: Any valid JSON value (dict, list, tuple, str, int, float,
                Decimal, bool, None) or an existing ``Value``.

        Returns:
            The root ``Value`` of the converted tree.

        Raises:
            TypeError: If value (or anything nested in it) is not JSON data,
                or an object key is not a ``str``.
            MalformedInputError: If a number is NaN or infinite.
        """
        if isinstance(value, Value):
            return value

        # CRITICAL: bool MUST be checked before int
        if isinstance(value, bool):
            return Value.boolean(value)

        if value is None:
            return Value.null()

        if isinstance(value, dict):
            return Value.object((key, self.build(member)) for key, member in value.items())

        if isinstance(value, (list, tuple)):
            return Value.array(self.build(item) for item in value)

        if isinstance(value, str):
            return Value.string(value)

        if isinstance(value, (int, float, Decimal)):
            return Value.number(value)

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def _reject_constant(name: str) -> Any:
    msg = f"non-finite number is not valid JSON: {name}"
    raise MalformedInputError(msg)


def _unique_members(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    members: dict[str, Any] = {}
    for key, member in pairs:
        if key in members:
            msg = f"duplicate object key: {key!r}"
            raise MalformedInputError(msg)
        members[key] = member
    return members


def parse_json(text: str | bytes) -> Value:
    """Parse JSON text into a ``Value`` tree.

    Args:
        text: A complete JSON document.

    Returns:
        The root ``Value`` of the document.

    Raises:
        MalformedInputError: If the text is not valid JSON, repeats an object
            key, or spells a non-finite number (NaN, Infinity).
    """
    try:
        data = json.loads(
            text,
            parse_float=Decimal,
            parse_int=Decimal,
            parse_constant=_reject_constant,
            object_pairs_hook=_unique_members,
        )
    except json.JSONDecodeError as exc:
        msg = f"invalid JSON document: {exc}"
        raise MalformedInputError(msg) from exc
    return ValueBuilder().build(data)
