"""Value dataclass and ValueKind StrEnum: the parsed-document representation.

A ``Value`` is an immutable tree node.  Leaves hold ``None``, ``bool``,
``decimal.Decimal`` or ``str``; containers hold tuples of children, so a tree
can be shared freely between comparisons and threads.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum, auto
from typing import Any

from json_equivalence.exceptions import MalformedInputError

__all__ = ["Value", "ValueKind"]

# RFC 8259 number: optional minus, no leading zeros, optional fraction and exponent
_JSON_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?", re.ASCII)


class ValueKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names, which is also how kinds
    are spelled in mismatch messages ("expected object ... but found array").
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    OBJECT = auto()
    ARRAY = auto()


@dataclass(frozen=True, slots=True)
class Value:
    """A node in a parsed JSON document.

    Attributes:
        kind:    Which JSON kind this node is (see ValueKind).
        scalar:  ``None``/``bool``/``Decimal``/``str`` payload for leaves;
                 ``None`` for OBJECT and ARRAY.
        literal: Textual form of a NUMBER as written ("3", "3.0", "1E+5");
                 empty for every other kind.
        fields:  Ordered ``(key, value)`` members of an OBJECT.  Keys are
                 unique and case-sensitive.
        items:   Ordered elements of an ARRAY.

    Use the factory classmethods rather than the constructor; they enforce
    the per-kind invariants.
    """

    kind: ValueKind
    scalar: Any = None
    literal: str = ""
    fields: tuple[tuple[str, Value], ...] = ()
    items: tuple[Value, ...] = ()

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def null(cls) -> Value:
        return cls(ValueKind.NULL)

    @classmethod
    def boolean(cls, flag: bool) -> Value:
        if not isinstance(flag, bool):
            msg = f"boolean value must be a bool, got {type(flag)!r}"
            raise TypeError(msg)
        return cls(ValueKind.BOOLEAN, scalar=flag)

    @classmethod
    def number(cls, number: int | float | Decimal | str) -> Value:
        """Build a NUMBER from an int, float, Decimal or numeric literal.

        Floats go through ``repr`` so that ``3.1`` keeps its shortest decimal
        form instead of its binary expansion.  Ints go through ``Decimal`` so
        that arbitrarily long ints are accepted.  Literal strings must follow
        the JSON number grammar exactly (no sign prefix, padding or ``_``).

        Raises:
            MalformedInputError: If the number is not finite or the literal
                is not a JSON number.
            TypeError: For ``bool`` and non-numeric types.
        """
        if isinstance(number, bool) or not isinstance(
            number, (int, float, Decimal, str)
        ):
            msg = f"number value must be int, float, Decimal or str, got {type(number)!r}"
            raise TypeError(msg)

        if isinstance(number, float):
            if not math.isfinite(number):
                msg = f"number is not a finite value: {number!r}"
                raise MalformedInputError(msg)
            literal = repr(number)
        elif isinstance(number, Decimal):
            if not number.is_finite():
                msg = f"number is not a finite value: {str(number)!r}"
                raise MalformedInputError(msg)
            literal = str(number)
        elif isinstance(number, int):
            literal = str(Decimal(number))
        else:
            literal = number

        if _JSON_NUMBER.fullmatch(literal) is None:
            msg = f"invalid numeric literal: {literal!r}"
            raise MalformedInputError(msg)

        return cls(ValueKind.NUMBER, scalar=Decimal(literal), literal=literal)

    @classmethod
    def string(cls, text: str) -> Value:
        if not isinstance(text, str):
            msg = f"string value must be a str, got {type(text)!r}"
            raise TypeError(msg)
        return cls(ValueKind.STRING, scalar=text)

    @classmethod
    def object(
        cls, members: Mapping[str, Value] | Iterable[tuple[str, Value]] = ()
    ) -> Value:
        """Build an OBJECT from a mapping or an iterable of ``(key, value)`` pairs.

        Raises:
            MalformedInputError: If a key occurs more than once.
            TypeError: If a key is not a ``str`` or a member is not a ``Value``.
        """
        pairs = members.items() if isinstance(members, Mapping) else members
        fields: list[tuple[str, Value]] = []
        seen: set[str] = set()
        for key, member in pairs:
            if not isinstance(key, str):
                msg = f"object keys must be str, got {type(key)!r}"
                raise TypeError(msg)
            if not isinstance(member, Value):
                msg = f"object member {key!r} must be a Value, got {type(member)!r}"
                raise TypeError(msg)
            if key in seen:
                msg = f"duplicate object key: {key!r}"
                raise MalformedInputError(msg)
            seen.add(key)
            fields.append((key, member))
        return cls(ValueKind.OBJECT, fields=tuple(fields))

    @classmethod
    def array(cls, elements: Iterable[Value] = ()) -> Value:
        items = tuple(elements)
        for idx, item in enumerate(items):
            if not isinstance(item, Value):
                msg = f"array element {idx} must be a Value, got {type(item)!r}"
                raise TypeError(msg)
        return cls(ValueKind.ARRAY, items=items)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def keys(self) -> tuple[str, ...]:
        """Return the member keys of an OBJECT in insertion order (empty otherwise)."""
        return tuple(key for key, _ in self.fields)

    def get(self, key: str) -> Value | None:
        """Return the member stored under *key*, or None when it is absent."""
        for name, member in self.fields:
            if name == key:
                return member
        return None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_json(self) -> str:
        """Render the compact JSON text used in mismatch messages."""
        if self.kind == ValueKind.NULL:
            return "null"
        if self.kind == ValueKind.BOOLEAN:
            return "true" if self.scalar else "false"
        if self.kind == ValueKind.NUMBER:
            return self.literal
        if self.kind == ValueKind.STRING:
            return json.dumps(self.scalar, ensure_ascii=False)
        if self.kind == ValueKind.OBJECT:
            members = ",".join(
                f"{json.dumps(key, ensure_ascii=False)}:{member.to_json()}"
                for key, member in self.fields
            )
            return "{" + members + "}"
        return "[" + ",".join(item.to_json() for item in self.items) + "]"

    def to_python(self) -> Any:
        """Convert back to plain Python data (dict, list, str, int, float, bool, None).

        Integral literals without a fraction or exponent become ``int``; every
        other number becomes ``float``.
        """
        if self.kind == ValueKind.NUMBER:
            if any(ch in self.literal for ch in ".eE"):
                return float(self.scalar)
            return int(self.scalar)
        if self.kind == ValueKind.OBJECT:
            return {key: member.to_python() for key, member in self.fields}
        if self.kind == ValueKind.ARRAY:
            return [item.to_python() for item in self.items]
        return self.scalar

    def __str__(self) -> str:
        return self.to_json()
