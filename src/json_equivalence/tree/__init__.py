"""Tree subpackage for document representation primitives.

Re-exports the public API for the tree module:
- Value: immutable node of a parsed JSON document
- ValueKind: StrEnum of the six value kinds (NULL, BOOLEAN, NUMBER, STRING, OBJECT, ARRAY)
- ValueBuilder: converts plain Python JSON data into a Value tree
- parse_json: parses JSON text into a Value tree
"""

from json_equivalence.tree.builder import ValueBuilder, parse_json
from json_equivalence.tree.nodes import Value, ValueKind

__all__ = ["Value", "ValueBuilder", "ValueKind", "parse_json"]
