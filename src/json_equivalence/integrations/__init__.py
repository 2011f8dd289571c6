"""Integrations subpackage for json-equivalence.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point)

The plugin module is not imported here; pytest loads it through the entry
point so that importing json_equivalence never imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
