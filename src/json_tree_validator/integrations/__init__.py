"""Integrations subpackage for json-tree-validator.

Contains the pytest plugin (auto-discovered via the pytest11 entry point);
it is loaded by pytest itself and needs no import from here.
"""

from __future__ import annotations

__all__: list[str] = []
