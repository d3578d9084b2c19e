"""PathNode: one addressed position in a paired actual/expected traversal.

Rendering rules:

- root                      -> ``$``
- string selector ``key``   -> ``<parent>['key']``
- integer selector ``N``    -> ``<parent>[N]``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["PathNode", "Selector"]

Selector = str | int | None


@dataclass(frozen=True, slots=True)
class PathNode:
    """A node in the comparison traversal.

    Attributes:
        selector: ``None`` for the root, a key for object members, an index
            for array elements.
        actual:   Value at this position in the actual document, or
            ``ABSENT`` when the position does not exist there.
        expected: Value at this position in the expected document.
        parent:   Enclosing node; ``None`` at the root.  Children only ever
            point upward, so a chain can never form a cycle.
    """

    selector: Selector
    actual: Any
    expected: Any
    parent: PathNode | None = None

    @classmethod
    def root(cls, actual: Any, expected: Any) -> PathNode:
        return cls(selector=None, actual=actual, expected=expected)

    def child(self, selector: str | int, actual: Any, expected: Any) -> PathNode:
        return PathNode(
            selector=selector, actual=actual, expected=expected, parent=self
        )

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def segments(self) -> tuple[str | int, ...]:
        """Selectors from the root's first child down to this node."""
        selectors: list[str | int] = []
        node: PathNode | None = self
        while node is not None and node.selector is not None:
            selectors.append(node.selector)
            node = node.parent
        selectors.reverse()
        return tuple(selectors)

    def name(self) -> str:
        if self.selector is None:
            return "$"
        if isinstance(self.selector, int):
            return f"[{self.selector}]"
        return self.selector

    def render_path(self) -> str:
        parts = ["$"]
        for selector in self.segments():
            if isinstance(selector, int):
                parts.append(f"[{selector}]")
            else:
                parts.append(f"['{selector}']")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render_path()
