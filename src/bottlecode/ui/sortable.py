"""Visual list model driven by a sortable-list library.

A sortable library relocates nodes in its own list as part of showing a drag.
The application never trusts that list: handlers discard the relocated node
and re-render the whole list from the board afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Iterable, List, Optional, Tuple

_keys = count(1)


@dataclass(eq=False)
class ListNode:
    color: Optional[str]
    key: int = field(default_factory=lambda: next(_keys))

    def clone(self) -> "ListNode":
        return ListNode(color=self.color)


@dataclass
class SortableList:
    nodes: List[ListNode] = field(default_factory=list)

    def render(self, colors: Iterable[Optional[str]]) -> None:
        """Replace every node with fresh ones derived from ``colors``."""
        self.nodes = [ListNode(color=color) for color in colors]

    def discard(self, node: ListNode) -> bool:
        """Remove ``node`` by identity; returns False if it is not in the list."""
        for i, existing in enumerate(self.nodes):
            if existing is node:
                del self.nodes[i]
                return True
        return False

    def colors(self) -> Tuple[Optional[str], ...]:
        return tuple(node.color for node in self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)
