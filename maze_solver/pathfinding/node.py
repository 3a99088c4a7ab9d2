"""Search nodes stored in a per-search arena."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.position import Position
from . import costs


@dataclass(frozen=True)
class SearchNode:
    """A discovered cell with its costs and the index of its predecessor.

    ``parent`` indexes into the :class:`NodeArena` that created the node and
    is ``None`` only for the start node.
    """

    position: Position
    g_cost: int
    h_cost: int
    parent: Optional[int] = None

    @property
    def f_cost(self) -> int:
        return costs.f_cost(self)

    def lower_cost(self, other: "SearchNode") -> bool:
        """Return ``True`` if this node should be kept over ``other``."""

        return self.f_cost < other.f_cost or (
            self.f_cost == other.f_cost and self.h_cost < other.h_cost
        )


class NodeArena:
    """Append-only node storage; predecessors are referenced by index."""

    def __init__(self) -> None:
        self._nodes: List[SearchNode] = []

    def add(self, node: SearchNode) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def trace(self, index: int) -> List[Position]:
        """Return positions from the root of ``index``'s chain to ``index``."""

        positions: List[Position] = []
        current: Optional[int] = index
        while current is not None:
            node = self._nodes[current]
            positions.append(node.position)
            current = node.parent
        positions.reverse()
        return positions


__all__ = ["SearchNode", "NodeArena"]
