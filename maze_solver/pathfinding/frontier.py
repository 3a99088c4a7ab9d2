"""Open set for A*: a binary heap indexed by position."""

from __future__ import annotations

import itertools
from heapq import heappop, heappush
from typing import Dict, List, Optional

from ..core.position import Position
from .node import NodeArena, SearchNode


_REMOVED = -1  # placeholder arena index for superseded heap entries


class Frontier:
    """Discovered, not yet expanded nodes.

    Entries are ordered by ``(f_cost, h_cost, insertion order)``: lowest
    ``f`` first, then lowest ``h``, then first in. Replacing the node for a
    position invalidates the old heap entry in place; it is discarded when
    it reaches the top.
    """

    def __init__(self, arena: NodeArena) -> None:
        self._arena = arena
        self._heap: List[list] = []
        self._entries: Dict[Position, list] = {}
        self._counter = itertools.count()

    def push(self, index: int) -> None:
        """Insert the arena node ``index``, replacing any entry for its position."""

        node = self._arena[index]
        old = self._entries.pop(node.position, None)
        if old is not None:
            old[-1] = _REMOVED
        entry = [node.f_cost, node.h_cost, next(self._counter), index]
        self._entries[node.position] = entry
        heappush(self._heap, entry)

    def pop(self) -> int:
        """Remove and return the arena index of the best node."""

        while self._heap:
            *_, index = heappop(self._heap)
            if index != _REMOVED:
                del self._entries[self._arena[index].position]
                return index
        raise KeyError("pop from an empty frontier")

    def get(self, position: Position) -> Optional[SearchNode]:
        """Return the node currently queued for ``position``, if any."""

        entry = self._entries.get(position)
        if entry is None:
            return None
        return self._arena[entry[-1]]

    def __contains__(self, position: object) -> bool:
        return position in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


__all__ = ["Frontier"]
