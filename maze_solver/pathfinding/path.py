"""Solved route through a grid."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from ..core.position import Position
from .costs import path_cost


class Path:
    """Ordered positions from start to end inclusive.

    A path always holds at least one position; a single position means the
    start and end coincide.
    """

    __slots__ = ("_positions",)

    def __init__(self, positions: Iterable[Position]) -> None:
        self._positions: Tuple[Position, ...] = tuple(positions)
        if not self._positions:
            raise ValueError("a path needs at least one position")

    @property
    def start(self) -> Position:
        return self._positions[0]

    @property
    def end(self) -> Position:
        return self._positions[-1]

    @property
    def positions(self) -> Tuple[Position, ...]:
        return self._positions

    @property
    def cost(self) -> int:
        """Total step cost along the path."""
        return path_cost(self._positions)

    def as_tuples(self) -> List[Tuple[int, int]]:
        return [p.as_tuple() for p in self._positions]

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __getitem__(self, index: int) -> Position:
        return self._positions[index]

    def __contains__(self, pos: object) -> bool:
        return pos in self._positions

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._positions == other._positions
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._positions)

    def __repr__(self) -> str:
        return f"Path({self.as_tuples()!r})"


__all__ = ["Path"]
