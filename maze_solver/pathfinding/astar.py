"""A* search over a maze grid with 8-directional movement.

Tie-breaking when two frontier nodes share the lowest ``f`` cost:

- the node with the lower ``h`` cost (closer to the end) is expanded first;
- remaining ties go to the node that entered the frontier first.

Closed positions are never reopened, even if a cheaper route to them is
found later.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, Optional, Set

from ..core.grid import Grid
from ..core.position import Position
from ..errors import StartEndMissingError, UnsolvableMazeError
from .costs import heuristic, step_cost
from .frontier import Frontier
from .node import NodeArena, SearchNode
from .path import Path

logger = logging.getLogger(__name__)


# Neighbour order: W, NW, N, NE, E, SE, S, SW.
NEIGHBOUR_OFFSETS = (
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
)


class SearchState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


class AStarSearch:
    """Single-use A* search from ``start`` to ``end`` on ``grid``.

    Preconditions are checked on construction, before any search state
    exists. :meth:`step` performs one expansion; :meth:`run` steps until the
    search is solved or the frontier is exhausted.
    """

    def __init__(self, grid: Grid, start: Optional[Position], end: Optional[Position]) -> None:
        if start is None or end is None:
            raise StartEndMissingError()
        grid.symbols.validate()
        for label, pos in (("start", start), ("end", end)):
            if not grid.in_bounds(pos.x, pos.y):
                raise ValueError(f"{label} {pos} lies outside the {grid.width}x{grid.height} grid")
            if grid.is_wall(pos):
                raise ValueError(f"{label} {pos} is a wall cell")

        self.grid = grid
        self.start = start
        self.end = end
        self.state = SearchState.NOT_STARTED
        self.path: Optional[Path] = None
        self.expanded = 0

        self._arena = NodeArena()
        self._frontier = Frontier(self._arena)
        self._closed: Set[Position] = set()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def frontier_size(self) -> int:
        return len(self._frontier)

    @property
    def closed_count(self) -> int:
        return len(self._closed)

    def is_closed(self, pos: Position) -> bool:
        return pos in self._closed

    def step(self) -> SearchState:
        """Expand one node and return the resulting state."""

        if self.state is SearchState.NOT_STARTED:
            self._seed()
        if self.state is not SearchState.RUNNING:
            return self.state

        if not self._frontier:
            self.state = SearchState.UNSOLVABLE
            return self.state

        index = self._frontier.pop()
        current = self._arena[index]

        if current.position == self.end:
            self.path = Path(self._arena.trace(index))
            self.state = SearchState.SOLVED
            return self.state

        for pos in self._neighbours(current.position):
            if pos in self._closed:
                continue
            candidate = SearchNode(
                position=pos,
                g_cost=current.g_cost + step_cost(current.position, pos),
                h_cost=heuristic(pos, self.end),
                parent=index,
            )
            queued = self._frontier.get(pos)
            if queued is not None and queued.lower_cost(candidate):
                continue
            self._frontier.push(self._arena.add(candidate))

        self._closed.add(current.position)
        self.expanded += 1
        return self.state

    def run(self) -> Path:
        """Search to completion and return the path.

        Raises :class:`UnsolvableMazeError` if the end cannot be reached.
        """

        while self.step() is SearchState.RUNNING:
            pass

        if self.path is None:
            logger.debug(
                "[AStar] No path from %s to %s after %d expansions",
                self.start,
                self.end,
                self.expanded,
            )
            raise UnsolvableMazeError()

        logger.debug(
            "[AStar] Path from %s to %s: %d cells, cost %d, %d expansions, %d nodes created",
            self.start,
            self.end,
            len(self.path),
            self.path.cost,
            self.expanded,
            len(self._arena),
        )
        return self.path

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _seed(self) -> None:
        root = SearchNode(self.start, 0, heuristic(self.start, self.end))
        self._frontier.push(self._arena.add(root))
        self.state = SearchState.RUNNING

    def _neighbours(self, pos: Position) -> Iterator[Position]:
        """Yield in-bounds, non-wall neighbours of ``pos``."""

        for dx, dy in NEIGHBOUR_OFFSETS:
            x, y = pos.x + dx, pos.y + dy
            if not self.grid.in_bounds(x, y):
                continue
            neighbour = Position(x, y)
            if not self.grid.is_wall(neighbour):
                yield neighbour


def solve(grid: Grid, start: Optional[Position], end: Optional[Position]) -> Path:
    """Return the A* path from ``start`` to ``end`` on ``grid``.

    Raises :class:`StartEndMissingError` if either endpoint is ``None``,
    :class:`ConfigurationConflictError` if the grid's symbols clash and
    :class:`UnsolvableMazeError` if no path exists.
    """

    return AStarSearch(grid, start, end).run()


def solve_grid(grid: Grid) -> Path:
    """Solve ``grid`` between its own start and end cells."""

    return solve(grid, grid.start, grid.end)


__all__ = [
    "NEIGHBOUR_OFFSETS",
    "SearchState",
    "AStarSearch",
    "solve",
    "solve_grid",
]
