"""Reference search and path checks shared by the pathfinding tests."""

import heapq
from typing import Dict, Optional

from maze_solver.core.grid import Grid
from maze_solver.core.position import Position
from maze_solver.pathfinding.astar import NEIGHBOUR_OFFSETS
from maze_solver.pathfinding.costs import step_cost


def brute_force_cost(grid: Grid, start: Position, end: Position) -> Optional[int]:
    """Uniform-cost search with the same moves and step costs as A*.

    Returns ``None`` when ``end`` is unreachable.
    """

    best: Dict[Position, int] = {start: 0}
    queue = [(0, start.x, start.y)]
    while queue:
        cost, x, y = heapq.heappop(queue)
        pos = Position(x, y)
        if cost > best[pos]:
            continue
        if pos == end:
            return cost
        for dx, dy in NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if not grid.in_bounds(nx, ny):
                continue
            nxt = Position(nx, ny)
            if grid.is_wall(nxt):
                continue
            new_cost = cost + step_cost(pos, nxt)
            if nxt not in best or new_cost < best[nxt]:
                best[nxt] = new_cost
                heapq.heappush(queue, (new_cost, nx, ny))
    return None


def assert_valid_path(grid: Grid, path, start: Position, end: Position) -> None:
    positions = list(path)
    assert positions[0] == start
    assert positions[-1] == end
    for a, b in zip(positions, positions[1:]):
        assert (b.x - a.x, b.y - a.y) in NEIGHBOUR_OFFSETS
    assert not any(grid.is_wall(p) for p in positions)
