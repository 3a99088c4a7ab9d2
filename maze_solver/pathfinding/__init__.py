"""pathfinding package."""

from .astar import AStarSearch, SearchState, solve, solve_grid
from .costs import heuristic, path_cost, step_cost
from .path import Path

__all__ = [
    "AStarSearch",
    "SearchState",
    "solve",
    "solve_grid",
    "heuristic",
    "path_cost",
    "step_cost",
    "Path",
]
