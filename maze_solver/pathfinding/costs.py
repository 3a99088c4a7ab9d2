"""Integer cost arithmetic for 8-directional grid search.

Costs use fixed-point units of ten per orthogonal step so that the
heuristic and accumulated path costs are comparable.
"""

from __future__ import annotations

import math
from typing import Sequence, TYPE_CHECKING

from ..core.position import Position

if TYPE_CHECKING:
    from .node import SearchNode


STRAIGHT_COST = 10
DIAGONAL_COST = 14


def heuristic(a: Position, b: Position) -> int:
    """Return the straight-line distance from ``a`` to ``b`` in cost units.

    The square root is truncated, not rounded. This Euclidean estimate can
    exceed the true remaining cost on long diagonal runs because a diagonal
    step costs 14 rather than 10·√2.
    """

    dx = abs(b.x - a.x) * STRAIGHT_COST
    dy = abs(b.y - a.y) * STRAIGHT_COST
    return int(math.sqrt(dx * dx + dy * dy))


def step_cost(src: Position, dst: Position) -> int:
    """Return the cost of moving one step from ``src`` to ``dst``."""

    if abs(dst.x - src.x) == 1 and abs(dst.y - src.y) == 1:
        return DIAGONAL_COST
    return STRAIGHT_COST


def f_cost(node: "SearchNode") -> int:
    return node.g_cost + node.h_cost


def path_cost(positions: Sequence[Position]) -> int:
    """Sum :func:`step_cost` over consecutive positions."""

    return sum(step_cost(a, b) for a, b in zip(positions, positions[1:]))


__all__ = [
    "STRAIGHT_COST",
    "DIAGONAL_COST",
    "heuristic",
    "step_cost",
    "f_cost",
    "path_cost",
]
