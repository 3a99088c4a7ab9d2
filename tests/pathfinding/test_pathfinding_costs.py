import pytest

from maze_solver.core.position import Position
from maze_solver.pathfinding.costs import (
    DIAGONAL_COST,
    STRAIGHT_COST,
    f_cost,
    heuristic,
    path_cost,
    step_cost,
)
from maze_solver.pathfinding.node import SearchNode


def _octile(a: Position, b: Position) -> int:
    dx, dy = abs(a.x - b.x), abs(a.y - b.y)
    return DIAGONAL_COST * min(dx, dy) + STRAIGHT_COST * (max(dx, dy) - min(dx, dy))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((0, 0), (0, 0), 0),
        ((0, 0), (2, 0), 20),
        ((0, 0), (0, 3), 30),
        ((0, 0), (1, 1), 14),
        ((0, 0), (2, 2), 28),
        ((0, 0), (1, 2), 22),
        ((4, 1), (1, 5), 50),
    ],
)
def test_heuristic_truncates_scaled_euclidean_distance(a, b, expected):
    assert heuristic(Position(*a), Position(*b)) == expected


def test_heuristic_is_symmetric():
    a, b = Position(3, 7), Position(6, 1)
    assert heuristic(a, b) == heuristic(b, a)


def test_heuristic_overestimates_long_diagonals():
    # Known deviation from provably-optimal A*: eight diagonal steps cost
    # 112 but the straight-line estimate truncates to 113.
    start, goal = Position(0, 0), Position(8, 8)
    assert heuristic(start, goal) == 113
    assert heuristic(start, goal) > _octile(start, goal)


def test_heuristic_admissible_on_short_runs():
    origin = Position(0, 0)
    for x in range(7):
        for y in range(7):
            goal = Position(x, y)
            assert heuristic(origin, goal) <= _octile(origin, goal)


def test_step_cost_straight_and_diagonal():
    centre = Position(1, 1)
    assert step_cost(centre, Position(0, 1)) == 10
    assert step_cost(centre, Position(1, 0)) == 10
    assert step_cost(centre, Position(2, 1)) == 10
    assert step_cost(centre, Position(1, 2)) == 10
    for corner in (Position(0, 0), Position(2, 0), Position(0, 2), Position(2, 2)):
        assert step_cost(centre, corner) == 14


def test_f_cost_sums_g_and_h():
    node = SearchNode(Position(2, 3), g_cost=24, h_cost=30)
    assert f_cost(node) == 54
    assert node.f_cost == 54


def test_path_cost():
    assert path_cost([Position(0, 0)]) == 0
    assert path_cost([Position(0, 0), Position(1, 1), Position(2, 1)]) == 24
