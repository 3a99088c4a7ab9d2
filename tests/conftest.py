# tests/conftest.py
import pytest

from maze_solver.core.grid import Grid


@pytest.fixture
def make_grid():
    """Build a :class:`Grid` from rows of text, default symbols unless given."""

    def _make(*rows: str, symbols=None) -> Grid:
        return Grid(rows, symbols)

    return _make
