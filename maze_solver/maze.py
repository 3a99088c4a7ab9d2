"""High level maze API: load a text maze, solve it and draw the result."""

from __future__ import annotations

import logging
from pathlib import Path as FilePath
from typing import Any, List, Optional, Tuple

from .core.grid import Grid
from .core.position import Position
from .core.symbols import MazeSymbols
from .errors import InvalidFilePathError, MazeNotSetError, MazeNotSolvedError
from .pathfinding.astar import solve
from .pathfinding.path import Path
from .utils.cli.terminal_view import TerminalView, get_view

logger = logging.getLogger(__name__)


class Maze:
    """A loaded maze together with its symbols and last solution.

    Rows are read either one per whitespace-separated word (:meth:`load`) or
    split on the separator symbol (:meth:`load_inline`). Every row must have
    the same length. If the file has several start or end symbols the first
    one in reading order is used.
    """

    def __init__(self, grid: Grid | None = None, symbols: MazeSymbols | None = None) -> None:
        if grid is not None and symbols is not None and grid.symbols != symbols:
            grid = grid.with_symbols(symbols)
        self._grid = grid
        self._symbols = symbols or (grid.symbols if grid is not None else MazeSymbols())
        self._path: Optional[Path] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @classmethod
    def from_text(cls, text: str, symbols: MazeSymbols | None = None, inline: bool = False) -> "Maze":
        symbols = symbols or MazeSymbols()
        grid = Grid.parse_inline(text, symbols) if inline else Grid.parse(text, symbols)
        return cls(grid, symbols)

    @classmethod
    def load(cls, path: str | FilePath, symbols: MazeSymbols | None = None) -> "Maze":
        """Load a maze whose rows are separated by whitespace."""

        return cls.from_text(_read_text(path), symbols)

    @classmethod
    def load_inline(cls, path: str | FilePath, symbols: MazeSymbols | None = None) -> "Maze":
        """Load a maze whose rows are separated by the separator symbol."""

        return cls.from_text(_read_text(path), symbols, inline=True)

    def with_symbols(self, **changes: Any) -> "Maze":
        """Return a maze over the same cells with updated symbols.

        Start and end are looked up again; any previous solution is dropped.
        """

        symbols = self._symbols.replace(**changes)
        grid = self._grid.with_symbols(symbols) if self._grid is not None else None
        return Maze(grid, symbols)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def grid(self) -> Grid:
        if self._grid is None:
            raise MazeNotSetError()
        return self._grid

    @property
    def is_set(self) -> bool:
        return self._grid is not None

    @property
    def symbols(self) -> MazeSymbols:
        return self._symbols

    @property
    def start(self) -> Optional[Position]:
        return self._grid.start if self._grid is not None else None

    @property
    def end(self) -> Optional[Position]:
        return self._grid.end if self._grid is not None else None

    @property
    def dimensions(self) -> Tuple[int, int]:
        """Return ``(columns, rows)``."""
        return self.grid.dimensions

    @property
    def is_solved(self) -> bool:
        return self._path is not None

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------
    def try_solve(self) -> Path:
        """Solve the maze and remember the path.

        Raises :class:`StartEndMissingError` if the start or end symbol is
        missing, :class:`ConfigurationConflictError` if start, end, wall and
        separator symbols are not unique, and :class:`UnsolvableMazeError`
        if no path exists.
        """

        grid = self.grid
        path = solve(grid, grid.start, grid.end)
        self._path = path
        logger.info("Solved %dx%d maze: %d cells, cost %d", grid.width, grid.height, len(path), path.cost)
        return path

    @property
    def path(self) -> Path:
        if self._path is None:
            raise MazeNotSolvedError()
        return self._path

    def get_path(self) -> List[Tuple[int, int]]:
        """Return the solved path as ``(x, y)`` tuples from start to end."""

        return self.path.as_tuples()

    @property
    def path_cost(self) -> int:
        return self.path.cost

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render_maze(self, view: TerminalView | None = None) -> str:
        return (view or get_view()).render(self.grid)

    def render_path(self, view: TerminalView | None = None) -> str:
        """Render the maze with the solved path drawn using the path symbol."""

        return (view or get_view()).render(self.grid, self.path)

    def print_maze(self, view: TerminalView | None = None) -> None:
        print(self.render_maze(view))

    def print_path(self, view: TerminalView | None = None) -> None:
        print(self.render_path(view))


def _read_text(path: str | FilePath) -> str:
    try:
        return FilePath(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidFilePathError(f"Invalid file path: {path}") from exc


__all__ = ["Maze"]
