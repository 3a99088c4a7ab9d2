"""Immutable maze grid built from text."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Tuple

from ..errors import MazeFormatError
from .position import Position
from .symbols import MazeSymbols


class Grid:
    """Rectangular, read-only array of cell symbols.

    Start and end are resolved once on construction. When a symbol appears
    more than once the first occurrence in row-major order is used.
    """

    def __init__(self, rows: Iterable[Sequence[str]], symbols: MazeSymbols | None = None) -> None:
        cells: Tuple[Tuple[str, ...], ...] = tuple(tuple(row) for row in rows)
        if not cells or not cells[0]:
            raise MazeFormatError("Maze is empty.")
        width = len(cells[0])
        for y, row in enumerate(cells):
            if len(row) != width:
                raise MazeFormatError(f"Row {y} has {len(row)} cells, expected {width}.")
        self._cells = cells
        self._width = width
        self._height = len(cells)
        self._symbols = symbols or MazeSymbols()
        self._start = self._find(self._symbols.start)
        self._end = self._find(self._symbols.end)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def parse(cls, text: str, symbols: MazeSymbols | None = None) -> "Grid":
        """Build a grid whose rows are separated by whitespace."""

        return cls(text.split(), symbols)

    @classmethod
    def parse_inline(cls, text: str, symbols: MazeSymbols | None = None) -> "Grid":
        """Build a grid whose rows are separated by ``symbols.separator``.

        Line breaks around each row are ignored, so a file may keep one row
        per line as long as every row also ends with the separator.
        """

        symbols = symbols or MazeSymbols()
        rows = [chunk.strip() for chunk in text.strip().split(symbols.separator)]
        return cls(rows, symbols)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def dimensions(self) -> tuple[int, int]:
        """Return ``(width, height)``."""
        return (self._width, self._height)

    @property
    def symbols(self) -> MazeSymbols:
        return self._symbols

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return self._cells

    @property
    def start(self) -> Optional[Position]:
        return self._start

    @property
    def end(self) -> Optional[Position]:
        return self._end

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def cell(self, pos: Position) -> str:
        return self._cells[pos.y][pos.x]

    def is_wall(self, pos: Position) -> bool:
        return self._cells[pos.y][pos.x] == self._symbols.wall

    def with_symbols(self, symbols: MazeSymbols) -> "Grid":
        """Return a grid over the same cells classified with ``symbols``."""

        return Grid(self._cells, symbols)

    def __iter__(self) -> Iterator[Tuple[str, ...]]:
        return iter(self._cells)

    def __repr__(self) -> str:
        return (
            f"Grid(width={self._width}, height={self._height}, "
            f"start={self._start}, end={self._end})"
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _find(self, symbol: str) -> Optional[Position]:
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                if cell == symbol:
                    return Position(x, y)
        return None


__all__ = ["Grid"]
