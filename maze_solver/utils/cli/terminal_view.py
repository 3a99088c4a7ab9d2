"""ASCII terminal renderer for maze grids."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, TYPE_CHECKING

from ...core.grid import Grid
from ...core.position import Position

if TYPE_CHECKING:
    from ...config import RenderConfig
    from ...pathfinding.path import Path


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "bright_red": "\x1b[91m",
    "bright_green": "\x1b[92m",
    "bright_yellow": "\x1b[93m",
    "bright_cyan": "\x1b[96m",
    "bold_yellow": "\x1b[1;93m",
    "reset": "\x1b[0m",
}


class TerminalView:
    """Maze viewer with axis rulers and ANSI colours."""

    def __init__(
        self,
        colour: bool = True,
        path_colour: str = "bright_green",
        wall_colour: str = "bright_red",
        start_colour: str = "bold_yellow",
        end_colour: str = "bold_yellow",
    ) -> None:
        self.colour = colour
        self.path_colour = path_colour
        self.wall_colour = wall_colour
        self.start_colour = start_colour
        self.end_colour = end_colour

    @classmethod
    def from_config(cls, render: "RenderConfig") -> "TerminalView":
        return cls(
            colour=render.colour,
            path_colour=render.path_colour,
            wall_colour=render.wall_colour,
            start_colour=render.start_colour,
            end_colour=render.end_colour,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render_lines(self, grid: Grid, path: Optional["Path"] = None) -> list[str]:
        """Return the ruler line followed by one line per grid row."""

        on_path = set(path) if path is not None else set()
        ruler = vertical_ruler(grid.height)
        lines = [horizontal_ruler(grid.width)]
        for y, row in enumerate(grid.rows):
            parts: list[str] = []
            for x, cell in enumerate(row):
                glyph, colour = self._cell_glyph_colour(grid, cell, Position(x, y) in on_path)
                parts.append(self._paint(glyph, colour))
            lines.append("".join(parts) + " " + ruler[y])
        return lines

    def render(self, grid: Grid, path: Optional["Path"] = None) -> str:
        return "\n".join(self.render_lines(grid, path))

    def draw(self, grid: Grid, path: Optional["Path"] = None, stream: TextIO | None = None) -> None:
        """Write the rendered grid to ``stream`` (``stdout`` by default)."""

        out = stream if stream is not None else sys.stdout
        out.write(self.render(grid, path) + "\n")
        out.flush()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _cell_glyph_colour(self, grid: Grid, cell: str, on_path: bool) -> tuple[str, str | None]:
        symbols = grid.symbols
        if cell == symbols.wall:
            return cell, self.wall_colour
        if cell == symbols.start:
            return cell, self.start_colour
        if cell == symbols.end:
            return cell, self.end_colour
        if on_path:
            return symbols.path, self.path_colour
        return cell, None

    def _paint(self, glyph: str, colour: str | None) -> str:
        if not self.colour or colour is None:
            return glyph
        return f"{_COLOURS.get(colour, '')}{glyph}{_COLOURS['reset']}"


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _centre(text: str, width: int, fill: str) -> str:
    # Odd padding leaves the extra fill character on the right.
    pad = max(0, width - len(text))
    left = pad // 2
    return fill * left + text + fill * (pad - left)


def _ruler_fill(size: int, label: str) -> int:
    # Labels of three or more digits would otherwise leave the ruler short.
    return max(abs(size - len(label)), size - 2)


def horizontal_ruler(width: int) -> str:
    """Return the ``<--N-->`` ruler labelled with ``width``.

    The ruler is never shorter than ``width`` characters.
    """

    label = str(width)
    return "<" + _centre(label, _ruler_fill(width, label), "-") + ">"


def vertical_ruler(height: int) -> str:
    """Return ``^||N||v``; character ``y`` is printed beside row ``y``.

    The ruler has at least ``height`` characters so every row gets one.
    """

    label = str(height)
    return "^" + _centre(label, _ruler_fill(height, label), "|") + "v"


_view: TerminalView | None = None


def configure_view(render: "RenderConfig") -> TerminalView:
    """Replace the shared view with one built from ``render``."""

    global _view
    _view = TerminalView.from_config(render)
    return _view


def get_view() -> TerminalView:
    """Return the shared :class:`TerminalView` built from the loaded config."""

    global _view
    if _view is None:
        from ...config import CONFIG

        _view = TerminalView.from_config(CONFIG.render)
    return _view


__all__ = ["TerminalView", "get_view", "configure_view", "horizontal_ruler", "vertical_ruler"]
