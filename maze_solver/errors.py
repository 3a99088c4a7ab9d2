"""Exception hierarchy for maze loading and solving."""

from __future__ import annotations


class MazeError(Exception):
    """Base error for everything raised by :mod:`maze_solver`."""

    default_message = "Maze error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ConfigurationConflictError(MazeError, ValueError):
    """Raised when two of the start, end, wall and separator symbols coincide."""

    default_message = "Characters are not unique. (start, end, wall...)"


class SearchError(MazeError):
    """Base error for search outcomes that yield no path."""


class StartEndMissingError(SearchError):
    """Raised when the grid has no start or no end cell."""

    default_message = "Start/End are not set."


class UnsolvableMazeError(SearchError):
    """Raised when the frontier is exhausted without reaching the end."""

    default_message = "This maze is unsolvable."


class InvalidFilePathError(MazeError, OSError):
    """Raised when a maze file cannot be read."""

    default_message = "Invalid file path"


class MazeFormatError(MazeError, ValueError):
    """Raised for empty mazes or rows of unequal length."""

    default_message = "Maze rows must be non-empty and of equal length."


class MazeNotSetError(MazeError):
    """Raised when a maze is used before one has been loaded."""

    default_message = "Maze is not set (loaded), consider using `load` first."


class MazeNotSolvedError(MazeError):
    """Raised when a path is requested before a successful solve."""

    default_message = "Could not retrieve path, maze is not yet solved."


__all__ = [
    "MazeError",
    "ConfigurationConflictError",
    "SearchError",
    "StartEndMissingError",
    "UnsolvableMazeError",
    "InvalidFilePathError",
    "MazeFormatError",
    "MazeNotSetError",
    "MazeNotSolvedError",
]
