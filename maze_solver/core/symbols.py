"""Cell symbols used to read and draw a maze."""

from __future__ import annotations

from dataclasses import dataclass, replace
from itertools import combinations
from typing import Any

from ..errors import ConfigurationConflictError


@dataclass(frozen=True)
class MazeSymbols:
    """Characters marking special cells inside a maze text file.

    ``path`` is only used when drawing a solved maze, so it is not part of
    the uniqueness check.
    """

    start: str = "S"
    end: str = "E"
    wall: str = "W"
    path: str = "X"
    separator: str = "\\"

    def __post_init__(self) -> None:
        for name in ("start", "end", "wall", "path", "separator"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} symbol must be a single character, got {value!r}")

    def conflicts(self) -> list[tuple[str, str]]:
        """Return every pair of symbol names that share a character."""

        named = [
            ("start", self.start),
            ("end", self.end),
            ("wall", self.wall),
            ("separator", self.separator),
        ]
        return [(a, b) for (a, ca), (b, cb) in combinations(named, 2) if ca == cb]

    def validate(self) -> "MazeSymbols":
        """Raise :class:`ConfigurationConflictError` if symbols coincide."""

        clashes = self.conflicts()
        if clashes:
            detail = ", ".join(f"{a}/{b}" for a, b in clashes)
            raise ConfigurationConflictError(
                f"{ConfigurationConflictError.default_message} Clashing: {detail}"
            )
        return self

    def replace(self, **changes: Any) -> "MazeSymbols":
        """Return a copy with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["MazeSymbols"]
