"""Simple command parsing utilities for the interactive maze shell."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional, TextIO


@dataclass
class CLICommand:
    """Result of parsing a command string."""
    name: str
    args: List[str]


def parse_command(text: str) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``text`` if it starts with ``/``."""
    text = text.strip()
    if not text.startswith("/"):
        return None
    parts = text[1:].split()
    if not parts:
        return None

    cmd = parts[0].lower()

    # Symbols are single characters and may themselves look like options,
    # so keep exactly two arguments: the symbol kind and the character.
    if cmd == "symbol":
        return CLICommand(name="symbol", args=parts[1:3])

    return CLICommand(name=cmd, args=parts[1:])


def read_commands(stream: TextIO | None = None) -> Iterator[CLICommand]:
    """Yield parsed commands from ``stream`` (``stdin`` by default) until EOF.

    Blank lines and lines without a leading ``/`` are skipped.
    """
    source = stream if stream is not None else sys.stdin
    while True:
        line = source.readline()
        if not line:  # EOF
            return
        parsed = parse_command(line)
        if parsed:
            yield parsed


__all__ = ["CLICommand", "parse_command", "read_commands"]
