"""Implementations of interactive maze shell commands.

Every command takes the shared ``state`` dict. ``state["maze"]`` holds the
current :class:`Maze` and ``state["running"]`` is cleared by ``/quit``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
import logging

from ...core.symbols import MazeSymbols
from ...errors import MazeError
from ...maze import Maze
from ...pathfinding.path import Path

logger = logging.getLogger(__name__)


SYMBOL_KINDS = ("start", "end", "wall", "path", "separator")


def _current_maze(state: Dict[str, Any]) -> Maze:
    maze = state.get("maze")
    if maze is None:
        maze = Maze(symbols=state.get("symbols") or MazeSymbols())
        state["maze"] = maze
    return maze


def load(state: Dict[str, Any], path: str | None, inline: bool = False) -> Optional[Maze]:
    if path is None:
        logger.info("Usage: /%s <path>", "load_inline" if inline else "load")
        return None
    symbols = _current_maze(state).symbols
    try:
        maze = Maze.load_inline(path, symbols) if inline else Maze.load(path, symbols)
    except MazeError as e:
        logger.error("Error loading maze: %s", e)
        return None
    state["maze"] = maze
    width, height = maze.dimensions
    logger.info("Loaded %dx%d maze from %s (start=%s, end=%s)", width, height, path, maze.start, maze.end)
    return maze


def symbol(state: Dict[str, Any], kind: str | None, char: str | None) -> None:
    if kind is None or char is None:
        logger.info("Usage: /symbol <%s> <char>", "|".join(SYMBOL_KINDS))
        return
    kind = kind.lower()
    if kind not in SYMBOL_KINDS:
        logger.error("Unknown symbol kind: %s. Expected one of: %s", kind, ", ".join(SYMBOL_KINDS))
        return
    try:
        state["maze"] = _current_maze(state).with_symbols(**{kind: char})
    except ValueError as e:
        logger.error("Invalid symbol: %s", e)
        return
    logger.info("%s symbol set to %r", kind.capitalize(), char)


def show(state: Dict[str, Any]) -> None:
    try:
        _current_maze(state).print_maze()
    except MazeError as e:
        logger.error("%s", e)


def solve(state: Dict[str, Any]) -> Optional[Path]:
    try:
        path = _current_maze(state).try_solve()
    except MazeError as e:
        logger.error("%s", e)
        return None
    logger.info("Path found: %d cells, cost %d", len(path), path.cost)
    return path


def show_path(state: Dict[str, Any]) -> None:
    try:
        _current_maze(state).print_path()
    except MazeError as e:
        logger.error("%s", e)


def info(state: Dict[str, Any]) -> None:
    maze = _current_maze(state)
    sym = maze.symbols
    logger.info(
        "Symbols: start=%r end=%r wall=%r path=%r separator=%r",
        sym.start, sym.end, sym.wall, sym.path, sym.separator,
    )
    if not maze.is_set:
        logger.info("No maze loaded.")
        return
    width, height = maze.dimensions
    logger.info("Maze: %dx%d, start=%s, end=%s", width, height, maze.start, maze.end)
    if maze.is_solved:
        logger.info("Solved: %d cells, cost %d", len(maze.path), maze.path_cost)


def help_command(state: Dict[str, Any]) -> None:
    help_lines = [
        "\nAvailable commands:",
        "  /help                  - Show this help message.",
        "  /load <path>           - Load a maze, one row per line.",
        "  /load_inline <path>    - Load a maze whose rows end with the separator symbol.",
        "  /symbol <kind> <char>  - Set a symbol (start, end, wall, path, separator).",
        "  /show                  - Print the loaded maze.",
        "  /solve                 - Find the shortest path.",
        "  /path                  - Print the maze with the solved path.",
        "  /info                  - Show symbols, size and solution summary.",
        "  /quit                  - Exit the shell.\n",
    ]
    for line in help_lines:
        logger.info(line)


def execute(command: str, args: List[str], state: Dict[str, Any]) -> Any:
    logger.debug("commands.execute: %s %s", command, args)

    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    if cmd_lower == "load":
        return_value = load(state, args[0] if args else None)
    elif cmd_lower == "load_inline":
        return_value = load(state, args[0] if args else None, inline=True)
    elif cmd_lower == "symbol":
        symbol(state, args[0] if args else None, args[1] if len(args) > 1 else None)
    elif cmd_lower == "show":
        show(state)
    elif cmd_lower == "solve":
        return_value = solve(state)
    elif cmd_lower == "path":
        show_path(state)
    elif cmd_lower == "info":
        info(state)
    elif cmd_lower == "help":
        help_command(state)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = [
    "load", "symbol", "show", "solve", "show_path", "info", "help_command", "execute",
]
