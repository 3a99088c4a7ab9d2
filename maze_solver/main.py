"""Command line entry point: solve a maze file or run the interactive shell."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .config import CONFIG, CONFIG_PATH, Config, LoggingConfig, load_config
from .errors import MazeError
from .maze import Maze
from .utils.cli.command_parser import read_commands
from .utils.cli.commands import execute
from .utils.cli.terminal_view import configure_view


def configure_logging(cfg: LoggingConfig) -> None:
    numeric_level = getattr(logging, cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    # Apply per-module levels if defined
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


logger = logging.getLogger(__name__)
configure_logging(CONFIG.logging)


def bootstrap(config_path: str | Path | None = None) -> Config:
    """Load ``.env`` and the configuration, then apply its logging settings.

    ``MAZE_SOLVER_CONFIG`` selects the config file when ``config_path`` is
    not given.
    """
    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    if config_path is None:
        config_path = os.getenv("MAZE_SOLVER_CONFIG") or CONFIG_PATH
    cfg = load_config(Path(config_path))
    configure_logging(cfg.logging)
    configure_view(cfg.render)
    logger.debug("[Bootstrap] Configuration loaded from %s", config_path)
    return cfg


def solve_file(path: str | Path, cfg: Config, inline: bool = False) -> int:
    """Load, print, solve and print the maze at ``path``. Return an exit status."""
    symbols = cfg.symbols.to_symbols()
    try:
        maze = Maze.load_inline(path, symbols) if inline else Maze.load(path, symbols)
        maze.print_maze()
        print("\n")
        maze.try_solve()
        maze.print_path()
    except MazeError as e:
        print(e)
        return 1
    return 0


def run_shell(cfg: Config, stream: Any = None) -> Dict[str, Any]:
    """Read slash commands until ``/quit`` or end of input."""
    state: Dict[str, Any] = {
        "running": True,
        "maze": Maze(symbols=cfg.symbols.to_symbols()),
    }
    logger.info("Maze shell started. Type /help for commands.")
    try:
        for cmd in read_commands(stream):
            execute(cmd.name, cmd.args, state)
            if not state["running"]:
                break
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    return state


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    inline = "--inline" in args
    files = [a for a in args if a != "--inline"]

    cfg = bootstrap()
    if files:
        return solve_file(files[0], cfg, inline=inline)
    run_shell(cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
