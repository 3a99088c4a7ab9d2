"""Simple configuration loader for maze_solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .core.symbols import MazeSymbols


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SymbolsConfig:
    """Characters used in maze files."""

    start: str = "S"
    end: str = "E"
    wall: str = "W"
    path: str = "X"
    separator: str = "\\"

    def to_symbols(self) -> MazeSymbols:
        return MazeSymbols(
            start=self.start,
            end=self.end,
            wall=self.wall,
            path=self.path,
            separator=self.separator,
        )


@dataclass
class RenderConfig:
    """Terminal rendering options. Colours are names from the terminal view palette."""

    colour: bool = True
    path_colour: str = "bright_green"
    wall_colour: str = "bright_red"
    start_colour: str = "bold_yellow"
    end_colour: str = "bold_yellow"


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    symbols: SymbolsConfig
    render: RenderConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    sym_data = data.get("symbols", {}) or {}
    symbols = SymbolsConfig(
        start=str(sym_data.get("start", "S")),
        end=str(sym_data.get("end", "E")),
        wall=str(sym_data.get("wall", "W")),
        path=str(sym_data.get("path", "X")),
        separator=str(sym_data.get("separator", "\\")),
    )

    render_data = data.get("render", {}) or {}
    render = RenderConfig(
        colour=bool(render_data.get("colour", True)),
        path_colour=render_data.get("path_colour", "bright_green"),
        wall_colour=render_data.get("wall_colour", "bright_red"),
        start_colour=render_data.get("start_colour", "bold_yellow"),
        end_colour=render_data.get("end_colour", "bold_yellow"),
    )

    log_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels=dict(log_data.get("module_levels") or {}),
    )

    return Config(symbols=symbols, render=render, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_PATH",
    "Config",
    "SymbolsConfig",
    "RenderConfig",
    "LoggingConfig",
    "load_config",
]
