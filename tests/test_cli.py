import io
import logging
from pathlib import Path

from maze_solver.core.position import Position
from maze_solver.core.symbols import MazeSymbols
from maze_solver.maze import Maze
from maze_solver.utils.cli import commands
from maze_solver.utils.cli.command_parser import parse_command, read_commands


def _maze_file(tmp_path: Path, text: str = "S...\n.WW.\n...E\n") -> Path:
    path = tmp_path / "maze.txt"
    path.write_text(text)
    return path


def test_parse_command_basic():
    cmd = parse_command("/load foo.txt")
    assert cmd is not None
    assert cmd.name == "load"
    assert cmd.args == ["foo.txt"]


def test_parse_command_invalid():
    assert parse_command("hello") is None
    assert parse_command("/") is None


def test_read_commands_skips_noise():
    stream = io.StringIO("/show\nnot a command\n\n/SOLVE now\n")
    parsed = [(c.name, c.args) for c in read_commands(stream)]
    assert parsed == [("show", []), ("solve", ["now"])]


def test_load_and_solve_commands(tmp_path: Path):
    state: dict = {}
    maze = commands.execute("load", [str(_maze_file(tmp_path))], state)
    assert isinstance(maze, Maze)
    assert state["maze"] is maze
    assert state["running"] is True

    path = commands.execute("solve", [], state)
    assert path is not None
    assert path.as_tuples()[0] == (0, 0)
    assert state["maze"].is_solved


def test_load_inline_command(tmp_path: Path):
    path = tmp_path / "inline.txt"
    path.write_text("S..\\...\\..E")
    state: dict = {}
    maze = commands.execute("load_inline", [str(path)], state)
    assert maze.dimensions == (3, 3)


def test_load_missing_file_logs_error(tmp_path: Path, caplog):
    state: dict = {}
    with caplog.at_level(logging.ERROR):
        result = commands.execute("load", [str(tmp_path / "nope.txt")], state)
    assert result is None
    assert "Invalid file path" in caplog.text


def test_symbol_command_updates_maze(tmp_path: Path):
    state: dict = {}
    commands.execute("load", [str(_maze_file(tmp_path, "G.\n.F"))], state)
    commands.execute("symbol", ["start", "G"], state)
    commands.execute("symbol", ["end", "F"], state)
    assert state["maze"].symbols == MazeSymbols(start="G", end="F")
    assert commands.execute("solve", [], state).as_tuples() == [(0, 0), (1, 1)]


def test_symbol_command_rejects_unknown_kind(caplog):
    state: dict = {}
    with caplog.at_level(logging.ERROR):
        commands.execute("symbol", ["door", "D"], state)
    assert "Unknown symbol kind" in caplog.text
    assert state["maze"].symbols == MazeSymbols()


def test_symbols_survive_reload(tmp_path: Path):
    state: dict = {}
    commands.execute("symbol", ["wall", "#"], state)
    commands.execute("load", [str(_maze_file(tmp_path, "S#E\n..."))], state)
    assert state["maze"].grid.is_wall(Position(1, 0))


def test_solve_without_maze_logs_error(caplog):
    state: dict = {}
    with caplog.at_level(logging.ERROR):
        assert commands.execute("solve", [], state) is None
    assert "not set" in caplog.text


def test_show_and_path_print(tmp_path: Path, capsys):
    state: dict = {}
    commands.execute("load", [str(_maze_file(tmp_path, "S.E"))], state)
    commands.execute("show", [], state)
    assert "S.E" in capsys.readouterr().out
    commands.execute("solve", [], state)
    commands.execute("path", [], state)
    assert "X" in capsys.readouterr().out


def test_quit_and_unknown(caplog):
    state: dict = {}
    with caplog.at_level(logging.ERROR):
        commands.execute("dance", [], state)
    assert "Unknown command: /dance" in caplog.text
    commands.execute("quit", [], state)
    assert state["running"] is False


def test_help_and_info(caplog):
    state: dict = {}
    with caplog.at_level(logging.INFO):
        commands.execute("help", [], state)
        commands.execute("info", [], state)
    assert "/solve" in caplog.text
    assert "No maze loaded." in caplog.text
