import pytest

from maze_solver.core.symbols import MazeSymbols
from maze_solver.errors import ConfigurationConflictError


def test_defaults_are_unique():
    symbols = MazeSymbols()
    assert (symbols.start, symbols.end, symbols.wall, symbols.path, symbols.separator) == (
        "S", "E", "W", "X", "\\",
    )
    assert symbols.conflicts() == []
    assert symbols.validate() is symbols


@pytest.mark.parametrize(
    "changes, clash",
    [
        ({"end": "S"}, ("start", "end")),
        ({"wall": "S"}, ("start", "wall")),
        ({"separator": "E"}, ("end", "separator")),
        ({"wall": "\\"}, ("wall", "separator")),
    ],
)
def test_clashing_symbols(changes, clash):
    symbols = MazeSymbols().replace(**changes)
    assert clash in symbols.conflicts()
    with pytest.raises(ConfigurationConflictError):
        symbols.validate()


def test_path_symbol_may_repeat_another():
    assert MazeSymbols(path=".").conflicts() == []
    assert MazeSymbols(path="S").conflicts() == []


def test_symbols_must_be_single_characters():
    with pytest.raises(ValueError):
        MazeSymbols(start="ST")
    with pytest.raises(ValueError):
        MazeSymbols(wall="")
