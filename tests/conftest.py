import pytest

from tictactoe.game.board import Board, Player
from tictactoe.game.history import HistoryManager
from tictactoe.game.session import GameSession


@pytest.fixture
def history():
    return HistoryManager()


@pytest.fixture
def session():
    return GameSession()


def board_from(layout: str) -> Board:
    """Build a board from 9 chars, '.' for empty, e.g. 'XOX.O....'."""
    assert len(layout) == 9
    return Board(tuple(Player(c) if c != "." else None for c in layout))


def play_all(target, cells):
    for cell in cells:
        assert target.play_move(cell) is not None, f"move on {cell} was rejected"
