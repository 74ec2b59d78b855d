import logging

import pytest

from tictactoe.game.board import InvalidIndex, Player
from tictactoe.game.session import GameSession, GameStatus, Outcome

from .conftest import board_from, play_all


def test_new_session(session):
    assert session.turn_number() == 0
    assert session.status_text() == "Next player: X"
    assert session.turn_text() == "You are at move #0"
    assert session.outcome() == Outcome(GameStatus.IN_PROGRESS)
    assert session.move_list() == [(0, "Go to game start")]


def test_status_alternates(session):
    session.play_move(4)
    assert session.status_text() == "Next player: O"
    session.play_move(0)
    assert session.status_text() == "Next player: X"


def test_win_on_first_column(session):
    play_all(session, [0, 1, 3, 4, 6])
    board = session.current_board()
    assert [board[c] for c in (0, 1, 3, 4, 6)] == [
        Player.X, Player.O, Player.X, Player.O, Player.X,
    ]
    assert session.status_text() == "Winner: X"
    outcome = session.outcome()
    assert outcome.status is GameStatus.WON
    assert outcome.winner is Player.X
    assert outcome.line == (0, 3, 6)
    assert outcome.is_over


def test_draw(session):
    # X: 0, 1, 5, 6, 8 / O: 2, 3, 4, 7
    play_all(session, [0, 2, 1, 3, 5, 4, 6, 7, 8])
    assert session.current_board().is_full()
    assert session.outcome() == Outcome(GameStatus.DRAW)
    assert session.status_text() == "Next player: O"


def test_branch_after_jump(session):
    play_all(session, [0, 1, 2])
    session.jump_to(1)
    assert session.turn_text() == "You are at move #1"
    session.play_move(4)
    history = session.history
    assert len(history) == 3
    assert history.board_at(2) == board_from("X...O....")


def test_occupied_cell_keeps_state(session):
    play_all(session, [0, 4])
    boards = session.history.boards
    assert session.play_move(4) is None
    assert session.history.boards == boards
    assert session.turn_number() == 2


def test_viewing_old_board_after_win(session):
    play_all(session, [0, 1, 3, 4, 6])
    session.jump_to(2)
    assert session.status_text() == "Next player: X"
    session.jump_to(5)
    assert session.status_text() == "Winner: X"


def test_jump_out_of_range(session):
    with pytest.raises(InvalidIndex):
        session.jump_to(1)


def test_new_game(session):
    play_all(session, [0, 4])
    session.new_game()
    assert len(session.history) == 1
    assert session.status_text() == "Next player: X"


def test_outcome_of_board():
    assert Outcome.of(board_from("OOO.XX.X.")).winner is Player.O
    assert not Outcome.of(board_from(".........")).is_over


def test_to_dict(session):
    play_all(session, [0, 4, 8])
    session.jump_to(1)
    data = session.to_dict()
    assert data["board"] == ["X"] + [None] * 8
    assert data["status_text"] == "Next player: O"
    assert data["turn_text"] == "You are at move #1"
    assert data["turn_number"] == 1
    assert data["x_is_next"] is False
    assert data["outcome"] == {"status": "in_progress", "winner": None, "line": None}
    assert [m["index"] for m in data["moves"]] == [0, 2, 3]
    assert data["history_length"] == 4


def test_logs_game_end(session, caplog):
    with caplog.at_level(logging.INFO, logger="tictactoe.game.session"):
        play_all(session, [0, 1, 3, 4, 6])
    assert "X wins" in caplog.text


def test_logs_ignored_move(session, caplog):
    session.play_move(0)
    with caplog.at_level(logging.DEBUG, logger="tictactoe.game.session"):
        session.play_move(0)
    assert "Ignored move by O on cell 0" in caplog.text
