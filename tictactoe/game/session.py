"""Game session that ties history and win detection together."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging

from .board import Board, Player
from .history import HistoryManager, Move, MoveEntry
from .rules import Line, evaluate, is_draw, winning_line

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    status: GameStatus
    winner: Player | None = None
    line: Line | None = None

    @classmethod
    def of(cls, board: Board) -> Outcome:
        """Classify a board as won, drawn or still in progress."""
        winner = evaluate(board)
        if winner is not None:
            return cls(GameStatus.WON, winner, winning_line(board))
        if is_draw(board):
            return cls(GameStatus.DRAW)
        return cls(GameStatus.IN_PROGRESS)

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "winner": self.winner.value if self.winner else None,
            "line": list(self.line) if self.line else None,
        }


class GameSession:
    """One game: the move history, what is being viewed, and its status.

    Moves are only refused when the viewed board is already won (or the
    cell is taken). Jumping back to an earlier board and playing from it is
    always allowed and replaces the old continuation.
    """

    def __init__(self, history: HistoryManager | None = None):
        self.history = history or HistoryManager()

    @property
    def x_is_next(self) -> bool:
        return self.history.x_is_next

    @property
    def next_player(self) -> Player:
        return self.history.next_player

    def current_board(self) -> Board:
        return self.history.current_board()

    def turn_number(self) -> int:
        return self.history.current_move

    def move_list(self) -> list[MoveEntry]:
        return list(self.history.move_list())

    def outcome(self) -> Outcome:
        return Outcome.of(self.current_board())

    def status_text(self) -> str:
        winner = evaluate(self.current_board())
        if winner is not None:
            return f"Winner: {winner.value}"
        return f"Next player: {self.next_player.value}"

    def turn_text(self) -> str:
        return f"You are at move #{self.turn_number()}"

    def play_move(self, cell_index: int) -> Move | None:
        player = self.next_player
        move = self.history.play_move(cell_index)
        if move is None:
            logger.debug(
                "Ignored move by %s on cell %d at move #%d",
                player.value, cell_index, self.turn_number(),
            )
            return None

        logger.debug("Move #%d: %s on cell %d", move.number, move.player.value, move.cell)
        outcome = self.outcome()
        if outcome.status is GameStatus.WON:
            logger.info("%s wins on line %s after %d moves",
                        outcome.winner.value, outcome.line, move.number)
        elif outcome.status is GameStatus.DRAW:
            logger.info("Draw after %d moves", move.number)
        return move

    def jump_to(self, move_index: int) -> Board:
        board = self.history.jump_to(move_index)
        logger.debug("Jumped to move #%d of %d", move_index, len(self.history) - 1)
        return board

    def new_game(self):
        self.history.reset()
        logger.info("New game started")

    def to_dict(self) -> dict:
        """Everything the front end needs to draw the current view."""
        return {
            "board": self.current_board().to_list(),
            "status_text": self.status_text(),
            "turn_text": self.turn_text(),
            "turn_number": self.turn_number(),
            "x_is_next": self.x_is_next,
            "outcome": self.outcome().to_dict(),
            "moves": [{"index": e.index, "label": e.label} for e in self.move_list()],
            "history_length": len(self.history),
        }
