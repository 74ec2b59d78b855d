"""History manager for board snapshots and time travel."""
from __future__ import annotations
from typing import Iterator, NamedTuple

from ..board import Board, InvalidIndex, Player, check_cell_index
from ..rules import evaluate
from .action import Move
from .snapshot import Snapshot


class MoveEntry(NamedTuple):
    index: int
    label: str


def describe(index: int) -> str:
    """Navigation label for a history index."""
    if index > 0:
        return f"Go to move #{index}"
    return "Go to game start"


class HistoryManager:
    """Ordered board snapshots plus a cursor on the one being viewed.

    Snapshots are never modified. Playing a move from an earlier snapshot
    builds a new list that drops everything after the cursor, so the
    abandoned branch cannot be reached again.
    """

    def __init__(self):
        self._snapshots: list[Snapshot] = [Snapshot.initial()]
        self._current_move = 0

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def current_move(self) -> int:
        return self._current_move

    @property
    def x_is_next(self) -> bool:
        return self._current_move % 2 == 0

    @property
    def next_player(self) -> Player:
        return Player.X if self.x_is_next else Player.O

    @property
    def is_at_latest(self) -> bool:
        return self._current_move == len(self._snapshots) - 1

    @property
    def snapshots(self) -> tuple[Snapshot, ...]:
        return tuple(self._snapshots)

    @property
    def boards(self) -> tuple[Board, ...]:
        return tuple(s.board for s in self._snapshots)

    @property
    def moves(self) -> tuple[Move, ...]:
        """Moves of the live branch, oldest first."""
        return tuple(s.move for s in self._snapshots[1:])

    def _check_move_index(self, move_index: int) -> int:
        if isinstance(move_index, bool) or not isinstance(move_index, int):
            raise InvalidIndex(f"Move index must be an int, got {move_index!r}")
        if not 0 <= move_index < len(self._snapshots):
            raise InvalidIndex(
                f"Move {move_index} not in history (0-{len(self._snapshots) - 1})"
            )
        return move_index

    def board_at(self, move_index: int) -> Board:
        return self._snapshots[self._check_move_index(move_index)].board

    def current_snapshot(self) -> Snapshot:
        return self._snapshots[self._current_move]

    def current_board(self) -> Board:
        return self._snapshots[self._current_move].board

    def can_play(self, cell_index: int) -> bool:
        """True if a move on `cell_index` would be accepted right now."""
        board = self.current_board()
        return board[cell_index] is None and evaluate(board) is None

    def play_move(self, cell_index: int) -> Move | None:
        """Play the next player's mark on `cell_index` of the viewed board.

        Returns the new Move, or None when the move is ignored because the
        cell is taken or the viewed board already has a winner.
        """
        check_cell_index(cell_index)
        if not self.can_play(cell_index):
            return None

        current = self.current_snapshot()
        move = Move(number=current.index + 1, cell=cell_index, player=self.next_player)
        self._snapshots = self._snapshots[:self._current_move + 1] + [current.advance(move)]
        self._current_move = len(self._snapshots) - 1
        return move

    def jump_to(self, move_index: int) -> Board:
        """Move the cursor to `move_index`. History is left untouched."""
        self._current_move = self._check_move_index(move_index)
        return self.current_board()

    def move_list(self) -> Iterator[MoveEntry]:
        """Navigation entries, rebuilt from the history on every call.

        The game start is always listed; other moves are listed unless they
        are the one currently viewed.
        """
        for index in range(len(self._snapshots)):
            if index == 0 or index != self._current_move:
                yield MoveEntry(index, describe(index))

    def reset(self):
        self._snapshots = [Snapshot.initial()]
        self._current_move = 0

    def to_dict(self) -> dict:
        return {
            "current_move": self._current_move,
            "snapshots": [s.to_dict() for s in self._snapshots],
        }
