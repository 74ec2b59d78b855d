"""Board snapshots for time travel."""
from __future__ import annotations
from dataclasses import dataclass

from ..board import Board
from .action import Move


@dataclass(frozen=True)
class Snapshot:
    """Board state after `index` moves, and the move that produced it."""
    index: int
    board: Board
    move: Move | None = None

    @classmethod
    def initial(cls) -> Snapshot:
        return cls(index=0, board=Board.empty())

    def advance(self, move: Move) -> Snapshot:
        """Derive the next snapshot by applying `move` to this board."""
        return Snapshot(
            index=self.index + 1,
            board=self.board.with_mark(move.cell, move.player),
            move=move,
        )

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "board": self.board.to_list(),
            "move": self.move.to_dict() if self.move else None,
        }
