"""Move recording."""
from __future__ import annotations
from dataclasses import dataclass

from ..board import Player


@dataclass(frozen=True)
class Move:
    """Immutable record of one played move.

    `number` is 1-based: move #n turns history[n - 1] into history[n].
    """
    number: int
    cell: int
    player: Player

    @property
    def row(self) -> int:
        return self.cell // 3

    @property
    def col(self) -> int:
        return self.cell % 3

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "cell": self.cell,
            "row": self.row,
            "col": self.col,
            "player": self.player.value,
        }

