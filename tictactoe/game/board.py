from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class Player(Enum):
    X = "X"
    O = "O"

    def opposite(self) -> Player:
        return Player.O if self is Player.X else Player.X


# None is an empty cell
Cell = Optional[Player]

SIZE = 3
CELL_COUNT = SIZE * SIZE


class InvalidIndex(IndexError):
    """Raised when a cell or move index is outside the valid range."""


def check_cell_index(index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidIndex(f"Cell index must be an int, got {index!r}")
    if not 0 <= index < CELL_COUNT:
        raise InvalidIndex(f"Cell index {index} out of range 0-{CELL_COUNT - 1}")
    return index


@dataclass(frozen=True)
class Board:
    """Immutable 3x3 board, cells stored row-major (0-2 top row)."""
    cells: tuple[Cell, ...] = (None,) * CELL_COUNT

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"Board needs {CELL_COUNT} cells, got {len(cells)}")
        for cell in cells:
            if cell is not None and not isinstance(cell, Player):
                raise ValueError(f"Invalid cell value: {cell!r}")
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> Board:
        return cls()

    def __getitem__(self, index: int) -> Cell:
        return self.cells[check_cell_index(index)]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def with_mark(self, index: int, player: Player) -> Board:
        """Return a new board with `player` placed on `index`."""
        check_cell_index(index)
        if self.cells[index] is not None:
            raise ValueError(f"Cell {index} is already taken by {self.cells[index].value}")
        cells = list(self.cells)
        cells[index] = player
        return Board(tuple(cells))

    def empty_cells(self) -> list[int]:
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def filled_count(self) -> int:
        return sum(1 for cell in self.cells if cell is not None)

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def rows(self) -> list[tuple[Cell, ...]]:
        return [self.cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]

    def to_list(self) -> list[str | None]:
        return [cell.value if cell else None for cell in self.cells]

    def to_ascii(self) -> str:
        lines = []
        for row in self.rows():
            lines.append(" | ".join(cell.value if cell else " " for cell in row))
        return "\n---------\n".join(lines)

    def __str__(self) -> str:
        return self.to_ascii()
