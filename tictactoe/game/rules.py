"""Win detection for a 3x3 board.

All functions here are pure: they only read the board they are given.
Board geometry lives entirely in WIN_LINES, so history and session code
never need to know which triples make a line.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board, Player


Line = tuple[int, int, int]

# Checked in this order: rows, columns, diagonals
WIN_LINES: tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def _line_owner(board: Board, line: Line) -> Player | None:
    a, b, c = line
    first = board.cells[a]
    if first is not None and first == board.cells[b] == board.cells[c]:
        return first
    return None


def winning_line(board: Board) -> Line | None:
    """Return the first completed line, or None."""
    for line in WIN_LINES:
        if _line_owner(board, line) is not None:
            return line
    return None


def evaluate(board: Board) -> Player | None:
    """Return the player holding a complete line, or None (no winner).

    None does not mean the game is over: use is_draw() to tell a full board
    from a game still in progress.
    """
    line = winning_line(board)
    if line is None:
        return None
    return board.cells[line[0]]


def is_draw(board: Board) -> bool:
    return evaluate(board) is None and board.is_full()

