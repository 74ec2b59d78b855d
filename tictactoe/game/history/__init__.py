"""Game history tracking."""
from .action import Move
from .snapshot import Snapshot
from .manager import HistoryManager, MoveEntry, describe

__all__ = [
    "Move",
    "Snapshot",
    "HistoryManager",
    "MoveEntry",
    "describe",
]
