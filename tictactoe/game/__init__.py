from .board import Board, Player, Cell, InvalidIndex
from .rules import WIN_LINES, evaluate, winning_line, is_draw
from .history import HistoryManager, Move, Snapshot, MoveEntry
from .session import GameSession, GameStatus, Outcome
from .config import AppConfig, ServerConfig, load_config
