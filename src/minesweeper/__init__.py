"""
Minesweeper engine package.

Provides board generation, reveal and flag moves, win/loss detection,
and the callers built on them: a game session, a Gymnasium environment
and a terminal front-end.
"""
from .cell import Cell, CellState, CellType
from .board import Board, GameOutcome
from .config import BoardConfig, BEGINNER, INTERMEDIATE, EXPERT, DIFFICULTIES
from .errors import MinesweeperError, InvalidConfiguration, GenerationInfeasible
from .engine import RevealResult, validate, generate, reveal, toggle_flag
from .session import GameSession, GameState
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "CellType",
    "Board",
    "GameOutcome",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "MinesweeperError",
    "InvalidConfiguration",
    "GenerationInfeasible",
    "RevealResult",
    "validate",
    "generate",
    "reveal",
    "toggle_flag",
    "GameSession",
    "GameState",
    "MinesweeperEnv",
]
