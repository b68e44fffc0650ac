"""
Dama (Ethiopian checkers) engine.
Rules, move generation, evaluation and AI opponents for an 8x8 board.
"""

from dama.board import Board, Move, Position
from dama.config import GameConfig, GameMode
from dama.constants import EvaluationConstants, GameConstants, ScoreConstants
from dama.evaluation import evaluate_board
from dama.exceptions import (
    ConfigError,
    DamaError,
    GameOverError,
    IllegalMoveError,
    NotAITurnError,
)
from dama.game import DamaGame, GameResult, MoveOutcome
from dama.moves import (
    ApplyMoveResult,
    apply_move,
    find_capture_moves,
    get_all_moves,
    get_valid_moves,
)
from dama.piece import Piece, Rank, Side
from dama.rules import check_winner
from dama.strategies import (
    STRATEGIES,
    CaptureFirstStrategy,
    MinimaxStrategy,
    RandomStrategy,
    Strategy,
)
from dama.strategy import Difficulty, StrategyFactory, get_ai_move
from dama.suggestions import get_suggested_moves

__all__ = [
    "Board",
    "Move",
    "Position",
    "Piece",
    "Rank",
    "Side",
    "ApplyMoveResult",
    "apply_move",
    "find_capture_moves",
    "get_all_moves",
    "get_valid_moves",
    "check_winner",
    "evaluate_board",
    "get_suggested_moves",
    "get_ai_move",
    "Difficulty",
    "Strategy",
    "StrategyFactory",
    "RandomStrategy",
    "CaptureFirstStrategy",
    "MinimaxStrategy",
    "STRATEGIES",
    "DamaGame",
    "GameResult",
    "MoveOutcome",
    "GameConfig",
    "GameMode",
    "DamaError",
    "IllegalMoveError",
    "GameOverError",
    "NotAITurnError",
    "ConfigError",
    "GameConstants",
    "EvaluationConstants",
    "ScoreConstants",
]
