"""
Strategic decision-making system for the Dama AI.
Difficulty levels, strategy factory and the AI move entry point.
"""

import random
from enum import Enum
from typing import Dict, List, Optional, Union

from loguru import logger

from .board import Board, Move
from .piece import Side
from .strategies import STRATEGIES, Strategy


class Difficulty(Enum):
    """AI difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union["Difficulty", str, None]) -> "Difficulty":
        """Resolve ``value`` to a level; anything unrecognised means EASY."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.warning(f"Unknown difficulty '{value}', falling back to easy")
            return cls.EASY


DIFFICULTY_STRATEGIES: Dict[Difficulty, str] = {
    Difficulty.EASY: "random",
    Difficulty.MEDIUM: "capture_first",
    Difficulty.HARD: "minimax",
}


# Strategy Factory
class StrategyFactory:
    """Factory class for creating strategy instances."""

    _strategies = STRATEGIES

    @classmethod
    def create_strategy(
        cls, strategy_name: str, rng: Optional[random.Random] = None
    ) -> Strategy:
        """
        Create a strategy instance by name.

        Args:
            strategy_name: Name of the strategy to create
            rng: Optional random generator used for tie-breaking

        Returns:
            Strategy: Instance of the requested strategy

        Raises:
            ValueError: If strategy name is not recognized
        """
        strategy_name = strategy_name.lower()
        if strategy_name not in cls._strategies:
            available = list(cls._strategies.keys())
            raise ValueError(
                f"Unknown strategy '{strategy_name}'. Available: {available}"
            )

        return cls._strategies[strategy_name](rng=rng)

    @classmethod
    def for_difficulty(
        cls,
        difficulty: Union[Difficulty, str, None],
        rng: Optional[random.Random] = None,
    ) -> Strategy:
        """Strategy playing at ``difficulty``; unknown levels play easy."""
        level = Difficulty.parse(difficulty)
        return cls.create_strategy(DIFFICULTY_STRATEGIES[level], rng)

    @classmethod
    def get_available_strategies(cls) -> List[str]:
        """Get list of available strategy names."""
        return list(cls._strategies.keys())

    @classmethod
    def get_strategy_descriptions(cls) -> Dict[str, str]:
        """Get descriptions of all available strategies."""
        descriptions = {}
        for name, strategy_class in cls._strategies.items():
            strategy = strategy_class()
            descriptions[name] = strategy.description
        return descriptions


def get_ai_move(
    board: Board,
    side: Side,
    difficulty: Union[Difficulty, str, None],
    rng: Optional[random.Random] = None,
    moves: Optional[List[Move]] = None,
) -> Optional[Move]:
    """
    Choose the AI move for ``side`` at ``difficulty``.

    Each call builds a fresh strategy, so no search state survives between
    decisions. ``moves`` optionally narrows the choice to a subset of the
    legal moves. Returns ``None`` when ``side`` has no legal move.
    """
    strategy = StrategyFactory.for_difficulty(difficulty, rng)
    move = strategy.decide(board, side, moves)
    logger.debug(f"{strategy.name} picked {move} for {side.display_name}")
    return move
