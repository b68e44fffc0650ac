"""
Strategies module - Collection of all available Dama AI strategies.
"""

from dama.strategies.base import Strategy
from dama.strategies.capture_first import CaptureFirstStrategy
from dama.strategies.minimax import MinimaxStrategy
from dama.strategies.random_strategy import RandomStrategy

# Strategy Mapping - Centralized mapping of strategy names to classes
STRATEGIES: dict[str, type] = {
    "random": RandomStrategy,
    "capture_first": CaptureFirstStrategy,
    "minimax": MinimaxStrategy,
}

__all__ = [
    "Strategy",
    "RandomStrategy",
    "CaptureFirstStrategy",
    "MinimaxStrategy",
    "STRATEGIES",
]
