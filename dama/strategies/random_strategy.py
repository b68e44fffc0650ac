"""
Random Strategy - uniform choice among the legal moves.
"""

from typing import List, Optional

from ..board import Board, Move
from ..piece import Side
from .base import Strategy


class RandomStrategy(Strategy):
    """Easy opponent: any legal move, no preference."""

    def __init__(self, rng=None):
        super().__init__(
            "Random",
            "Plays a uniformly random legal move",
            rng,
        )

    def decide(
        self, board: Board, side: Side, moves: Optional[List[Move]] = None
    ) -> Optional[Move]:
        return self._pick(self._get_valid_moves(board, side, moves))
