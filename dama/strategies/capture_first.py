"""
Capture-First Strategy - random play that always grabs material when it can.
"""

from typing import List, Optional

from ..board import Board, Move
from ..piece import Side
from .base import Strategy


class CaptureFirstStrategy(Strategy):
    """Medium opponent: random capture if any, otherwise random move."""

    def __init__(self, rng=None):
        super().__init__(
            "CaptureFirst",
            "Prefers a random capture, otherwise plays a random legal move",
            rng,
        )

    def decide(
        self, board: Board, side: Side, moves: Optional[List[Move]] = None
    ) -> Optional[Move]:
        moves = self._get_valid_moves(board, side, moves)
        if not moves:
            return None

        # Priority 1: any capture
        captures = self._get_capture_moves(moves)
        if captures:
            return self._pick(captures)

        # Fallback: anything legal
        return self._pick(moves)
