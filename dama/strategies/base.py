"""
Base class shared by all Dama AI strategies.
"""

import random
from abc import ABC, abstractmethod
from typing import List, Optional

from ..board import Board, Move
from ..moves import get_all_moves
from ..piece import Side


class Strategy(ABC):
    """
    A stateless move chooser.

    ``decide`` looks only at the board it is given; nothing is remembered
    between calls apart from the random generator used for tie-breaking.
    """

    def __init__(self, name: str, description: str, rng: Optional[random.Random] = None):
        self.name = name
        self.description = description
        self.rng = rng if rng is not None else random.Random()

    @abstractmethod
    def decide(
        self, board: Board, side: Side, moves: Optional[List[Move]] = None
    ) -> Optional[Move]:
        """
        Choose a move for ``side``.

        Args:
            board: Position to play from.
            side: Side to move.
            moves: Optional subset of the legal moves to choose from, e.g. the
                continuing piece's captures during a chain. Defaults to every
                legal move of ``side``.

        Returns:
            Optional[Move]: A legal move, or ``None`` when ``side`` cannot move.
        """

    # --- Helpers ---
    @staticmethod
    def _get_valid_moves(
        board: Board, side: Side, moves: Optional[List[Move]] = None
    ) -> List[Move]:
        if moves is not None:
            return list(moves)
        return get_all_moves(board, side)

    @staticmethod
    def _get_capture_moves(moves: List[Move]) -> List[Move]:
        return [move for move in moves if move.is_capture]

    def _pick(self, moves: List[Move]) -> Optional[Move]:
        if not moves:
            return None
        return self.rng.choice(moves)

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"
