"""
Static evaluation of Dama positions.

Scores are always from one side's perspective: that side's pieces count
positively and the opponent's negatively, so
``evaluate_board(b, s) == -evaluate_board(b, s.opponent)`` for every board.
Search code relies on this to flip perspective between plies.
"""

from typing import Union

from .board import Board, Position
from .constants import EvaluationConstants, GameConstants
from .piece import Piece, Side

Score = Union[int, float]


def piece_value(piece: Piece, pos: Position) -> Score:
    """Unsigned worth of ``piece`` standing on ``pos``."""
    ec = EvaluationConstants
    last = GameConstants.BOARD_SIZE - 1
    if piece.is_king():
        dist_to_center = abs(pos.row - ec.BOARD_CENTER) + abs(pos.col - ec.BOARD_CENTER)
        value = ec.KING_VALUE + (ec.CENTRALIZATION_BASE - dist_to_center) * ec.CENTRALIZATION_WEIGHT
    else:
        # Rows travelled from the owner's back edge
        progress = last - pos.row if piece.owner is Side.FIRST else pos.row
        value = ec.MAN_VALUE + progress * ec.ADVANCEMENT_BONUS
    if pos.row in (0, last) or pos.col in (0, last):
        value += ec.EDGE_BONUS
    return value


def evaluate_board(board: Board, side: Side) -> Score:
    """Material and positional balance of ``board`` for ``side``."""
    score: Score = 0
    for pos, piece in board.pieces():
        value = piece_value(piece, pos)
        score += value if piece.owner is side else -value
    return score
