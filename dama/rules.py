"""
Terminal-state detection for the Dama game.
"""

from typing import Optional

from .board import Board
from .moves import get_all_moves
from .piece import Side


def has_moves(board: Board, side: Side) -> bool:
    return len(get_all_moves(board, side)) > 0


def check_winner(board: Board, side_to_move: Side) -> Optional[Side]:
    """
    Decide whether the game is over with ``side_to_move`` about to play.

    Args:
        board: Current position.
        side_to_move: Side whose turn it is.

    Returns:
        Optional[Side]: The winning side, or ``None`` while the game continues.
        A side with no legal move loses. Otherwise the side to move wins when
        the opponent has no pieces left or none of them can move.
    """
    opponent = side_to_move.opponent
    if not has_moves(board, side_to_move):
        return opponent
    if board.count(opponent) == 0:
        return side_to_move
    if not has_moves(board, opponent):
        return side_to_move
    return None
