"""
Move hints for human players.
"""

from typing import List

from .board import Board, Move
from .evaluation import evaluate_board
from .moves import apply_move, get_all_moves
from .piece import Side


def get_suggested_moves(board: Board, side: Side) -> List[Move]:
    """
    Moves worth highlighting for ``side``.

    With captures available this is every capture of the highest count.
    Otherwise each legal move is scored one ply ahead with the static
    evaluator and all moves sharing the best score are returned, in
    generation order.
    """
    moves = get_all_moves(board, side)
    if not moves:
        return []

    captures = [move for move in moves if move.is_capture]
    if captures:
        most = max(move.capture_count for move in captures)
        return [move for move in captures if move.capture_count == most]

    scored = [(evaluate_board(apply_move(board, move).board, side), move) for move in moves]
    best = max(score for score, _ in scored)
    return [move for score, move in scored if score == best]
