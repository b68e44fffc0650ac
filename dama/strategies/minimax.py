"""Minimax Strategy.

Depth-limited minimax with alpha-beta pruning over immutable boards. The
searching side is always the maximizing side and every leaf is scored from
its perspective, so the sign convention stays fixed through the whole tree:
maximizing nodes pick the highest child, minimizing nodes (the opponent to
move) the lowest.

Terminal positions score ``WIN_SCORE + depth`` for a win and the negation for
a loss, where ``depth`` is the remaining depth, so quicker wins and slower
losses are preferred. Non-terminal leaves use the static evaluator.
"""

import math
from typing import List, Optional, Tuple

from loguru import logger

from ..board import Board, Move
from ..constants import GameConstants
from ..evaluation import Score, evaluate_board
from ..moves import apply_move, get_all_moves
from ..piece import Side
from ..rules import check_winner
from .base import Strategy


def search_depth(board: Board) -> int:
    """Plies searched from ``board``: deeper once few pieces remain."""
    if board.count() < GameConstants.LATE_GAME_PIECE_THRESHOLD:
        return GameConstants.AI_DEPTH_HARD_LATE_GAME
    return GameConstants.AI_DEPTH_HARD


def minimax(
    board: Board,
    depth: int,
    alpha: Score,
    beta: Score,
    maximizing: bool,
    ai_side: Side,
) -> Score:
    """
    Alpha-beta value of ``board`` for ``ai_side``.

    Args:
        board: Position to score.
        depth: Remaining plies.
        alpha: Best score the maximizer is already assured of.
        beta: Best score the minimizer is already assured of.
        maximizing: True when ``ai_side`` is to move on ``board``.
        ai_side: The searching side; all scores are from its perspective.
    """
    to_move = ai_side if maximizing else ai_side.opponent
    winner = check_winner(board, to_move)
    if winner is ai_side:
        return GameConstants.WIN_SCORE + depth
    if winner is ai_side.opponent:
        return -GameConstants.WIN_SCORE - depth
    if depth == 0:
        return evaluate_board(board, ai_side)

    moves = get_all_moves(board, to_move)
    if maximizing:
        best = -math.inf
        for move in moves:
            child = apply_move(board, move).board
            value = minimax(child, depth - 1, alpha, beta, False, ai_side)
            best = max(best, value)
            alpha = max(alpha, value)
            if beta <= alpha:
                break
        return best

    best = math.inf
    for move in moves:
        child = apply_move(board, move).board
        value = minimax(child, depth - 1, alpha, beta, True, ai_side)
        best = min(best, value)
        beta = min(beta, value)
        if beta <= alpha:
            break
    return best


class MinimaxStrategy(Strategy):
    """Hard opponent: alpha-beta search, deterministic tie-breaking."""

    def __init__(self, rng=None):
        super().__init__(
            "Minimax",
            "Alpha-beta search 4 plies deep, 6 plies once fewer than 10 pieces remain",
            rng,
        )

    def decide(
        self, board: Board, side: Side, moves: Optional[List[Move]] = None
    ) -> Optional[Move]:
        move, _ = self.search(board, side, moves)
        return move

    def search(
        self, board: Board, side: Side, moves: Optional[List[Move]] = None
    ) -> Tuple[Optional[Move], Optional[Score]]:
        """
        Best root move for ``side`` and its score.

        A single legal move is returned at once without searching (score
        ``None``). Among equally scored root moves the first one wins.
        """
        moves = self._get_valid_moves(board, side, moves)
        if not moves:
            return None, None
        if len(moves) == 1:
            return moves[0], None

        depth = search_depth(board)
        best_move: Optional[Move] = None
        best_value: Score = -math.inf
        for move in moves:
            child = apply_move(board, move).board
            # Each root child gets a full window, so root scores are exact
            value = minimax(child, depth - 1, -math.inf, math.inf, False, side)
            if value > best_value:
                best_value = value
                best_move = move

        logger.debug(
            f"Minimax chose {best_move} for {side.display_name} "
            f"(depth={depth}, score={best_value}, candidates={len(moves)})"
        )
        return best_move, best_value
