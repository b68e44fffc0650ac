"""
Constants and configuration values for the Dama game.
Centralized location for board layout, search and scoring constants.
"""

from typing import Tuple


class GameConstants:
    """Core game constants and rules."""

    # Board dimensions
    BOARD_SIZE = 8
    STARTING_ROWS = 3  # rows of men per side at the start

    # Diagonal steps: (row delta, col delta)
    FORWARD_FIRST: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1))
    FORWARD_SECOND: Tuple[Tuple[int, int], ...] = ((1, -1), (1, 1))
    ALL_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

    # Promotion rows (farthest row from each side's start)
    FIRST_PROMOTION_ROW = 0
    SECOND_PROMOTION_ROW = BOARD_SIZE - 1

    # Search depths (plies)
    AI_DEPTH_HARD = 4
    AI_DEPTH_HARD_LATE_GAME = 6
    LATE_GAME_PIECE_THRESHOLD = 10  # total pieces strictly below this widens the search

    # Terminal scores in minimax, remaining depth is added on top
    WIN_SCORE = 10000


class EvaluationConstants:
    """Weights of the static board evaluation."""

    MAN_VALUE = 100
    KING_VALUE = 500
    ADVANCEMENT_BONUS = 10  # per row travelled toward promotion
    CENTRALIZATION_BASE = 8
    CENTRALIZATION_WEIGHT = 5
    BOARD_CENTER = 3.5
    EDGE_BONUS = 15


class ScoreConstants:
    """Final score shown once a game is won."""

    PIECE_POINTS = 100
    KING_POINTS = 200  # on top of PIECE_POINTS
    MOVE_PENALTY = 5
    WIN_BONUS = 1000


class DisplayNames:
    """Human readable names for sides and players."""

    FIRST = "White"
    SECOND = "Black"
    HUMAN = "Player"
    CPU = "CPU"
