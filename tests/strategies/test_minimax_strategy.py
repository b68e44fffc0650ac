import math
import unittest

from dama.board import Board, Move, Position
from dama.constants import GameConstants
from dama.piece import Side
from dama.strategies import MinimaxStrategy
from dama.strategies.minimax import minimax, search_depth

EMPTY = "........"


class TestSearchDepth(unittest.TestCase):
    def test_opening_depth(self):
        self.assertEqual(search_depth(Board.initial()), GameConstants.AI_DEPTH_HARD)

    def test_late_game_depth(self):
        board = Board.from_rows([
            EMPTY, ".b......", EMPTY, EMPTY, EMPTY, EMPTY, "......w.", EMPTY,
        ])
        self.assertEqual(search_depth(board), GameConstants.AI_DEPTH_HARD_LATE_GAME)


class TestMinimaxScores(unittest.TestCase):
    def test_win_scores_include_remaining_depth(self):
        # Black has nothing left, so black to move is a win for white
        board = Board.from_rows([
            EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, "..w.....", EMPTY, EMPTY,
        ])
        value = minimax(board, 3, -math.inf, math.inf, False, Side.FIRST)
        self.assertEqual(value, GameConstants.WIN_SCORE + 3)
        value = minimax(board, 3, -math.inf, math.inf, True, Side.SECOND)
        self.assertEqual(value, -GameConstants.WIN_SCORE - 3)

    def test_depth_zero_uses_evaluator_from_searching_side(self):
        board = Board.from_rows([
            EMPTY, EMPTY, "...b....", EMPTY, EMPTY, "..w.....", ".....w..", EMPTY,
        ])
        first = minimax(board, 0, -math.inf, math.inf, True, Side.FIRST)
        second = minimax(board, 0, -math.inf, math.inf, False, Side.SECOND)
        self.assertEqual(first, -second)
        self.assertGreater(first, 0)


class TestMinimaxDecisions(unittest.TestCase):
    def setUp(self):
        self.strategy = MinimaxStrategy()

    def test_avoids_hanging_a_piece(self):
        # Stepping to (4,3) lets black jump back to (5,4); (4,5) is safe
        board = Board.from_rows([
            EMPTY, EMPTY, EMPTY,
            "..b.....",
            EMPTY,
            "....w...",
            EMPTY, EMPTY,
        ])
        move, score = self.strategy.search(board, Side.FIRST)
        self.assertEqual(move, Move(Position(5, 4), Position(4, 5)))
        self.assertGreater(score, -GameConstants.WIN_SCORE)

    def test_takes_immediate_win(self):
        # Capturing the last black man ends the game at once
        board = Board.from_rows([
            EMPTY, EMPTY, EMPTY, EMPTY,
            "...b....",
            "..w.....",
            EMPTY,
            "......w.",
        ])
        move, _ = self.strategy.search(board, Side.FIRST)
        self.assertTrue(move.is_capture)

    def test_deterministic(self):
        board = Board.from_rows([
            EMPTY, "b.b.....", EMPTY, EMPTY, EMPTY, EMPTY, ".w.w....", EMPTY,
        ])
        self.assertEqual(
            self.strategy.decide(board, Side.FIRST),
            MinimaxStrategy().decide(board, Side.FIRST),
        )

    def test_no_moves(self):
        board = Board.from_rows([EMPTY, EMPTY, "...b....", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY])
        self.assertEqual(self.strategy.search(board, Side.FIRST), (None, None))


if __name__ == "__main__":
    unittest.main()
