import random
import unittest
from unittest.mock import patch

from dama.board import Board, Move, Position
from dama.moves import get_all_moves
from dama.piece import Side
from dama.strategies import CaptureFirstStrategy, MinimaxStrategy, RandomStrategy
from dama.strategy import Difficulty, StrategyFactory, get_ai_move

EMPTY = "........"

SINGLE_MOVE_BOARD = Board.from_rows([
    EMPTY,
    "......b.",
    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY,
    "w.......",
])


class TestStrategyFactory(unittest.TestCase):
    def test_difficulty_mapping(self):
        self.assertIsInstance(StrategyFactory.for_difficulty("easy"), RandomStrategy)
        self.assertIsInstance(StrategyFactory.for_difficulty(Difficulty.MEDIUM), CaptureFirstStrategy)
        self.assertIsInstance(StrategyFactory.for_difficulty("HARD"), MinimaxStrategy)

    def test_unknown_difficulty_plays_easy(self):
        self.assertEqual(Difficulty.parse("nightmare"), Difficulty.EASY)
        self.assertIsInstance(StrategyFactory.for_difficulty("nightmare"), RandomStrategy)
        self.assertIsInstance(StrategyFactory.for_difficulty(None), RandomStrategy)

    def test_unknown_strategy_name(self):
        with self.assertRaises(ValueError):
            StrategyFactory.create_strategy("oracle")

    def test_descriptions(self):
        names = StrategyFactory.get_available_strategies()
        self.assertEqual(set(names), {"random", "capture_first", "minimax"})
        descriptions = StrategyFactory.get_strategy_descriptions()
        self.assertTrue(all(descriptions[name] for name in names))


class TestEasyAndMedium(unittest.TestCase):
    def test_easy_returns_legal_moves(self):
        board = Board.initial()
        legal = set(get_all_moves(board, Side.FIRST))
        strategy = RandomStrategy(rng=random.Random(7))
        for _ in range(20):
            self.assertIn(strategy.decide(board, Side.FIRST), legal)

    def test_easy_is_reproducible_with_seed(self):
        board = Board.initial()
        a = get_ai_move(board, Side.FIRST, "easy", random.Random(3))
        b = get_ai_move(board, Side.FIRST, "easy", random.Random(3))
        self.assertEqual(a, b)

    def test_medium_prefers_captures(self):
        board = Board.from_rows([
            EMPTY, EMPTY, EMPTY, EMPTY,
            "...b....",
            "..w.....",
            EMPTY,
            "w.......",
        ])
        strategy = CaptureFirstStrategy(rng=random.Random(1))
        move = strategy.decide(board, Side.FIRST)
        self.assertTrue(move.is_capture)

    def test_medium_quiet_position(self):
        board = Board.initial()
        move = get_ai_move(board, Side.SECOND, Difficulty.MEDIUM, random.Random(5))
        self.assertIn(move, get_all_moves(board, Side.SECOND))

    def test_no_moves_returns_none(self):
        board = Board.from_rows([EMPTY, EMPTY, "...b....", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY])
        for level in Difficulty:
            self.assertIsNone(get_ai_move(board, Side.FIRST, level))

    def test_restricted_candidates(self):
        board = Board.initial()
        only = [Move(Position(5, 6), Position(4, 7))]
        for level in Difficulty:
            self.assertEqual(get_ai_move(board, Side.FIRST, level, moves=only), only[0])


class TestSingleLegalMove(unittest.TestCase):
    def test_every_difficulty_returns_the_only_move(self):
        expected = Move(Position(7, 0), Position(6, 1))
        self.assertEqual(get_all_moves(SINGLE_MOVE_BOARD, Side.FIRST), [expected])
        for level in Difficulty:
            self.assertEqual(
                get_ai_move(SINGLE_MOVE_BOARD, Side.FIRST, level, random.Random(0)),
                expected,
            )

    def test_hard_skips_search(self):
        with patch("dama.strategies.minimax.minimax") as search:
            move = MinimaxStrategy().decide(SINGLE_MOVE_BOARD, Side.FIRST)
        search.assert_not_called()
        self.assertEqual(move, Move(Position(7, 0), Position(6, 1)))


if __name__ == "__main__":
    unittest.main()
