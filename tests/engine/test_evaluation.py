import unittest

from dama.board import Board, Position
from dama.evaluation import evaluate_board, piece_value
from dama.piece import Piece, Rank, Side

EMPTY = "........"


class TestEvaluation(unittest.TestCase):
    def test_initial_position_is_balanced(self):
        self.assertEqual(evaluate_board(Board.initial(), Side.FIRST), 0)

    def test_antisymmetry(self):
        board = Board.from_rows([
            ".b......",
            "........",
            "...W....",
            "....b...",
            "........",
            "..B.....",
            ".....w..",
            "w.......",
        ])
        self.assertEqual(
            evaluate_board(board, Side.FIRST), -evaluate_board(board, Side.SECOND)
        )
        self.assertNotEqual(evaluate_board(board, Side.FIRST), 0)

    def test_man_advancement(self):
        self.assertEqual(piece_value(Piece(Side.FIRST), Position(5, 2)), 120)
        self.assertEqual(piece_value(Piece(Side.SECOND), Position(2, 3)), 120)
        # Back row man: no progress, edge bonus
        self.assertEqual(piece_value(Piece(Side.FIRST), Position(7, 2)), 115)

    def test_king_centralization_and_edge(self):
        self.assertEqual(piece_value(Piece(Side.FIRST, Rank.KING), Position(3, 4)), 535)
        self.assertEqual(piece_value(Piece(Side.SECOND, Rank.KING), Position(0, 1)), 525)

    def test_sign_follows_owner(self):
        board = Board.from_rows([
            EMPTY, EMPTY, EMPTY, EMPTY, EMPTY,
            "..w.....",
            EMPTY, EMPTY,
        ])
        self.assertEqual(evaluate_board(board, Side.FIRST), 120)
        self.assertEqual(evaluate_board(board, Side.SECOND), -120)


if __name__ == "__main__":
    unittest.main()
