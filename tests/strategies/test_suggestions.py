import unittest

from dama.board import Board, Move, Position
from dama.moves import find_capture_moves
from dama.piece import Side
from dama.suggestions import get_suggested_moves

EMPTY = "........"


class TestSuggestions(unittest.TestCase):
    def test_opening_hint(self):
        # Only (5,6)->(4,7) both advances and gains the edge bonus
        hints = get_suggested_moves(Board.initial(), Side.FIRST)
        self.assertEqual(hints, [Move(Position(5, 6), Position(4, 7))])

    def test_captures_take_priority(self):
        board = Board.from_rows([
            EMPTY, EMPTY, EMPTY,
            "....b...",
            EMPTY,
            "..b.....",
            ".w......",
            "......w.",
        ])
        hints = get_suggested_moves(board, Side.FIRST)
        self.assertEqual(hints, find_capture_moves(board, Side.FIRST))
        self.assertEqual(hints[0].capture_count, 2)

    def test_ties_are_all_returned(self):
        # Both men gain one row and no edge bonus whichever way they step
        board = Board.from_rows([
            EMPTY, "b.......", EMPTY, EMPTY, EMPTY, "..w.w...", EMPTY, EMPTY,
        ])
        hints = get_suggested_moves(board, Side.FIRST)
        self.assertEqual(
            hints,
            [
                Move(Position(5, 2), Position(4, 1)),
                Move(Position(5, 2), Position(4, 3)),
                Move(Position(5, 4), Position(4, 3)),
                Move(Position(5, 4), Position(4, 5)),
            ],
        )

    def test_no_moves(self):
        board = Board.from_rows([EMPTY, EMPTY, "...b....", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY])
        self.assertEqual(get_suggested_moves(board, Side.FIRST), [])


if __name__ == "__main__":
    unittest.main()
