"""
Board representation for the Dama game.
An immutable 8x8 grid of optional pieces plus the move value types.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .constants import GameConstants
from .piece import Piece, Rank, Side

Square = Optional[Piece]
Grid = Tuple[Tuple[Square, ...], ...]


@dataclass(frozen=True)
class Position:
    """A square of the board, addressed by row and column."""

    row: int
    col: int

    def is_on_board(self) -> bool:
        size = GameConstants.BOARD_SIZE
        return 0 <= self.row < size and 0 <= self.col < size

    def offset(self, d_row: int, d_col: int, steps: int = 1) -> "Position":
        return Position(self.row + d_row * steps, self.col + d_col * steps)

    def is_dark(self) -> bool:
        return (self.row + self.col) % 2 == 1

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class Move:
    """
    A single move of one piece.

    ``captured`` is empty for a plain step and lists every opponent square
    vacated along a capture chain, in the order they were jumped.
    """

    from_pos: Position
    to_pos: Position
    captured: Tuple[Position, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "captured", tuple(self.captured))

    @property
    def is_capture(self) -> bool:
        return len(self.captured) > 0

    @property
    def capture_count(self) -> int:
        return len(self.captured)

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{self.from_pos}{sep}{self.to_pos}"


def _empty_grid() -> Grid:
    size = GameConstants.BOARD_SIZE
    return tuple(tuple(None for _ in range(size)) for _ in range(size))


@dataclass(frozen=True)
class Board:
    """
    Immutable Dama board.

    Row 0 is SECOND's starting edge and row 7 is FIRST's. Every change
    returns a new ``Board`` so earlier snapshots stay valid for undo.
    """

    squares: Grid = field(default_factory=_empty_grid)

    # --- Construction ---
    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def initial(cls) -> "Board":
        """Starting position: three rows of men per side on the dark squares."""
        size = GameConstants.BOARD_SIZE
        rows = GameConstants.STARTING_ROWS
        pieces: Dict[Position, Piece] = {}
        for row in range(size):
            for col in range(size):
                pos = Position(row, col)
                if not pos.is_dark():
                    continue
                if row < rows:
                    pieces[pos] = Piece(Side.SECOND, Rank.MAN)
                elif row >= size - rows:
                    pieces[pos] = Piece(Side.FIRST, Rank.MAN)
        return cls.from_pieces(pieces)

    @classmethod
    def from_pieces(cls, pieces: Dict[Position, Piece]) -> "Board":
        return cls.empty().with_pieces(pieces)

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Board":
        """
        Build a board from a text diagram.

        Args:
            rows: Eight strings of eight characters, row 0 first.
                ``w``/``b`` are men, ``W``/``B`` kings, anything else is empty.
                Whitespace inside a row is ignored.

        Returns:
            Board: The described position.
        """
        size = GameConstants.BOARD_SIZE
        cleaned = ["".join(r.split()) for r in rows]
        if len(cleaned) != size or any(len(r) != size for r in cleaned):
            raise ValueError(f"Board diagram must be {size}x{size}")
        pieces = {}
        for row, line in enumerate(cleaned):
            for col, char in enumerate(line):
                if char.lower() in ("w", "b"):
                    pieces[Position(row, col)] = Piece.from_char(char)
        return cls.from_pieces(pieces)

    # --- Queries ---
    def piece_at(self, pos: Position) -> Square:
        """Piece on ``pos``; ``None`` when empty or off the board."""
        if not pos.is_on_board():
            return None
        return self.squares[pos.row][pos.col]

    def is_empty(self, pos: Position) -> bool:
        """True only for on-board squares holding no piece."""
        return pos.is_on_board() and self.squares[pos.row][pos.col] is None

    def pieces(self, side: Optional[Side] = None) -> Iterator[Tuple[Position, Piece]]:
        """Iterate occupied squares row-major, optionally for one side only."""
        for row, line in enumerate(self.squares):
            for col, piece in enumerate(line):
                if piece is not None and (side is None or piece.owner is side):
                    yield Position(row, col), piece

    def count(self, side: Optional[Side] = None, rank: Optional[Rank] = None) -> int:
        return sum(
            1 for _, piece in self.pieces(side) if rank is None or piece.rank is rank
        )

    # --- Transformations ---
    def with_pieces(self, changes: Dict[Position, Square]) -> "Board":
        """Return a copy with the given squares replaced; off-board keys are ignored."""
        grid = [list(line) for line in self.squares]
        for pos, piece in changes.items():
            if pos.is_on_board():
                grid[pos.row][pos.col] = piece
        return Board(tuple(tuple(line) for line in grid))

    def to_rows(self) -> List[str]:
        return [
            "".join(piece.to_char() if piece else "." for piece in line)
            for line in self.squares
        ]

    def __str__(self) -> str:
        header = "  " + " ".join(str(c) for c in range(GameConstants.BOARD_SIZE))
        lines = [header]
        for row, line in enumerate(self.to_rows()):
            lines.append(f"{row} " + " ".join(line))
        return "\n".join(lines)
