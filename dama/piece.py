"""
Piece representation for the Dama game.
Each square holds at most one piece owned by one of the two sides.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import DisplayNames, GameConstants


class Side(Enum):
    """The two sides of a game. FIRST starts on rows 5-7 and moves first."""

    FIRST = "first"
    SECOND = "second"

    @property
    def opponent(self) -> "Side":
        return Side.SECOND if self is Side.FIRST else Side.FIRST

    @property
    def forward_directions(self) -> Tuple[Tuple[int, int], ...]:
        """Diagonals a man of this side may step or capture along."""
        if self is Side.FIRST:
            return GameConstants.FORWARD_FIRST
        return GameConstants.FORWARD_SECOND

    @property
    def promotion_row(self) -> int:
        if self is Side.FIRST:
            return GameConstants.FIRST_PROMOTION_ROW
        return GameConstants.SECOND_PROMOTION_ROW

    @property
    def display_name(self) -> str:
        return DisplayNames.FIRST if self is Side.FIRST else DisplayNames.SECOND


class Rank(Enum):
    """Possible ranks of a piece."""

    MAN = "man"
    KING = "king"


@dataclass(frozen=True)
class Piece:
    """
    A single piece on the board.

    Pieces are values: promotion produces a new ``Piece`` rather than
    changing an existing one.
    """

    owner: Side
    rank: Rank = Rank.MAN

    def __post_init__(self):
        # Enum lookups reject anything that is not a real Side / Rank
        object.__setattr__(self, "owner", Side(self.owner))
        object.__setattr__(self, "rank", Rank(self.rank))

    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def is_man(self) -> bool:
        return self.rank is Rank.MAN

    def directions(self) -> Tuple[Tuple[int, int], ...]:
        """Diagonal directions this piece moves along, one square per step."""
        if self.is_king():
            return GameConstants.ALL_DIRECTIONS
        return self.owner.forward_directions

    def promoted(self) -> "Piece":
        """Return the king version of this piece."""
        return Piece(self.owner, Rank.KING)

    def to_char(self) -> str:
        """Single character used in board diagrams."""
        char = "w" if self.owner is Side.FIRST else "b"
        return char.upper() if self.is_king() else char

    @classmethod
    def from_char(cls, char: str) -> "Piece":
        """Inverse of :meth:`to_char`."""
        owners = {"w": Side.FIRST, "b": Side.SECOND}
        if char.lower() not in owners:
            raise ValueError(f"Unknown piece character '{char}'")
        rank = Rank.KING if char.isupper() else Rank.MAN
        return cls(owners[char.lower()], rank)

    def __str__(self) -> str:
        return f"Piece({self.owner.display_name} {self.rank.value})"
