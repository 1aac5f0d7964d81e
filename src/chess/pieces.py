"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto


class PieceType(Enum):
    KING = auto()
    QUEEN = auto()
    ROOK = auto()
    BISHOP = auto()
    KNIGHT = auto()
    PAWN = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


# Pieces on the first (white) and eighth (black) rank, read from the a-file to the h-file
STARTING_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True)
class Piece:
    # NOTE: no move history (has_moved etc.). Moving a piece places the same value on another square.
    type: PieceType
    color: Color

    def belongs_to(self, color: Color) -> bool:
        return self.color == color
