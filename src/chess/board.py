"""The Game board keeps track of the `position` (in chess: the configuration of pieces on the board) and whose turn it is"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.pieces import STARTING_BACK_RANK, Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square


@dataclass
class Board:
    # sparse: a square without an entry is empty
    position: dict[Square, Piece] = field(default_factory=dict)
    to_move: Color = Color.WHITE

    @classmethod
    def new(cls) -> Self:
        """Standard starting position, White to move.

        * 1st rank: white pieces, rook on a1 up to rook on h1
        * 2nd rank: white pawns
        * 7th rank: black pawns
        * 8th rank: black pieces, mirrored from the white ones (so the kings face each other on the e-file)
        """
        position: dict[Square, Piece] = {}
        last_rank = BOARD_DIMENSIONS[1]
        for file, piece_type in enumerate(STARTING_BACK_RANK, start=1):
            position[Square(file, 1)] = Piece(piece_type, Color.WHITE)
            position[Square(file, 2)] = Piece(PieceType.PAWN, Color.WHITE)
            position[Square(file, last_rank - 1)] = Piece(PieceType.PAWN, Color.BLACK)
            position[Square(file, last_rank)] = Piece(piece_type, Color.BLACK)
        return cls(position, Color.WHITE)

    def piece_at(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)

    def apply(self, from_square: Square, to_square: Square) -> None:
        """Relocate the piece and hand the turn to the other player.

        NOTE: no checks are done here. The caller must have validated the move (so there is a piece on `from_square`).
        Whatever stood on `to_square` is captured by simply being overwritten.
        """
        piece_that_moved = self.position.pop(from_square)
        self.position[to_square] = piece_that_moved
        self.to_move = self.to_move.opponent

    def occupied_squares(self, color: Optional[Color] = None) -> list[Square]:
        """Squares holding a piece (of the given color, if any is given)"""
        return [
            square
            for square, piece in self.position.items()
            if color is None or piece.color == color
        ]

    def count_pieces(self) -> dict[Color, int]:
        """Tally how many pieces each player has left"""
        tally = Counter(piece.color for piece in self.position.values())
        return {color: tally[color] for color in Color}
