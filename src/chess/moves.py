"""
Parsing and validating move tokens, and applying the accepted ones to the board.

The checks done here are (in this order, stopping at the first failure):

1. the token consists of exactly 4 characters
2. file letters (A-H) at positions 0 and 2, rank digits (1-8) at positions 1 and 3
3. there is a piece on the from-square, and it belongs to the player to move
4. the to-square does not hold a piece of the player to move

NOTE: movement geometry, check and checkmate are NOT verified. A pawn may 'move' like a queen.
"""

import logging
from dataclasses import dataclass
from typing import Self

from src.chess.board import Board
from src.chess.square import Square, is_square_name
from src.core.exceptions import (
    FriendlyCaptureError,
    InvalidMoveError,
    MalformedMoveError,
    NoFriendlyPieceError,
)

logger = logging.getLogger(__name__)

MOVE_TOKEN_LENGTH = 4


@dataclass(frozen=True)
class Move:
    """A request to relocate a piece. Thrown away after it got applied or rejected."""

    from_square: Square
    to_square: Square

    @classmethod
    def from_token(cls, token: str) -> Self:
        """
        Move token:
        ---
        two square names without separator, upper case file letters

        examples:
        * "A2A4": move the piece on a2 to a4
        * "G8F6": move the piece on g8 to f6
        """
        if len(token) != MOVE_TOKEN_LENGTH:
            raise MalformedMoveError(
                token, f"Expected {MOVE_TOKEN_LENGTH} characters, got {len(token)}"
            )

        from_name, to_name = token[:2], token[2:]
        for name in (from_name, to_name):
            if not is_square_name(name):
                raise MalformedMoveError(token, f"{name!r} is not a square name")
        return cls(Square.from_algebraic(from_name), Square.from_algebraic(to_name))

    def to_token(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


def validate_move(board: Board, token: str) -> Move:
    """Run all checks against the current board, without touching it. Raises an `InvalidMoveError` subclass on failure."""
    move = Move.from_token(token)

    piece_to_move = board.piece_at(move.from_square)
    if piece_to_move is None:
        raise NoFriendlyPieceError(
            token, f"No piece on {move.from_square.to_algebraic()}"
        )
    if not piece_to_move.belongs_to(board.to_move):
        raise NoFriendlyPieceError(
            token,
            f"Piece on {move.from_square.to_algebraic()} belongs to {piece_to_move.color.name.lower()}",
        )

    # landing on another piece is only allowed if it is hostile
    piece_to_capture = board.piece_at(move.to_square)
    if piece_to_capture is not None and piece_to_capture.belongs_to(board.to_move):
        raise FriendlyCaptureError(
            token, f"Cannot capture own piece on {move.to_square.to_algebraic()}"
        )

    return move


def perform_move(board: Board, token: str) -> None:
    """Validate the token and, if it passes, update the board (piece relocated, turn handed over)"""
    mover = board.to_move
    try:
        move = validate_move(board, token)
    except InvalidMoveError as err:
        logger.debug("Rejected %r for %s: %s", token, mover.name.lower(), err.kind)
        raise

    board.apply(move.from_square, move.to_square)
    logger.debug("%s played %s", mover.name.lower(), move.to_token())
