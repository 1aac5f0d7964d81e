"""Exceptions raised by the domain layer and caught at the session boundary"""

from src.core.shared_types import MoveErrorKind


class ChessError(Exception):
    """Base class for all errors of this package"""


class InvalidMoveError(ChessError):
    """A move token was rejected. The board is left untouched."""

    kind: MoveErrorKind

    def __init__(self, token: str, detail: str = "") -> None:
        self.token = token
        self.detail = detail
        message = f"Invalid move: {token!r} ({self.kind})"
        if detail:
            message = f"{message}. {detail}"
        super().__init__(message)


class MalformedMoveError(InvalidMoveError):
    """Token is not of the form [A-H][1-8][A-H][1-8]"""

    kind = MoveErrorKind.MALFORMED


class NoFriendlyPieceError(InvalidMoveError):
    """The from-square is empty or holds a piece of the player who is not to move"""

    kind = MoveErrorKind.NO_FRIENDLY_PIECE


class FriendlyCaptureError(InvalidMoveError):
    """The to-square holds a piece of the player who is to move"""

    kind = MoveErrorKind.FRIENDLY_CAPTURE


class ConfigError(ChessError):
    """Settings that the console cannot work with"""
