"""
Type definitions used across layers
"""

from enum import StrEnum


class MoveErrorKind(StrEnum):
    """Why a move token got rejected. Values double as readable labels (e.g. in logs)."""

    MALFORMED = "malformed"
    NO_FRIENDLY_PIECE = "no friendly piece"
    FRIENDLY_CAPTURE = "friendly capture"
