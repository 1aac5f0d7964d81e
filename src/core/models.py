"""
Boundary layer data model(s).

The Session hands these to the console (I/O layer) after every line it processed.
(Decouples what the console needs to print from the exceptions raised in the domain layer)
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import MoveErrorKind


@dataclass
class MoveOutcome:
    """Result of one line of user input."""

    token: str
    accepted: bool
    error: Optional[MoveErrorKind] = None
    quit_requested: bool = False
