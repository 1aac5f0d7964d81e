"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Color, Piece
from src.chess.square import Square

BoardState = tuple[dict[Square, Piece], Color]


@pytest.fixture
def board() -> Board:
    """Fresh board in the starting position, White to move."""
    return Board.new()


@pytest.fixture
def board_state() -> Callable[[Board], BoardState]:
    """Call the inner function to copy everything that makes up the board state (to compare before/after a move)"""

    def _state(board: Board) -> BoardState:
        return dict(board.position), board.to_move

    return _state
