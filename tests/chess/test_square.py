"""Unit tests for /src/chess/square.py"""

from string import ascii_uppercase

import pytest

from src.chess.square import BOARD_DIMENSIONS, Square, all_squares, is_square_name


@pytest.mark.parametrize(
    "file, rank, notation",
    [
        (file, rank, f"{ascii_uppercase[file - 1]}{rank}")
        for file in range(1, 9)
        for rank in range(1, 9)
    ],
)
def test_creating_from_algebraic(file: int, rank: int, notation: str) -> None:
    """Simply checks if the notation for 'A1' indeed maps to file 1, rank 1, etc."""
    square = Square.from_algebraic(notation)
    assert square.file == file
    assert square.rank == rank


@pytest.mark.parametrize(
    "file, rank, notation",
    [
        (file, rank, f"{ascii_uppercase[file - 1]}{rank}")
        for file in range(1, 9)
        for rank in range(1, 9)
    ],
)
def test_to_algebraic_notation(file: int, rank: int, notation: str) -> None:
    """Test the reverse, so the square on the 1st file and 1st rank should be denoted as A1"""
    square = Square(file, rank)
    assert square.to_algebraic() == notation


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for file in range(1, BOARD_DIMENSIONS[0] + 1):
        for rank in range(1, BOARD_DIMENSIONS[1] + 1):
            square = Square(file, rank)
            assert square.is_within_bounds()


def test_square_out_of_bounds() -> None:
    square = Square(BOARD_DIMENSIONS[0] + 1, BOARD_DIMENSIONS[1] + 1)
    assert not square.is_within_bounds()

    square = Square(0, 0)
    assert not square.is_within_bounds()


def test_squares_are_values() -> None:
    """Used as dictionary keys by the board, so equal coordinates must mean the same key"""
    assert Square(5, 4) == Square.from_algebraic("E4")
    assert len({Square(5, 4), Square.from_algebraic("E4")}) == 1


@pytest.mark.parametrize("name", ["A1", "H8", "E4", "D5"])
def test_valid_square_names(name: str) -> None:
    assert is_square_name(name)


@pytest.mark.parametrize(
    "name",
    [
        "a1",  # lower case file letters are not accepted
        "I1",  # file beyond H
        "A9",  # rank beyond 8
        "A0",
        "1A",  # swapped
        "Z9",
        "A",
        "A10",
        "",
    ],
)
def test_invalid_square_names(name: str) -> None:
    assert not is_square_name(name)


def test_all_squares() -> None:
    """64 different squares, all on the board"""
    squares = all_squares()
    assert len(squares) == 64
    assert len(set(squares)) == 64
    assert all(square.is_within_bounds() for square in squares)
    assert squares[0] == Square.from_algebraic("A1")
    assert squares[-1] == Square.from_algebraic("H8")
