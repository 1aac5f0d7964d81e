"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8.
BOARD_DIMENSIONS = (8, 8)

# Only upper case file letters are part of the move notation
FILE_NAMES = "ABCDEFGH"
RANK_NAMES = "12345678"


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'A1' - 'H8' get converted to (1,1) - (8,8)

        NOTE: does not check the name. Use `is_square_name` first if the input comes from a user.
        """
        file = ord(sq[0]) - ord("A") + 1
        rank = int(sq[1])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('A') - 1)}{self.rank}"

    def is_within_bounds(self) -> bool:
        return (1 <= self.file <= BOARD_DIMENSIONS[0]) and (
            1 <= self.rank <= BOARD_DIMENSIONS[1]
        )


def is_square_name(name: str) -> bool:
    """Exactly one file letter followed by one rank digit, e.g. 'E4' (but not 'e4', 'I1' or 'A9')"""
    return len(name) == 2 and name[0] in FILE_NAMES and name[1] in RANK_NAMES


def all_squares() -> list[Square]:
    """The 64 squares, rank by rank starting at A1"""
    return [
        Square(file, rank)
        for rank in range(1, BOARD_DIMENSIONS[1] + 1)
        for file in range(1, BOARD_DIMENSIONS[0] + 1)
    ]
