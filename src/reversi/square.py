"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_uppercase

# Reversi board is always 8x8.
BOARD_SIZE = 8

# Column letters as printed above the board: A - H
COLUMN_LETTERS = ascii_uppercase[:BOARD_SIZE]

Direction = tuple[int, int]

# The 8 compass directions as (row offset, column offset).
# Both the legality check and the flipping walk exactly these rays.
DIRECTIONS: tuple[Direction, ...] = (
    (-1, 0),  # N
    (1, 0),  # S
    (0, 1),  # E
    (0, -1),  # W
    (-1, 1),  # NE
    (-1, -1),  # NW
    (1, 1),  # SE
    (1, -1),  # SW
)


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_notation(cls, row_number: int, column_letter: str) -> Square:
        """Text notation: row 1-8 and column 'A'-'H' get converted to (0,0) - (7,7)"""
        return cls(row_number - 1, COLUMN_LETTERS.index(column_letter.upper()))

    def to_notation(self) -> str:
        return f"{self.row + 1} {COLUMN_LETTERS[self.col]}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def step(self, direction: Direction) -> Square:
        """The neighbouring square in the given direction (may fall off the board)"""
        d_row, d_col = direction
        return Square(self.row + d_row, self.col + d_col)


def all_squares() -> list[Square]:
    """Every square on the board, row by row."""
    return [Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
