"""Defines the states a cell on the board can be in"""

from enum import Enum, auto
from typing import Literal, Self

from src.core.exceptions import InvalidBoardError


class Cell(Enum):
    EMPTY = auto()
    BLACK = auto()
    WHITE = auto()

    @classmethod
    def from_diagram(cls, character: str) -> Self:
        if character not in DIAGRAM_TO_CELL:
            raise InvalidBoardError(
                f"Cannot interpret {character!r} as a cell. Pick one from {''.join(DIAGRAM_TO_CELL)}"
            )
        return DIAGRAM_TO_CELL[character]

    def to_diagram(self) -> str:
        return CELL_TO_DIAGRAM[self]

    @property
    def glyph(self) -> str:
        return GLYPHS[self]


# Only these two can ever be "to move"
Player = Literal[Cell.BLACK, Cell.WHITE]
PLAYERS: tuple[Player, Player] = (Cell.BLACK, Cell.WHITE)


DIAGRAM_TO_CELL: dict[str, Cell] = {
    ".": Cell.EMPTY,
    "B": Cell.BLACK,
    "W": Cell.WHITE,
}

CELL_TO_DIAGRAM: dict[Cell, str] = {value: key for key, value in DIAGRAM_TO_CELL.items()}

# What the terminal prints for every cell. Every glyph is 3 characters wide.
GLYPHS: dict[Cell, str] = {
    Cell.EMPTY: " . ",
    Cell.BLACK: " ● ",
    Cell.WHITE: " ○ ",
}


def opponent(player: Player) -> Player:
    return Cell.WHITE if player == Cell.BLACK else Cell.BLACK
