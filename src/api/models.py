"""Requests and Response models"""

from typing import Any, Optional, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Outcome, Status
from src.reversi.square import BOARD_SIZE, COLUMN_LETTERS

DiagramRow = str
SquareName = str


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    """0-based coordinates of the cell to play on. Built from user text with `from_text`."""

    row: int
    column: int

    @classmethod
    def from_text(cls, text: str) -> Self:
        """
        Parse "<row 1-8> <column letter A-H>", ex. "3 D".
        ----
        Text is 1-based and uses a letter for the column, the engine is 0-based on both axes.
        """
        parts = text.split()
        if len(parts) != 2:
            raise InvalidRequestError(
                f"Expected a row and a column separated by a space, got: {text!r}"
            )
        row_text, column_text = parts
        return cls(row=row_text, column=column_text)

    @field_validator("row", mode="before")
    @classmethod
    def validate_row(cls, value: Any) -> int:
        if isinstance(value, str):
            if not (value.isascii() and value.isdigit()):
                raise InvalidRequestError(f"Cannot interpret row: {value!r} as a number.")
            # text rows are counted from 1
            value = int(value) - 1
        if not isinstance(value, int) or not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(f"Row must be between 1 and {BOARD_SIZE}.")
        return value

    @field_validator("column", mode="before")
    @classmethod
    def validate_column(cls, value: Any) -> int:
        if isinstance(value, str):
            if len(value) != 1 or value.upper() not in COLUMN_LETTERS:
                raise InvalidRequestError(
                    f"Cannot interpret column: {value!r}. Pick one from {COLUMN_LETTERS[0]}-{COLUMN_LETTERS[-1]}."
                )
            value = COLUMN_LETTERS.index(value.upper())
        if not isinstance(value, int) or not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Column must be between {COLUMN_LETTERS[0]} and {COLUMN_LETTERS[-1]}."
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    board: list[DiagramRow]
    current_turn: Color
    black_count: int
    white_count: int
    status: Status
    winner: Optional[Outcome] = None
    passed: Optional[Color] = None


class LegalMovesResponse(BaseModel):
    color: Color
    legal_moves: list[SquareName]
