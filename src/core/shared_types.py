"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    GAME_OVER = "game over"


# --- Color DOES NOT contain an option for empty cells. That lives in src/reversi/pieces.py (Cell)
# --- NOTE the service converts between the two by name, so keep the member names identical


class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"


class Outcome(StrEnum):
    BLACK = "black"
    WHITE = "white"
    DRAW = "draw"
