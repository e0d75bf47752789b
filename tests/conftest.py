"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.models import GameModel
from src.reversi.game import Game

BoardRows = list[str]


@pytest.fixture
def game_in_position() -> Callable[[BoardRows, str], Game]:
    """Call the inner function with 8 diagram rows ('.', 'B', 'W') and the name of the player to move"""

    def _create_game(rows: BoardRows, current_turn: str = "black") -> Game:
        model = GameModel(rows=rows, current_turn=current_turn, status="in progress")
        return Game.from_model(model)

    return _create_game


@pytest.fixture
def empty_rows() -> BoardRows:
    return ["." * 8 for _ in range(8)]
