"""
The terminal loop: show the board, read a move, hand it to the service, repeat until the game is over.

All game logic lives behind the service. This module only deals with text in and text out.
"""

import logging
from typing import Callable, Optional

from rich.console import Console

from src.api.models import GameResponse, MoveRequest
from src.core.exceptions import IllegalMoveError, InvalidRequestError
from src.core.shared_types import Color, Outcome, Status
from src.reversi.pieces import Cell
from src.reversi.square import COLUMN_LETTERS
from src.services.reversi_service import ReversiService

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]

COLUMN_HEADER = "   " + "  ".join(COLUMN_LETTERS)
PROMPT = "Enter row (1-8) and column (A-H) separated by space: "
INVALID_INPUT = "Invalid input. Please try again."
INVALID_MOVE = "Invalid move. Please try again."
QUIT_COMMANDS = ("q", "quit", "exit")
MOVES_COMMAND = "moves"


def render_board(rows: list[str]) -> str:
    """Column letters on top, 1-based row numbers on the left, one glyph per cell."""
    lines = [COLUMN_HEADER]
    for row_idx, row in enumerate(rows):
        glyphs = "".join(Cell.from_diagram(character).glyph for character in row)
        lines.append(f"{row_idx + 1} {glyphs}")
    return "\n".join(lines)


def glyph(color: Color) -> str:
    return Cell[color.name].glyph


class TerminalLoop:
    """Drives one game from the keyboard (or whatever `read_line` reads from)."""

    def __init__(
        self,
        service: ReversiService,
        console: Console,
        read_line: Optional[ReadLine] = None,
    ) -> None:
        self.service = service
        self.console = console
        self.read_line = read_line or console.input

    def run(self) -> GameResponse:
        """Play until the game is over or the user leaves. Returns the last known state."""
        state = self.service.game_state()

        while state.status != Status.GAME_OVER:
            self._show_turn(state)
            try:
                text = self.read_line(PROMPT)
            except EOFError:
                logger.info("Input closed before the game was over.")
                self.console.print()
                return state

            command = text.strip().lower()
            if command in QUIT_COMMANDS:
                logger.info("Player left the game.")
                return state
            if command == MOVES_COMMAND:
                self._show_legal_moves()
                continue

            try:
                request = MoveRequest.from_text(text)
            except InvalidRequestError as exc:
                logger.debug("Could not parse %r: %s", text, exc)
                self.console.print(INVALID_INPUT)
                continue

            try:
                state = self.service.make_move(request)
            except IllegalMoveError as exc:
                logger.debug(exc)
                self.console.print(INVALID_MOVE)
                continue

            if state.passed is not None:
                self.console.print(
                    f"{glyph(state.passed)} cannot make a valid move. {glyph(state.current_turn)} continues the turn."
                )

        self._show_result(state)
        return state

    # -- Output helpers --
    def _show_turn(self, state: GameResponse) -> None:
        self.console.print(render_board(state.board))
        self.console.print(f"Current Turn: {glyph(state.current_turn)}")
        self._show_counts(state)

    def _show_counts(self, state: GameResponse) -> None:
        self.console.print(f"Black Pieces: {state.black_count}")
        self.console.print(f"White Pieces: {state.white_count}")

    def _show_legal_moves(self) -> None:
        legal = self.service.legal_moves()
        self.console.print(f"Legal moves for {glyph(legal.color)}: {', '.join(legal.legal_moves)}")

    def _show_result(self, state: GameResponse) -> None:
        winner = state.winner or Outcome.DRAW
        self.console.print(render_board(state.board))
        self.console.print(f"Game Over! Winner: {winner.value.capitalize()}")
        self._show_counts(state)
