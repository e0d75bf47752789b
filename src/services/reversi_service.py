"""Orchestration of communication from the terminal to the game engine (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import GameResponse, LegalMovesResponse, MoveRequest
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import Color, Status
from src.reversi.game import Game
from src.reversi.square import Square

logger = logging.getLogger(__name__)


class ReversiService:
    """Orchestration of layers for a single, in-memory reversi game."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else Game.new_game()

    # -- Terminal facing logic ---
    def new_game(self) -> GameResponse:
        """Throw away the current game and set up the opening position."""
        self.game = Game.new_game()
        logger.info("Started a new game.")
        return self._create_game_response()

    def game_state(self) -> GameResponse:
        return self._create_game_response()

    def legal_moves(self) -> LegalMovesResponse:
        """retrieve set of legal moves for the player to move."""
        return LegalMovesResponse(
            color=self._to_color(self.game.current_turn.name),
            legal_moves=[square.to_notation() for square in self.game.valid_moves()],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Make a move attempt.
        ----

        The engine answers with a plain bool. Translate a rejection into an IllegalMoveError (nothing changed on the board).
        If the turn did not pass to the opponent while the game goes on, the opponent had to pass.
        """
        mover = self.game.current_turn
        square = Square(request.row, request.column)

        if not self.game.attempt_move(request.row, request.column):
            logger.debug("Rejected move %s for %s", square.to_notation(), mover.name.lower())
            raise IllegalMoveError(
                f"{mover.name.capitalize()} cannot play on {square.to_notation()}."
            )
        logger.debug("%s played %s", mover.name.capitalize(), square.to_notation())

        if self.game.status == Status.GAME_OVER:
            black_count, white_count = self.game.get_piece_counts()
            logger.info(
                "Game over. Winner: %s (black %d, white %d)",
                self.game.get_winner(),
                black_count,
                white_count,
            )
            return self._create_game_response()

        passed: Optional[Color] = None
        if self.game.current_turn == mover:
            passed = self._to_color(self.game.get_other_player().name)
            logger.info("%s cannot make a valid move. %s continues the turn.", passed, mover.name.lower())

        return self._create_game_response(passed=passed)

    # -- Internal helpers --
    def _create_game_response(self, passed: Optional[Color] = None) -> GameResponse:
        """Convert the Game snapshot into a GameResponse."""
        model = self.game.to_model()
        black_count, white_count = self.game.get_piece_counts()
        status = Status(model.status)
        return GameResponse(
            board=model.rows,
            current_turn=Color(model.current_turn),
            black_count=black_count,
            white_count=white_count,
            status=status,
            winner=self.game.get_winner() if status == Status.GAME_OVER else None,
            passed=passed,
        )

    @staticmethod
    def _to_color(name: str) -> Color:
        return Color[name]
