"""
The Game class will be the entrypoint into the domain layer for the service layer.
It owns the board and whose turn it is, and applies the rules for playing a move -->
the service layer reads the outcome and passes it onwards to the terminal.

NOTE: the Game never raises for a bad move and never does any I/O. An illegal move simply yields False.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import Outcome, Status
from src.reversi.board import Board
from src.reversi.pieces import PLAYERS, Cell, Player, opponent
from src.reversi.square import Direction, Square

PLAYER_NAMES: dict[str, Player] = {player.name.lower(): player for player in PLAYERS}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_turn: Player

    @classmethod
    def new_game(cls) -> Self:
        """Canonical starting position, black to move."""
        return cls(board=Board.starting_position(), current_turn=Cell.BLACK)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Rebuild a Game from a snapshot (handy to start from a given position)"""
        turn_name = model.current_turn.lower()
        if turn_name not in PLAYER_NAMES:
            raise GameStateError(
                f"Invalid player to move: {model.current_turn!r}. \nPick one from {','.join(PLAYER_NAMES)}"
            )
        board = Board.from_diagram("\n".join(model.rows))
        return cls(board, PLAYER_NAMES[turn_name])

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            rows=self.board.rows(),
            current_turn=self.current_turn.name.lower(),
            status=self.status.value,
        )

    @property
    def status(self) -> Status:
        return Status.GAME_OVER if self.is_game_over() else Status.IN_PROGRESS

    def attempt_move(self, row: int, col: int) -> bool:
        """
        Attempt to play the current player's piece on (row, col)
        -----

        1. reject anything that is not a valid move (state stays untouched)
        2. place the piece and flip every captured piece
        3. game over? --> keep the turn as is
        4. opponent cannot move? --> current player moves again
        5. otherwise, hand the turn to the opponent
        """
        if not self.is_valid_move(row, col):
            return False

        square = Square(row, col)
        self.board.place(square, self.current_turn)
        self.board.flip_pieces(square, self.current_turn)

        if self.is_game_over():
            return True

        if not self.has_valid_move(self.get_other_player()):
            return True

        self.switch_turn()
        return True

    def is_valid_move(self, row: int, col: int) -> bool:
        if not (_is_coordinate(row) and _is_coordinate(col)):
            return False
        return self.board.is_valid_move(Square(row, col), self.current_turn)

    def check_direction(self, row: int, col: int, d_row: int, d_col: int) -> bool:
        direction: Direction = (d_row, d_col)
        return self.board.check_direction(Square(row, col), direction, self.current_turn)

    def flip_pieces(self, row: int, col: int) -> None:
        """Assumes the move is already known to be valid."""
        self.board.flip_pieces(Square(row, col), self.current_turn)

    def has_valid_move(self, player: Player) -> bool:
        """Could `player` move, if it were their turn?"""
        return self.board.has_valid_move(player)

    def valid_moves(self, player: Optional[Player] = None) -> list[Square]:
        return self.board.valid_moves(player or self.current_turn)

    def is_game_over(self) -> bool:
        return not any(self.has_valid_move(player) for player in PLAYERS)

    def get_winner(self) -> Outcome:
        """Majority of pieces wins. Only meaningful once the game is over, but defined at any time."""
        black_count, white_count = self.get_piece_counts()
        if black_count > white_count:
            return Outcome.BLACK
        if white_count > black_count:
            return Outcome.WHITE
        return Outcome.DRAW

    def get_piece_counts(self) -> tuple[int, int]:
        counts = self.board.count_pieces()
        return counts[Cell.BLACK], counts[Cell.WHITE]

    # -- TURN HELPERS ---
    def switch_turn(self) -> None:
        self.current_turn = self.get_other_player()

    def get_other_player(self) -> Player:
        return opponent(self.current_turn)


def _is_coordinate(value: object) -> bool:
    """bool is a subclass of int, but True/False are not board coordinates."""
    return isinstance(value, int) and not isinstance(value, bool)
