"""The Game board implements all rules that effect the `position` (in reversi: which colour occupies which cell)"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidBoardError
from src.reversi.pieces import Cell, Player, opponent
from src.reversi.square import BOARD_SIZE, DIRECTIONS, Direction, Square, all_squares

# Canonical opening: two pieces of each colour in the centre, crossed.
STARTING_PIECES: dict[Square, Player] = {
    Square(3, 3): Cell.WHITE,
    Square(3, 4): Cell.BLACK,
    Square(4, 3): Cell.BLACK,
    Square(4, 4): Cell.WHITE,
}


@dataclass
class Board:
    position: dict[Square, Cell]

    @classmethod
    def empty(cls) -> Self:
        return cls({square: Cell.EMPTY for square in all_squares()})

    @classmethod
    def starting_position(cls) -> Self:
        board = cls.empty()
        for square, color in STARTING_PIECES.items():
            board.place(square, color)
        return board

    @classmethod
    def from_diagram(cls, diagram: str) -> Self:
        """Construct a board from a text diagram.

        The diagram has one line per row (top row first) and one character per cell:
        '.' for an empty cell, 'B' for black, 'W' for white.
        Surrounding whitespace and blank lines are ignored.
        ex. standard starting position:
        ........
        ........
        ........
        ...WB...
        ...BW...
        ........
        ........
        ........
        """
        lines = [line.strip() for line in diagram.strip().splitlines() if line.strip()]
        if len(lines) != BOARD_SIZE or any(len(line) != BOARD_SIZE for line in lines):
            raise InvalidBoardError(
                f"Board diagram must have {BOARD_SIZE} rows of {BOARD_SIZE} cells:\n{diagram}"
            )

        position: dict[Square, Cell] = {}
        for row, line in enumerate(lines):
            for col, character in enumerate(line):
                position[Square(row, col)] = Cell.from_diagram(character)
        return cls(position)

    def rows(self) -> list[str]:
        """One diagram string per row, top row first."""
        return [
            "".join(self.cell(Square(row, col)).to_diagram() for col in range(BOARD_SIZE))
            for row in range(BOARD_SIZE)
        ]

    def to_diagram(self) -> str:
        return "\n".join(self.rows())

    def cell(self, square: Square) -> Cell:
        return self.position[square]

    def place(self, square: Square, color: Player) -> None:
        self.position[square] = color

    def empty_squares(self) -> list[Square]:
        return [square for square in all_squares() if self.cell(square) == Cell.EMPTY]

    def count_pieces(self) -> dict[Player, int]:
        """Tally the pieces each player has on the board"""
        counts: dict[Player, int] = {Cell.BLACK: 0, Cell.WHITE: 0}
        for cell in self.position.values():
            if cell != Cell.EMPTY:
                counts[cell] += 1
        return counts

    # --- RAYCASTING ---
    def captures_in_direction(
        self, square: Square, direction: Direction, color: Player
    ) -> list[Square]:
        """
        Opponent pieces that `color` would capture along one ray when playing on `square`.
        ---

        Walk outwards from the square. The run of opponent pieces only counts when it is closed off by one of your own pieces.
        Running into an empty cell or off the board first means nothing gets captured in this direction.
        """
        other = opponent(color)
        captured: list[Square] = []
        current = square.step(direction)
        while current.is_within_bounds():
            cell = self.cell(current)
            if cell == other:
                captured.append(current)
            elif cell == color:
                return captured
            else:
                return []
            current = current.step(direction)
        return []

    def check_direction(self, square: Square, direction: Direction, color: Player) -> bool:
        return bool(self.captures_in_direction(square, direction, color))

    def is_valid_move(self, square: Square, color: Player) -> bool:
        """In bounds, empty, and closing off at least one run of opponent pieces"""
        if not square.is_within_bounds() or self.cell(square) != Cell.EMPTY:
            return False
        return any(self.check_direction(square, direction, color) for direction in DIRECTIONS)

    def valid_moves(self, color: Player) -> list[Square]:
        return [square for square in self.empty_squares() if self.is_valid_move(square, color)]

    def has_valid_move(self, color: Player) -> bool:
        return any(self.is_valid_move(square, color) for square in self.empty_squares())

    def flip_pieces(self, square: Square, color: Player) -> None:
        """Turn every captured opponent piece, in all directions, into `color`.

        NOTE captures are collected before anything changes, so one ray cannot influence another.
        """
        to_flip: list[Square] = []
        for direction in DIRECTIONS:
            to_flip.extend(self.captures_in_direction(square, direction, color))
        for captured in to_flip:
            self.position[captured] = color
