"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The service (higher) and the domain layer (lower) exchange game snapshots using the model defined here.
(Decouples the domain objects from the information needed to build responses / rebuild a game in a given position)
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
DiagramRow = str
PlayerName = str


@dataclass
class GameModel:
    """Transport-safe representation of a reversi game. Only ever kept in memory."""

    rows: list[DiagramRow]
    current_turn: PlayerName
    status: str
