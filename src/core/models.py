"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The domain layer converts its live state into a GameModel, the API layer reads it to build responses.
(Decouples the data model specific to the API layer or the domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PlayerId = str
Occupant = Optional[PlayerId]
CoordinatePair = tuple[int, int]


@dataclass
class PlayerModel:
    """Transport-safe representation of a registered player."""

    id: PlayerId
    name: str
    color: str
    kind: str


@dataclass
class GameModel:
    """Transport-safe snapshot of a Connect Four session used between API, Service, and Game layers."""

    width: int
    height: int
    board: list[list[Occupant]]
    placed_pieces: list[CoordinatePair]
    players: list[PlayerModel]
    current_player: Optional[PlayerId]
    status: str
    winner: Optional[PlayerId] = None
    winning_line: Optional[list[CoordinatePair]] = None
