"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The GameController hands a GameModel to the service layer, which turns it into responses for the rendering collaborator.
(Decouples the domain objects - mutable pieces, enums - from the information needed to draw the board)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PieceColor = str
PieceTypeName = str
Coordinates = tuple[int, int]


@dataclass
class PieceModel:
    id: int
    color: PieceColor
    type: PieceTypeName
    file: int
    rank: int


@dataclass
class GameModel:
    """Transport-safe representation of the game, as seen after processing the latest click."""

    pieces: list[PieceModel]
    color_to_move: PieceColor
    selected_square: Optional[Coordinates]
    legal_targets: list[Coordinates]
    status: str
    winner: Optional[PieceColor]
