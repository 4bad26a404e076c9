"""Defines the types of chess pieces"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from src.chess.square import Square


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self == Color.WHITE else Color.WHITE


# Pawns advance along the file axis: White towards the higher files, Black towards the lower ones
PAWN_DIRECTION: dict[Color, int] = {
    Color.WHITE: 1,
    Color.BLACK: -1,
}

# The file the pawns start on. Only from here a pawn may advance by two squares.
PAWN_HOME_FILE: dict[Color, int] = {
    Color.WHITE: 1,
    Color.BLACK: 6,
}


@dataclass
class Piece:
    """
    A live piece on the board.

    NOTE: the square changes over the lifetime of a piece, so a piece is identified by its id (handed out by the Board).
    """

    id: int
    type: PieceType
    color: Color
    square: Square

    def is_opponent_of(self, other: Piece) -> bool:
        return self.color != other.color
