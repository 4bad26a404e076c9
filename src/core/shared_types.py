"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    KING_CAPTURED = "king captured"


# --- NOTE Same names as the domain enums in src/chess/pieces.py (Color and PieceType). These are the string-valued versions
# --- that can cross the boundary to the renderer. Let the imports show which versions are used in what part of the code


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
