"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator, model_validator

from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, Status


# --- REQUEST MODELS ---
class ClickRequest(BaseModel):
    """
    A click coming from the picking collaborator, already resolved into board coordinates.
    No coordinates at all means the click landed outside of the board.
    """

    file: Optional[int] = None
    rank: Optional[int] = None

    @field_validator("file")
    @classmethod
    def validate_file(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not 0 <= value < BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(f"File {value!r} is not on the board.")
        return value

    @field_validator("rank")
    @classmethod
    def validate_rank(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not 0 <= value < BOARD_DIMENSIONS[1]:
            raise InvalidRequestError(f"Rank {value!r} is not on the board.")
        return value

    @model_validator(mode="after")
    def validate_both_or_neither(self) -> Self:
        if (self.file is None) != (self.rank is None):
            raise InvalidRequestError(
                "A click needs both file and rank (or neither, for a click outside of the board)."
            )
        return self

    @property
    def is_outside_board(self) -> bool:
        return self.file is None


# --- RESPONSE MODELS ---
class SquareResponse(BaseModel):
    file: int
    rank: int


class PieceResponse(BaseModel):
    id: int
    color: Color
    type: PieceType
    square: SquareResponse


class GameResponse(BaseModel):
    pieces: list[PieceResponse]
    color_to_move: Color
    to_move_text: str
    selected_square: Optional[SquareResponse]
    legal_targets: list[SquareResponse]
    status: Status
    winner: Optional[Color]


class ClickResponse(BaseModel):
    game: GameResponse
    # only set in the response to the click that captured a King
    outcome: Optional[Color] = None
