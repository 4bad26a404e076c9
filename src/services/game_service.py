"""Orchestration of communication from the input/rendering collaborators to the game logic (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import (
    ClickRequest,
    ClickResponse,
    GameResponse,
    PieceResponse,
    SquareResponse,
)
from src.chess.game import GameController
from src.chess.square import Square
from src.core.models import Coordinates, GameModel
from src.core.shared_types import Color, PieceType, Status

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for a single chess session (there is no persistence: the game lives in memory)."""

    def __init__(self, controller: Optional[GameController] = None) -> None:
        self.controller = controller or GameController.new_game()

    def new_game(self) -> GameResponse:
        """Throw away the current game and start again from the starting position."""
        self.controller = GameController.new_game()
        logger.info("New game started")
        return self._create_game_response(self.controller.to_model())

    def get_game_state(self) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by the renderer after every processed event: where to place the pieces, which square to highlight, whose turn it is.
        """
        return self._create_game_response(self.controller.to_model())

    def click(self, request: ClickRequest) -> ClickResponse:
        """Feed a click into the game."""
        if request.is_outside_board:
            self.controller.click_outside_board()
            outcome = None
        else:
            assert request.file is not None and request.rank is not None
            outcome = self.controller.click_square(Square(request.file, request.rank))

        return ClickResponse(
            game=self._create_game_response(self.controller.to_model()),
            outcome=Color(outcome.winner.name.lower()) if outcome else None,
        )

    # -- Internal helpers --
    def _create_game_response(self, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse."""
        return GameResponse(
            pieces=[
                PieceResponse(
                    id=piece.id,
                    color=Color(piece.color),
                    type=PieceType(piece.type),
                    square=SquareResponse(file=piece.file, rank=piece.rank),
                )
                for piece in model.pieces
            ],
            color_to_move=Color(model.color_to_move),
            to_move_text=self.controller.to_move_text(),
            selected_square=self._to_square_response(model.selected_square),
            legal_targets=[
                SquareResponse(file=file, rank=rank)
                for file, rank in model.legal_targets
            ],
            status=Status[model.status.upper()],
            winner=Color(model.winner) if model.winner else None,
        )

    @staticmethod
    def _to_square_response(
        coordinates: Optional[Coordinates],
    ) -> Optional[SquareResponse]:
        if coordinates is None:
            return None
        file, rank = coordinates
        return SquareResponse(file=file, rank=rank)
