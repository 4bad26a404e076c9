"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.game import GameController, GameState
from src.chess.pieces import Color, PieceType
from src.chess.square import Square

Placement = tuple[PieceType, Color, tuple[int, int]]


@pytest.fixture
def board_with() -> Callable[..., Board]:
    """Call the inner function with (piece type, color, (file, rank)) tuples to get a board with just those pieces"""

    def _create_board(*placements: Placement) -> Board:
        return Board.from_pieces(
            (piece_type, color, Square(*coordinates))
            for piece_type, color, coordinates in placements
        )

    return _create_board


@pytest.fixture
def controller_with(
    board_with: Callable[..., Board],
) -> Callable[..., GameController]:
    """Same as board_with, but wraps the board in a fresh game (white to move)"""

    def _create_controller(
        *placements: Placement, color_to_move: Color = Color.WHITE
    ) -> GameController:
        state = GameState(board=board_with(*placements), color_to_move=color_to_move)
        return GameController(state)

    return _create_controller
