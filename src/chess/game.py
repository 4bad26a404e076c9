"""
The GameController is the entrypoint into the domain layer for the service layer.
It owns the game state and turns clicks on the board into selections and moves -->
the service layer then passes the resulting state onwards to whoever draws the board.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.chess.board import Board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.rules import is_move_valid, legal_targets
from src.chess.square import Square
from src.core.models import GameModel, PieceModel

logger = logging.getLogger(__name__)

TO_MOVE_TEXT = "To Move: {color}"


class Status(Enum):
    IN_PROGRESS = auto()
    KING_CAPTURED = auto()


class SelectionPhase(Enum):
    IDLE = auto()
    SQUARE_SELECTED = auto()
    PIECE_SELECTED = auto()


@dataclass
class Selection:
    square: Optional[Square] = None
    piece_id: Optional[int] = None

    @property
    def phase(self) -> SelectionPhase:
        if self.piece_id is not None:
            return SelectionPhase.PIECE_SELECTED
        if self.square is not None:
            return SelectionPhase.SQUARE_SELECTED
        return SelectionPhase.IDLE

    def clear(self) -> None:
        self.square = None
        self.piece_id = None


@dataclass(frozen=True)
class GameOutcome:
    winner: Color


@dataclass
class GameState:
    board: Board
    color_to_move: Color = Color.WHITE
    selection: Selection = field(default_factory=Selection)
    status: Status = Status.IN_PROGRESS
    outcome: Optional[GameOutcome] = None


class GameController:
    """
    Selection / turn state machine
    ----

    The only input is a click: either on a square, or somewhere outside of the board.
    * 1st click: marks the square, and selects the piece on it (if it belongs to the player to move)
    * 2nd click: attempts to move the selected piece there. Legal or not, the selection is reset afterwards.

    Illegal moves are not errors: nothing happens, except the selection getting cleared.
    Once a King is captured the game is over and every further click is ignored.
    """

    def __init__(self, state: GameState) -> None:
        self.state = state

    @classmethod
    def new_game(cls) -> Self:
        return cls(GameState(board=Board.starting_position()))

    # --- READ-ONLY VIEWS ---
    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def color_to_move(self) -> Color:
        return self.state.color_to_move

    @property
    def selection(self) -> Selection:
        return self.state.selection

    @property
    def outcome(self) -> Optional[GameOutcome]:
        return self.state.outcome

    @property
    def is_over(self) -> bool:
        return self.state.status == Status.KING_CAPTURED

    @property
    def selected_piece(self) -> Optional[Piece]:
        piece_id = self.state.selection.piece_id
        if piece_id is None or piece_id not in self.board.pieces:
            return None
        return self.board.piece(piece_id)

    def legal_targets(self) -> list[Square]:
        """Squares the selected piece could move to (nothing selected: no squares)"""
        piece = self.selected_piece
        if piece is None:
            return []
        return legal_targets(piece, self.board.live_pieces())

    def to_move_text(self) -> str:
        return TO_MOVE_TEXT.format(color=self.color_to_move.name.capitalize())

    # --- INPUT EVENTS ---
    def click_square(self, square: Square) -> Optional[GameOutcome]:
        """
        Handle a click on a square.
        ----

        Returns the GameOutcome only for the click that captured a King. Every other click returns None.
        """
        if self.is_over:
            logger.debug("Game is over, ignoring click", extra={"square": square})
            return None

        if not square.is_within_bounds():
            logger.warning(
                "Click outside of the board dimensions", extra={"square": square}
            )
            self.click_outside_board()
            return None

        if self.selected_piece is None:
            self._select(square)
            return None

        return self._attempt_move(square)

    def click_outside_board(self) -> None:
        self.state.selection.clear()

    # --- SERIALIZATION ---
    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        selected = self.state.selection.square
        return GameModel(
            pieces=[
                PieceModel(
                    id=piece.id,
                    color=piece.color.name.lower(),
                    type=piece.type.name.lower(),
                    file=piece.square.file,
                    rank=piece.square.rank,
                )
                for piece in self.board.live_pieces()
            ],
            color_to_move=self.color_to_move.name.lower(),
            selected_square=(selected.file, selected.rank) if selected else None,
            legal_targets=[(sq.file, sq.rank) for sq in self.legal_targets()],
            status=self.state.status.name.lower(),
            winner=self.outcome.winner.name.lower() if self.outcome else None,
        )

    # --- INTERNAL HELPERS ---
    def _select(self, square: Square) -> None:
        """Mark the square. Only pick up the piece on it if it belongs to the player to move."""
        selection = self.state.selection
        selection.square = square
        selection.piece_id = None

        piece = self.board.piece_at(square)
        if piece is not None and piece.color == self.color_to_move:
            selection.piece_id = piece.id
            logger.debug(
                "Piece selected",
                extra={"piece_id": piece.id, "piece_type": piece.type.name},
            )

    def _attempt_move(self, target: Square) -> Optional[GameOutcome]:
        """
        1. check legality against a snapshot of the board
        2. remove captured pieces (a captured King ends the game)
        3. move the piece
        4. hand the turn to the opponent
        (5.) in all cases: clear the selection
        """
        piece = self.selected_piece
        assert piece is not None
        outcome: Optional[GameOutcome] = None

        if is_move_valid(piece, target, self.board.live_pieces()):
            outcome = self._capture_on(target, piece.color)
            self.board.move_piece(piece.id, target)
            logger.info(
                "Move committed",
                extra={
                    "piece_id": piece.id,
                    "piece_type": piece.type.name,
                    "color": piece.color.name,
                    "target": target,
                },
            )
            self.state.color_to_move = self.color_to_move.opposite
        else:
            logger.debug(
                "Move rejected",
                extra={"piece_id": piece.id, "target": target},
            )

        self.state.selection.clear()
        return outcome

    def _capture_on(self, target: Square, mover: Color) -> Optional[GameOutcome]:
        """Remove every opponent's piece on the target square. Returns the outcome if one of them was the King."""
        outcome: Optional[GameOutcome] = None
        for captured in self.board.pieces_at(target):
            if captured.color == mover:
                continue
            self.board.remove_piece(captured.id)
            logger.info(
                "Piece captured",
                extra={"piece_id": captured.id, "piece_type": captured.type.name},
            )
            if captured.type == PieceType.KING and self.state.outcome is None:
                outcome = GameOutcome(winner=mover)
                self.state.outcome = outcome
                self.state.status = Status.KING_CAPTURED
                logger.info("King captured", extra={"winner": mover.name})
        return outcome
