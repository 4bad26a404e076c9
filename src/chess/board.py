"""The Game board keeps track of all live pieces and where they are (in chess: the `position`)"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Self

from src.chess.pieces import PAWN_HOME_FILE, Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import GameStateError

# Order of the pieces on the back rank, starting from rank 0
BACK_RANK_ORDER: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

BACK_RANK_FILE: dict[Color, int] = {
    Color.WHITE: 0,
    Color.BLACK: BOARD_DIMENSIONS[0] - 1,
}


@dataclass
class Board:
    pieces: dict[int, Piece] = field(default_factory=dict)
    # ids are never reused, even after a capture
    _next_id: int = field(default=0, repr=False, compare=False)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def starting_position(cls) -> Self:
        """Construct a board in the standard starting position.

        * White's pieces are on file 0 (rook on rank 0, knight on rank 1, ..., rook on rank 7)
        * White's pawns cover file 1 entirely
        * Black mirrors this on files 7 and 6
        Ids get handed out in that same order: white first, then black.
        """
        board = cls()
        for color in (Color.WHITE, Color.BLACK):
            for rank, piece_type in enumerate(BACK_RANK_ORDER):
                board.place_piece(piece_type, color, Square(BACK_RANK_FILE[color], rank))
            for rank in range(BOARD_DIMENSIONS[1]):
                board.place_piece(
                    PieceType.PAWN, color, Square(PAWN_HOME_FILE[color], rank)
                )
        return board

    @classmethod
    def from_pieces(
        cls, placements: Iterable[tuple[PieceType, Color, Square]]
    ) -> Self:
        """Convenience constructor for custom positions (mostly used to set up tests)"""
        board = cls()
        for piece_type, color, square in placements:
            board.place_piece(piece_type, color, square)
        return board

    def place_piece(self, piece_type: PieceType, color: Color, square: Square) -> Piece:
        """Only used during set-up. There is no promotion, so no pieces appear afterwards."""
        if not square.is_within_bounds():
            raise GameStateError(f"Cannot place a piece outside of the board: {square}")
        if self.piece_at(square) is not None:
            raise GameStateError(f"Square {square} is already occupied.")

        piece = Piece(self._next_id, piece_type, color, square)
        self.pieces[piece.id] = piece
        self._next_id += 1
        return piece

    def piece(self, piece_id: int) -> Piece:
        if piece_id not in self.pieces:
            raise GameStateError(f"No live piece with id {piece_id}.")
        return self.pieces[piece_id]

    def piece_at(self, square: Square) -> Optional[Piece]:
        return next(
            (piece for piece in self.pieces.values() if piece.square == square), None
        )

    def pieces_at(self, square: Square) -> list[Piece]:
        """All live pieces on a square. (By the board invariant there is at most one.)"""
        return [piece for piece in self.pieces.values() if piece.square == square]

    def color_on(self, square: Square) -> Optional[Color]:
        piece = self.piece_at(square)
        return piece.color if piece else None

    def live_pieces(self) -> list[Piece]:
        """Snapshot of the pieces still in play. The rules engine only ever reads this list."""
        return list(self.pieces.values())

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Square]:
        return [
            piece.square
            for piece in self.pieces.values()
            if piece.type == piece_type and piece.color == color
        ]

    def move_piece(self, piece_id: int, square: Square) -> None:
        """Update the position on the board. Legality (and captures) are the controller's business."""
        self.piece(piece_id).square = square

    def remove_piece(self, piece_id: int) -> Piece:
        """A captured piece leaves the board for good"""
        piece = self.piece(piece_id)
        del self.pieces[piece_id]
        return piece
