"""Unit tests for /src/chess/board.py"""

from typing import Callable

import pytest

from src.chess.board import BACK_RANK_ORDER, Board
from src.chess.pieces import Color, PieceType
from src.chess.square import Square
from src.core.exceptions import GameStateError


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    """32 pieces: back ranks on files 0 and 7, pawns on files 1 and 6"""
    board = Board.starting_position()
    assert len(board.live_pieces()) == 32

    for rank, piece_type in enumerate(BACK_RANK_ORDER):
        white_piece = board.piece_at(Square(0, rank))
        black_piece = board.piece_at(Square(7, rank))
        assert white_piece is not None and black_piece is not None
        assert (white_piece.type, white_piece.color) == (piece_type, Color.WHITE)
        assert (black_piece.type, black_piece.color) == (piece_type, Color.BLACK)

    for rank in range(8):
        assert board.color_on(Square(1, rank)) == Color.WHITE
        assert board.color_on(Square(6, rank)) == Color.BLACK

    # files in the middle are all empty
    for file in range(2, 6):
        for rank in range(8):
            assert board.piece_at(Square(file, rank)) is None


def test_kings_in_starting_position() -> None:
    board = Board.starting_position()
    assert board.locate_pieces(PieceType.KING, Color.WHITE) == [Square(0, 4)]
    assert board.locate_pieces(PieceType.KING, Color.BLACK) == [Square(7, 4)]


def test_ids_are_unique() -> None:
    board = Board.starting_position()
    ids = [piece.id for piece in board.live_pieces()]
    assert sorted(ids) == list(range(32))


def test_empty_board() -> None:
    assert Board.empty().live_pieces() == []


def test_cannot_place_two_pieces_on_one_square() -> None:
    board = Board.empty()
    board.place_piece(PieceType.ROOK, Color.WHITE, Square(0, 0))
    with pytest.raises(GameStateError):
        board.place_piece(PieceType.KNIGHT, Color.BLACK, Square(0, 0))


def test_cannot_place_piece_off_the_board() -> None:
    with pytest.raises(GameStateError):
        Board.empty().place_piece(PieceType.ROOK, Color.WHITE, Square(8, 0))


# -- QUERIES --
def test_piece_at_empty_square(board_with: Callable[..., Board]) -> None:
    board = board_with((PieceType.QUEEN, Color.WHITE, (3, 3)))
    assert board.piece_at(Square(3, 4)) is None
    assert board.color_on(Square(3, 4)) is None
    assert board.pieces_at(Square(3, 4)) == []


def test_unknown_piece_id() -> None:
    with pytest.raises(GameStateError):
        Board.empty().piece(42)


def test_live_pieces_is_a_snapshot(board_with: Callable[..., Board]) -> None:
    """Changing the returned list should not touch the board"""
    board = board_with((PieceType.QUEEN, Color.WHITE, (3, 3)))
    snapshot = board.live_pieces()
    snapshot.clear()
    assert len(board.live_pieces()) == 1


# -- MUTATIONS --
def test_move_piece(board_with: Callable[..., Board]) -> None:
    board = board_with((PieceType.ROOK, Color.WHITE, (0, 0)))
    rook = board.piece_at(Square(0, 0))
    assert rook is not None

    board.move_piece(rook.id, Square(0, 5))

    assert board.piece_at(Square(0, 0)) is None
    assert board.piece_at(Square(0, 5)) is rook


def test_remove_piece(board_with: Callable[..., Board]) -> None:
    board = board_with(
        (PieceType.ROOK, Color.WHITE, (0, 0)), (PieceType.PAWN, Color.BLACK, (6, 0))
    )
    pawn = board.piece_at(Square(6, 0))
    assert pawn is not None

    removed = board.remove_piece(pawn.id)

    assert removed is pawn
    assert pawn.id not in board.pieces
    assert len(board.live_pieces()) == 1


def test_ids_are_not_reused_after_capture(board_with: Callable[..., Board]) -> None:
    board = board_with((PieceType.PAWN, Color.BLACK, (6, 0)))
    pawn = board.piece_at(Square(6, 0))
    assert pawn is not None
    board.remove_piece(pawn.id)
    new_piece = board.place_piece(PieceType.PAWN, Color.BLACK, Square(6, 0))
    assert new_piece.id != pawn.id
