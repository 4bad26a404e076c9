"""
Movement and capturing rules

Key idea: Use strategy pattern to define the legality check for each piece type.
Every rule is a pure predicate: it gets the piece, the square it wants to go to, and a (read-only) snapshot of all live pieces.

NOTE: There is no notion of check. The game ends when a King gets captured (taken care of by the GameController)
"""

from typing import Callable, Iterable, Optional

from src.chess.pieces import PAWN_DIRECTION, PAWN_HOME_FILE, Color, Piece, PieceType
from src.chess.square import Square, all_squares

Pieces = Iterable[Piece]
MoveRuleFn = Callable[[Piece, Square, list[Piece]], bool]


# --- QUERIES ON THE SNAPSHOT ---
def piece_on_square(square: Square, pieces: Pieces) -> Optional[Piece]:
    for piece in pieces:
        if piece.square == square:
            return piece
    return None


def color_of_piece_on_square(square: Square, pieces: Pieces) -> Optional[Color]:
    """Returns the color of the piece at the given square, None if it is empty."""
    piece = piece_on_square(square, pieces)
    return piece.color if piece else None


def _is_strictly_between(start: int, end: int, value: int) -> bool:
    return start < value < end or end < value < start


def is_path_empty(begin: Square, end: Square, pieces: Pieces) -> bool:
    """
    Line of sight between two squares (both end points excluded)
    ---

    * same file: nothing may stand between the two ranks on that file
    * same rank: same thing, between the two files
    * diagonal: walk the squares one by one towards the end square

    NOTE: blocking does not care about color. Any piece in the way blocks.
    Squares that are not on a common line are considered 'empty' here. The rules for each piece type check the geometry themselves.
    """
    pieces = list(pieces)

    if begin.file == end.file:
        for piece in pieces:
            if piece.square.file == begin.file and _is_strictly_between(
                begin.rank, end.rank, piece.square.rank
            ):
                return False

    if begin.rank == end.rank:
        for piece in pieces:
            if piece.square.rank == begin.rank and _is_strictly_between(
                begin.file, end.file, piece.square.file
            ):
                return False

    d_file = abs(begin.file - end.file)
    d_rank = abs(begin.rank - end.rank)
    if d_file == d_rank:
        step_file = 1 if end.file > begin.file else -1
        step_rank = 1 if end.rank > begin.rank else -1
        for i in range(1, d_file):
            square = begin.offset(i * step_file, i * step_rank)
            if piece_on_square(square, pieces) is not None:
                return False

    return True


def _distances(piece: Piece, target: Square) -> tuple[int, int]:
    return abs(piece.square.file - target.file), abs(piece.square.rank - target.rank)


# --- MOVEMENT RULES ---
def is_valid_king_move(piece: Piece, target: Square, pieces: list[Piece]) -> bool:
    d_file, d_rank = _distances(piece, target)
    return d_file <= 1 and d_rank <= 1


def is_valid_queen_move(piece: Piece, target: Square, pieces: list[Piece]) -> bool:
    d_file, d_rank = _distances(piece, target)
    on_a_line = d_file == d_rank or d_file == 0 or d_rank == 0
    return on_a_line and is_path_empty(piece.square, target, pieces)


def is_valid_rook_move(piece: Piece, target: Square, pieces: list[Piece]) -> bool:
    d_file, d_rank = _distances(piece, target)
    return (d_file == 0 or d_rank == 0) and is_path_empty(
        piece.square, target, pieces
    )


def is_valid_bishop_move(piece: Piece, target: Square, pieces: list[Piece]) -> bool:
    d_file, d_rank = _distances(piece, target)
    return d_file == d_rank and is_path_empty(piece.square, target, pieces)


def is_valid_knight_move(piece: Piece, target: Square, pieces: list[Piece]) -> bool:
    """Knights jump. Whatever stands in between does not matter."""
    return _distances(piece, target) in ((2, 1), (1, 2))


def is_valid_pawn_move(piece: Piece, target: Square, pieces: list[Piece]) -> bool:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - takes diagonally (one square forward, one to the side), only if an opponent's piece sits there
    - can move by two when it is still on its home file, if both squares are empty

    NOTE: no en passant, no promotion.
    """
    advance = (target.file - piece.square.file) * PAWN_DIRECTION[piece.color]
    d_rank = abs(target.rank - piece.square.rank)
    occupant = color_of_piece_on_square(target, pieces)

    if advance == 1 and d_rank == 0:
        return occupant is None

    if advance == 1 and d_rank == 1:
        return occupant == piece.color.opposite

    if advance == 2 and d_rank == 0 and piece.square.file == PAWN_HOME_FILE[piece.color]:
        return occupant is None and is_path_empty(piece.square, target, pieces)

    return False


MOVEMENT_RULES: dict[PieceType, MoveRuleFn] = {
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: is_valid_knight_move,
    PieceType.BISHOP: is_valid_bishop_move,
    PieceType.ROOK: is_valid_rook_move,
    PieceType.QUEEN: is_valid_queen_move,
    PieceType.KING: is_valid_king_move,
}


def is_move_valid(piece: Piece, target: Square, pieces: Pieces) -> bool:
    """
    Can `piece` move to `target`, given all pieces that are currently on the board?
    ----

    1. Never onto a square occupied by your own pieces (checked first)
    2. Never a 'null move' onto the square you are already standing on
    3. Otherwise it is up to the rule for the piece type
    """
    pieces = list(pieces)

    if color_of_piece_on_square(target, pieces) == piece.color:
        return False

    if target == piece.square:
        return False

    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(piece, target, pieces)


def legal_targets(piece: Piece, pieces: Pieces) -> list[Square]:
    """All squares the piece could move to. Can be used by the renderer to highlight them."""
    pieces = list(pieces)
    return [square for square in all_squares() if is_move_valid(piece, square, pieces)]
