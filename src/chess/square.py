"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """
    Zero-based board coordinate.

    The file axis is the one the pawns advance along: white starts on files 0 (pieces) and 1 (pawns),
    black on files 7 and 6. The rank axis runs across the board.
    """

    file: int
    rank: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )

    def is_light(self) -> bool:
        """Shading used by the renderer for the square's material"""
        return (self.file + self.rank + 1) % 2 == 0

    def offset(self, d_file: int, d_rank: int) -> Square:
        return Square(self.file + d_file, self.rank + d_rank)


def all_squares() -> list[Square]:
    return [
        Square(file, rank)
        for file in range(BOARD_DIMENSIONS[0])
        for rank in range(BOARD_DIMENSIONS[1])
    ]
