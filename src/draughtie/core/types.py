"""Square value type and coordinate helpers.

Board layout (row-major, row 0 at the top):
    row 0 = rank 8 (black's back row)
    row 7 = rank 1 (red's back row)
    col 0..7 = files a..h
"""

from __future__ import annotations

from dataclasses import dataclass

from draughtie.core.enums import Color

BOARD_SIZE = 8

# Row on which a regular piece of each color is promoted.
PROMOTION_ROW: dict[Color, int] = {
    Color.RED: 0,
    Color.BLACK: BOARD_SIZE - 1,
}


def is_valid_square(row: int, col: int) -> bool:
    """Bounds test."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark_square(row: int, col: int) -> bool:
    """Pieces live on dark squares only."""
    return (row + col) % 2 == 1


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate."""

    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        return is_valid_square(self.row, self.col)

    @property
    def is_dark(self) -> bool:
        return is_dark_square(self.row, self.col)

    @property
    def index(self) -> int:
        """Row-major index 0-63."""
        return self.row * BOARD_SIZE + self.col

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        if not self.is_valid:
            return f"({self.row},{self.col})"
        return square_name(self)


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. Square(7, 0) -> 'a1', Square(0, 7) -> 'h8'."""
    return chr(ord("a") + sq.col) + str(BOARD_SIZE - sq.row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'a3' -> Square(5, 0)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


# Row-major scan order; this order decides which piece is reported first
# when several pieces are obliged to capture.
ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
DARK_SQUARES: tuple[Square, ...] = tuple(sq for sq in ALL_SQUARES if sq.is_dark)
