"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from draughtie.core.enums import Color
from draughtie.core.piece import Piece
from draughtie.core.types import ALL_SQUARES, BOARD_SIZE, Square

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE
_INITIAL_ROWS: dict[Color, range] = {
    Color.BLACK: range(0, 3),
    Color.RED: range(5, 8),
}


class Board:
    """Immutable 64-square snapshot.

    Every change goes through :meth:`with_pieces`, which returns a new
    board, so older snapshots stay valid for history and undo.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        if squares is None:
            self._squares: tuple[Piece | None, ...] = (None,) * _SQUARE_COUNT
            return
        cells = tuple(squares)
        if len(cells) != _SQUARE_COUNT:
            raise ValueError(f"Board needs {_SQUARE_COUNT} cells, got {len(cells)}")
        for sq, piece in zip(ALL_SQUARES, cells):
            if piece is not None and not sq.is_dark:
                raise ValueError(f"Piece {piece} placed on light square {sq}")
        self._squares = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not sq.is_valid:
            raise IndexError(f"Square out of bounds: {sq}")
        return self._squares[sq.index]

    def get(self, sq: Square) -> Piece | None:
        """Like ``board[sq]`` but ``None`` for out-of-bounds squares."""
        if not sq.is_valid:
            return None
        return self._squares[sq.index]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) pairs in row-major order."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, row-major."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def count(self, color: Color) -> int:
        return sum(1 for p in self._squares if p is not None and p.color == color)

    # -- Derivation ---------------------------------------------------------

    def with_pieces(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with *changes* applied; ``None`` clears a square."""
        cells = list(self._squares)
        for sq, piece in changes.items():
            if not sq.is_valid:
                raise ValueError(f"Square out of bounds: {sq}")
            if piece is not None and not sq.is_dark:
                raise ValueError(f"Piece {piece} placed on light square {sq}")
            cells[sq.index] = piece
        b = Board.__new__(Board)
        b._squares = tuple(cells)
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: three rows of dark squares per side."""
        changes: dict[Square, Piece | None] = {}
        for color, rows in _INITIAL_ROWS.items():
            for sq in ALL_SQUARES:
                if sq.row in rows and sq.is_dark:
                    changes[sq] = Piece(color)
        return cls().with_pieces(changes)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._squares[row * BOARD_SIZE + col]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
