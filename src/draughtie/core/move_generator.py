"""Move generation and the mandatory-capture check."""

from __future__ import annotations

from draughtie.core.board import Board
from draughtie.core.enums import Color
from draughtie.core.move import Move
from draughtie.core.piece import Piece
from draughtie.core.types import ALL_SQUARES, PROMOTION_ROW, Square

KING_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_FORWARD_DIRS: dict[Color, tuple[tuple[int, int], ...]] = {
    Color.RED: ((-1, -1), (-1, 1)),
    Color.BLACK: ((1, -1), (1, 1)),
}


class MoveGenerator:
    """Generates destination squares and steps for a given :class:`Board`.

    Pure: the board is never modified.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @staticmethod
    def directions(piece: Piece) -> tuple[tuple[int, int], ...]:
        """Diagonal steps available to *piece* (forward only unless king)."""
        if piece.is_king:
            return KING_DIRS
        return _FORWARD_DIRS[piece.color]

    # -- Per-square generation ----------------------------------------------

    def valid_moves(self, sq: Square, must_capture: bool = False) -> list[Square]:
        """Destinations reachable in one step from *sq*.

        Captures take priority: when any capture exists, or when
        *must_capture* is set, simple steps are suppressed.
        """
        if self._board.get(sq) is None:
            return []
        captures = self.capture_moves(sq)
        if must_capture or captures:
            return captures
        return self.simple_moves(sq)

    def capture_moves(self, sq: Square) -> list[Square]:
        """Landing squares of single jumps from *sq*."""
        board = self._board
        piece = board.get(sq)
        if piece is None:
            return []

        landings: list[Square] = []
        for d_row, d_col in self.directions(piece):
            over = sq.offset(d_row, d_col)
            land = sq.offset(2 * d_row, 2 * d_col)
            if not land.is_valid or not land.is_dark or board[land] is not None:
                continue
            victim = board[over]
            if victim is not None and victim.color != piece.color:
                landings.append(land)
        return landings

    def simple_moves(self, sq: Square) -> list[Square]:
        """Non-capturing one-step destinations from *sq*."""
        board = self._board
        piece = board.get(sq)
        if piece is None:
            return []

        targets: list[Square] = []
        for d_row, d_col in self.directions(piece):
            to = sq.offset(d_row, d_col)
            if to.is_valid and to.is_dark and board[to] is None:
                targets.append(to)
        return targets

    # -- Whole-side queries -------------------------------------------------

    def mandatory_capture_origin(self, color: Color) -> Square | None:
        """First square (row-major) whose *color* piece can capture, if any."""
        for sq in ALL_SQUARES:
            piece = self._board[sq]
            if piece is not None and piece.color == color and self.capture_moves(sq):
                return sq
        return None

    def has_any_move(self, color: Color) -> bool:
        """Whether any *color* piece has a simple or capture step."""
        for sq in self._board.pieces(color):
            if self.valid_moves(sq):
                return True
        return False

    def legal_moves(self, color: Color) -> list[Move]:
        """Steps *color* may play now.

        With a capture obligation only the obliged piece's jumps are
        returned; otherwise every simple step in scan order.
        """
        origin = self.mandatory_capture_origin(color)
        if origin is not None:
            return [self._jump(origin, land) for land in self.capture_moves(origin)]

        moves: list[Move] = []
        for sq in self._board.pieces(color):
            moves.extend(
                Move(sq, to, promoted=self._promotes(sq, to))
                for to in self.simple_moves(sq)
            )
        return moves

    def _jump(self, from_sq: Square, to_sq: Square) -> Move:
        over = Square((from_sq.row + to_sq.row) // 2, (from_sq.col + to_sq.col) // 2)
        victim = self._board[over]
        assert victim is not None
        return Move(
            from_sq, to_sq, (over,), (victim,), self._promotes(from_sq, to_sq)
        )

    def _promotes(self, from_sq: Square, to_sq: Square) -> bool:
        piece = self._board[from_sq]
        assert piece is not None
        return not piece.is_king and to_sq.row == PROMOTION_ROW[piece.color]
