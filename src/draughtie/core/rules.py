"""High-level draughts rules: move execution and win / draw detection."""

from __future__ import annotations

from dataclasses import dataclass

from draughtie.core.board import Board
from draughtie.core.enums import Color, GameResult
from draughtie.core.move import Move
from draughtie.core.move_generator import MoveGenerator
from draughtie.core.piece import Piece
from draughtie.core.types import PROMOTION_ROW, Square


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of :meth:`Rules.apply_move`."""

    board: Board
    move: Move | None
    has_more_captures: bool = False

    @property
    def captured(self) -> tuple[Square, ...]:
        return self.move.captured if self.move is not None else ()


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def apply_move(board: Board, from_sq: Square, to_sq: Square) -> MoveResult:
        """Play one step from *from_sq* to *to_sq* and return the new board.

        Legality is not checked here. An empty origin (or an out-of-bounds
        or light target square) leaves the board untouched.
        """
        piece = board.get(from_sq)
        if piece is None or not to_sq.is_valid or not to_sq.is_dark:
            return MoveResult(board, None)

        changes: dict[Square, Piece | None] = {from_sq: None}
        captured: tuple[Square, ...] = ()
        captured_pieces: tuple[Piece, ...] = ()

        if abs(to_sq.row - from_sq.row) == 2:
            over = Square(
                (from_sq.row + to_sq.row) // 2, (from_sq.col + to_sq.col) // 2
            )
            victim = board[over]
            captured = (over,)
            if victim is not None:
                captured_pieces = (victim,)
            changes[over] = None

        promoted = not piece.is_king and to_sq.row == PROMOTION_ROW[piece.color]
        changes[to_sq] = piece.promoted() if promoted else piece

        new_board = board.with_pieces(changes)
        has_more = bool(MoveGenerator(new_board).capture_moves(to_sq))
        move = Move(from_sq, to_sq, captured, captured_pieces, promoted)
        return MoveResult(new_board, move, has_more)

    @staticmethod
    def piece_count(board: Board, color: Color) -> int:
        return board.count(color)

    @staticmethod
    def any_move_available(board: Board, color: Color) -> bool:
        return MoveGenerator(board).has_any_move(color)

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result.

        An empty side loses before mobility is considered; after that a
        side without moves loses, and both sides stuck is a draw.
        """
        if board.count(Color.RED) == 0:
            return GameResult.BLACK_WINS
        if board.count(Color.BLACK) == 0:
            return GameResult.RED_WINS

        red_can_move = Rules.any_move_available(board, Color.RED)
        black_can_move = Rules.any_move_available(board, Color.BLACK)

        if not red_can_move and not black_can_move:
            return GameResult.DRAW
        if not red_can_move:
            return GameResult.BLACK_WINS
        if not black_can_move:
            return GameResult.RED_WINS
        return GameResult.IN_PROGRESS
