"""Tests for MoveGenerator: directions, forced captures, scan order."""

import pytest

from draughtie.core.board import Board
from draughtie.core.enums import Color, PieceType
from draughtie.core.move import Move
from draughtie.core.move_generator import KING_DIRS, MoveGenerator
from draughtie.core.notation import board_from_text
from draughtie.core.piece import Piece
from draughtie.core.types import DARK_SQUARES, Square

# Red c3 can jump the black piece on d4.
SINGLE_CAPTURE = "8/8/8/8/3b4/2r5/8/8"


def _gen(text: str) -> MoveGenerator:
    return MoveGenerator(board_from_text(text))


class TestSimpleMoves:
    def test_empty_square(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.valid_moves(Square(4, 1)) == []

    def test_out_of_bounds_square(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.valid_moves(Square(9, 9)) == []
        assert gen.capture_moves(Square(-1, 2)) == []

    def test_edge_piece_has_one_move(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.valid_moves(Square(5, 0)) == [Square(4, 1)]

    def test_red_moves_toward_row_zero(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.valid_moves(Square(5, 2)) == [Square(4, 1), Square(4, 3)]

    def test_black_moves_toward_row_seven(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.valid_moves(Square(2, 1)) == [Square(3, 0), Square(3, 2)]

    def test_blocked_back_rows(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.valid_moves(Square(6, 1)) == []
        assert gen.valid_moves(Square(1, 2)) == []

    def test_king_moves_all_directions(self) -> None:
        gen = _gen("8/8/8/8/3R4/8/8/b7")
        assert gen.valid_moves(Square(4, 3)) == [
            Square(3, 2),
            Square(3, 4),
            Square(5, 2),
            Square(5, 4),
        ]

    def test_directions(self) -> None:
        assert MoveGenerator.directions(Piece(Color.RED)) == ((-1, -1), (-1, 1))
        assert MoveGenerator.directions(Piece(Color.BLACK)) == ((1, -1), (1, 1))
        king = Piece(Color.BLACK, PieceType.KING)
        assert MoveGenerator.directions(king) == KING_DIRS


class TestCaptures:
    def test_capture_suppresses_simple_moves(self) -> None:
        gen = _gen(SINGLE_CAPTURE)
        assert gen.valid_moves(Square(5, 2)) == [Square(3, 4)]
        assert gen.simple_moves(Square(5, 2)) == [Square(4, 1)]

    def test_landing_square_must_be_empty(self) -> None:
        gen = _gen("8/8/8/4b3/3b4/2r5/8/8")
        assert gen.capture_moves(Square(5, 2)) == []
        assert gen.valid_moves(Square(5, 2)) == [Square(4, 1)]

    def test_cannot_jump_own_piece(self) -> None:
        gen = _gen("8/8/8/8/3r4/2r5/8/8")
        assert gen.capture_moves(Square(5, 2)) == []

    def test_landing_must_be_on_board(self) -> None:
        gen = _gen("1b6/r7/8/8/8/8/8/8")
        assert gen.capture_moves(Square(1, 0)) == []

    def test_regular_cannot_capture_backward(self) -> None:
        gen = _gen("8/8/8/2r5/3b4/8/8/8")
        assert gen.capture_moves(Square(3, 2)) == []
        assert gen.valid_moves(Square(3, 2)) == [Square(2, 1), Square(2, 3)]

    def test_king_captures_backward(self) -> None:
        gen = _gen("8/8/8/2R5/3b4/8/8/8")
        assert gen.valid_moves(Square(3, 2)) == [Square(5, 4)]

    def test_must_capture_without_capture_is_empty(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.valid_moves(Square(5, 2), must_capture=True) == []

    def test_black_captures_downward(self) -> None:
        gen = _gen("8/8/8/8/3b4/2r5/8/8")
        assert gen.valid_moves(Square(4, 3)) == [Square(6, 1)]


class TestDestinationsAlwaysValid:
    @pytest.mark.parametrize(
        "text",
        [
            "1b1b1b1b/b1b1b1b1/1b1b1b1b/8/8/r1r1r1r1/1r1r1r1r/r1r1r1r1",
            "1R1B4/B1r5/3b4/2r1R3/1b6/R1B1b3/1r6/r1B5",
            "7b/8/8/4b3/8/2b5/1r6/8",
        ],
    )
    def test_dark_and_in_bounds(self, text: str) -> None:
        gen = _gen(text)
        for sq in DARK_SQUARES:
            for must_capture in (False, True):
                for to in gen.valid_moves(sq, must_capture):
                    assert to.is_valid
                    assert to.is_dark


class TestMandatoryCapture:
    def test_none_on_initial_board(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.mandatory_capture_origin(Color.RED) is None
        assert gen.mandatory_capture_origin(Color.BLACK) is None

    def test_single_origin(self) -> None:
        gen = _gen(SINGLE_CAPTURE)
        assert gen.mandatory_capture_origin(Color.RED) == Square(5, 2)
        assert gen.mandatory_capture_origin(Color.BLACK) == Square(4, 3)

    def test_first_in_row_major_order_wins(self) -> None:
        # c3 and e3 can both take d4; g5 can take f6 and sits on an earlier row.
        gen = _gen("8/8/5b2/6r1/3b4/2r1r3/8/8")
        assert gen.mandatory_capture_origin(Color.RED) == Square(3, 6)

    def test_same_row_tie_break_by_column(self) -> None:
        gen = _gen("8/8/8/8/3b4/2r1r3/8/8")
        assert gen.mandatory_capture_origin(Color.RED) == Square(5, 2)

    def test_forced_selection_offers_only_captures(self) -> None:
        board = board_from_text("8/8/8/8/3b4/2r5/7r/8")
        gen = MoveGenerator(board)
        forced = gen.mandatory_capture_origin(Color.RED) is not None
        for sq in board.pieces(Color.RED):
            targets = gen.valid_moves(sq, must_capture=forced)
            assert all(abs(to.row - sq.row) == 2 for to in targets)
        assert gen.valid_moves(Square(6, 7), must_capture=forced) == []


class TestLegalMoves:
    def test_initial_red(self) -> None:
        moves = MoveGenerator(Board.initial()).legal_moves(Color.RED)
        assert len(moves) == 7
        assert all(m.from_sq.row == 5 and m.to_sq.row == 4 for m in moves)
        assert not any(m.is_capture for m in moves)

    def test_initial_black(self) -> None:
        moves = MoveGenerator(Board.initial()).legal_moves(Color.BLACK)
        assert len(moves) == 7

    def test_forced_jump_only(self) -> None:
        moves = _gen("8/8/8/8/3b4/2r5/7r/8").legal_moves(Color.RED)
        assert moves == [
            Move(Square(5, 2), Square(3, 4), (Square(4, 3),), (Piece(Color.BLACK),))
        ]

    def test_promotion_flag(self) -> None:
        moves = _gen("8/2r5/8/8/8/8/8/b7").legal_moves(Color.RED)
        assert {m.to_sq for m in moves} == {Square(0, 1), Square(0, 3)}
        assert all(m.promoted for m in moves)

    def test_has_any_move(self) -> None:
        gen = _gen("1r6/8/8/8/8/8/8/b7")
        assert not gen.has_any_move(Color.RED)
        assert not gen.has_any_move(Color.BLACK)
        assert MoveGenerator(Board.initial()).has_any_move(Color.RED)
