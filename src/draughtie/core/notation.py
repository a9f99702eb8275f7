"""Board placement text, modelled on the FEN piece-placement field.

Rows are separated by ``/`` and listed from row 0 (top, black's back
row) down to row 7. Within a row, ``r``/``R`` are red regular/king,
``b``/``B`` black regular/king and a digit is a run of empty cells.
"""

from __future__ import annotations

from draughtie.core.board import Board
from draughtie.core.piece import Piece
from draughtie.core.types import BOARD_SIZE, Square

STARTING_BOARD = "1b1b1b1b/b1b1b1b1/1b1b1b1b/8/8/r1r1r1r1/1r1r1r1r/r1r1r1r1"


def board_from_text(text: str) -> Board:
    """Parse placement text into a :class:`Board`."""
    rows = text.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid board text (must contain 8 rows): {text!r}")

    changes: dict[Square, Piece | None] = {}
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid board digit {ch!r}: {text!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid board row width: {text!r}")
                sq = Square(row, col)
                if not sq.is_dark:
                    raise ValueError(f"Piece on light square {sq}: {text!r}")
                changes[sq] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid board row width: {text!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid board row width: {text!r}")

    return Board().with_pieces(changes)


def board_to_text(board: Board) -> str:
    """Serialise a :class:`Board` to placement text."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        row_text = ""
        for col in range(BOARD_SIZE):
            piece = board[Square(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                row_text += str(empty)
                empty = 0
            row_text += str(piece)
        if empty:
            row_text += str(empty)
        rows.append(row_text)
    return "/".join(rows)
