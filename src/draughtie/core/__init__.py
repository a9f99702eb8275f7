"""Core domain layer: pure draughts rules with zero external dependencies.

Quick start::

    from draughtie.core import Board, MoveGenerator, Rules, Color

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.legal_moves(Color.RED):
        print(move)
"""

from draughtie.core.board import Board
from draughtie.core.enums import Color, GameResult, PieceType
from draughtie.core.move import Move
from draughtie.core.move_generator import MoveGenerator
from draughtie.core.notation import STARTING_BOARD, board_from_text, board_to_text
from draughtie.core.piece import Piece
from draughtie.core.rules import MoveResult, Rules
from draughtie.core.types import (
    BOARD_SIZE,
    Square,
    is_dark_square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "is_dark_square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Rules",
    # Notation
    "STARTING_BOARD",
    "board_from_text",
    "board_to_text",
]
