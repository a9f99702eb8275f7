"""Game state machine: tracks selection, chain captures and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from draughtie.core.board import Board
from draughtie.core.enums import Color, GameResult
from draughtie.core.move import Move
from draughtie.core.move_generator import MoveGenerator
from draughtie.core.notation import STARTING_BOARD, board_from_text
from draughtie.core.rules import Rules
from draughtie.core.types import Square
from draughtie.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history (one atomic step)."""

    move: Move
    board_before: Board
    mover: Color
    result_after: GameResult = GameResult.IN_PROGRESS
    continues_chain: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: turn, selection, chain captures, history.

    This is a pure data/logic class with no threading and no UI.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.RED, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    selected: Square | None = field(default=None, init=False)
    valid_targets: list[Square] = field(default_factory=list, init=False)
    capture_in_progress: bool = field(default=False, init=False)
    must_capture_from: Square | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_board: str = field(default=STARTING_BOARD, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self, start_board: str | None = None, first_player: Color = Color.RED
    ) -> None:
        """Initialise (or reset) the game."""
        self.start_board = start_board or STARTING_BOARD
        self.board = board_from_text(self.start_board)
        self.side_to_move = first_player
        self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE
        self._clear_chain()
        self.move_history.clear()
        self._check_game_over()

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, square: Square) -> bool:
        """Select a piece of the side to move.

        While a capture obligation exists only the obliged piece may be
        picked, and it is offered captures only.
        """
        if self.is_game_over or self.capture_in_progress:
            return False
        piece = self.board.get(square)
        if piece is None or piece.color != self.side_to_move:
            return False

        gen = MoveGenerator(self.board)
        origin = gen.mandatory_capture_origin(self.side_to_move)
        if origin is not None and origin != square:
            _LOGGER.debug("Selection %s refused: %s must capture", square, origin)
            return False

        self.selected = square
        self.valid_targets = gen.valid_moves(square, must_capture=origin is not None)
        return True

    def clear_selection(self) -> None:
        """Drop the current selection (ignored mid-chain)."""
        if self.capture_in_progress:
            return
        self.selected = None
        self.valid_targets = []

    # ── Move application ─────────────────────────────────────────────────

    def move_selected_to(self, square: Square) -> MoveRecord | None:
        """Move the selected piece to *square* if it is a valid target."""
        if self.is_game_over or self.selected is None:
            return None
        if square not in self.valid_targets:
            return None

        outcome = Rules.apply_move(self.board, self.selected, square)
        if outcome.move is None:
            return None

        record = MoveRecord(
            move=outcome.move,
            board_before=self.board,
            mover=self.side_to_move,
        )
        self.board = outcome.board

        if outcome.has_more_captures and outcome.move.is_capture:
            record.continues_chain = True
            self._enter_chain(square)
        else:
            self.side_to_move = self.side_to_move.opposite
            self._clear_chain()
            self._check_game_over()

        record.result_after = self.result
        self.move_history.append(record)
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last step. Returns the undone Move, or None if empty.

        The board snapshot taken before the step is restored, so captured
        pieces come back with their original rank.
        """
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.board = record.board_before
        self.side_to_move = record.mover
        self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE
        self._clear_chain()

        if self.move_history and self.move_history[-1].continues_chain:
            self._enter_chain(record.move.from_sq)

        _LOGGER.debug("Undid %s by %s", record.move, record.mover)
        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of atomic steps played."""
        return len(self.move_history)

    def legal_moves(self) -> list[Move]:
        """Steps the side to move may play now."""
        if self.is_game_over:
            return []
        if self.must_capture_from is not None:
            # Mid-chain the jumping piece is fixed, whichever piece the
            # row-major scan would report.
            square = self.must_capture_from
            moves: list[Move] = []
            for to in self.valid_targets:
                step = Rules.apply_move(self.board, square, to).move
                if step is not None:
                    moves.append(step)
            return moves
        return MoveGenerator(self.board).legal_moves(self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _enter_chain(self, square: Square) -> None:
        self.selected = square
        self.valid_targets = MoveGenerator(self.board).valid_moves(
            square, must_capture=True
        )
        self.capture_in_progress = True
        self.must_capture_from = square
        self.phase = GamePhase.CHAIN_CAPTURE

    def _clear_chain(self) -> None:
        self.selected = None
        self.valid_targets = []
        self.capture_in_progress = False
        self.must_capture_from = None
        if self.phase == GamePhase.CHAIN_CAPTURE:
            self.phase = GamePhase.AWAITING_MOVE

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
