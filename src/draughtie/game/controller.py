"""GameController: the central orchestrator of a draughts game.

Coordinates: GameState, MoveGenerator, Rules.
Emits events via simple callbacks so a front-end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from draughtie.core.enums import Color, GameResult
from draughtie.core.types import Square
from draughtie.game.interfaces import GamePhase, IGameController
from draughtie.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full draughts game: selection, forced captures,
    chain jumps, turn switching, undo, and listener notification.

    Thread-safety: methods are designed to be called from a single thread.
    """

    __slots__ = ("_state", "_start_board", "_first_player", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._start_board: str | None = None
        self._first_player = Color.RED
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        start_board: str | None = None,
        first_player: Color = Color.RED,
    ) -> None:
        self._start_board = start_board
        self._first_player = first_player

        self._state = GameState()
        self._state.setup(start_board, first_player)
        _LOGGER.debug("New game, %s to move", first_player)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def reset(self) -> None:
        """Start over with the options of the last :meth:`new_game`."""
        self.new_game(self._start_board, self._first_player)

    def handle_square(self, square: Square) -> bool:
        state = self._state
        if state.is_game_over:
            return False

        # Mid-chain only a further jump by the same piece is accepted.
        if state.capture_in_progress:
            if state.selected != state.must_capture_from:
                return False
            if square not in state.valid_targets:
                _LOGGER.debug("Ignoring %s during chain capture", square)
                return False
            return self._play(square)

        piece = state.board.get(square)
        if piece is not None and piece.color == state.side_to_move:
            return state.select(square)

        if state.selected is None:
            return False
        if square in state.valid_targets:
            return self._play(square)

        state.clear_selection()
        return True

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        state = self._state
        if state.is_game_over:
            return False
        if state.capture_in_progress:
            if from_sq != state.must_capture_from:
                return False
        elif not state.select(from_sq):
            return False
        if to_sq not in state.valid_targets:
            return False
        return self._play(to_sq)

    def undo_move(self) -> bool:
        if self._state.is_game_over or not self._state.move_history:
            return False
        self._state.undo_last_move()
        self._emit_phase(self._state.phase)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(self, square: Square) -> bool:
        record = self._state.move_selected_to(square)
        if record is None:
            return False

        _LOGGER.debug("%s played %s", record.mover, record.move)
        self._emit_move(record)

        if self._state.is_game_over:
            _LOGGER.info("Game over: %s", self._state.result.name)
            self._emit_game_over(self._state.result)
        elif record.continues_chain:
            _LOGGER.debug("Chain capture continues from %s", square)
            self._emit_phase(GamePhase.CHAIN_CAPTURE)
        else:
            self._emit_phase(GamePhase.AWAITING_MOVE)
        return True

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
