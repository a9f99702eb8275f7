"""Abstract interfaces for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto

from draughtie.core.enums import Color
from draughtie.core.types import Square

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a draughts game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    CHAIN_CAPTURE = auto()  # same piece must keep jumping
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        start_board: str | None = None,
        first_player: Color = Color.RED,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def handle_square(self, square: Square) -> bool:
        """React to a square being picked. Returns True if state changed."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Submit a step. Returns True if legal and applied."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last step. Returns True on success."""
