"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from draughtie.game.controller import GameController

# Red b2 must jump c3 and then e5; black keeps h8 so the game goes on.
_CHAIN_BOARD = "7b/8/8/4b3/8/2b5/1r6/8"


@pytest.fixture
def controller() -> GameController:
    """Controller with a fresh standard game."""
    ctrl = GameController()
    ctrl.new_game()
    return ctrl


@pytest.fixture
def chain_controller() -> GameController:
    """Controller whose first red turn is a forced double jump."""
    ctrl = GameController()
    ctrl.new_game(_CHAIN_BOARD)
    return ctrl
