"""Game management layer: controller and state machine.

Quick start::

    from draughtie.core import Color, parse_square
    from draughtie.game import GameController

    ctrl = GameController()
    ctrl.new_game(first_player=Color.RED)
    ctrl.submit_move(parse_square("a3"), parse_square("b4"))
"""

from draughtie.game.controller import GameController, GameEvents
from draughtie.game.interfaces import GamePhase, IGameController
from draughtie.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
