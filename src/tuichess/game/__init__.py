"""Game management layer: selection state machine, opponent, status.

Quick start::

    from tuichess.game import InputKey, RandomOpponent, SelectionController

    ctrl = SelectionController(opponent=RandomOpponent(seed=7))
    ctrl.handle(InputKey.UP)
    ctrl.handle(InputKey.ENTER)  # selects the a2 pawn
"""

from tuichess.game.controller import GameEvents, SelectionController, find_move
from tuichess.game.interfaces import InputKey, IOpponent, SelectionPhase
from tuichess.game.player import RandomOpponent
from tuichess.game.state import InteractionState
from tuichess.game.status import describe, side_name

__all__ = [
    # Interfaces
    "InputKey",
    "IOpponent",
    "SelectionPhase",
    # Concrete
    "GameEvents",
    "InteractionState",
    "RandomOpponent",
    "SelectionController",
    # Helpers
    "describe",
    "find_move",
    "side_name",
]
