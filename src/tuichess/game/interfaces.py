"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on concrete opponent, input
or renderer implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import chess

    from tuichess.core.board import IBoardAdapter


# ── Input events ─────────────────────────────────────────────────────────────


class InputKey(IntEnum):
    """Decoded input events delivered by a front end."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    QUIT = auto()
    OTHER = auto()


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Finite-state-machine states for piece selection."""

    IDLE = auto()  # nothing selected
    ARMED = auto()  # a piece is selected, waiting for a target


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IOpponent(ABC):
    """Interface for the automatic opponent."""

    @abstractmethod
    def select_and_apply(self, board: IBoardAdapter) -> chess.Move | None:
        """Pick a move for the side to move and play it.

        Returns the move played, or ``None`` when there is no legal move
        (the board is left untouched).
        """
