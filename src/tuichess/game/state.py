"""Cursor, selection and the last action message."""

from __future__ import annotations

from dataclasses import dataclass

from tuichess.core.types import A1, Square
from tuichess.game.interfaces import SelectionPhase


@dataclass
class InteractionState:
    """Mutable UI-facing state owned by :class:`SelectionController`.

    ``selection`` doubles as the FSM discriminant: ``None`` is IDLE,
    a square is ARMED.
    """

    cursor: Square = A1
    selection: Square | None = None
    message: str = ""

    @property
    def phase(self) -> SelectionPhase:
        if self.selection is None:
            return SelectionPhase.IDLE
        return SelectionPhase.ARMED

    def reset(self) -> None:
        self.cursor = A1
        self.selection = None
        self.message = ""
