"""Tests for InteractionState."""

from tuichess.core.types import A1, E4
from tuichess.game.interfaces import SelectionPhase
from tuichess.game.state import InteractionState


class TestInteractionState:
    def test_defaults(self) -> None:
        state = InteractionState()
        assert state.cursor == A1
        assert state.selection is None
        assert state.message == ""

    def test_phase_follows_selection(self) -> None:
        state = InteractionState()
        assert state.phase == SelectionPhase.IDLE
        state.selection = E4
        assert state.phase == SelectionPhase.ARMED

    def test_reset(self) -> None:
        state = InteractionState(cursor=E4, selection=E4, message="Piece selected")
        state.reset()
        assert state == InteractionState()
