"""Concrete opponent implementations."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import TYPE_CHECKING

from tuichess.game.interfaces import IOpponent

if TYPE_CHECKING:
    import chess

    from tuichess.core.board import IBoardAdapter

_LOGGER = logging.getLogger(__name__)


class RandomOpponent(IOpponent):
    """Plays a uniformly random legal move.

    Args:
        rng: Random source to draw from. Takes precedence over *seed*.
        seed: Seed for a private ``random.Random`` when *rng* is not given.
            With neither, a freshly seeded generator is used.
    """

    __slots__ = ("_rng",)

    def __init__(
        self,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def choose(self, moves: Sequence[chess.Move]) -> chess.Move | None:
        """Draw one of *moves* uniformly, or ``None`` if there are none."""
        if not moves:
            return None
        return self._rng.choice(moves)

    def select_and_apply(self, board: IBoardAdapter) -> chess.Move | None:
        move = self.choose(board.legal_moves_for_current_side())
        if move is None:
            _LOGGER.info("Opponent has no legal moves")
            return None
        board.apply(move)
        return move
