"""SelectionController: turns key presses into cursor moves and chess moves.

Coordinates: InteractionState, BoardAdapter, the automatic opponent.
Emits events via simple callbacks so the app / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import chess

from tuichess.core.board import BoardAdapter, IBoardAdapter
from tuichess.core.enums import Side
from tuichess.core.types import Square, offset_square, square_name
from tuichess.game.interfaces import InputKey, IOpponent, SelectionPhase
from tuichess.game.player import RandomOpponent
from tuichess.game.state import InteractionState
from tuichess.i18n import t

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[chess.Move, Side, bool], None]  # move, mover, by_opponent
MessageCallback = Callable[[str], None]

_DIRECTIONS: dict[InputKey, tuple[int, int]] = {
    InputKey.LEFT: (-1, 0),
    InputKey.RIGHT: (1, 0),
    InputKey.UP: (0, 1),
    InputKey.DOWN: (0, -1),
}


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_message: list[MessageCallback] = field(default_factory=list)


def find_move(
    moves: Sequence[chess.Move], source: Square, target: Square
) -> chess.Move | None:
    """Pick the legal move from *source* to *target*.

    When several moves share both squares (promotions) the queen
    promotion wins; otherwise the first match is returned.
    """
    matches = [m for m in moves if m.from_square == source and m.to_square == target]
    if not matches:
        return None
    for move in matches:
        if move.promotion == chess.QUEEN:
            return move
    return matches[0]


# ── Controller ───────────────────────────────────────────────────────────────


class SelectionController:
    """Sole mutator of :class:`InteractionState` and of the board.

    Thread-safety: all methods must be called from the event-loop thread.

    Args:
        board: Position to play on; a fresh initial position by default.
        opponent: Replies to every human move; a :class:`RandomOpponent`
            by default.
        lock_on_game_over: Refuse selections once the position is
            checkmate or stalemate.
    """

    __slots__ = ("_board", "_opponent", "_state", "_lock_on_game_over", "events")

    def __init__(
        self,
        board: IBoardAdapter | None = None,
        opponent: IOpponent | None = None,
        *,
        lock_on_game_over: bool = True,
    ) -> None:
        self._board: IBoardAdapter = board if board is not None else BoardAdapter()
        self._opponent: IOpponent = (
            opponent if opponent is not None else RandomOpponent()
        )
        self._state = InteractionState()
        self._lock_on_game_over = lock_on_game_over
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> IBoardAdapter:
        return self._board

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def phase(self) -> SelectionPhase:
        return self._state.phase

    @property
    def opponent(self) -> IOpponent:
        return self._opponent

    # ── Public API ───────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        """Start over from *fen* (initial position when ``None``)."""
        self._board = BoardAdapter(fen)
        self._state.reset()

    def handle(self, key: InputKey) -> bool:
        """Apply one input event. Returns True if any state changed.

        QUIT is not handled here; the event loop owns it.
        """
        if key in _DIRECTIONS:
            return self._move_cursor(*_DIRECTIONS[key])
        if key == InputKey.ENTER:
            return self._on_enter()
        if key == InputKey.ESCAPE:
            self._state.selection = None
            self._set_message(t().selection_cleared)
            return True
        return False

    # ── Internal helpers ─────────────────────────────────────────────────

    def _move_cursor(self, dfile: int, drank: int) -> bool:
        target = offset_square(self._state.cursor, dfile, drank)
        if target is None:
            return False
        self._state.cursor = target
        return True

    def _on_enter(self) -> bool:
        if self._lock_on_game_over and self._board.is_terminal():
            self._state.selection = None
            self._set_message(t().game_over)
            return True

        selected = self._state.selection
        if selected is None:
            return self._select()

        self._state.selection = None
        move = find_move(
            self._board.legal_moves_for_current_side(), selected, self._state.cursor
        )
        if move is None:
            _LOGGER.debug(
                "Rejected %s-%s", square_name(selected), square_name(self._state.cursor)
            )
            self._set_message(t().invalid_move)
            return True

        mover = self._board.side_to_move
        self._board.apply(move)
        self._set_message(t().moved.format(move=move.uci()))
        self._emit_move(move, mover, by_opponent=False)

        if not self._board.is_terminal():
            self._opponent_reply()
        return True

    def _select(self) -> bool:
        cursor = self._state.cursor
        piece = self._board.piece_at(cursor)
        if piece is None or piece.side != self._board.side_to_move:
            return False
        self._state.selection = cursor
        self._set_message(t().piece_selected)
        return True

    def _opponent_reply(self) -> None:
        mover = self._board.side_to_move
        move = self._opponent.select_and_apply(self._board)
        if move is None:
            self._set_message(t().no_legal_moves)
            return
        self._set_message(t().ai_moved.format(move=move.uci()))
        self._emit_move(move, mover, by_opponent=True)

    def _set_message(self, text: str) -> None:
        self._state.message = text
        for cb in self.events.on_message:
            cb(text)

    def _emit_move(self, move: chess.Move, mover: Side, by_opponent: bool) -> None:
        for cb in self.events.on_move:
            cb(move, mover, by_opponent)
