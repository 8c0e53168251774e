"""Game status text derived from the board's terminal-state queries."""

from __future__ import annotations

from tuichess.core.board import IBoardAdapter
from tuichess.core.enums import Side
from tuichess.i18n import t


def side_name(side: Side) -> str:
    s = t()
    return s.color_white if side == Side.WHITE else s.color_black


def describe(board: IBoardAdapter, last_action_message: str = "") -> str:
    """Return the game status line for *board*.

    Priority: checkmate, stalemate, check, plain turn.  The status is
    independent of *last_action_message*, which front ends show in a
    separate region; it is accepted so callers can pass both together.
    """
    s = t()
    side = board.side_to_move
    if board.is_checkmate():
        return s.checkmate.format(winner=side_name(side.opposite))
    if board.is_stalemate():
        return s.stalemate
    if board.is_in_check():
        return s.in_check.format(side=side_name(side))
    return s.turn.format(side=side_name(side))
