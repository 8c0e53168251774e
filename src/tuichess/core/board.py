"""Board snapshot adapter over python-chess.

Follows Dependency Inversion: the game layer depends on
:class:`IBoardAdapter`, not on ``chess.Board``.  Any rules authority that
can enumerate legal moves, apply them and answer terminal-state queries
can stand in for :class:`BoardAdapter`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

import chess

from tuichess.core.enums import Side
from tuichess.core.piece import Piece
from tuichess.core.types import Square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = chess.STARTING_FEN


class IllegalMoveError(ValueError):
    """Raised when a move outside the legal set is applied."""


class IBoardAdapter(ABC):
    """Queries and mutations the interaction core needs from the rules engine."""

    @property
    @abstractmethod
    def side_to_move(self) -> Side: ...

    @abstractmethod
    def legal_moves_for_current_side(self) -> Sequence[chess.Move]:
        """Every legal move for the side to move. Empty in terminal positions."""

    @abstractmethod
    def piece_at(self, square: Square) -> Piece | None:
        """Occupant of *square*, ``None`` when empty."""

    @abstractmethod
    def apply(self, move: chess.Move) -> None:
        """Play *move*; raises :class:`IllegalMoveError` if it is not legal."""

    @abstractmethod
    def is_checkmate(self) -> bool: ...

    @abstractmethod
    def is_stalemate(self) -> bool: ...

    @abstractmethod
    def is_in_check(self) -> bool: ...

    def is_terminal(self) -> bool:
        """Checkmate or stalemate: no further moves are possible."""
        return self.is_checkmate() or self.is_stalemate()


class BoardAdapter(IBoardAdapter):
    """:class:`IBoardAdapter` backed by a ``chess.Board``.

    Args:
        fen: Starting position. ``None`` means the standard initial position.

    Raises:
        ValueError: If *fen* cannot be parsed.
    """

    __slots__ = ("_board",)

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board() if fen is None else chess.Board(fen)
        _LOGGER.debug("Board set up from %s", "initial position" if fen is None else fen)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Side:
        return Side.from_chess(self._board.turn)

    @property
    def ply(self) -> int:
        """Half-moves played since the position was set up."""
        return len(self._board.move_stack)

    def legal_moves_for_current_side(self) -> list[chess.Move]:
        return list(self._board.legal_moves)

    def piece_at(self, square: Square) -> Piece | None:
        piece = self._board.piece_at(square)
        if piece is None:
            return None
        return Piece.from_chess(piece)

    def is_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def is_stalemate(self) -> bool:
        return self._board.is_stalemate()

    def is_in_check(self) -> bool:
        return self._board.is_check()

    def fen(self) -> str:
        return self._board.fen()

    def board_fen(self) -> str:
        """Piece placement only (first FEN field)."""
        return self._board.board_fen()

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply(self, move: chess.Move) -> None:
        if not self._board.is_legal(move):
            raise IllegalMoveError(f"Illegal move {move.uci()} in {self.fen()}")
        self._board.push(move)

    def __repr__(self) -> str:
        return f"BoardAdapter({self.fen()!r})"
