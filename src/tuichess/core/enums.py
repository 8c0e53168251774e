"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

import chess


class Side(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @classmethod
    def from_chess(cls, color: chess.Color) -> Side:
        """Convert a python-chess color (``True`` is white)."""
        return cls.WHITE if color == chess.WHITE else cls.BLACK

    def to_chess(self) -> chess.Color:
        return chess.WHITE if self is Side.WHITE else chess.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds; values match python-chess piece types."""

    PAWN = chess.PAWN
    KNIGHT = chess.KNIGHT
    BISHOP = chess.BISHOP
    ROOK = chess.ROOK
    QUEEN = chess.QUEEN
    KING = chess.KING
