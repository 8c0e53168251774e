"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from tuichess.core.enums import PieceKind, Side

_UNICODE: dict[tuple[Side, PieceKind], str] = {
    (Side.WHITE, PieceKind.PAWN): "♙",
    (Side.WHITE, PieceKind.KNIGHT): "♘",
    (Side.WHITE, PieceKind.BISHOP): "♗",
    (Side.WHITE, PieceKind.ROOK): "♖",
    (Side.WHITE, PieceKind.QUEEN): "♕",
    (Side.WHITE, PieceKind.KING): "♔",
    (Side.BLACK, PieceKind.PAWN): "♟",
    (Side.BLACK, PieceKind.KNIGHT): "♞",
    (Side.BLACK, PieceKind.BISHOP): "♝",
    (Side.BLACK, PieceKind.ROOK): "♜",
    (Side.BLACK, PieceKind.QUEEN): "♛",
    (Side.BLACK, PieceKind.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Occupant of a square. Empty squares are represented by ``None``."""

    kind: PieceKind
    side: Side

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return chess.Piece(self.kind, self.side.to_chess()).symbol()

    @classmethod
    def from_chess(cls, piece: chess.Piece) -> Piece:
        return cls(PieceKind(piece.piece_type), Side.from_chess(piece.color))

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.side, self.kind)]
