"""Core domain layer: board values and the python-chess adapter.

Quick start::

    from tuichess.core import BoardAdapter, parse_square

    board = BoardAdapter()
    for move in board.legal_moves_for_current_side():
        print(move.uci())
    print(board.piece_at(parse_square("e2")))
"""

from tuichess.core.board import (
    STARTING_FEN,
    BoardAdapter,
    IBoardAdapter,
    IllegalMoveError,
)
from tuichess.core.enums import PieceKind, Side
from tuichess.core.piece import Piece
from tuichess.core.types import (
    Square,
    file_of,
    is_light_square,
    make_square,
    offset_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types / helpers
    "Square",
    "file_of",
    "is_light_square",
    "make_square",
    "offset_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "BoardAdapter",
    "IBoardAdapter",
    "IllegalMoveError",
    "Piece",
    "STARTING_FEN",
]
