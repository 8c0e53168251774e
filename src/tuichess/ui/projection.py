"""Renderer-agnostic view of the board and interaction state.

Front ends never read the controller directly; they receive a
:class:`Frame` built by :func:`build_frame` once per loop iteration.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from tuichess.core.piece import Piece
from tuichess.core.types import FILE_NAMES, Square, is_light_square, make_square
from tuichess.game.status import describe

if TYPE_CHECKING:
    from tuichess.core.board import IBoardAdapter
    from tuichess.game.controller import SelectionController
    from tuichess.game.state import InteractionState

EMPTY_GLYPH = "."


class Highlight(IntEnum):
    NONE = 0
    CURSOR = 1
    SELECTED = 2


@dataclass(frozen=True, slots=True)
class SquareView:
    """Everything a renderer needs to draw one square."""

    square: Square
    piece: Piece | None
    glyph: str
    highlight: Highlight
    light: bool
    selected: bool = False


@dataclass(frozen=True, slots=True)
class BoardProjection:
    """64 square views indexed by square number (a1=0 … h8=63)."""

    squares: tuple[SquareView, ...]

    def __getitem__(self, sq: Square) -> SquareView:
        return self.squares[sq]

    def __len__(self) -> int:
        return len(self.squares)

    def rows(self) -> Iterator[tuple[int, list[SquareView]]]:
        """Yield ``(rank, views)`` from rank 8 down to rank 1, files a→h."""
        for rank in range(7, -1, -1):
            yield rank, [self.squares[make_square(f, rank)] for f in range(8)]


@dataclass(frozen=True, slots=True)
class Frame:
    """One render pass: board plus the two status strings."""

    projection: BoardProjection
    game_status: str
    message: str


def glyph_for(piece: Piece | None, unicode: bool = True) -> str:
    if piece is None:
        return EMPTY_GLYPH
    return piece.symbol if unicode else str(piece)


def project(
    state: InteractionState, board: IBoardAdapter, *, unicode: bool = True
) -> BoardProjection:
    views = []
    for sq in range(64):
        piece = board.piece_at(sq)
        selected = state.selection == sq
        if state.cursor == sq:
            highlight = Highlight.CURSOR
        elif selected:
            highlight = Highlight.SELECTED
        else:
            highlight = Highlight.NONE
        views.append(
            SquareView(
                square=sq,
                piece=piece,
                glyph=glyph_for(piece, unicode),
                highlight=highlight,
                light=is_light_square(sq),
                selected=selected,
            )
        )
    return BoardProjection(tuple(views))


def build_frame(controller: SelectionController, *, unicode: bool = True) -> Frame:
    state = controller.state
    board = controller.board
    return Frame(
        projection=project(state, board, unicode=unicode),
        game_status=describe(board, state.message),
        message=state.message,
    )


_BRACKETS: dict[Highlight, tuple[str, str]] = {
    Highlight.NONE: (" ", " "),
    Highlight.CURSOR: ("[", "]"),
    Highlight.SELECTED: ("(", ")"),
}


def cell_text(view: SquareView) -> str:
    """Three-character cell: ``[x]`` under the cursor, ``(x)`` when selected."""
    left, right = _BRACKETS[view.highlight]
    return f"{left}{view.glyph}{right}"


def board_lines(projection: BoardProjection) -> list[str]:
    """Plain-text board: file header, then ranks 8→1."""
    lines = ["   " + "  ".join(FILE_NAMES.upper()) + " "]
    for rank, views in projection.rows():
        lines.append(f"{rank + 1} " + "".join(cell_text(v) for v in views))
    return lines


def render_text(frame: Frame) -> str:
    """Whole frame as text: status line, board, action message."""
    lines = [frame.game_status, *board_lines(frame.projection), frame.message]
    return "\n".join(lines)
