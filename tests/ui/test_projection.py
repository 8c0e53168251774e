"""Tests for the renderer-agnostic board projection."""

from tuichess.core.board import BoardAdapter
from tuichess.core.enums import PieceKind, Side
from tuichess.core.types import A1, A8, E2, E4, H1, parse_square
from tuichess.game.controller import SelectionController
from tuichess.game.interfaces import InputKey
from tuichess.game.player import RandomOpponent
from tuichess.game.state import InteractionState
from tuichess.ui.projection import (
    EMPTY_GLYPH,
    Highlight,
    board_lines,
    build_frame,
    cell_text,
    project,
    render_text,
)


def _armed_state() -> InteractionState:
    return InteractionState(cursor=E4, selection=E2)


class TestProject:
    def test_sixty_four_squares(self) -> None:
        projection = project(InteractionState(), BoardAdapter())
        assert len(projection) == 64
        assert [v.square for v in projection.squares] == list(range(64))

    def test_cursor_highlight(self) -> None:
        projection = project(InteractionState(), BoardAdapter())
        assert projection[A1].highlight == Highlight.CURSOR
        highlighted = [v for v in projection.squares if v.highlight != Highlight.NONE]
        assert len(highlighted) == 1

    def test_selected_and_cursor(self) -> None:
        projection = project(_armed_state(), BoardAdapter())
        assert projection[E2].highlight == Highlight.SELECTED
        assert projection[E2].selected
        assert projection[E4].highlight == Highlight.CURSOR
        assert not projection[E4].selected

    def test_cursor_wins_over_selection(self) -> None:
        state = InteractionState(cursor=E2, selection=E2)
        view = project(state, BoardAdapter())[E2]
        assert view.highlight == Highlight.CURSOR
        assert view.selected

    def test_square_colors_independent_of_state(self) -> None:
        a = project(InteractionState(), BoardAdapter())
        b = project(_armed_state(), BoardAdapter())
        assert [v.light for v in a.squares] == [v.light for v in b.squares]
        assert not a[A1].light
        assert a[H1].light

    def test_pieces_and_glyphs(self) -> None:
        projection = project(InteractionState(), BoardAdapter())
        rook = projection[A1]
        assert rook.piece is not None
        assert (rook.piece.kind, rook.piece.side) == (PieceKind.ROOK, Side.WHITE)
        assert rook.glyph == "♖"
        assert projection[A8].glyph == "♜"
        assert projection[E4].piece is None
        assert projection[E4].glyph == EMPTY_GLYPH

    def test_ascii_glyphs(self) -> None:
        projection = project(InteractionState(), BoardAdapter(), unicode=False)
        assert projection[A1].glyph == "R"
        assert projection[A8].glyph == "r"

    def test_rows_top_down(self) -> None:
        rows = list(project(InteractionState(), BoardAdapter()).rows())
        assert [rank for rank, _ in rows] == list(range(7, -1, -1))
        first_rank, first_row = rows[0]
        assert first_row[0].square == A8
        assert rows[-1][1][7].square == H1


class TestText:
    def test_cell_text(self) -> None:
        projection = project(_armed_state(), BoardAdapter(), unicode=False)
        assert cell_text(projection[E2]) == "(P)"
        assert cell_text(projection[E4]) == "[.]"
        assert cell_text(projection[A1]) == " R "

    def test_board_lines(self) -> None:
        lines = board_lines(project(InteractionState(), BoardAdapter(), unicode=False))
        assert lines[0] == "   A  B  C  D  E  F  G  H "
        assert lines[1] == "8  r  n  b  q  k  b  n  r "
        assert lines[8] == "1 [R] N  B  Q  K  B  N  R "
        assert len(lines) == 9

    def test_render_text_includes_status_and_message(self) -> None:
        ctrl = SelectionController(BoardAdapter(), RandomOpponent(seed=1))
        ctrl.handle(InputKey.ESCAPE)
        text = render_text(build_frame(ctrl))
        lines = text.splitlines()
        assert lines[0] == "White's turn"
        assert lines[-1] == "Selection cleared"


class TestBuildFrame:
    def test_initial_frame(self) -> None:
        ctrl = SelectionController(BoardAdapter(), RandomOpponent(seed=1))
        frame = build_frame(ctrl)
        assert frame.game_status == "White's turn"
        assert frame.message == ""
        assert frame.projection[A1].highlight == Highlight.CURSOR

    def test_frame_tracks_selection(self) -> None:
        ctrl = SelectionController(BoardAdapter(), RandomOpponent(seed=1))
        for key in (InputKey.RIGHT,) * 4 + (InputKey.UP, InputKey.ENTER, InputKey.UP):
            ctrl.handle(key)
        frame = build_frame(ctrl, unicode=False)
        assert frame.message == "Piece selected"
        assert frame.projection[E2].highlight == Highlight.SELECTED
        assert frame.projection[parse_square("e3")].highlight == Highlight.CURSOR

    def test_building_a_frame_does_not_mutate(self) -> None:
        ctrl = SelectionController(BoardAdapter(), RandomOpponent(seed=1))
        before = (ctrl.board.fen(), ctrl.state.cursor, ctrl.state.selection)
        build_frame(ctrl)
        assert (ctrl.board.fen(), ctrl.state.cursor, ctrl.state.selection) == before
