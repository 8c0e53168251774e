"""Tests for the curses front end (no real terminal required)."""

from __future__ import annotations

import curses
from typing import Any

import pytest

from tuichess.core.board import BoardAdapter
from tuichess.core.enums import Side
from tuichess.game.controller import SelectionController
from tuichess.game.interfaces import InputKey
from tuichess.game.player import RandomOpponent
from tuichess.game.state import InteractionState
from tuichess.settings import AppSettings
from tuichess.ui import terminal
from tuichess.ui.projection import Highlight, build_frame, project
from tuichess.ui.terminal import (
    BOARD_LEFT,
    BOARD_TOP,
    CursesInput,
    CursesRenderer,
    decode_key,
    run_terminal,
)
from tuichess.ui.theme import BoardTheme


class _FakeWindow:
    """Minimal stand-in for a curses window."""

    def __init__(
        self, keys: list[int] | None = None, size: tuple[int, int] = (24, 80)
    ) -> None:
        self._keys = list(keys or [])
        self._size = size
        self.timeouts: list[int] = []
        self.writes: list[tuple[int, int, str, int]] = []
        self.keypad_enabled = False
        self.refreshed = 0
        self.fail_at: set[tuple[int, int]] = set()

    def keypad(self, flag: bool) -> None:
        self.keypad_enabled = flag

    def timeout(self, ms: int) -> None:
        self.timeouts.append(ms)

    def getch(self) -> int:
        return self._keys.pop(0) if self._keys else -1

    def getmaxyx(self) -> tuple[int, int]:
        return self._size

    def erase(self) -> None:
        self.writes.clear()

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        if (y, x) in self.fail_at:
            raise curses.error("addwstr() returned ERR")
        self.writes.append((y, x, text, attr))

    def refresh(self) -> None:
        self.refreshed += 1

    def text_at(self, y: int, x: int) -> str:
        for wy, wx, text, _ in self.writes:
            if (wy, wx) == (y, x):
                return text
        raise AssertionError(f"nothing written at {(y, x)}")


def _controller() -> SelectionController:
    return SelectionController(BoardAdapter(), RandomOpponent(seed=0))


@pytest.fixture
def plain_renderer(monkeypatch: pytest.MonkeyPatch) -> Any:
    monkeypatch.setattr(terminal.curses, "has_colors", lambda: False)

    def _make(window: _FakeWindow) -> CursesRenderer:
        return CursesRenderer(window, BoardTheme.default())  # type: ignore[arg-type]

    return _make


class TestDecodeKey:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (curses.KEY_UP, InputKey.UP),
            (curses.KEY_DOWN, InputKey.DOWN),
            (curses.KEY_LEFT, InputKey.LEFT),
            (curses.KEY_RIGHT, InputKey.RIGHT),
            (ord("k"), InputKey.UP),
            (ord("j"), InputKey.DOWN),
            (ord("h"), InputKey.LEFT),
            (ord("l"), InputKey.RIGHT),
            (ord("\n"), InputKey.ENTER),
            (ord("\r"), InputKey.ENTER),
            (curses.KEY_ENTER, InputKey.ENTER),
            (ord(" "), InputKey.ENTER),
            (27, InputKey.ESCAPE),
            (ord("q"), InputKey.QUIT),
            (ord("Q"), InputKey.QUIT),
            (ord("x"), InputKey.OTHER),
            (curses.KEY_F1, InputKey.OTHER),
        ],
    )
    def test_mapping(self, code: int, expected: InputKey) -> None:
        assert decode_key(code) == expected

    def test_timeout_is_no_event(self) -> None:
        assert decode_key(-1) is None

    def test_resize_is_no_event(self) -> None:
        assert decode_key(curses.KEY_RESIZE) is None


class TestCursesInput:
    def test_poll_sets_timeout_and_decodes(self) -> None:
        window = _FakeWindow([curses.KEY_UP])
        source = CursesInput(window)  # type: ignore[arg-type]
        assert window.keypad_enabled
        assert source.poll(100) == InputKey.UP
        assert source.poll(100) is None
        assert window.timeouts == [100, 100]


class TestCursesRenderer:
    def test_draws_status_board_and_message(self, plain_renderer: Any) -> None:
        window = _FakeWindow()
        ctrl = _controller()
        ctrl.handle(InputKey.ESCAPE)

        plain_renderer(window).render(build_frame(ctrl))

        assert window.text_at(0, 0) == "White's turn"
        assert window.text_at(BOARD_TOP + 7, BOARD_LEFT) == "[♖]"
        assert window.text_at(BOARD_TOP, BOARD_LEFT) == " ♜ "
        assert window.text_at(BOARD_TOP + 7, 0) == "1"
        assert any("Selection cleared" in text for _, _, text, _ in window.writes)
        assert window.refreshed == 1

    def test_highlighted_squares_use_reverse_without_colors(
        self, plain_renderer: Any
    ) -> None:
        window = _FakeWindow()
        plain_renderer(window).render(build_frame(_controller()))
        attrs = {(y, x): attr for y, x, _, attr in window.writes}
        assert attrs[(BOARD_TOP + 7, BOARD_LEFT)] == curses.A_REVERSE
        assert attrs[(BOARD_TOP + 7, BOARD_LEFT + 3)] == 0

    def test_small_terminal(self, plain_renderer: Any) -> None:
        window = _FakeWindow(size=(5, 20))
        plain_renderer(window).render(build_frame(_controller()))
        assert window.writes == [(0, 0, "Terminal too small", 0)]

    def test_clipped_writes_are_tolerated(self, plain_renderer: Any) -> None:
        window = _FakeWindow()
        window.fail_at.add((0, 0))
        plain_renderer(window).render(build_frame(_controller()))
        assert window.refreshed == 1


class TestColorPairs:
    def test_pair_ids_unique(self) -> None:
        ids = {
            terminal._pair_id(bg, side)
            for bg in terminal._BACKGROUNDS
            for side in Side
        }
        assert len(ids) == len(terminal._BACKGROUNDS) * 2
        assert terminal._PAIR_FRAME not in ids

    def test_background_of(self) -> None:
        state = InteractionState(cursor=12, selection=8)
        projection = project(state, BoardAdapter())
        assert terminal._background_of(projection[12]) == "cursor"
        assert terminal._background_of(projection[8]) == "selected"
        assert projection[0].highlight == Highlight.NONE
        assert terminal._background_of(projection[0]) == "dark"
        assert terminal._background_of(projection[7]) == "light"


class TestRunTerminal:
    def test_returns_zero_after_wrapper(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[object] = []
        monkeypatch.setattr(terminal.locale, "setlocale", lambda *a: "C")
        monkeypatch.setattr(
            terminal.curses, "wrapper", lambda fn: calls.append(fn) or 3
        )
        assert run_terminal(_controller(), AppSettings()) == 0
        assert len(calls) == 1

    def test_errors_propagate(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _boom(fn: object) -> int:
            raise RuntimeError("draw failed")

        monkeypatch.setattr(terminal.locale, "setlocale", lambda *a: "C")
        monkeypatch.setattr(terminal.curses, "wrapper", _boom)
        with pytest.raises(RuntimeError, match="draw failed"):
            run_terminal(_controller(), AppSettings())
