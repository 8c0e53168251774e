"""Terminal front end built on curses: key decoding, drawing, start-up."""

from __future__ import annotations

import curses
import locale
import logging
import os
from typing import TYPE_CHECKING

from tuichess.core.enums import Side
from tuichess.core.types import FILE_NAMES
from tuichess.game.interfaces import InputKey
from tuichess.i18n import t
from tuichess.ui.loop import IInputSource, IRenderer, run_loop
from tuichess.ui.projection import Frame, Highlight, SquareView, cell_text
from tuichess.ui.theme import BoardTheme, rgb_to_xterm256, theme_by_name

if TYPE_CHECKING:
    from tuichess.game.controller import SelectionController
    from tuichess.settings import AppSettings

_LOGGER = logging.getLogger(__name__)

_ESC = 27
_NO_KEY = -1

_KEYMAP: dict[int, InputKey] = {
    curses.KEY_UP: InputKey.UP,
    curses.KEY_DOWN: InputKey.DOWN,
    curses.KEY_LEFT: InputKey.LEFT,
    curses.KEY_RIGHT: InputKey.RIGHT,
    ord("k"): InputKey.UP,
    ord("j"): InputKey.DOWN,
    ord("h"): InputKey.LEFT,
    ord("l"): InputKey.RIGHT,
    curses.KEY_ENTER: InputKey.ENTER,
    ord("\n"): InputKey.ENTER,
    ord("\r"): InputKey.ENTER,
    ord(" "): InputKey.ENTER,
    _ESC: InputKey.ESCAPE,
    ord("q"): InputKey.QUIT,
    ord("Q"): InputKey.QUIT,
}

CELL_W = 3  # characters per square
BOARD_TOP = 2  # first board row on screen
BOARD_LEFT = 2  # first board column on screen, after the rank label
MIN_HEIGHT = BOARD_TOP + 8 + 5
MIN_WIDTH = BOARD_LEFT + 8 * CELL_W + 2

# Colour pair ids: one per (background, piece side), plus the frame text.
_BACKGROUNDS = ("light", "dark", "cursor", "selected")
_PAIR_FRAME = 1


def decode_key(code: int) -> InputKey | None:
    """Map a ``getch`` code to an :class:`InputKey`; ``None`` on timeout."""
    if code in (_NO_KEY, curses.KEY_RESIZE):
        return None
    return _KEYMAP.get(code, InputKey.OTHER)


def _pair_id(background: str, side: Side) -> int:
    return 2 + _BACKGROUNDS.index(background) * 2 + int(side)


def _background_of(view: SquareView) -> str:
    if view.highlight == Highlight.CURSOR:
        return "cursor"
    if view.highlight == Highlight.SELECTED:
        return "selected"
    return "light" if view.light else "dark"


class CursesInput(IInputSource):
    """Reads keys from a curses window with a bounded wait."""

    def __init__(self, window: curses.window) -> None:
        self._window = window
        self._window.keypad(True)

    def poll(self, timeout_ms: int) -> InputKey | None:
        self._window.timeout(timeout_ms)
        return decode_key(self._window.getch())


class CursesRenderer(IRenderer):
    """Draws a :class:`Frame`: status title, coloured board, message box."""

    def __init__(self, window: curses.window, theme: BoardTheme) -> None:
        self._window = window
        self._theme = theme
        self._colors = curses.has_colors()
        if self._colors:
            self._init_colors()

    def _init_colors(self) -> None:
        curses.start_color()
        curses.use_default_colors()
        theme = self._theme
        if curses.COLORS >= 256:
            bgs = {
                "light": rgb_to_xterm256(theme.light_square),
                "dark": rgb_to_xterm256(theme.dark_square),
                "cursor": rgb_to_xterm256(theme.cursor),
                "selected": rgb_to_xterm256(theme.selected),
            }
            fgs = {
                Side.WHITE: rgb_to_xterm256(theme.white_piece),
                Side.BLACK: rgb_to_xterm256(theme.black_piece),
            }
        else:
            bgs = {
                "light": curses.COLOR_WHITE,
                "dark": curses.COLOR_BLUE,
                "cursor": curses.COLOR_CYAN,
                "selected": curses.COLOR_MAGENTA,
            }
            fgs = {Side.WHITE: curses.COLOR_YELLOW, Side.BLACK: curses.COLOR_BLACK}
        curses.init_pair(_PAIR_FRAME, curses.COLOR_CYAN, -1)
        for background, bg in bgs.items():
            for side, fg in fgs.items():
                curses.init_pair(_pair_id(background, side), fg, bg)

    def _addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        try:
            self._window.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen.
            _LOGGER.debug("addstr clipped at (%d, %d)", y, x)

    def _square_attr(self, view: SquareView) -> int:
        if not self._colors:
            return curses.A_REVERSE if view.highlight != Highlight.NONE else 0
        side = view.piece.side if view.piece is not None else Side.BLACK
        return curses.color_pair(_pair_id(_background_of(view), side)) | curses.A_BOLD

    def render(self, frame: Frame) -> None:
        win = self._window
        win.erase()
        height, width = win.getmaxyx()
        if height < MIN_HEIGHT or width < MIN_WIDTH:
            self._addstr(0, 0, t().terminal_too_small[: max(width - 1, 0)])
            win.refresh()
            return

        frame_attr = curses.color_pair(_PAIR_FRAME) if self._colors else 0
        self._addstr(0, 0, frame.game_status[: width - 1], curses.A_BOLD)

        header = "".join(f" {name.upper()} " for name in FILE_NAMES)
        self._addstr(BOARD_TOP - 1, BOARD_LEFT, header, frame_attr)
        for row, (rank, views) in enumerate(frame.projection.rows()):
            y = BOARD_TOP + row
            self._addstr(y, 0, str(rank + 1), frame_attr)
            for col, view in enumerate(views):
                x = BOARD_LEFT + col * CELL_W
                self._addstr(y, x, cell_text(view), self._square_attr(view))

        box_top = BOARD_TOP + 9
        box_width = min(width - 1, max(MIN_WIDTH, len(frame.message) + 4))
        self._draw_box(box_top, box_width, t().status_title, frame.message)
        self._addstr(box_top + 3, 0, t().help_line[: width - 1], curses.A_DIM)
        win.refresh()

    def _draw_box(self, top: int, box_width: int, title: str, body: str) -> None:
        inner = box_width - 2
        self._addstr(top, 0, "┌" + title.ljust(inner, "─")[:inner] + "┐")
        self._addstr(top + 1, 0, "│" + body[:inner].ljust(inner) + "│")
        self._addstr(top + 2, 0, "└" + "─" * inner + "┘")


def _hide_cursor() -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        _LOGGER.debug("Terminal cannot hide the cursor")


def run_terminal(controller: SelectionController, settings: AppSettings) -> int:
    """Run the curses UI until the user quits; returns the exit code.

    ``curses.wrapper`` restores the terminal on every exit path, including
    exceptions, which are re-raised afterwards.
    """
    locale.setlocale(locale.LC_ALL, "")
    os.environ.setdefault("ESCDELAY", "25")
    theme = theme_by_name(settings.board_theme)

    def _main(stdscr: curses.window) -> int:
        _hide_cursor()
        return run_loop(
            controller,
            CursesInput(stdscr),
            CursesRenderer(stdscr, theme),
            poll_timeout_ms=settings.poll_interval_ms,
            unicode=settings.unicode_pieces,
        )

    handled = curses.wrapper(_main)
    _LOGGER.info("Terminal session ended after %d keys", handled)
    return 0
