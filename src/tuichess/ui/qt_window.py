"""Qt front end: paints the same :class:`Frame` the terminal UI draws."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from PyQt6.QtCore import QRectF, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QApplication, QMainWindow, QSizePolicy, QWidget

from tuichess.core.enums import Side
from tuichess.core.types import FILE_NAMES, file_of
from tuichess.game.interfaces import InputKey
from tuichess.i18n import t
from tuichess.ui.projection import Frame, Highlight, SquareView, build_frame
from tuichess.ui.theme import BoardTheme, theme_by_name

if TYPE_CHECKING:
    from tuichess.game.controller import SelectionController
    from tuichess.settings import AppSettings

_LOGGER = logging.getLogger(__name__)

_KEYMAP: dict[int, InputKey] = {
    Qt.Key.Key_Up.value: InputKey.UP,
    Qt.Key.Key_Down.value: InputKey.DOWN,
    Qt.Key.Key_Left.value: InputKey.LEFT,
    Qt.Key.Key_Right.value: InputKey.RIGHT,
    Qt.Key.Key_K.value: InputKey.UP,
    Qt.Key.Key_J.value: InputKey.DOWN,
    Qt.Key.Key_H.value: InputKey.LEFT,
    Qt.Key.Key_L.value: InputKey.RIGHT,
    Qt.Key.Key_Return.value: InputKey.ENTER,
    Qt.Key.Key_Enter.value: InputKey.ENTER,
    Qt.Key.Key_Space.value: InputKey.ENTER,
    Qt.Key.Key_Escape.value: InputKey.ESCAPE,
    Qt.Key.Key_Q.value: InputKey.QUIT,
}


def decode_qt_key(key: int) -> InputKey:
    return _KEYMAP.get(key, InputKey.OTHER)


def _qcolor(rgb: tuple[int, int, int]) -> QColor:
    return QColor(*rgb)


class BoardWidget(QWidget):
    """Keyboard-driven board.

    Signals:
        quit_requested(): Emitted on the QUIT key.
    """

    quit_requested = pyqtSignal()

    TILE = 56  # px per square
    _MARGIN = 24  # room for coordinates
    _STATUS_H = 28

    def __init__(
        self,
        controller: SelectionController,
        theme: BoardTheme | None = None,
        *,
        unicode: bool = True,
        poll_interval_ms: int = 100,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = theme or BoardTheme.default()
        self._unicode = unicode

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        board_px = 8 * self.TILE
        self.setFixedSize(
            board_px + 2 * self._MARGIN,
            board_px + 2 * self._MARGIN + 2 * self._STATUS_H,
        )

        # Periodic repaint even without input, like the terminal poll loop.
        self._timer = QTimer(self)
        self._timer.setInterval(poll_interval_ms)
        self._timer.timeout.connect(self.update)
        self._timer.start()

    def frame(self) -> Frame:
        return build_frame(self._controller, unicode=self._unicode)

    # ── Input ────────────────────────────────────────────────────────────

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is None:
            return
        key = decode_qt_key(event.key())
        if key == InputKey.QUIT:
            self.quit_requested.emit()
            return
        if self._controller.handle(key):
            self.update()

    # ── Painting ─────────────────────────────────────────────────────────

    def _square_rect(self, view: SquareView, row: int) -> QRectF:
        col = file_of(view.square)
        return QRectF(
            self._MARGIN + col * self.TILE,
            self._STATUS_H + self._MARGIN + row * self.TILE,
            self.TILE,
            self.TILE,
        )

    def _square_color(self, view: SquareView) -> QColor:
        theme = self._theme
        if view.highlight == Highlight.CURSOR:
            return _qcolor(theme.cursor)
        if view.highlight == Highlight.SELECTED:
            return _qcolor(theme.selected)
        return _qcolor(theme.light_square if view.light else theme.dark_square)

    def paintEvent(self, event: QPaintEvent | None) -> None:
        frame = self.frame()
        theme = self._theme
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.fillRect(0, 0, self.width(), self.height(), QColor(43, 43, 43))

        text_pen = QPen(_qcolor(theme.frame_text))
        p.setPen(text_pen)
        p.setFont(QFont("Sans", 12, QFont.Weight.Bold))
        p.drawText(
            QRectF(0, 0, self.width(), self._STATUS_H),
            Qt.AlignmentFlag.AlignCenter,
            frame.game_status,
        )

        piece_font = QFont("DejaVu Sans", int(self.TILE * 0.6))
        coord_font = QFont("Sans", 10)
        for row, (rank, views) in enumerate(frame.projection.rows()):
            for view in views:
                rect = self._square_rect(view, row)
                p.fillRect(rect, self._square_color(view))
                if view.selected and view.highlight == Highlight.CURSOR:
                    p.setPen(QPen(_qcolor(theme.selected), 4))
                    p.drawRect(rect.adjusted(2, 2, -2, -2))
                if view.piece is None:
                    continue
                color = (
                    theme.white_piece if view.piece.side == Side.WHITE else theme.black_piece
                )
                p.setPen(QPen(_qcolor(color)))
                p.setFont(piece_font)
                p.drawText(rect, Qt.AlignmentFlag.AlignCenter, view.glyph)

            p.setPen(text_pen)
            p.setFont(coord_font)
            label_rect = QRectF(
                0, self._STATUS_H + self._MARGIN + row * self.TILE, self._MARGIN, self.TILE
            )
            p.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, str(rank + 1))

        files_top = self._STATUS_H + self._MARGIN + 8 * self.TILE
        for col, name in enumerate(FILE_NAMES):
            rect = QRectF(self._MARGIN + col * self.TILE, files_top, self.TILE, self._MARGIN)
            p.drawText(rect, Qt.AlignmentFlag.AlignCenter, name.upper())

        p.setFont(QFont("Sans", 11))
        p.drawText(
            QRectF(0, self.height() - self._STATUS_H, self.width(), self._STATUS_H),
            Qt.AlignmentFlag.AlignCenter,
            frame.message,
        )
        p.end()


class ChessWindow(QMainWindow):
    """Top-level window hosting a :class:`BoardWidget`."""

    def __init__(
        self, controller: SelectionController, settings: AppSettings
    ) -> None:
        super().__init__()
        self.setWindowTitle(t().app_title)
        self._board = BoardWidget(
            controller,
            theme_by_name(settings.board_theme),
            unicode=settings.unicode_pieces,
            poll_interval_ms=settings.poll_interval_ms,
        )
        self._board.quit_requested.connect(self.close)
        self.setCentralWidget(self._board)
        self._board.setFocus()

    @property
    def board_widget(self) -> BoardWidget:
        return self._board


def run_gui(
    controller: SelectionController,
    settings: AppSettings,
    argv: list[str] | None = None,
) -> int:
    """Create and run the Qt application; returns its exit code."""
    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)
    app.setApplicationName(t().app_title)

    window = ChessWindow(controller, settings)
    window.show()
    _LOGGER.info("Qt window shown")

    return app.exec()
