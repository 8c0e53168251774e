"""Internationalisation strings for tuichess.

Usage::

    from tuichess.i18n import t, set_language

    set_language("Russian")
    print(t().invalid_move)          # "Недопустимый ход!"
    print(t().turn.format(side=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Action messages ──────────────────────────────────────────────────
    piece_selected: str
    selection_cleared: str
    invalid_move: str
    moved: str  # "Moved: {move}"
    ai_moved: str  # "AI moved: {move}"
    no_legal_moves: str
    game_over: str

    # ── Game status ──────────────────────────────────────────────────────
    checkmate: str  # "Checkmate! {winner} wins!"
    stalemate: str
    in_check: str  # "{side} is in check!"
    turn: str  # "{side}'s turn"
    color_white: str
    color_black: str

    # ── Front ends ───────────────────────────────────────────────────────
    app_title: str
    status_title: str
    help_line: str
    terminal_too_small: str


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    piece_selected="Piece selected",
    selection_cleared="Selection cleared",
    invalid_move="Invalid move!",
    moved="Moved: {move}",
    ai_moved="AI moved: {move}",
    no_legal_moves="No legal moves available",
    game_over="Game over",
    checkmate="Checkmate! {winner} wins!",
    stalemate="Stalemate!",
    in_check="{side} is in check!",
    turn="{side}'s turn",
    color_white="White",
    color_black="Black",
    app_title="tuichess",
    status_title="Status",
    help_line="Arrows/hjkl: move  Enter/Space: select  Esc: cancel  q: quit",
    terminal_too_small="Terminal too small",
)

_RU = Strings(
    piece_selected="Фигура выбрана",
    selection_cleared="Выбор отменён",
    invalid_move="Недопустимый ход!",
    moved="Ход: {move}",
    ai_moved="Ход ИИ: {move}",
    no_legal_moves="Нет допустимых ходов",
    game_over="Игра окончена",
    checkmate="Мат! {winner} победили!",
    stalemate="Пат!",
    in_check="{side}: шах!",
    turn="Ходят {side}",
    color_white="Белые",
    color_black="Чёрные",
    app_title="tuichess",
    status_title="Статус",
    help_line="Стрелки/hjkl: курсор  Enter/Пробел: выбор  Esc: отмена  q: выход",
    terminal_too_small="Слишком маленький терминал",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
