"""Application settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tuichess.i18n import LANGUAGES
from tuichess.ui.loop import DEFAULT_POLL_TIMEOUT_MS
from tuichess.ui.theme import THEMES

_LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_file: str | None = None
    log_level: str = "WARNING"

    # Board
    board_theme: str = "Classic"
    unicode_pieces: bool = True

    # Game
    fen: str | None = None
    seed: int | None = None
    lock_on_game_over: bool = True

    # Front end
    gui: bool = False
    poll_interval_ms: int = DEFAULT_POLL_TIMEOUT_MS

    def normalize(self) -> AppSettings:
        """Replace unknown names with defaults. Returns ``self``."""
        if self.language not in LANGUAGES:
            _LOGGER.warning("Unknown language %r, using English", self.language)
            self.language = "English"
        if self.board_theme not in THEMES:
            _LOGGER.warning("Unknown board theme %r, using Classic", self.board_theme)
            self.board_theme = "Classic"
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            self.log_level = "WARNING"
        self.poll_interval_ms = max(1, self.poll_interval_ms)
        return self
