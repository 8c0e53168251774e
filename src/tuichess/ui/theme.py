"""Visual theme constants shared by the terminal and Qt front ends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

RGB: TypeAlias = tuple[int, int, int]


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard (0–255 RGB triples)."""

    light_square: RGB
    dark_square: RGB
    cursor: RGB  # square under the cursor
    selected: RGB  # selected piece origin
    white_piece: RGB
    black_piece: RGB
    frame_text: RGB  # coordinates, titles

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=(240, 217, 181),  # tan
            dark_square=(181, 136, 99),  # brown
            cursor=(95, 175, 215),  # blue
            selected=(215, 215, 95),  # yellow
            white_piece=(255, 255, 255),
            black_piece=(0, 0, 0),
            frame_text=(224, 224, 224),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=(222, 227, 230),
            dark_square=(140, 162, 173),
            cursor=(95, 175, 95),
            selected=(215, 215, 95),
            white_piece=(255, 255, 255),
            black_piece=(0, 0, 0),
            frame_text=(224, 224, 224),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=(236, 238, 220),
            dark_square=(112, 149, 120),
            cursor=(95, 135, 215),
            selected=(215, 215, 95),
            white_piece=(255, 255, 255),
            black_piece=(0, 0, 0),
            frame_text=(224, 224, 224),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
}


def theme_by_name(name: str) -> BoardTheme:
    """Look up a preset. Unknown names fall back to Classic."""
    return THEMES.get(name, BoardTheme.default())


def rgb_to_xterm256(rgb: RGB) -> int:
    """Nearest colour index in the xterm 6×6×6 colour cube (16–231)."""
    r, g, b = (round(c / 255 * 5) for c in rgb)
    return 16 + 36 * r + 6 * g + b
