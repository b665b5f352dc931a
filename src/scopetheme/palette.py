"""16-color ANSI palettes used to turn sentinel colors into RGB."""

from __future__ import annotations

from dataclasses import dataclass

from scopetheme.model.color import Color


class Code:
    # Standard 8-color codes (0-7) + bright (8-15)
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    # Bright variants
    BBLACK = 8
    BRED = 9
    BGREEN = 10
    BYELLOW = 11
    BBLUE = 12
    BMAGENTA = 13
    BCYAN = 14
    BWHITE = 15


@dataclass(frozen=True)
class AnsiPalette:
    """A named table of 16 RGB triples, indexed by ANSI color code."""

    name: str
    colors: tuple[tuple[int, int, int], ...]

    def __post_init__(self) -> None:
        if len(self.colors) != 16:
            raise ValueError(f"Palette {self.name!r} needs 16 colors, got {len(self.colors)}")

    def rgb(self, index: int) -> tuple[int, int, int]:
        if not 0 <= index <= 15:
            raise ValueError("ANSI index must be 0-15")
        return self.colors[index]


XTERM_PALETTE = AnsiPalette(
    name="xterm",
    colors=(
        (0x00, 0x00, 0x00),
        (0xCD, 0x00, 0x00),
        (0x00, 0xCD, 0x00),
        (0xCD, 0xCD, 0x00),
        (0x00, 0x00, 0xEE),
        (0xCD, 0x00, 0xCD),
        (0x00, 0xCD, 0xCD),
        (0xE5, 0xE5, 0xE5),
        (0x7F, 0x7F, 0x7F),
        (0xFF, 0x00, 0x00),
        (0x00, 0xFF, 0x00),
        (0xFF, 0xFF, 0x00),
        (0x5C, 0x5C, 0xFF),
        (0xFF, 0x00, 0xFF),
        (0x00, 0xFF, 0xFF),
        (0xFF, 0xFF, 0xFF),
    ),
)


def to_rgb(color: Color, palette: AnsiPalette = XTERM_PALETTE) -> tuple[int, int, int]:
    """Return the displayable RGB triple for *color*.

    Sentinel colors are looked up in *palette*; literal colors pass through
    (alpha is ignored).
    """
    index = color.ansi_index
    if index is not None:
        return palette.rgb(index)
    return color.rgb


def describe(color: Color | None, palette: AnsiPalette = XTERM_PALETTE) -> str:
    """Human-readable form: ``ansi:4 (#0000EE)`` or the literal ``#RRGGBBAA``."""
    if color is None:
        return "-"
    index = color.ansi_index
    if index is None:
        return str(color)
    r, g, b = palette.rgb(index)
    return f"ansi:{index} (#{r:02X}{g:02X}{b:02X})"
