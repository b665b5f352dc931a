"""
Terminal rendering of resolved styles as ANSI SGR escape sequences.

References:
- **Rendering:** https://en.wikipedia.org/wiki/ANSI_escape_code#Select_Graphic_Rendition_parameters
- **8-Bit Coloring:** https://en.wikipedia.org/wiki/ANSI_escape_code#8-bit
"""

from __future__ import annotations

from scopetheme.config import RenderConfig
from scopetheme.model.color import Color
from scopetheme.model.style import FontStyle, ResolvedStyle

ESCAPE = "\x1b"
RESET = f"{ESCAPE}[0m"

_FLAG_CODES = {
    FontStyle.BOLD: 1,
    FontStyle.ITALIC: 3,
    FontStyle.UNDERLINE: 4,
    FontStyle.STRIKETHROUGH: 9,
}


def rgb_to_256(red: int, green: int, blue: int) -> int:
    """Return the nearest xterm 256-color code (16-255) for an RGB triple."""
    if red == green == blue:
        if red < 8:
            return 16
        if red > 248:
            return 231
        return round((red - 8) / 247 * 24) + 232
    cube = [round(c / 255 * 5) for c in (red, green, blue)]
    return 16 + 36 * cube[0] + 6 * cube[1] + cube[2]


def color_code(color: Color, *, background: bool = False, true_color: bool = False) -> str:
    """Return the SGR parameter selecting *color* as foreground or background."""
    index = color.ansi_index
    if index is not None:
        base = 40 if background else 30
        if index < 8:
            return str(base + index)
        return str(base + 60 + index - 8)
    prefix = "48" if background else "38"
    if true_color:
        return f"{prefix};2;{color.red};{color.green};{color.blue}"
    return f"{prefix};5;{rgb_to_256(*color.rgb)}"


def sgr_codes(style: ResolvedStyle, *, true_color: bool = False) -> list[str]:
    """Return the SGR parameters for *style*: font flags, then foreground, then background."""
    codes = [str(_FLAG_CODES[flag]) for flag in sorted(style.font_style, key=_FLAG_CODES.__getitem__)]
    if style.foreground is not None:
        codes.append(color_code(style.foreground, true_color=true_color))
    if style.background is not None:
        codes.append(color_code(style.background, background=True, true_color=true_color))
    return codes


def escape(style: ResolvedStyle, *, true_color: bool = False) -> str:
    """Return the escape sequence that switches the terminal to *style*."""
    codes = sgr_codes(style, true_color=true_color)
    if not codes:
        return ""
    return f"{ESCAPE}[{';'.join(codes)}m"


def paint(text: str, style: ResolvedStyle, config: RenderConfig | None = None) -> str:
    """Wrap *text* in the escape sequences for *style*.

    Returns *text* unchanged when color output is disabled or the style has
    nothing to render.
    """
    config = config or RenderConfig()
    if not config.color:
        return text
    start = escape(style, true_color=config.true_color)
    if not start:
        return text
    return f"{start}{text}{RESET}"
