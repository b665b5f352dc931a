"""Decoding of theme setting values: colors and font styles.

Theme colors are ``#RRGGBBAA`` strings.  An alpha byte of ``00`` is a
sentinel meaning "ANSI palette index in RR" rather than true color; this is
the only module that knows about that convention.
"""

from __future__ import annotations

import re

from scopetheme.errors import ValueEncodingError
from scopetheme.model.color import Color
from scopetheme.model.style import FontStyle

__all__ = ["decode_color", "decode_font_style"]

_COLOR_RE = re.compile(r"^#(?P<r>[0-9A-Fa-f]{2})(?P<g>[0-9A-Fa-f]{2})(?P<b>[0-9A-Fa-f]{2})(?P<a>[0-9A-Fa-f]{2})$")

_FONT_STYLES = {flag.value: flag for flag in FontStyle}


def decode_color(value: object) -> Color:
    """Decode a ``#RRGGBBAA`` string into a Color.

    Raises ValueEncodingError if the value is not a string of that shape, or
    if it is an ANSI sentinel (``AA == 00``) whose index is outside 00-0f.
    """
    if not isinstance(value, str):
        raise ValueEncodingError(
            f"Color must be a string, got {type(value).__name__}", value=repr(value)
        )
    match = _COLOR_RE.match(value.strip())
    if match is None:
        raise ValueEncodingError(f"Invalid color {value!r}: expected #RRGGBBAA", value=value)
    red, green, blue, alpha = (int(match.group(k), 16) for k in ("r", "g", "b", "a"))
    if alpha == 0 and red > 0x0F:
        raise ValueEncodingError(
            f"Invalid color {value!r}: ANSI index {red:#04x} is outside the 16-color palette",
            value=value,
        )
    return Color(red=red, green=green, blue=blue, alpha=alpha)


def decode_font_style(value: object) -> frozenset[FontStyle]:
    """Decode a space-separated fontStyle string into a set of flags.

    An empty string is a valid, explicit "no flags".
    """
    if not isinstance(value, str):
        raise ValueEncodingError(
            f"fontStyle must be a string, got {type(value).__name__}", value=repr(value)
        )
    flags: set[FontStyle] = set()
    for word in value.split():
        flag = _FONT_STYLES.get(word.lower())
        if flag is None:
            raise ValueEncodingError(f"Unknown fontStyle flag {word!r}", value=value)
        flags.add(flag)
    return frozenset(flags)
