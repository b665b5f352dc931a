"""Themes shipped as package data."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources

from scopetheme.theme.loader import ThemeDefinition, parse_theme

_BUNDLED = {
    "ansi": "ansi.tmTheme",
}

# "auto" picks the theme that follows the terminal's own palette.
_ALIASES = {
    "auto": "ansi",
}


def bundled_theme_names() -> list[str]:
    return sorted(_BUNDLED)


@lru_cache(maxsize=None)
def load_bundled_theme(name: str = "ansi") -> ThemeDefinition:
    """Load a bundled theme by name; raises KeyError for unknown names."""
    name = _ALIASES.get(name, name)
    try:
        filename = _BUNDLED[name]
    except KeyError:
        raise KeyError(f"Unknown bundled theme: {name!r}") from None
    data = resources.files("scopetheme.theme").joinpath("data").joinpath(filename).read_bytes()
    return parse_theme(data)
