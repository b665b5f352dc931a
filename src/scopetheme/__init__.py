"""scopetheme -- scope-to-style resolution for tmTheme color schemes."""

__version__ = "0.1.0"

from scopetheme.errors import MalformedThemeError, ThemeError, ValueEncodingError  # noqa: E402
from scopetheme.model import Color, FontStyle, ResolvedStyle, StyleRule  # noqa: E402
from scopetheme.resolver import Resolver  # noqa: E402
from scopetheme.theme import (  # noqa: E402
    ThemeDefinition,
    load_bundled_theme,
    load_theme_file,
    parse_theme,
)

__all__ = [
    "__version__",
    # errors
    "ThemeError",
    "MalformedThemeError",
    "ValueEncodingError",
    # model
    "Color",
    "FontStyle",
    "StyleRule",
    "ResolvedStyle",
    # resolution
    "Resolver",
    "ThemeDefinition",
    "parse_theme",
    "load_theme_file",
    "load_bundled_theme",
]
