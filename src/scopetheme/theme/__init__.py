from scopetheme.theme.loader import ThemeDefinition, load_theme_file, parse_theme
from scopetheme.theme.bundled import bundled_theme_names, load_bundled_theme

__all__ = [
    "ThemeDefinition",
    "parse_theme",
    "load_theme_file",
    "bundled_theme_names",
    "load_bundled_theme",
]
