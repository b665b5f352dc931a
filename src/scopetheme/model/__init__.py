"""scopetheme model layer -- public type re-exports."""

from scopetheme.model.color import Color
from scopetheme.model.diagnostic import Diagnostic, Severity
from scopetheme.model.style import FontStyle, ResolvedStyle, StyleRule

__all__ = [
    # color
    "Color",
    # style
    "FontStyle",
    "StyleRule",
    "ResolvedStyle",
    # diagnostic
    "Severity",
    "Diagnostic",
]
