"""Error hierarchy for theme loading and value decoding."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scopetheme.model.diagnostic import Diagnostic


class ThemeError(Exception):
    """Base error for all scopetheme errors."""


class MalformedThemeError(ThemeError):
    """The theme document or rule set is structurally invalid.

    Raised at load time; the theme is rejected as a whole.
    """

    def __init__(
        self, message: str, diagnostics: list[Diagnostic] | None = None
    ) -> None:
        self.diagnostics = list(diagnostics or [])
        super().__init__(message)


class ValueEncodingError(ThemeError, ValueError):
    """A color or font-style value could not be decoded.

    Only the affected field is dropped; the rest of the theme still loads.
    """

    def __init__(
        self,
        message: str,
        *,
        value: str = "",
        field: str | None = None,
        rule: str | None = None,
    ) -> None:
        super().__init__(message)
        self.value = value
        self.field = field
        self.rule = rule
