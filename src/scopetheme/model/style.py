"""Style model: FontStyle flags, StyleRule, and ResolvedStyle dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scopetheme.model.color import Color
from scopetheme.selector.model import Selector


class FontStyle(Enum):
    """Font style flags a theme may attach to a scope."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"


@dataclass(frozen=True)
class StyleRule:
    """A single theme entry pairing a selector with style settings.

    ``selector`` is ``None`` only for the theme-wide default rule.  A ``None``
    color or font style means the rule leaves that attribute undefined; an
    empty ``font_style`` set is an explicit "plain".
    """

    name: str | None = None
    selector: Selector | None = None
    foreground: Color | None = None
    background: Color | None = None
    font_style: frozenset[FontStyle] | None = None

    @property
    def is_default(self) -> bool:
        return self.selector is None


@dataclass(frozen=True)
class ResolvedStyle:
    """The effective style for one queried scope.

    ``selector`` is the source text of the winning selector alternative, or
    ``None`` when no scoped rule matched and the default style applied.
    """

    foreground: Color | None = None
    background: Color | None = None
    font_style: frozenset[FontStyle] = frozenset()
    selector: str | None = None

    @property
    def is_default(self) -> bool:
        return self.selector is None
