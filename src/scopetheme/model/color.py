"""Color model: an RGBA value that may instead name an ANSI palette slot."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """A decoded ``#RRGGBBAA`` theme color.

    An alpha of zero is the ANSI sentinel: the color is then a reference to
    palette slot ``red`` rather than a literal RGB value.  Build instances via
    :func:`scopetheme.encoding.decode_color` or :meth:`ansi`.
    """

    red: int
    green: int
    blue: int
    alpha: int

    @classmethod
    def ansi(cls, index: int) -> Color:
        """Return the sentinel color naming ANSI palette slot *index*."""
        if not 0 <= index <= 15:
            raise ValueError(f"ANSI index must be 0-15, got {index}")
        return cls(red=index, green=0, blue=0, alpha=0)

    @property
    def is_ansi(self) -> bool:
        return self.alpha == 0

    @property
    def ansi_index(self) -> int | None:
        """Palette slot for sentinel colors, ``None`` for literal colors."""
        if not self.is_ansi:
            return None
        return self.red

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def __str__(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}{self.alpha:02X}"
