from __future__ import annotations

from dataclasses import dataclass

from scopetheme.palette import XTERM_PALETTE, AnsiPalette


@dataclass(frozen=True)
class RenderConfig:
    color: bool = True
    true_color: bool = False  # literal colors as 24-bit instead of xterm-256
    palette: AnsiPalette = XTERM_PALETTE
