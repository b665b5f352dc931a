"""Tests for ANSI escape rendering of resolved styles."""

import pytest

from scopetheme.config import RenderConfig
from scopetheme.encoding import decode_color
from scopetheme.model import Color, FontStyle, ResolvedStyle
from scopetheme.palette import Code
from scopetheme.render import RESET, color_code, escape, paint, rgb_to_256, sgr_codes
from scopetheme.theme import load_bundled_theme


# ---------------------------------------------------------------------------
# color_code
# ---------------------------------------------------------------------------


class TestAnsiColorCode:
    def test_standard_foreground(self):
        assert color_code(Color.ansi(Code.BLUE)) == "34"

    def test_standard_background(self):
        assert color_code(Color.ansi(Code.BLUE), background=True) == "44"

    def test_bright_foreground(self):
        assert color_code(Color.ansi(Code.BBLUE)) == "94"

    def test_bright_background(self):
        assert color_code(Color.ansi(Code.BBLACK), background=True) == "100"

    def test_true_color_flag_does_not_affect_ansi(self):
        assert color_code(Color.ansi(Code.RED), true_color=True) == "31"


class TestLiteralColorCode:
    def test_true_color(self):
        assert color_code(decode_color("#FF8800FF"), true_color=True) == "38;2;255;136;0"

    def test_true_color_background(self):
        assert color_code(decode_color("#010203FF"), background=True, true_color=True) == "48;2;1;2;3"

    def test_256_color(self):
        assert color_code(decode_color("#FF0000FF")) == "38;5;196"


class TestRgbTo256:
    @pytest.mark.parametrize(
        "rgb, expected",
        [
            ((255, 0, 0), 196),
            ((0, 0, 255), 21),
            ((0, 0, 0), 16),
            ((255, 255, 255), 231),
            ((128, 128, 128), 244),
        ],
    )
    def test_nearest(self, rgb, expected):
        assert rgb_to_256(*rgb) == expected


# ---------------------------------------------------------------------------
# sgr_codes / escape / paint
# ---------------------------------------------------------------------------


class TestSgrCodes:
    def test_flags_then_colors(self):
        style = ResolvedStyle(
            foreground=Color.ansi(Code.RED),
            background=Color.ansi(Code.BLACK),
            font_style=frozenset({FontStyle.UNDERLINE, FontStyle.BOLD}),
        )
        assert sgr_codes(style) == ["1", "4", "31", "40"]

    def test_all_flags(self):
        style = ResolvedStyle(font_style=frozenset(FontStyle))
        assert sgr_codes(style) == ["1", "3", "4", "9"]

    def test_empty_style(self):
        assert sgr_codes(ResolvedStyle()) == []
        assert escape(ResolvedStyle()) == ""


class TestPaint:
    style = ResolvedStyle(
        foreground=Color.ansi(Code.RED),
        font_style=frozenset({FontStyle.UNDERLINE}),
    )

    def test_wraps_text(self):
        assert paint("oops", self.style) == "\x1b[4;31moops" + RESET

    def test_color_disabled(self):
        assert paint("oops", self.style, RenderConfig(color=False)) == "oops"

    def test_nothing_to_render(self):
        assert paint("plain", ResolvedStyle()) == "plain"

    def test_true_color_config(self):
        style = ResolvedStyle(foreground=decode_color("#102030FF"))
        config = RenderConfig(true_color=True)
        assert paint("x", style, config) == "\x1b[38;2;16;32;48mx" + RESET

    def test_bundled_error_scope(self):
        style = load_bundled_theme().resolver().resolve("error")
        assert paint("bad", style) == "\x1b[4;31mbad\x1b[0m"
