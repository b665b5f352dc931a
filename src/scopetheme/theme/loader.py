"""Theme loader: reads property-list (tmTheme) documents into StyleRules.

Document shape:
    name: <string>
    settings: [
        { settings: { foreground: #RRGGBBAA } },                    # default
        { name: ..., scope: <selector>, settings: { foreground: ...,
          background: ..., fontStyle: ... } },
        ...
    ]
"""

from __future__ import annotations

import logging
import plistlib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable
from xml.parsers.expat import ExpatError

from scopetheme.encoding import decode_color, decode_font_style
from scopetheme.errors import MalformedThemeError, ValueEncodingError
from scopetheme.model.diagnostic import Diagnostic, Severity
from scopetheme.model.style import StyleRule
from scopetheme.resolver import Resolver
from scopetheme.selector import Selector, parse_selector

__all__ = ["ThemeDefinition", "parse_theme", "load_theme_file"]

log = logging.getLogger("scopetheme.theme")

# settings key -> (StyleRule field, decoder)
_VALUE_FIELDS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "foreground": ("foreground", decode_color),
    "background": ("background", decode_color),
    "fontStyle": ("font_style", decode_font_style),
}


@dataclass(frozen=True)
class ThemeDefinition:
    """A parsed theme: its rules in source order plus load-time findings."""

    name: str | None
    rules: tuple[StyleRule, ...]
    diagnostics: tuple[Diagnostic, ...] = ()
    encoding_errors: tuple[ValueEncodingError, ...] = ()

    def resolver(self) -> Resolver:
        """Build a Resolver; raises MalformedThemeError on structural problems."""
        return Resolver.load(self.rules)


class _Collector:
    """Accumulates diagnostics and encoding errors while building rules."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []
        self.encoding_errors: list[ValueEncodingError] = []

    def error(self, message: str, index: int, name: str | None = None) -> None:
        self.diagnostics.append(
            Diagnostic(
                rule="parse_theme",
                severity=Severity.ERROR,
                message=message,
                index=index,
                name=name,
            )
        )

    def encoding(self, exc: ValueEncodingError, index: int) -> None:
        log.warning("Theme entry %d (%s): %s", index, exc.rule or "unnamed", exc)
        self.encoding_errors.append(exc)
        self.diagnostics.append(
            Diagnostic(
                rule="decode_value",
                severity=Severity.WARNING,
                message=f"{exc.field}: {exc}",
                index=index,
                name=exc.rule,
                fix=f"Use a #RRGGBBAA color; '{exc.field}' is ignored for this entry.",
            )
        )


def _build_selector(scope: Any, index: int, name: str | None, out: _Collector) -> Selector | None:
    if not isinstance(scope, str):
        out.error(f"'scope' must be a string, got {type(scope).__name__}", index, name)
        return None
    if not scope.strip():
        # Left for validation to report as an empty selector.
        return Selector(source=scope, alternatives=())
    try:
        return parse_selector(scope)
    except ValueError as exc:
        out.error(f"Invalid scope selector {scope!r}: {exc}", index, name)
        return None


def _build_rule(entry: Any, index: int, out: _Collector) -> StyleRule | None:
    if not isinstance(entry, dict):
        out.error(f"Settings entry must be a dict, got {type(entry).__name__}", index)
        return None
    raw_name = entry.get("name")
    name = raw_name if isinstance(raw_name, str) else None
    settings = entry.get("settings")
    if not isinstance(settings, dict):
        out.error("Settings entry has no 'settings' dict", index, name)
        return None

    selector = None
    if "scope" in entry:
        selector = _build_selector(entry["scope"], index, name, out)
        if selector is None:
            return None

    values: dict[str, Any] = {}
    for key, (field, decode) in _VALUE_FIELDS.items():
        if key not in settings:
            continue
        try:
            values[field] = decode(settings[key])
        except ValueEncodingError as exc:
            exc.field = key
            exc.rule = name
            out.encoding(exc, index)
    return StyleRule(name=name, selector=selector, **values)


def parse_theme(data: bytes | str) -> ThemeDefinition:
    """Parse a property-list theme document.

    Raises MalformedThemeError if the document is not a property list, has no
    ``settings`` array, or contains entries that cannot form a rule.  Bad
    color or fontStyle values only drop that field and are reported through
    ``diagnostics`` and ``encoding_errors``.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        document = plistlib.loads(data)
    except (
        plistlib.InvalidFileException, ExpatError, ValueError, AttributeError, TypeError
    ) as exc:
        # plistlib surfaces some bad values (e.g. <date>) as AttributeError/TypeError
        raise MalformedThemeError(f"Theme is not a valid property list: {exc}") from exc
    if not isinstance(document, dict):
        raise MalformedThemeError("Theme root must be a dict")
    entries = document.get("settings")
    if not isinstance(entries, list):
        raise MalformedThemeError("Theme has no 'settings' array")

    out = _Collector()
    rules: list[StyleRule] = []
    for index, entry in enumerate(entries):
        rule = _build_rule(entry, index, out)
        if rule is not None:
            rules.append(rule)

    errors = [d for d in out.diagnostics if d.is_error]
    if errors:
        messages = "; ".join(str(d) for d in errors)
        raise MalformedThemeError(
            f"Theme rejected with {len(errors)} error(s): {messages}", errors
        )

    raw_name = document.get("name")
    theme = ThemeDefinition(
        name=raw_name if isinstance(raw_name, str) else None,
        rules=tuple(rules),
        diagnostics=tuple(out.diagnostics),
        encoding_errors=tuple(out.encoding_errors),
    )
    log.debug(
        "Parsed theme %r: %d rule(s), %d encoding error(s)",
        theme.name,
        len(theme.rules),
        len(theme.encoding_errors),
    )
    return theme


def load_theme_file(path: str | Path) -> ThemeDefinition:
    """Read and parse a theme file from *path*."""
    return parse_theme(Path(path).read_bytes())
