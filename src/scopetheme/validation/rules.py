"""Structural validation rules for theme rule sets.

Each rule is a function taking the ordered rule sequence and returning a list
of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from typing import Sequence

from scopetheme.model.diagnostic import Diagnostic, Severity
from scopetheme.model.style import StyleRule


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_default_rule(rules: Sequence[StyleRule]) -> list[Diagnostic]:
    """Exactly one default rule (no scope) required."""
    defaults = [(i, r) for i, r in enumerate(rules) if r.is_default]
    diagnostics: list[Diagnostic] = []
    if len(defaults) == 0:
        diagnostics.append(
            Diagnostic(
                rule="check_default_rule",
                severity=Severity.ERROR,
                message="No default rule found. Exactly one settings entry without a scope is required.",
                fix="Add a settings entry with no 'scope' key holding the theme-wide colors.",
            )
        )
    elif len(defaults) > 1:
        for i, r in defaults:
            diagnostics.append(
                Diagnostic(
                    rule="check_default_rule",
                    severity=Severity.ERROR,
                    message="Multiple default rules found. This entry has no scope.",
                    index=i,
                    name=r.name,
                    fix="Give every entry except one a 'scope'.",
                )
            )
    return diagnostics


def check_scoped_selectors(rules: Sequence[StyleRule]) -> list[Diagnostic]:
    """Every scoped rule must carry at least one selector alternative."""
    diagnostics: list[Diagnostic] = []
    for i, rule in enumerate(rules):
        if rule.selector is None:
            continue
        if not rule.selector.alternatives:
            diagnostics.append(
                Diagnostic(
                    rule="check_scoped_selectors",
                    severity=Severity.ERROR,
                    message="Scoped rule has an empty selector.",
                    index=i,
                    name=rule.name,
                    fix="Set 'scope' to one or more scope names, or remove the entry.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_default_foreground(rules: Sequence[StyleRule]) -> list[Diagnostic]:
    """The default rule should define a foreground every scope can fall back to."""
    diagnostics: list[Diagnostic] = []
    for i, rule in enumerate(rules):
        if rule.is_default and rule.foreground is None:
            diagnostics.append(
                Diagnostic(
                    rule="check_default_foreground",
                    severity=Severity.WARNING,
                    message="Default rule has no usable foreground color.",
                    index=i,
                    name=rule.name,
                )
            )
    return diagnostics


def check_duplicate_selectors(rules: Sequence[StyleRule]) -> list[Diagnostic]:
    """Flag selector alternatives that a later rule completely shadows."""
    diagnostics: list[Diagnostic] = []
    last_seen: dict[str, int] = {}
    for i, rule in enumerate(rules):
        if rule.selector is None:
            continue
        for chain in rule.selector.alternatives:
            last_seen[chain.source] = i
    for i, rule in enumerate(rules):
        if rule.selector is None:
            continue
        for chain in rule.selector.alternatives:
            later = last_seen[chain.source]
            if later != i:
                diagnostics.append(
                    Diagnostic(
                        rule="check_duplicate_selectors",
                        severity=Severity.INFO,
                        message=f"Selector '{chain.source}' is redefined by entry {later}, which takes precedence.",
                        index=i,
                        name=rule.name,
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_default_rule,
    check_scoped_selectors,
    check_default_foreground,
    check_duplicate_selectors,
]
