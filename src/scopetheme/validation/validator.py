"""Rule-set validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable, Sequence

from scopetheme.errors import MalformedThemeError
from scopetheme.model.diagnostic import Diagnostic
from scopetheme.model.style import StyleRule
from scopetheme.validation.rules import ALL_RULES

RuleFunc = Callable[[Sequence[StyleRule]], list[Diagnostic]]


def validate(
    rules: Sequence[StyleRule], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all validation rules against *rules*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    checks: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        checks.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for check in checks:
        diagnostics.extend(check(rules))
    return diagnostics


def validate_or_raise(
    rules: Sequence[StyleRule], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`MalformedThemeError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(rules, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        messages = "; ".join(str(d) for d in errors)
        raise MalformedThemeError(
            f"Theme rejected with {len(errors)} error(s): {messages}", errors
        )
    return diagnostics
