"""Tests for theme rule-set validation rules and the validator."""

import pytest

from scopetheme.errors import MalformedThemeError
from scopetheme.model import Color, Diagnostic, Severity, StyleRule
from scopetheme.selector import Selector, parse_selector
from scopetheme.validation import validate, validate_or_raise
from scopetheme.validation.rules import (
    check_default_foreground,
    check_default_rule,
    check_duplicate_selectors,
    check_scoped_selectors,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _default(fg: int | None = 7) -> StyleRule:
    return StyleRule(foreground=Color.ansi(fg) if fg is not None else None)


def _scoped(selector: str, fg: int = 4, name: str | None = None) -> StyleRule:
    return StyleRule(name=name, selector=parse_selector(selector), foreground=Color.ansi(fg))


def _minimal_rules(*extra: StyleRule) -> list[StyleRule]:
    """A valid rule set: the default plus one scoped rule."""
    return [_default(), _scoped("constant.numeric", name="Numbers"), *extra]


# ---------------------------------------------------------------------------
# check_default_rule
# ---------------------------------------------------------------------------


class TestCheckDefaultRule:
    def test_no_default_rule(self):
        diags = check_default_rule([_scoped("error")])
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert "No default rule" in diags[0].message

    def test_multiple_default_rules(self):
        rules = [_default(), _scoped("error"), StyleRule(name="Again", foreground=Color.ansi(1))]
        diags = check_default_rule(rules)
        assert len(diags) == 2
        assert all(d.severity is Severity.ERROR for d in diags)
        assert [d.index for d in diags] == [0, 2]
        assert diags[1].name == "Again"

    def test_exactly_one_default_rule(self):
        assert check_default_rule(_minimal_rules()) == []


# ---------------------------------------------------------------------------
# check_scoped_selectors
# ---------------------------------------------------------------------------


class TestCheckScopedSelectors:
    def test_empty_selector(self):
        empty = StyleRule(name="Blank", selector=Selector(source="", alternatives=()))
        diags = check_scoped_selectors(_minimal_rules(empty))
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert diags[0].index == 2
        assert diags[0].name == "Blank"

    def test_default_rule_is_not_checked(self):
        assert check_scoped_selectors([_default()]) == []

    def test_all_selectors_present(self):
        assert check_scoped_selectors(_minimal_rules(_scoped("error"))) == []


# ---------------------------------------------------------------------------
# check_default_foreground
# ---------------------------------------------------------------------------


class TestCheckDefaultForeground:
    def test_default_without_foreground(self):
        diags = check_default_foreground([_default(fg=None)])
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING

    def test_default_with_foreground(self):
        assert check_default_foreground(_minimal_rules()) == []


# ---------------------------------------------------------------------------
# check_duplicate_selectors
# ---------------------------------------------------------------------------


class TestCheckDuplicateSelectors:
    def test_shadowed_selector(self):
        rules = _minimal_rules(_scoped("string, constant.numeric", name="Later"))
        diags = check_duplicate_selectors(rules)
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO
        assert diags[0].index == 1
        assert "entry 2" in diags[0].message

    def test_prefix_is_not_a_duplicate(self):
        assert check_duplicate_selectors(_minimal_rules(_scoped("constant"))) == []


# ---------------------------------------------------------------------------
# Diagnostic formatting
# ---------------------------------------------------------------------------


class TestDiagnosticStr:
    def test_without_location(self):
        diag = Diagnostic(rule="r", severity=Severity.ERROR, message="broken")
        assert str(diag) == "ERROR: broken"

    def test_with_index_and_name(self):
        diag = Diagnostic(rule="r", severity=Severity.WARNING, message="odd", index=3, name="Tags")
        assert str(diag) == "WARNING [entry=3 name='Tags']: odd"
        assert diag.is_warning
        assert not diag.is_error


# ---------------------------------------------------------------------------
# Validator integration
# ---------------------------------------------------------------------------


class TestValidate:
    def test_valid_rules_no_diagnostics(self):
        assert validate(_minimal_rules()) == []

    def test_extra_rules(self):
        def custom_rule(rules) -> list[Diagnostic]:
            return [
                Diagnostic(
                    rule="custom",
                    severity=Severity.INFO,
                    message="custom info",
                )
            ]

        diags = validate(_minimal_rules(), extra_rules=[custom_rule])
        assert any(d.rule == "custom" for d in diags)


class TestValidateOrRaise:
    def test_raises_on_errors(self):
        with pytest.raises(MalformedThemeError) as exc_info:
            validate_or_raise([_scoped("error")])
        assert len(exc_info.value.diagnostics) == 1
        assert exc_info.value.diagnostics[0].is_error

    def test_returns_warnings_without_raising(self):
        warnings = validate_or_raise([_default(fg=None), _scoped("error")])
        assert any(d.is_warning for d in warnings)

    def test_valid_rules_return_empty(self):
        assert validate_or_raise(_minimal_rules()) == []
