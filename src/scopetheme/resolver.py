"""Scope style resolver: maps a queried scope to its effective style."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, TypeVar

from scopetheme.model.style import ResolvedStyle, StyleRule
from scopetheme.selector import ScopeChain, parse_scope_stack
from scopetheme.validation import validate_or_raise

log = logging.getLogger("scopetheme.resolver")

T = TypeVar("T")

# (chain, position among scoped rules, rule)
_Entry = tuple[ScopeChain, int, StyleRule]


def _first_defined(values: Iterable[T | None]) -> T | None:
    for value in values:
        if value is not None:
            return value
    return None


class Resolver:
    """Resolve scope paths against an immutable, ordered rule set.

    Matching:
        A selector scope matches a queried scope when it equals it or is a
        dot-segment prefix of it.  Descendant chains anchor their last scope
        on the innermost queried scope.

    Precedence:
        Higher specificity wins; on equal specificity the later-defined rule
        wins.  Attributes the winner leaves undefined fall through to the
        next-best match and finally to the default rule.

    Instances hold no mutable state after construction, so ``resolve`` may be
    called from any number of threads.
    """

    def __init__(self, default: StyleRule, rules: Sequence[StyleRule]) -> None:
        self._default = default
        self._rules = tuple(rules)
        # Every scope matched by a chain shares the first segment of its
        # innermost scope, so bucket on it.
        index: dict[str, list[_Entry]] = {}
        for order, rule in enumerate(self._rules):
            assert rule.selector is not None
            for chain in rule.selector.alternatives:
                index.setdefault(chain.index_key, []).append((chain, order, rule))
        self._index = index
        log.debug(
            "Resolver built: %d scoped rule(s) in %d bucket(s)",
            len(self._rules),
            len(self._index),
        )

    @classmethod
    def load(cls, rules: Iterable[StyleRule]) -> Resolver:
        """Validate *rules* and build a resolver.

        Raises MalformedThemeError unless exactly one default rule exists and
        every scoped rule has a non-empty selector.
        """
        rules = tuple(rules)
        for diag in validate_or_raise(rules):
            log.debug("%s", diag)
        default = next(r for r in rules if r.is_default)
        return cls(default, [r for r in rules if not r.is_default])

    @property
    def default(self) -> StyleRule:
        return self._default

    @property
    def rules(self) -> tuple[StyleRule, ...]:
        """Scoped rules in source order."""
        return self._rules

    @property
    def default_style(self) -> ResolvedStyle:
        return ResolvedStyle(
            foreground=self._default.foreground,
            background=self._default.background,
            font_style=self._default.font_style or frozenset(),
        )

    def matches(self, scopes: Sequence[str]) -> list[tuple[ScopeChain, StyleRule]]:
        """Return every (chain, rule) matching the scope stack, best first."""
        stack = tuple(s for s in scopes if s)
        if not stack:
            return []
        key = stack[-1].split(".", 1)[0]
        found = [
            (chain.specificity, order, chain, rule)
            for chain, order, rule in self._index.get(key, ())
            if chain.matches(stack)
        ]
        found.sort(key=lambda m: (m[0], m[1]), reverse=True)
        return [(chain, rule) for _, _, chain, rule in found]

    def resolve(self, scope_path: str) -> ResolvedStyle:
        """Resolve a dotted scope path, e.g. ``"constant.numeric.http"``.

        Whitespace separates the scopes of a stack, outermost first.  Never
        raises for unknown scopes; those get the default style.
        """
        return self.resolve_stack(parse_scope_stack(scope_path))

    def resolve_stack(self, scopes: Sequence[str]) -> ResolvedStyle:
        """Resolve an explicit scope stack, outermost scope first."""
        matched = self.matches(scopes)
        if not matched:
            return self.default_style
        cascade = [rule for _, rule in matched] + [self._default]
        return ResolvedStyle(
            foreground=_first_defined(r.foreground for r in cascade),
            background=_first_defined(r.background for r in cascade),
            font_style=_first_defined(r.font_style for r in cascade) or frozenset(),
            selector=matched[0][0].source,
        )
