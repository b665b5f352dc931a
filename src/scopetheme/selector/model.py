"""Selector model: ScopeChain and Selector dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


def scope_matches(selector_scope: str, scope: str) -> bool:
    """Return True if *selector_scope* equals *scope* or is a dot-segment prefix of it.

    ``constant`` matches ``constant.numeric`` but not ``constantly``.
    """
    return scope == selector_scope or scope.startswith(selector_scope + ".")


@dataclass(frozen=True)
class ScopeChain:
    """One selector alternative: a descendant chain of dotted scope names.

    The last scope must match the innermost queried scope; every earlier one
    must match some enclosing scope, in order.

    Specificity is ``(innermost segments, chain length, total segments)`` so
    that for a single scope it reduces to the number of dot segments.
    """

    scopes: tuple[str, ...]

    @property
    def source(self) -> str:
        return " ".join(self.scopes)

    @property
    def innermost(self) -> str:
        return self.scopes[-1]

    @property
    def index_key(self) -> str:
        """First segment of the innermost scope; every matching query shares it."""
        return self.innermost.split(".", 1)[0]

    @property
    def specificity(self) -> tuple[int, int, int]:
        segments = [len(s.split(".")) for s in self.scopes]
        return (segments[-1], len(segments), sum(segments))

    def matches(self, stack: Sequence[str]) -> bool:
        """Check whether this chain matches a scope *stack* (outermost first)."""
        if not stack or not scope_matches(self.innermost, stack[-1]):
            return False
        remaining = list(stack[:-1])
        for ancestor in reversed(self.scopes[:-1]):
            while remaining and not scope_matches(ancestor, remaining[-1]):
                remaining.pop()
            if not remaining:
                return False
            remaining.pop()
        return True


@dataclass(frozen=True)
class Selector:
    """A parsed scope selector: comma-separated alternative chains."""

    source: str
    alternatives: tuple[ScopeChain, ...]

