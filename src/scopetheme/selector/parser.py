"""Parser for TextMate-style scope selectors.

Syntax example:
    constant.numeric
    meta.tag.sgml, entity.name.tag.doctype
    source.http http.requestheaders support.variable.http

Commas separate alternatives; whitespace separates the scopes of a
descendant chain.
"""

from __future__ import annotations

import re

from scopetheme.selector.model import ScopeChain, Selector

__all__ = ["parse_selector", "parse_scope_stack"]

# A single dotted scope name: non-empty segments joined by dots.
_SCOPE_RE = re.compile(
    r"""
    ^
    [A-Za-z0-9_+-]+          # first segment
    (?:\.[A-Za-z0-9_+-]+)*   # further dot-separated segments
    $
    """,
    re.VERBOSE,
)


def _parse_scope(raw: str) -> str:
    if not _SCOPE_RE.match(raw):
        raise ValueError(f"Invalid scope name: {raw!r}")
    return raw


def _parse_chain(raw: str) -> ScopeChain:
    parts = raw.split()
    if not parts:
        raise ValueError("Empty selector alternative")
    return ScopeChain(scopes=tuple(_parse_scope(p) for p in parts))


def parse_selector(source: str) -> Selector:
    """Parse a scope selector string into a Selector object.

    Raises ValueError for an empty selector, an empty alternative, or a
    malformed scope name.
    """
    if not source or not source.strip():
        raise ValueError("Empty selector")
    alternatives = tuple(_parse_chain(alt) for alt in source.split(","))
    return Selector(source=source.strip(), alternatives=alternatives)


def parse_scope_stack(scope_path: str) -> tuple[str, ...]:
    """Split a queried scope path into a stack, outermost scope first.

    Unlike selectors, query paths are not validated: anything a tokenizer
    emits is a legal (possibly unmatched) scope.
    """
    return tuple(scope_path.split())
