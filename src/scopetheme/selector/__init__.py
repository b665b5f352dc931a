from scopetheme.selector.parser import parse_scope_stack, parse_selector
from scopetheme.selector.model import ScopeChain, Selector, scope_matches

__all__ = ["parse_selector", "parse_scope_stack", "ScopeChain", "Selector", "scope_matches"]
