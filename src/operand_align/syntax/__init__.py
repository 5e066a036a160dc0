"""Scope resolution: syntax provider interface, C-like scanner, resolver."""

from .provider import NO_SCOPE, Scope, SyntaxProvider
from .resolver import ScopeResolver
from .scanner import CLikeScanner

__all__ = [
    "CLikeScanner",
    "NO_SCOPE",
    "Scope",
    "ScopeResolver",
    "SyntaxProvider",
]
