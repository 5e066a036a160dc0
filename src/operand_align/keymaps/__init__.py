"""Key bindings for insert-time commands."""

from .models import ActionRef, Binding, ResolutionMatch, WhenClause
from .registry import KeymapConflictError, KeymapRegistry

__all__ = [
    "ActionRef",
    "Binding",
    "KeymapConflictError",
    "KeymapRegistry",
    "ResolutionMatch",
    "WhenClause",
]
