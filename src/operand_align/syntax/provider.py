"""Scope model and the capability interface syntax analyzers implement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from operand_align.buffer import Position


@dataclass(frozen=True, slots=True)
class Scope:
    """Syntactic surroundings of one buffer position.

    ``enclosing_open`` is the innermost unmatched ``(``, ``[`` or ``{`` before
    the position and ``open_char`` the bracket found there. ``statement_start``
    is where the innermost statement containing the position begins.
    ``preceding_char`` is the last code character before the position with
    whitespace and comments skipped, ``None`` at the start of the buffer.
    """

    enclosing_open: Optional[Position] = None
    open_char: Optional[str] = None
    in_literal: bool = False
    statement_start: Optional[Position] = None
    preceding_char: Optional[str] = None

    @property
    def top_level(self) -> bool:
        return self.enclosing_open is None


NO_SCOPE = Scope()


class SyntaxProvider(Protocol):
    """Bracket, literal, and statement queries over a buffer. Never mutates."""

    def scan(self, position: Position) -> Scope:
        """Return the full scope at ``position``."""
        ...

    def find_enclosing_bracket(self, position: Position) -> Optional[Position]:
        ...

    def is_inside_literal(self, position: Position) -> bool:
        ...

    def find_statement_start(self, position: Position) -> Optional[Position]:
        ...
