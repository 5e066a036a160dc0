"""Forward scanner for C-like bracket, literal, and statement structure."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from operand_align.buffer import Buffer, BufferDocument, Position, ensure_position

from .provider import Scope

OPENERS = "([{"
CLOSERS = {")": "(", "]": "[", "}": "{"}
QUOTES = ('"', "'")


@dataclass(slots=True)
class _ScanState:
    stack: List[Tuple[Position, str]] = field(default_factory=list)
    literal: Optional[str] = None  # '"', "'", '//', '/*' or None
    statement_pending: bool = True
    statement_start: Optional[Position] = None
    preceding: Optional[str] = None

    def copy(self) -> "_ScanState":
        return _ScanState(
            stack=list(self.stack),
            literal=self.literal,
            statement_pending=self.statement_pending,
            statement_start=self.statement_start,
            preceding=self.preceding,
        )

    def code_char(self, char: str, where: Position) -> None:
        if self.statement_pending:
            self.statement_start = where
            self.statement_pending = False
        self.preceding = char

        if char in QUOTES:
            self.literal = char
        elif char in OPENERS:
            self.stack.append((where, char))
            if char == "{":
                self.statement_pending = True
        elif char in CLOSERS:
            if self.stack and self.stack[-1][1] == CLOSERS[char]:
                self.stack.pop()
            if char == "}":
                self.statement_pending = True
        elif char == ";":
            self.statement_pending = True

    def end_of_line(self, line: str) -> None:
        if self.literal == "//":
            self.literal = None
        elif self.literal in QUOTES and not line.endswith("\\"):
            # unterminated character or string literal
            self.literal = None


class CLikeScanner:
    """``SyntaxProvider`` for C-like code, scanning from the buffer start.

    Tracks ``()``, ``[]`` and ``{}`` nesting, string and character literals
    with backslash escapes, and ``//`` / ``/* */`` comments. Statements are
    delimited by ``;``, ``{`` and ``}`` outside literals. Unbalanced closers
    are ignored.

    The state at the start of each row is cached for the current document,
    so repeated queries only rescan the target row. Any edit replaces the
    document and drops the cache; re-indenting ``n`` rows therefore still
    rescans the buffer prefix once per changed row.
    """

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer
        self._document: Optional[BufferDocument] = None
        self._row_states: List[_ScanState] = []

    def scan(self, position: Position) -> Scope:
        target = ensure_position(self.buffer.document, position)
        lines = self.buffer.document.snapshot()
        state = self._state_at_row(target.row, lines)
        self._scan_line(state, lines, target.row, target.column)

        statement_start = state.statement_start
        if state.statement_pending:
            statement_start = target
        enclosing, open_char = state.stack[-1] if state.stack else (None, None)
        return Scope(
            enclosing_open=enclosing,
            open_char=open_char,
            in_literal=state.literal is not None,
            statement_start=statement_start,
            preceding_char=state.preceding,
        )

    def find_enclosing_bracket(self, position: Position) -> Optional[Position]:
        return self.scan(position).enclosing_open

    def is_inside_literal(self, position: Position) -> bool:
        return self.scan(position).in_literal

    def find_statement_start(self, position: Position) -> Optional[Position]:
        return self.scan(position).statement_start

    def _state_at_row(self, row: int, lines: Sequence[str]) -> _ScanState:
        document = self.buffer.document
        if document is not self._document:
            self._document = document
            self._row_states = [_ScanState()]
        while len(self._row_states) <= row:
            index = len(self._row_states) - 1
            state = self._row_states[index].copy()
            self._scan_line(state, lines, index, len(lines[index]))
            state.end_of_line(lines[index])
            self._row_states.append(state)
        return self._row_states[row].copy()

    def _scan_line(
        self, state: _ScanState, lines: Sequence[str], row: int, limit: int
    ) -> None:
        line = lines[row]
        column = 0
        while column < limit:
            char = line[column]
            following = line[column + 1] if column + 1 < len(line) else ""

            if state.literal in QUOTES:
                if char == "\\":
                    column += 2
                    continue
                if char == state.literal:
                    state.literal = None
                    state.preceding = char
                column += 1
                continue

            if state.literal == "/*":
                if char == "*" and following == "/":
                    state.literal = None
                    column += 2
                else:
                    column += 1
                continue

            if state.literal == "//":
                column += 1
                continue

            if char == "/" and following in ("/", "*"):
                state.literal = "/" + following
                column += 2
                continue

            if char not in " \t":
                state.code_char(char, Position(row, column))
            column += 1


__all__ = ["CLikeScanner"]
