"""Electric operator alignment for the operator-first continuation style.

Typing an operator as the first thing on a continuation line lines the
operator up one column right of the enclosing bracket, pads the first operand
so it starts one column further right, and re-indents the rest of the
expression::

    if ( alpha
        && beta
        || gamma )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from operand_align.buffer import Buffer, Position, whitespace_between
from operand_align.indent import Indenter
from operand_align.modes import ModeBus
from operand_align.operators import OperatorSet
from operand_align.runtime import telemetry
from operand_align.syntax import Scope, ScopeResolver

APPLIED = "applied"
SKIP_UNIVERSAL_ARG = "universal-argument"
SKIP_NO_OPERATOR = "no-operator-at-point"
SKIP_NOT_FIRST_ON_LINE = "not-first-on-line"
SKIP_TOP_LEVEL = "top-level"
SKIP_IN_LITERAL = "in-literal"
SKIP_NESTED_STATEMENT = "nested-statement"
SKIP_AFTER_COMMA = "after-comma"
SKIP_REENTRANT = "reentrant"


class InputDispatch(Protocol):
    """Performs the literal insertion a key would normally do."""

    def insert(self, char: str) -> None:
        ...


class SelfInsertDispatch:
    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer

    def insert(self, char: str) -> None:
        self.buffer.insert_text(char)


@dataclass(frozen=True, slots=True)
class AlignmentOutcome:
    """What one electric keystroke did beyond inserting its character."""

    applied: bool
    reason: str
    padding: int = 0
    rows: Optional[Tuple[int, int]] = None


class AlignmentEngine:
    """Runs the electric transformation for operator keystrokes.

    The engine is the only component that mutates the buffer on behalf of
    alignment. Every disqualifying condition leaves the buffer exactly as the
    literal insertion left it.
    """

    def __init__(
        self,
        buffer: Buffer,
        resolver: ScopeResolver,
        indenter: Indenter,
        *,
        operators: Optional[OperatorSet] = None,
        dispatch: Optional[InputDispatch] = None,
        bus: Optional[ModeBus] = None,
        logger_name: str | None = None,
    ) -> None:
        self.buffer = buffer
        self.resolver = resolver
        self.indenter = indenter
        self.operators = operators or indenter.operators
        self.dispatch = dispatch or SelfInsertDispatch(buffer)
        self.bus = bus
        self._logger_name = logger_name or "operand_align.electric"
        self._inserting = False

    def on_operator_typed(
        self,
        char: str,
        universal_arg: bool = False,
        *,
        dispatch: Optional[InputDispatch] = None,
    ) -> AlignmentOutcome:
        """Insert ``char`` through the dispatcher, then align if it applies."""

        if self._inserting:
            # The dispatcher routed the key back here: insert it plainly.
            self.buffer.insert_text(char)
            return AlignmentOutcome(applied=False, reason=SKIP_REENTRANT)

        self._inserting = True
        try:
            (dispatch or self.dispatch).insert(char)
        finally:
            self._inserting = False
        return self.align_after_insert(char, universal_arg)

    def align_after_insert(
        self, char: str, universal_arg: bool = False
    ) -> AlignmentOutcome:
        """Post-insertion hook for hosts that already inserted ``char``."""

        with telemetry.span(
            "electric::align",
            logger_name=self._logger_name,
            component="electric",
            metadata={"char": char, "buffer": self.buffer.name},
        ) as handle:
            outcome = self._align(char, universal_arg)
            handle.add_metadata("reason", outcome.reason)
            if not outcome.applied:
                handle.skip(outcome.reason)

        if outcome.applied:
            telemetry.record_event(
                "align.applied",
                data={"padding": outcome.padding, "rows": outcome.rows},
                logger_name=self._logger_name,
            )
        if self.bus is not None:
            self.bus.emit("align.result", outcome)
        return outcome

    def _align(self, char: str, universal_arg: bool) -> AlignmentOutcome:
        if universal_arg:
            return AlignmentOutcome(applied=False, reason=SKIP_UNIVERSAL_ARG)

        row, column = self.buffer.cursor
        line = self.buffer.line(row)
        if column == 0 or line[column - 1] != char or char not in self.operators:
            return AlignmentOutcome(applied=False, reason=SKIP_NO_OPERATOR)

        run_start = column - 1
        while run_start > 0 and line[run_start - 1] in self.operators:
            run_start -= 1
        if line[:run_start].strip(" \t"):
            return AlignmentOutcome(applied=False, reason=SKIP_NOT_FIRST_ON_LINE)

        scope = self.resolver.resolve(Position(row, run_start))
        opener = scope.enclosing_open
        if opener is None:
            return AlignmentOutcome(applied=False, reason=SKIP_TOP_LEVEL)
        reason = self._disqualify(scope, opener, Position(row, column - 1))
        if reason is not None:
            return AlignmentOutcome(applied=False, reason=reason)

        with self.buffer.transaction("electric_align"):
            self.indenter.reindent_line(row)
            target = self.buffer.indentation_column(row) + 1
            padding = self._pad_first_operand(opener, target)
            last_row = self.buffer.cursor.row
            self.indenter.reindent_lines(opener.row + 1, last_row)

        return AlignmentOutcome(
            applied=True,
            reason=APPLIED,
            padding=padding,
            rows=(opener.row, last_row),
        )

    def _disqualify(
        self, scope: Scope, opener: Position, typed_at: Position
    ) -> Optional[str]:
        if scope.in_literal or self.resolver.resolve(typed_at).in_literal:
            return SKIP_IN_LITERAL
        statement = scope.statement_start
        if statement is not None and statement >= opener:
            return SKIP_NESTED_STATEMENT
        if scope.preceding_char is None or scope.preceding_char == ",":
            return SKIP_AFTER_COMMA
        return None

    def _pad_first_operand(self, opener: Position, target: int) -> int:
        """Push the token after ``opener`` right so it starts at ``target``.

        Only inserts whitespace; returns the number of characters inserted.
        """

        line = self.buffer.line(opener.row)
        column = opener.column + 1
        while column < len(line) and line[column] in " \t":
            column += 1
        if column >= len(line):
            return 0

        where = Position(opener.row, column)
        current = self.buffer.display_column(where)
        padding = whitespace_between(
            current,
            target,
            self.buffer.tab_width,
            use_tabs=self.indenter.style.use_tabs,
        )
        if padding:
            self.buffer.insert_text(padding, position=where)
        return len(padding)


__all__ = [
    "APPLIED",
    "AlignmentEngine",
    "AlignmentOutcome",
    "InputDispatch",
    "SKIP_AFTER_COMMA",
    "SKIP_IN_LITERAL",
    "SKIP_NESTED_STATEMENT",
    "SKIP_NOT_FIRST_ON_LINE",
    "SKIP_NO_OPERATOR",
    "SKIP_REENTRANT",
    "SKIP_TOP_LEVEL",
    "SKIP_UNIVERSAL_ARG",
    "SelfInsertDispatch",
]
