"""Host indentation engine: classify a line, then apply the matching rule."""

from __future__ import annotations

from typing import Optional

from operand_align.buffer import Buffer, Position, ensure_row, whitespace_between
from operand_align.operators import OperatorSet
from operand_align.runtime import telemetry
from operand_align.syntax import ScopeResolver

from . import rules
from .rules import LangElem
from .style import IndentStyle


class Indenter:
    """Computes and applies indentation for rows of one buffer.

    Each row is classified into a :class:`LangElem` from the scope at its
    first non-blank character; ``style.offsets`` maps the element's symbol
    to the rule that yields the target display column.
    """

    def __init__(
        self,
        buffer: Buffer,
        resolver: ScopeResolver,
        *,
        style: Optional[IndentStyle] = None,
        operators: Optional[OperatorSet] = None,
        logger_name: str | None = None,
    ) -> None:
        self.buffer = buffer
        self.resolver = resolver
        self.style = style or IndentStyle()
        self.operators = operators or OperatorSet.default()
        self._logger_name = logger_name or "operand_align.indent"

    def analyze(self, row: int) -> LangElem:
        ensure_row(self.buffer.document, row)
        start = Position(row, self.buffer.indentation_length(row))
        line = self.buffer.line(row)
        first_char = line[start.column] if start.column < len(line) else None
        scope = self.resolver.resolve(start)

        if scope.in_literal:
            return LangElem(rules.LITERAL, row)

        statement = scope.statement_start
        if scope.top_level:
            if statement is not None and statement < start:
                return LangElem(rules.STATEMENT_CONT, row, statement)
            return LangElem(rules.TOPMOST_INTRO, row)

        opener = scope.enclosing_open
        if scope.open_char == "{":
            if first_char == "}":
                return LangElem(rules.BLOCK_CLOSE, row, opener)
            if statement is not None and opener < statement < start:
                return LangElem(rules.STATEMENT_CONT, row, statement)
            return LangElem(rules.STATEMENT, row, opener)

        if first_char is not None and first_char in ")]":
            return LangElem(rules.ARGLIST_CLOSE, row, opener)
        if self._open_ends_line(opener):
            return LangElem(rules.ARGLIST_INTRO, row, opener)
        return LangElem(rules.ARGLIST_CONT_NONEMPTY, row, opener)

    def calculate(self, row: int) -> int:
        elem = self.analyze(row)
        column = self.style.rule_for(elem.symbol)(elem, self)
        return max(0, column)

    def reindent_line(self, row: int) -> bool:
        column = self.calculate(row)
        whitespace = whitespace_between(
            0, column, self.buffer.tab_width, use_tabs=self.style.use_tabs
        )
        return self.buffer.set_indentation(row, whitespace)

    def reindent_lines(self, first: int, last: int) -> int:
        """Re-indent rows ``first..last`` inclusive; returns how many changed."""

        changed = 0
        with telemetry.span(
            "indent::reindent_lines",
            logger_name=self._logger_name,
            component="indent",
            metadata={"first": first, "last": last},
        ) as handle, self.buffer.transaction("reindent"):
            for row in range(max(first, 0), min(last, self.buffer.line_count - 1) + 1):
                if self.reindent_line(row):
                    changed += 1
            handle.add_metadata("changed", changed)
        return changed

    def default_align_under_bracket(self, elem: LangElem) -> int:
        return rules.close_under_paren(elem, self)

    def statement_indentation(self, position: Position) -> int:
        """Indentation column of the row where the statement holding ``position`` starts."""

        statement = self.resolver.resolve(position).statement_start
        row = statement.row if statement is not None else position.row
        return self.buffer.indentation_column(row)

    def _open_ends_line(self, opener: Optional[Position]) -> bool:
        if opener is None:
            return False
        rest = self.buffer.line(opener.row)[opener.column + 1 :].strip()
        return not rest or rest.startswith(("//", "/*"))


__all__ = ["Indenter"]
