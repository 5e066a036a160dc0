"""Language elements and the per-symbol indentation rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from operand_align.buffer import Position

if TYPE_CHECKING:
    from .indenter import Indenter

TOPMOST_INTRO = "topmost-intro"
STATEMENT = "statement"
STATEMENT_CONT = "statement-cont"
BLOCK_CLOSE = "block-close"
ARGLIST_INTRO = "arglist-intro"
ARGLIST_CONT_NONEMPTY = "arglist-cont-nonempty"
ARGLIST_CLOSE = "arglist-close"
LITERAL = "literal"


@dataclass(frozen=True, slots=True)
class LangElem:
    """Syntactic context of one line handed to an indentation rule.

    ``anchor`` is the enclosing bracket for block and arglist symbols and the
    statement start for ``statement-cont``.
    """

    symbol: str
    row: int
    anchor: Optional[Position] = None


Rule = Callable[[LangElem, "Indenter"], int]


def flush_left(elem: LangElem, indenter: "Indenter") -> int:
    del elem, indenter
    return 0


def keep_indentation(elem: LangElem, indenter: "Indenter") -> int:
    return indenter.buffer.indentation_column(elem.row)


def close_under_paren(elem: LangElem, indenter: "Indenter") -> int:
    """Line up under the enclosing opening bracket."""

    if elem.anchor is None:
        return keep_indentation(elem, indenter)
    return indenter.buffer.display_column(elem.anchor)


def lineup_operator_continuation(elem: LangElem, indenter: "Indenter") -> int:
    """Put an operator-first continuation one column right of the bracket.

    Lines that do not start with an operator, and lines starting with ``//``
    or ``/*``, get the plain bracket alignment.
    """

    column = indenter.default_align_under_bracket(elem)
    if indenter.operators.starts_operator_line(indenter.buffer.line(elem.row)):
        return column + 1
    return column


def statement_offset(elem: LangElem, indenter: "Indenter") -> int:
    """One ``basic_offset`` past the statement that owns the anchor."""

    if elem.anchor is None:
        return indenter.style.basic_offset
    return indenter.statement_indentation(elem.anchor) + indenter.style.basic_offset


def block_close(elem: LangElem, indenter: "Indenter") -> int:
    if elem.anchor is None:
        return 0
    return indenter.statement_indentation(elem.anchor)


def continuation_offset(elem: LangElem, indenter: "Indenter") -> int:
    if elem.anchor is None:
        return keep_indentation(elem, indenter)
    anchor_indent = indenter.buffer.indentation_column(elem.anchor.row)
    return anchor_indent + indenter.style.basic_offset


__all__ = [
    "ARGLIST_CLOSE",
    "ARGLIST_CONT_NONEMPTY",
    "ARGLIST_INTRO",
    "BLOCK_CLOSE",
    "LITERAL",
    "STATEMENT",
    "STATEMENT_CONT",
    "TOPMOST_INTRO",
    "LangElem",
    "Rule",
    "block_close",
    "close_under_paren",
    "continuation_offset",
    "flush_left",
    "keep_indentation",
    "lineup_operator_continuation",
    "statement_offset",
]
