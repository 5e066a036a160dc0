"""Indentation engine and the operator-continuation lineup rule."""

from .indenter import Indenter
from .rules import (
    LangElem,
    Rule,
    close_under_paren,
    lineup_operator_continuation,
)
from .style import OPERAND_ALIGNED_OFFSETS, IndentStyle

__all__ = [
    "Indenter",
    "IndentStyle",
    "LangElem",
    "OPERAND_ALIGNED_OFFSETS",
    "Rule",
    "close_under_paren",
    "lineup_operator_continuation",
]
