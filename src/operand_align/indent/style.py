"""Indentation style: basic offset, tab policy, and the symbol-to-rule table."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from . import rules
from .rules import Rule

OPERAND_ALIGNED_OFFSETS: Mapping[str, Rule] = MappingProxyType(
    {
        rules.TOPMOST_INTRO: rules.flush_left,
        rules.STATEMENT: rules.statement_offset,
        rules.STATEMENT_CONT: rules.continuation_offset,
        rules.BLOCK_CLOSE: rules.block_close,
        rules.ARGLIST_INTRO: rules.statement_offset,
        rules.ARGLIST_CONT_NONEMPTY: rules.lineup_operator_continuation,
        rules.ARGLIST_CLOSE: rules.close_under_paren,
        rules.LITERAL: rules.keep_indentation,
    }
)


@dataclass(frozen=True, slots=True)
class IndentStyle:
    basic_offset: int = 4
    use_tabs: bool = False
    offsets: Mapping[str, Rule] = field(default_factory=lambda: OPERAND_ALIGNED_OFFSETS)

    def __post_init__(self) -> None:
        if self.basic_offset < 0:
            raise ValueError("basic_offset cannot be negative")
        object.__setattr__(self, "offsets", MappingProxyType(dict(self.offsets)))

    def rule_for(self, symbol: str) -> Rule:
        return self.offsets.get(symbol, rules.keep_indentation)

    def with_rule(self, symbol: str, rule: Rule) -> "IndentStyle":
        offsets = dict(self.offsets)
        offsets[symbol] = rule
        return replace(self, offsets=offsets)


__all__ = ["IndentStyle", "OPERAND_ALIGNED_OFFSETS"]
