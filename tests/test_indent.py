from __future__ import annotations

import pytest

from operand_align.buffer import Buffer, Position
from operand_align.indent import Indenter, IndentStyle, rules
from operand_align.syntax import CLikeScanner, ScopeResolver


def make_indenter(text: str, *, cursor: Position | None = None, **style: object) -> Indenter:
    buffer = Buffer.from_text(text, cursor=cursor)
    resolver = ScopeResolver(CLikeScanner(buffer))
    return Indenter(buffer, resolver, style=IndentStyle(**style))  # type: ignore[arg-type]


def test_operator_line_is_one_column_past_bracket() -> None:
    indenter = make_indenter("if (alpha\n&& beta")

    elem = indenter.analyze(1)

    assert elem.symbol == rules.ARGLIST_CONT_NONEMPTY
    assert elem.anchor == Position(0, 3)
    assert rules.lineup_operator_continuation(elem, indenter) == 4
    assert indenter.calculate(1) == 4


def test_plain_continuation_lines_up_under_bracket() -> None:
    indenter = make_indenter("if (alpha\nbeta")

    assert indenter.calculate(1) == 3


@pytest.mark.parametrize("line", ["// note", "/* note */", "  // note"])
def test_comment_lines_are_not_operator_lines(line: str) -> None:
    indenter = make_indenter(f"if (alpha\n{line}")

    assert indenter.calculate(1) == 3


def test_division_is_an_operator_line() -> None:
    indenter = make_indenter("if (alpha\n/ beta")

    assert indenter.calculate(1) == 4


def test_rule_is_idempotent() -> None:
    indenter = make_indenter("if (alpha\n      && beta")

    first = indenter.calculate(1)
    assert indenter.reindent_line(1) is True
    assert indenter.calculate(1) == first
    assert indenter.reindent_line(1) is False
    assert indenter.buffer.text() == "if (alpha\n    && beta"


def test_reindent_rebases_cursor() -> None:
    indenter = make_indenter("if (alpha\n&& beta")

    indenter.reindent_line(1)

    assert indenter.buffer.cursor == Position(1, 11)


def test_tab_indentation_uses_display_columns() -> None:
    indenter = make_indenter("\tif (alpha\n&& beta", use_tabs=True)

    indenter.reindent_line(1)

    assert indenter.calculate(1) == 12
    assert indenter.buffer.line(1) == "\t    && beta"


def test_reindent_lines_counts_changed_rows() -> None:
    indenter = make_indenter("if (alpha\n&& beta\n    || gamma)")

    changed = indenter.reindent_lines(1, 10)

    assert changed == 1
    assert indenter.buffer.text() == "if (alpha\n    && beta\n    || gamma)"


def test_close_paren_lines_up_under_open() -> None:
    indenter = make_indenter("foo(a,\n)")

    assert indenter.analyze(1).symbol == rules.ARGLIST_CLOSE
    assert indenter.calculate(1) == 3


def test_bracket_ending_line_uses_basic_offset() -> None:
    indenter = make_indenter("x = foo(\nbar", basic_offset=2)

    assert indenter.analyze(1).symbol == rules.ARGLIST_INTRO
    assert indenter.calculate(1) == 2


def test_block_statements_and_close() -> None:
    indenter = make_indenter("void f() {\nx = 1;\n}")

    assert indenter.analyze(1).symbol == rules.STATEMENT
    assert indenter.calculate(1) == 4
    assert indenter.analyze(2).symbol == rules.BLOCK_CLOSE
    assert indenter.calculate(2) == 0


def test_top_level_lines() -> None:
    indenter = make_indenter("x = 1;\n   y = 2;\nz = a\n+ b")

    assert indenter.analyze(1).symbol == rules.TOPMOST_INTRO
    assert indenter.calculate(1) == 0
    assert indenter.analyze(3).symbol == rules.STATEMENT_CONT
    assert indenter.calculate(3) == 4


def test_lines_inside_comments_keep_indentation() -> None:
    indenter = make_indenter("/* a\n   b")

    assert indenter.analyze(1).symbol == rules.LITERAL
    assert indenter.calculate(1) == 3


def test_with_rule_overrides_one_symbol() -> None:
    indenter = make_indenter("if (alpha\n&& beta")
    indenter.style = indenter.style.with_rule(
        rules.ARGLIST_CONT_NONEMPTY, rules.close_under_paren
    )

    assert indenter.calculate(1) == 3


def test_negative_basic_offset_rejected() -> None:
    with pytest.raises(ValueError):
        IndentStyle(basic_offset=-1)
