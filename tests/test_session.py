from __future__ import annotations

from typing import List

from operand_align.buffer import Position
from operand_align.config import AlignConfig
from operand_align.modes import ELECTRIC_OPERATORS_FLAG, KeyInput
from operand_align.operators import OperatorSet
from operand_align.session import EditorSession


def test_typing_operators_aligns_the_expression() -> None:
    session = EditorSession("if (alpha\n")

    [result] = session.type_text("&")

    assert result.status == "aligned"
    assert result.message == "applied"
    assert session.text() == "if ( alpha\n    &"

    session.type_text("&")

    assert session.text() == "if ( alpha\n    &&"
    assert session.cursor == Position(1, 6)


def test_typing_a_whole_condition() -> None:
    session = EditorSession("if (alpha")

    session.type_text("\n&& beta\n|| gamma")

    assert session.text() == "if ( alpha\n    && beta\n    || gamma"


def test_newline_indents_under_bracket() -> None:
    session = EditorSession("foo(alpha,")

    session.type_text("\nbeta")

    assert session.text() == "foo(alpha,\n   beta"


def test_skipped_alignment_still_inserts() -> None:
    session = EditorSession("alpha(bar,\n")

    [result] = session.type_text("&")

    assert result.status == "inserted"
    assert result.message == "after-comma"
    assert session.text() == "alpha(bar,\n&"


def test_universal_argument_inserts_plainly() -> None:
    session = EditorSession("if (alpha\n")

    [result] = session.type_text("&", universal_arg=True)

    assert result.message == "universal-argument"
    assert session.text() == "if (alpha\n&"


def test_disabled_mode_installs_no_bindings() -> None:
    session = EditorSession("if (alpha\n", config=AlignConfig(electric=False))

    session.type_text("&")

    assert session.text() == "if (alpha\n&"
    assert not session.keymaps.has_binding(session.electric_mode.binding_id("&"))


def test_toggle_installs_and_removes_bindings() -> None:
    session = EditorSession("if (alpha\n")
    events: List[object] = []
    session.context.bus.subscribe("electric.toggle", events.append)
    operators = list(session.config.operators)

    assert session.electric_mode.toggle() is False
    assert session.context.flags[ELECTRIC_OPERATORS_FLAG] is False
    assert not any(
        session.keymaps.has_binding(session.electric_mode.binding_id(char))
        for char in operators
    )

    assert session.electric_mode.toggle() is True
    assert all(
        session.keymaps.has_binding(session.electric_mode.binding_id(char))
        for char in operators
    )
    assert events == [{"enabled": False}, {"enabled": True}]


def test_set_enabled_is_idempotent() -> None:
    session = EditorSession()
    revision = session.keymaps.revision()

    session.electric_mode.set_enabled(True)

    assert session.keymaps.revision() == revision


def test_custom_operator_set_limits_electric_keys() -> None:
    config = AlignConfig(operators=OperatorSet.from_chars("&|"))
    session = EditorSession("if (alpha\n", config=config)

    [result] = session.type_text("+")

    assert result.status == "inserted"
    assert session.text() == "if (alpha\n+"


def test_undo_reverts_alignment_then_insertion() -> None:
    session = EditorSession("if (alpha\n")
    session.type_text("&")

    assert session.buffer.undo()
    assert session.text() == "if (alpha\n&"
    assert session.buffer.undo()
    assert session.text() == "if (alpha\n"
    assert session.buffer.redo()
    assert session.text() == "if (alpha\n&"


def test_tab_reindents_current_line() -> None:
    session = EditorSession("if (alpha\n&& beta", cursor=Position(1, 0))

    result = session.handle_key(KeyInput(key="TAB"))

    assert result.status == "indented"
    assert session.text() == "if (alpha\n    && beta"
    assert session.handle_key(KeyInput(key="TAB")).status == "noop"


def test_unbound_named_key_is_not_consumed() -> None:
    session = EditorSession("x")

    result = session.handle_key(KeyInput(key="F5"))

    assert result.consumed is False
    assert session.text() == "x"
