"""Built-in insert mode actions and bindings."""

from __future__ import annotations

from typing import Iterable

from operand_align.actions import editing as editing_actions
from operand_align.actions import electric as electric_actions

from .models import ActionRef, Binding
from .registry import KeymapRegistry

ELECTRIC_ACTION_ID = "electric.operator"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="editing.newline_and_indent",
        handler=editing_actions.newline_and_indent,
        description="Break the line and indent the new one",
    ),
    ActionRef(
        id="editing.indent_line",
        handler=editing_actions.indent_line,
        description="Re-indent the current line",
    ),
    ActionRef(
        id=ELECTRIC_ACTION_ID,
        handler=electric_actions.electric_operator,
        description="Insert an operator and align the enclosing expression",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="insert.enter",
        mode="insert",
        key="ENTER",
        action_id="editing.newline_and_indent",
        description="Newline and indent",
    ),
    Binding(
        id="insert.return",
        mode="insert",
        key="RETURN",
        action_id="editing.newline_and_indent",
        description="Newline and indent",
    ),
    Binding(
        id="insert.tab",
        mode="insert",
        key="TAB",
        action_id="editing.indent_line",
        description="Indent the current line",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register the built-in actions and insert mode bindings."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "ELECTRIC_ACTION_ID",
    "load_default_keymaps",
]
