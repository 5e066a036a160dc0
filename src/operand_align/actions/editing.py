"""Plain editing commands bound in insert mode."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from operand_align.keymaps import ResolutionMatch
from operand_align.modes import KeyInput, ModeContext, ModeResult

if TYPE_CHECKING:
    from operand_align.indent import Indenter


def newline_and_indent(
    context: ModeContext, match: ResolutionMatch, key: KeyInput
) -> ModeResult:
    del match, key
    indenter = context.extras.get("indenter")
    if indenter is None:
        raise RuntimeError("ModeContext.extras missing 'indenter'")
    buffer = context.buffer
    with buffer.transaction("newline_and_indent"):
        buffer.insert_text("\n")
        cast("Indenter", indenter).reindent_line(buffer.cursor.row)
    return ModeResult(consumed=True, status="newline")


def indent_line(
    context: ModeContext, match: ResolutionMatch, key: KeyInput
) -> ModeResult:
    del match, key
    indenter = context.extras.get("indenter")
    if indenter is None:
        raise RuntimeError("ModeContext.extras missing 'indenter'")
    changed = cast("Indenter", indenter).reindent_line(context.buffer.cursor.row)
    return ModeResult(consumed=True, status="indented" if changed else "noop")


__all__ = ["indent_line", "newline_and_indent"]
