"""Action run for operator keys while electric alignment is enabled."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from operand_align.keymaps import ResolutionMatch
from operand_align.modes import (
    InsertMode,
    KeyInput,
    KeymapDispatch,
    ModeContext,
    ModeResult,
)

if TYPE_CHECKING:
    from operand_align.electric.engine import AlignmentEngine


def require_engine(context: ModeContext) -> "AlignmentEngine":
    engine = context.extras.get("alignment_engine")
    if engine is None:
        raise RuntimeError("ModeContext.extras missing 'alignment_engine'")
    return cast("AlignmentEngine", engine)


def electric_operator(
    context: ModeContext, match: ResolutionMatch, key: KeyInput
) -> ModeResult:
    engine = require_engine(context)
    char = key.insert_text or match.binding.key
    mode = context.extras.get("insert_mode")
    dispatch = KeymapDispatch(mode, key) if isinstance(mode, InsertMode) else None
    outcome = engine.on_operator_typed(char, key.universal_arg, dispatch=dispatch)
    return ModeResult(
        consumed=True,
        status="aligned" if outcome.applied else "inserted",
        message=outcome.reason,
    )


__all__ = ["electric_operator", "require_engine"]
