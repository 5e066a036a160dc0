"""Insert mode: run the bound command for a key, or insert its text."""

from __future__ import annotations

from typing import Dict, Optional

from operand_align.keymaps import ResolutionMatch
from operand_align.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeResult

ELECTRIC_OPERATORS_FLAG = "electric_operators"


class InsertMode(Mode):
    name = "insert"

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = self.context.keymaps.resolve(
            self.name, key.token, context=self.context.flags
        )
        if match is not None:
            return self._execute_match(match, key)
        return self.self_insert(key)

    def dispatch_plain(self, key: KeyInput) -> ModeResult:
        """Run whatever ``key`` would do with electric operators switched off."""

        flags: Dict[str, bool] = dict(self.context.flags)
        flags[ELECTRIC_OPERATORS_FLAG] = False
        match = self.context.keymaps.resolve(self.name, key.token, context=flags)
        if match is not None:
            return self._execute_match(match, key)
        return self.self_insert(key)

    def self_insert(self, key: KeyInput) -> ModeResult:
        text = key.insert_text
        if not text:
            return ModeResult(consumed=False)
        self.context.buffer.insert_text(text)
        return ModeResult(consumed=True, status="inserted")

    def _execute_match(self, match: ResolutionMatch, key: KeyInput) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match, key)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


class KeymapDispatch:
    """``InputDispatch`` that inserts through ``InsertMode.dispatch_plain``."""

    def __init__(self, mode: InsertMode, key: Optional[KeyInput] = None) -> None:
        self.mode = mode
        self.key = key

    def insert(self, char: str) -> None:
        key = self.key if self.key is not None else KeyInput(key=char, text=char)
        self.mode.dispatch_plain(key)


__all__ = ["ELECTRIC_OPERATORS_FLAG", "InsertMode", "KeymapDispatch"]
