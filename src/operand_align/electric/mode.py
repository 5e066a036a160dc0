"""Minor mode that binds every operator key to the electric action."""

from __future__ import annotations

from typing import Optional

from operand_align.keymaps import Binding, WhenClause
from operand_align.keymaps.defaults import ELECTRIC_ACTION_ID, DEFAULT_ACTIONS
from operand_align.modes import ELECTRIC_OPERATORS_FLAG, InsertMode, ModeContext
from operand_align.operators import OperatorSet
from operand_align.runtime import telemetry


class ElectricOperatorMode:
    """Installs and removes the per-operator insert mode bindings.

    Owned by the host; the alignment engine itself keeps no mode state.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        operators: Optional[OperatorSet] = None,
        mode_name: str = InsertMode.name,
    ) -> None:
        self.context = context
        self.operators = operators or OperatorSet.default()
        self.mode_name = mode_name
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def binding_id(self, char: str) -> str:
        return f"electric.operator[{char}]"

    def set_enabled(self, enabled: bool) -> None:
        if enabled == self._enabled:
            return
        keymaps = self.context.keymaps
        if enabled:
            if not keymaps.has_action(ELECTRIC_ACTION_ID):
                action = next(a for a in DEFAULT_ACTIONS if a.id == ELECTRIC_ACTION_ID)
                keymaps.register_action(action)
            for char in self.operators:
                keymaps.register_binding(
                    Binding(
                        id=self.binding_id(char),
                        mode=self.mode_name,
                        key=char,
                        action_id=ELECTRIC_ACTION_ID,
                        description=f"Electric '{char}'",
                        when=(WhenClause(ELECTRIC_OPERATORS_FLAG),),
                        priority=10,
                    ),
                    replace=True,
                )
        else:
            for char in self.operators:
                keymaps.unregister_binding(self.binding_id(char))

        self._enabled = enabled
        self.context.flags[ELECTRIC_OPERATORS_FLAG] = enabled
        telemetry.record_event(
            "electric.toggle",
            data={"enabled": enabled, "operators": "".join(self.operators)},
        )
        self.context.bus.emit("electric.toggle", {"enabled": enabled})

    def toggle(self) -> bool:
        self.set_enabled(not self._enabled)
        return self._enabled


__all__ = ["ElectricOperatorMode"]
