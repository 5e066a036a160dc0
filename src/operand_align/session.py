"""Host integration: one buffer wired to the scanner, indenter, and engine."""

from __future__ import annotations

from typing import List, Optional

from operand_align.buffer import Buffer, Position
from operand_align.config import AlignConfig
from operand_align.electric import AlignmentEngine, ElectricOperatorMode
from operand_align.indent import Indenter
from operand_align.keymaps import KeymapRegistry
from operand_align.keymaps.defaults import load_default_keymaps
from operand_align.modes import (
    InsertMode,
    KeyInput,
    KeymapDispatch,
    ModeContext,
    ModeResult,
)
from operand_align.syntax import CLikeScanner, ScopeResolver


class EditorSession:
    """Everything a host needs to type into one buffer with alignment enabled."""

    def __init__(
        self,
        text: str = "",
        *,
        config: Optional[AlignConfig] = None,
        cursor: Optional[Position] = None,
        name: str = "default",
    ) -> None:
        self.config = config or AlignConfig()
        self.buffer = Buffer.from_text(
            text, name=name, cursor=cursor, tab_width=self.config.tab_width
        )
        self.scanner = CLikeScanner(self.buffer)
        self.resolver = ScopeResolver(self.scanner)
        self.indenter = Indenter(
            self.buffer,
            self.resolver,
            style=self.config.indent_style(),
            operators=self.config.operators,
        )
        self.keymaps = KeymapRegistry(logger_name="operand_align.keymaps")
        load_default_keymaps(self.keymaps)
        self.context = ModeContext(buffer=self.buffer, keymaps=self.keymaps)
        self.insert_mode = InsertMode(self.context)
        self.engine = AlignmentEngine(
            self.buffer,
            self.resolver,
            self.indenter,
            operators=self.config.operators,
            dispatch=KeymapDispatch(self.insert_mode),
            bus=self.context.bus,
        )
        self.context.extras.update(
            {
                "alignment_engine": self.engine,
                "indenter": self.indenter,
                "insert_mode": self.insert_mode,
            }
        )
        self.electric_mode = ElectricOperatorMode(
            self.context, operators=self.config.operators
        )
        self.electric_mode.set_enabled(self.config.electric)

    def text(self) -> str:
        return self.buffer.text()

    @property
    def cursor(self) -> Position:
        return self.buffer.cursor

    def handle_key(self, key: KeyInput) -> ModeResult:
        return self.insert_mode.handle_key(key)

    def type_text(self, text: str, *, universal_arg: bool = False) -> List[ModeResult]:
        """Feed ``text`` one character at a time; ``"\\n"`` presses ENTER."""

        results: List[ModeResult] = []
        for char in text:
            if char == "\n":
                results.append(self.newline())
            else:
                results.append(
                    self.handle_key(
                        KeyInput(key=char, text=char, universal_arg=universal_arg)
                    )
                )
        return results

    def newline(self) -> ModeResult:
        return self.handle_key(KeyInput(key="ENTER"))


__all__ = ["EditorSession"]
