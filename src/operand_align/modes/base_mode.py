"""Base classes and shared types for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from operand_align.buffer import Buffer
from operand_align.keymaps import KeymapRegistry


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None
    universal_arg: bool = False

    @property
    def token(self) -> str:
        if self.modifiers:
            return f"{'+'.join(self.modifiers)}+{self.key}"
        return self.key

    @property
    def insert_text(self) -> Optional[str]:
        if self.text is not None:
            return self.text
        if len(self.key) == 1 and not self.modifiers:
            return self.key
        return None


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting components publish structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode and action can access."""

    buffer: Buffer
    keymaps: KeymapRegistry
    bus: ModeBus = field(default_factory=ModeBus)
    flags: Dict[str, bool] = field(default_factory=dict)
    extras: Dict[str, object] = field(default_factory=dict)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError
