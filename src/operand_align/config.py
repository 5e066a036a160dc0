"""Engine configuration with ``OPERAND_ALIGN_*`` environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from operand_align.indent import IndentStyle
from operand_align.operators import OperatorSet

ENV_PREFIX = "OPERAND_ALIGN_"
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _read(environ: Mapping[str, str], name: str) -> Optional[str]:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = _read(environ, name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def _read_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _read(environ, name)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True, slots=True)
class AlignConfig:
    operators: OperatorSet = field(default_factory=OperatorSet.default)
    tab_width: int = 8
    basic_offset: int = 4
    use_tabs: bool = False
    electric: bool = True

    def __post_init__(self) -> None:
        if self.tab_width <= 0:
            raise ValueError("tab_width must be positive")
        if self.basic_offset < 0:
            raise ValueError("basic_offset cannot be negative")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AlignConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        chars = _read(env, "OPERATORS")
        return cls(
            operators=OperatorSet.from_chars(chars) if chars else defaults.operators,
            tab_width=_read_int(env, "TAB_WIDTH", defaults.tab_width),
            basic_offset=_read_int(env, "BASIC_OFFSET", defaults.basic_offset),
            use_tabs=_read_flag(env, "USE_TABS", defaults.use_tabs),
            electric=_read_flag(env, "ELECTRIC", defaults.electric),
        )

    def indent_style(self) -> IndentStyle:
        return IndentStyle(basic_offset=self.basic_offset, use_tabs=self.use_tabs)


__all__ = ["AlignConfig", "ENV_PREFIX"]
