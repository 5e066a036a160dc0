"""Key input model and the insert mode used as the input dispatcher."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .insert_mode import ELECTRIC_OPERATORS_FLAG, InsertMode, KeymapDispatch

__all__ = [
    "ELECTRIC_OPERATORS_FLAG",
    "InsertMode",
    "KeyInput",
    "KeymapDispatch",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
]
