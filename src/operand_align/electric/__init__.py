"""Electric operator alignment: engine and minor mode."""

from .engine import (
    AlignmentEngine,
    AlignmentOutcome,
    InputDispatch,
    SelfInsertDispatch,
)
from .mode import ElectricOperatorMode

__all__ = [
    "AlignmentEngine",
    "AlignmentOutcome",
    "ElectricOperatorMode",
    "InputDispatch",
    "SelfInsertDispatch",
]
