"""Text buffer collaborator: document storage, cursor, edits, and undo."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import BufferDocument, display_width, whitespace_between
from .state import BufferState, Position
from .undo import UndoHistory, UndoStep
from .validation import BufferValidationError, ensure_position, ensure_row

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "Position",
    "Transaction",
    "UndoHistory",
    "UndoStep",
    "display_width",
    "ensure_position",
    "ensure_row",
    "whitespace_between",
]
