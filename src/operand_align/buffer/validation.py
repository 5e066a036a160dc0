"""Position validation shared by buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .state import Position


class BufferValidationError(RuntimeError):
    """Raised when a caller passes an out-of-bounds position or row."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


def ensure_position(document: BufferDocument, position: Position) -> Position:
    row, column = position
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", position=Position(row, column))
    if column < 0 or column > len(document.get_line(row)):
        raise BufferValidationError(
            "Column out of range", position=Position(row, column)
        )
    return Position(row, column)


def ensure_row(document: BufferDocument, row: int) -> int:
    if row < 0 or row >= document.line_count:
        raise BufferValidationError(f"Row {row} out of range")
    return row
