"""Position and cursor state for text buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Position(NamedTuple):
    """Zero-based ``(row, column)`` location; tuples order by document order."""

    row: int
    column: int

    def shifted(self, columns: int) -> "Position":
        return Position(self.row, self.column + columns)


@dataclass(slots=True)
class BufferState:
    """Mutable cursor info tied to a document version."""

    cursor: Position = Position(0, 0)
    last_change_tick: int = 0

    def set_cursor(self, row: int, column: int) -> None:
        self.cursor = Position(row, column)
