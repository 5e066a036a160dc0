"""Text buffer façade combining document, cursor state, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from operand_align.runtime import telemetry

from .document import WHITESPACE, BufferDocument, display_width
from .state import BufferState, Position
from .undo import UndoHistory, UndoStep
from .validation import ensure_position, ensure_row


@dataclass(slots=True)
class BufferDelta:
    version: int
    cursor: Position
    label: str


class Buffer:
    """Editable text with a cursor that is rebased across every edit."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        history: Optional[UndoHistory] = None,
        tab_width: int = 8,
    ) -> None:
        if tab_width <= 0:
            raise ValueError("tab_width must be positive")
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.history = history or UndoHistory()
        self.tab_width = tab_width
        self._open_transaction: Optional[Transaction] = None

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        cursor: Optional[Position] = None,
        tab_width: int = 8,
    ) -> "Buffer":
        buffer = cls(
            name=name, document=BufferDocument.from_text(text), tab_width=tab_width
        )
        if cursor is not None:
            buffer.set_cursor(cursor)
        else:
            last = buffer.line_count - 1
            buffer.set_cursor(Position(last, len(buffer.line(last))))
        return buffer

    # -- reading -----------------------------------------------------------

    def text(self) -> str:
        return self.document.text()

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def line(self, row: int) -> str:
        return self.document.get_line(ensure_row(self.document, row))

    def char_at(self, position: Position) -> Optional[str]:
        """Character at ``position``; ``"\\n"`` at end of line, ``None`` at end of buffer."""

        row, column = ensure_position(self.document, position)
        line = self.document.get_line(row)
        if column < len(line):
            return line[column]
        if row < self.document.line_count - 1:
            return "\n"
        return None

    def display_column(self, position: Position) -> int:
        row, column = ensure_position(self.document, position)
        return display_width(self.document.get_line(row)[:column], self.tab_width)

    def indentation_length(self, row: int) -> int:
        return self.document.indentation_length(ensure_row(self.document, row))

    def indentation_column(self, row: int) -> int:
        return self.display_column(Position(row, self.indentation_length(row)))

    def first_nonblank(self, row: int) -> Optional[Position]:
        """Position of the first non-whitespace character of ``row``, if any."""

        line = self.line(row)
        index = self.document.indentation_length(row)
        if index >= len(line):
            return None
        return Position(row, index)

    def get_text_range(self, start: Position, end: Position) -> str:
        start = ensure_position(self.document, start)
        end = ensure_position(self.document, end)
        if start > end:
            start, end = end, start
        text = self.document.text()
        return text[self._offset(start) : self._offset(end)]

    # -- cursor ------------------------------------------------------------

    @property
    def cursor(self) -> Position:
        return self.state.cursor

    def set_cursor(self, position: Position) -> None:
        row, column = ensure_position(self.document, position)
        self.state.set_cursor(row, column)

    # -- editing -----------------------------------------------------------

    def transaction(self, label: str) -> "Transaction":
        """Group edits into one undo step; nested transactions join the outer one."""

        return Transaction(self, label)

    def replace_range(
        self, start: Position, end: Position, text: str, *, label: str
    ) -> BufferDelta:
        start = ensure_position(self.document, start)
        end = ensure_position(self.document, end)
        if start > end:
            start, end = end, start
        with self.transaction(label):
            # Whole-text rebuild: each edit costs O(buffer size).
            before = self.document.text()
            start_offset = self._offset(start)
            end_offset = self._offset(end)
            cursor_offset = self._offset(self.state.cursor)

            updated = before[:start_offset] + text + before[end_offset:]
            self.document = BufferDocument.from_text(
                updated, version=self.document.version + 1
            )
            self.document.dirty = True

            if cursor_offset >= end_offset:
                cursor_offset += len(text) - (end_offset - start_offset)
            elif cursor_offset >= start_offset:
                cursor_offset = start_offset + len(text)
            self.state.set_cursor(*self._position(cursor_offset))
            self.state.last_change_tick = self.document.version

        return BufferDelta(
            version=self.document.version, cursor=self.state.cursor, label=label
        )

    def insert_text(
        self, text: str, *, position: Optional[Position] = None
    ) -> BufferDelta:
        target = position if position is not None else self.state.cursor
        return self.replace_range(target, target, text, label="insert_text")

    def delete_range(self, start: Position, end: Position) -> BufferDelta:
        return self.replace_range(start, end, "", label="delete_range")

    def set_indentation(self, row: int, whitespace: str) -> bool:
        """Replace the leading whitespace of ``row``; returns whether it changed."""

        if whitespace.strip(WHITESPACE):
            raise ValueError("indentation must be whitespace only")
        current = self.indentation_length(row)
        if self.document.get_line(row)[:current] == whitespace:
            return False
        self.replace_range(
            Position(row, 0), Position(row, current), whitespace, label="indent"
        )
        return True

    def undo(self) -> bool:
        step = self.history.undo()
        if step is None:
            return False
        self._restore(step.before_text, step.cursor_before)
        return True

    def redo(self) -> bool:
        step = self.history.redo()
        if step is None:
            return False
        self._restore(step.after_text, step.cursor_after)
        return True

    # -- internals ---------------------------------------------------------

    def _restore(self, text: str, cursor: Position) -> None:
        self.document = BufferDocument.from_text(
            text, version=self.document.version + 1
        )
        self.document.dirty = True
        self.set_cursor(cursor)
        self.state.last_change_tick = self.document.version

    def _offset(self, position: Position) -> int:
        row, column = position
        offset = 0
        for index in range(row):
            offset += len(self.document.get_line(index)) + 1
        return offset + column

    def _position(self, offset: int) -> Position:
        running = 0
        lines = self.document.snapshot()
        for row, line in enumerate(lines):
            if offset <= running + len(line):
                return Position(row, offset - running)
            running += len(line) + 1
        return Position(len(lines) - 1, len(lines[-1]))


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._outer = False
        self._span_cm: Optional[ContextManager[object]] = None
        self._before_text = ""
        self._before_cursor = Position(0, 0)

    def __enter__(self) -> "Transaction":
        if self.buffer._open_transaction is not None:
            return self
        self._outer = True
        self.buffer._open_transaction = self
        self._before_text = self.buffer.document.text()
        self._before_cursor = self.buffer.state.cursor
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self._outer:
            return False
        self.buffer._open_transaction = None
        try:
            if exc_type is None:
                self.buffer.history.record(
                    UndoStep(
                        label=self.label,
                        before_text=self._before_text,
                        after_text=self.buffer.document.text(),
                        cursor_before=self._before_cursor,
                        cursor_after=self.buffer.state.cursor,
                    )
                )
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferDelta", "Transaction"]
