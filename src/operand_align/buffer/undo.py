"""Undo history: one step per outermost buffer transaction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .state import Position


@dataclass(frozen=True, slots=True)
class UndoStep:
    """Whole-text snapshots taken around one transaction.

    ``cursor_before`` is where undo leaves the cursor and ``cursor_after``
    where redo does; both are the cursor as rebased by the edits themselves.
    """

    label: str
    before_text: str
    after_text: str
    cursor_before: Position
    cursor_after: Position

    @property
    def changed(self) -> bool:
        return self.before_text != self.after_text


class UndoHistory:
    """Done and undone stacks; recording a new step clears the undone one."""

    def __init__(self, *, limit: int = 500) -> None:
        if limit <= 0:
            raise ValueError("undo limit must be positive")
        self.limit = limit
        self._done: List[UndoStep] = []
        self._undone: List[UndoStep] = []

    def record(self, step: UndoStep) -> bool:
        """Store ``step`` unless it left the text unchanged."""

        if not step.changed:
            return False
        self._done.append(step)
        if len(self._done) > self.limit:
            del self._done[0]
        self._undone.clear()
        return True

    def undo(self) -> Optional[UndoStep]:
        if not self._done:
            return None
        step = self._done.pop()
        self._undone.append(step)
        return step

    def redo(self) -> Optional[UndoStep]:
        if not self._undone:
            return None
        step = self._undone.pop()
        self._done.append(step)
        return step

    def labels(self) -> List[str]:
        """Labels of the undoable steps, oldest first."""

        return [step.label for step in self._done]

    def redo_labels(self) -> List[str]:
        return [step.label for step in reversed(self._undone)]
