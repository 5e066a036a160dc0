"""List-of-lines text storage with display-column helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

WHITESPACE = " \t"


def display_width(text: str, tab_width: int, start: int = 0) -> int:
    """Return the display column reached after rendering ``text`` from ``start``."""

    column = start
    for char in text:
        if char == "\t":
            column += tab_width - (column % tab_width)
        else:
            column += 1
    return column


@dataclass(slots=True)
class BufferDocument:
    """Versioned list of lines; every edit returns a new document."""

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        lines = text.split("\n")
        return cls(_lines=lines, version=version, dirty=False)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "BufferDocument":
        """Return a document with rows ``[start:end]`` replaced by ``new_lines``."""

        lines = list(self._lines)
        lines[start:end] = list(new_lines)
        return BufferDocument(_lines=lines, version=self.version + 1, dirty=True)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def indentation_length(self, index: int) -> int:
        """Number of leading whitespace characters on row ``index``."""

        line = self._lines[index]
        return len(line) - len(line.lstrip(WHITESPACE))


def whitespace_between(
    start: int, target: int, tab_width: int, *, use_tabs: bool = False
) -> str:
    """Whitespace that advances the display column from ``start`` to ``target``."""

    if target <= start:
        return ""
    if not use_tabs:
        return " " * (target - start)
    chunks = []
    column = start
    while True:
        next_stop = column + tab_width - (column % tab_width)
        if next_stop > target:
            break
        chunks.append("\t")
        column = next_stop
    chunks.append(" " * (target - column))
    return "".join(chunks)
