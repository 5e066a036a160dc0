"""The fixed set of characters treated as expression operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

DEFAULT_OPERATORS = ":?!-+|&*%<>=/"
_FORBIDDEN = set(" \t\n()[]{};,\"'")


@dataclass(frozen=True, slots=True)
class OperatorSet:
    """Immutable operator characters used to classify and trigger alignment."""

    characters: frozenset[str]

    def __post_init__(self) -> None:
        if not self.characters:
            raise ValueError("operator set cannot be empty")
        for char in self.characters:
            if len(char) != 1:
                raise ValueError(f"operators must be single characters, got {char!r}")
            if char in _FORBIDDEN:
                raise ValueError(f"{char!r} cannot be used as an operator")

    @classmethod
    def default(cls) -> "OperatorSet":
        return cls.from_chars(DEFAULT_OPERATORS)

    @classmethod
    def from_chars(cls, chars: Iterable[str]) -> "OperatorSet":
        return cls(frozenset(chars))

    def __contains__(self, char: object) -> bool:
        return char in self.characters

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.characters))

    def __len__(self) -> int:
        return len(self.characters)

    def starts_operator_line(self, text: str) -> bool:
        """Whether stripped ``text`` begins with an operator rather than a comment."""

        stripped = text.lstrip(" \t")
        if not stripped or stripped[0] not in self.characters:
            return False
        return not stripped.startswith(("//", "/*"))


__all__ = ["DEFAULT_OPERATORS", "OperatorSet"]
