"""Best-effort scope resolution on top of an injected ``SyntaxProvider``."""

from __future__ import annotations

from operand_align.buffer import Position
from operand_align.runtime import telemetry

from .provider import NO_SCOPE, Scope, SyntaxProvider


class ScopeResolver:
    """Answers "what encloses this position?" and degrades to ``NO_SCOPE``."""

    def __init__(
        self, provider: SyntaxProvider, *, logger_name: str | None = None
    ) -> None:
        self.provider = provider
        self._logger_name = logger_name or "operand_align.syntax"

    def resolve(self, position: Position) -> Scope:
        try:
            return self.provider.scan(position)
        except Exception as exc:
            telemetry.record_event(
                "scope.unresolved",
                level="debug",
                data={
                    "position": position,
                    "error": type(exc).__name__,
                    "detail": str(exc),
                },
                logger_name=self._logger_name,
            )
            return NO_SCOPE


__all__ = ["ScopeResolver"]
