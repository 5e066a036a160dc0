"""Operand alignment for operator-first C-like continuation lines."""

__all__ = [
    "actions",
    "buffer",
    "config",
    "electric",
    "indent",
    "keymaps",
    "modes",
    "operators",
    "runtime",
    "session",
    "syntax",
]

__version__ = "0.1.0"
