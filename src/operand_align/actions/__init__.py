"""Action handlers invoked through keymap bindings."""

from .editing import indent_line, newline_and_indent
from .electric import electric_operator, require_engine

__all__ = [
    "electric_operator",
    "indent_line",
    "newline_and_indent",
    "require_engine",
]
