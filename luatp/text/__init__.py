"""Source positions and small text helpers."""

from luatp.text.text import (
    ARGUMENT_TRIM_CHARS,
    SourceLocation,
    count_newlines,
    escape_for_display,
    trim_argument,
)

__all__ = [
    "ARGUMENT_TRIM_CHARS",
    "SourceLocation",
    "count_newlines",
    "escape_for_display",
    "trim_argument",
]
