from dataclasses import dataclass
from typing import Final

ARGUMENT_TRIM_CHARS: Final[str] = " \t\n\r"
"""Characters stripped from both ends of a raw macro argument."""

_DISPLAY_ESCAPES: Final[tuple[tuple[str, str], ...]] = (
    ("\r", "\\r"),
    ("\n", "\\n"),
    ("\t", "\\t"),
)


@dataclass(frozen=True, slots=True, order=True)
class SourceLocation:
    """Position of a token in its own source file.

    `line` is 0-based; it is shown 1-based to humans.
    """

    file: str
    line: int

    def __post_init__(self):
        if self.line < 0:
            raise ValueError("SourceLocation line cannot be negative")

    @property
    def display_line(self) -> int:
        """1-based line number for diagnostics."""
        return self.line + 1

    def __str__(self) -> str:
        return f"{self.file}:{self.display_line}"


def escape_for_display(text: str) -> str:
    """Escape carriage returns, newlines and tabs so the text fits on one line."""
    for raw, escaped in _DISPLAY_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def count_newlines(text: str) -> int:
    """Count `\\n` characters in the text."""
    return text.count("\n")


def trim_argument(text: str) -> str:
    return text.strip(ARGUMENT_TRIM_CHARS)
