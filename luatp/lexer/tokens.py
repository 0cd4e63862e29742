"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from luatp.text import SourceLocation

START_MARKER: Final[str] = "<?lua"
END_MARKER: Final[str] = "lua?>"

SPECIAL_CHARS: Final[frozenset[str]] = frozenset("()*+|-,.^'\"\\/:;#&=<>?!%$")
"""Characters that always lex as a one-character Special token."""


class TokenKind(IntEnum):
    EOF = -1
    WHITESPACE = 1
    SYMBOL = 2
    SCRIPT_BLOCK_START = 3
    SCRIPT_BLOCK_END = 4
    SCRIPT_BLOCK = 5
    SPECIAL = 6
    UNKNOWN = 7
    NUMBER = 8

    @property
    def is_rendered(self) -> bool:
        """Script block pieces never reach the output."""
        return self not in (
            TokenKind.SCRIPT_BLOCK_START,
            TokenKind.SCRIPT_BLOCK_END,
            TokenKind.SCRIPT_BLOCK,
        )


@dataclass(slots=True, weakref_slot=True, eq=False)
class Token:
    """A classified piece of source text.

    `value` is mutable: macro invocations and script block output slots are
    cleared and then appended to by scripts.
    """

    kind: TokenKind
    value: str
    line: int
    file: str

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.file, self.line)

    def append(self, text: str) -> None:
        self.value += text
