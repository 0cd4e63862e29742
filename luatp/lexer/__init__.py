"""Lexer."""

from luatp.lexer.cursor import CharStack, PushbackCursor
from luatp.lexer.lexer import Lexer, dump_tokens, tokenize
from luatp.lexer.tokens import END_MARKER, SPECIAL_CHARS, START_MARKER, Token, TokenKind

__all__ = [
    "END_MARKER",
    "SPECIAL_CHARS",
    "START_MARKER",
    "CharStack",
    "Lexer",
    "PushbackCursor",
    "Token",
    "TokenKind",
    "dump_tokens",
    "tokenize",
]
