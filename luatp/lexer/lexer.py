"""Lexer."""

import sys
import unicodedata
from collections.abc import Callable, Iterable
from typing import TextIO

from luatp.diagnostics import LEXER_UNTERMINATED_SCRIPT_BLOCK, PreprocessError
from luatp.lexer.cursor import PushbackCursor
from luatp.lexer.tokens import END_MARKER, SPECIAL_CHARS, START_MARKER, Token, TokenKind
from luatp.stream import TokenStream
from luatp.text import SourceLocation, escape_for_display


def _is_number(ch: str) -> bool:
    return unicodedata.category(ch).startswith("N")


def _is_punct(ch: str) -> bool:
    return unicodedata.category(ch).startswith("P")


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def _is_symbol_char(ch: str) -> bool:
    return _is_letter(ch) or _is_number(ch) or ch == "_"


class Lexer:
    """Splits one file's text into tokens, keeping every character."""

    def __init__(self, source: str, file: str = "") -> None:
        self._cursor = PushbackCursor(source)
        self._file = file

    def next_token_group(self) -> list[Token]:
        """Lex the next token, or the four tokens that make up a script block."""
        ch = self._cursor.peek()
        if ch is None:
            return [self._token(TokenKind.EOF, "")]

        if ch.isspace():
            return [self._read_while(TokenKind.WHITESPACE, str.isspace)]

        if _is_number(ch):
            return [self._read_while(TokenKind.NUMBER, lambda c: _is_number(c) or c == ".")]

        if ch == "<" and self._cursor.matches_ahead(START_MARKER):
            return self._read_script_block()

        if ch in SPECIAL_CHARS:
            self._cursor.skip(1)
            return [self._token(TokenKind.SPECIAL, ch)]

        if _is_punct(ch):
            return [self._read_while(TokenKind.SPECIAL, _is_punct)]

        if _is_letter(ch):
            return [self._read_while(TokenKind.SYMBOL, _is_symbol_char)]

        token = self._token(TokenKind.UNKNOWN, ch)
        self._cursor.skip(1)
        return [token]

    def lex(self) -> list[Token]:
        """Lex the whole source. The EOF token is not included."""
        tokens: list[Token] = []
        while not self._cursor.at_end:
            group = self.next_token_group()
            if group[0].kind == TokenKind.EOF:
                break
            tokens.extend(group)
        return tokens

    def _token(self, kind: TokenKind, value: str, line: int | None = None) -> Token:
        return Token(kind, value, self._cursor.line if line is None else line, self._file)

    def _read_while(self, kind: TokenKind, predicate: Callable[[str], bool]) -> Token:
        line = self._cursor.line
        chars: list[str] = []
        while (ch := self._cursor.advance()) is not None:
            if not predicate(ch):
                self._cursor.push_back(ch)
                break
            chars.append(ch)
        return self._token(kind, "".join(chars), line)

    def _read_until(self, marker: str) -> tuple[str, bool]:
        """Consume text up to (not including) `marker`; report whether it was found."""
        first = marker[0]
        chars: list[str] = []
        while (ch := self._cursor.peek()) is not None:
            if ch == first and self._cursor.matches_ahead(marker):
                return "".join(chars), True
            chars.append(ch)
            self._cursor.advance()
        return "".join(chars), False

    def _read_script_block(self) -> list[Token]:
        start = self._token(TokenKind.SCRIPT_BLOCK_START, START_MARKER)
        self._cursor.skip(len(START_MARKER))

        body_line = self._cursor.line
        body, found = self._read_until(END_MARKER)
        if not found:
            raise PreprocessError.from_spec(
                LEXER_UNTERMINATED_SCRIPT_BLOCK,
                f" [{END_MARKER}] for the block opened at line {start.line + 1}. "
                f"Found [{escape_for_display(body)}]",
                SourceLocation(self._file, self._cursor.line),
            )

        block = self._token(TokenKind.SCRIPT_BLOCK, body, body_line)
        # Output slot for whatever the block echoes.
        slot = self._token(TokenKind.SYMBOL, "")
        end = self._token(TokenKind.SCRIPT_BLOCK_END, END_MARKER)
        self._cursor.skip(len(END_MARKER))
        return [start, block, slot, end]


def tokenize(source: str, file: str = "") -> TokenStream:
    """Lex a whole file into a mutable token stream."""
    return TokenStream(Lexer(source, file).lex())


def dump_tokens(tokens: Iterable[Token], file: TextIO | None = None) -> None:
    """Print token list with kind, line, file and text for debugging."""
    out = file if file is not None else sys.stdout
    for i, tok in enumerate(tokens):
        text = escape_for_display(tok.value)
        print(f"{i:03d} {tok.kind.name:<18} line={tok.line + 1:<5} file={tok.file!r} text={text!r}", file=out)
