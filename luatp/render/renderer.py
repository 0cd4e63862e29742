"""Output rendering with line information markers."""

import io
from collections.abc import Callable, Iterable
from typing import TextIO, TypeAlias

from luatp.lexer.tokens import Token
from luatp.text import count_newlines

LineInfoGenerator: TypeAlias = Callable[[int, str], str | None]


class Renderer:
    """Writes the visible tokens of an expanded stream.

    The running line only moves by the newlines actually written, so text
    produced by scripts shifts the comparison for every later token.
    """

    def __init__(self, out: TextIO, line_info: LineInfoGenerator | None = None) -> None:
        self._out = out
        self._line_info = line_info

    def render(self, tokens: Iterable[Token]) -> None:
        line = 0
        file = ""
        for token in tokens:
            if not token.kind.is_rendered:
                continue
            if line != token.line or file != token.file:
                self._write_line_info(token)
                line = token.line
                file = token.file
            self._out.write(token.value)
            line += count_newlines(token.value)

    def _write_line_info(self, token: Token) -> None:
        if self._line_info is None:
            return
        marker = self._line_info(token.line, token.file)
        if marker is not None:
            self._out.write(marker + "\n")


def render_to_string(tokens: Iterable[Token], line_info: LineInfoGenerator | None = None) -> str:
    buffer = io.StringIO()
    Renderer(buffer, line_info).render(tokens)
    return buffer.getvalue()
