"""Argument list matching for macro invocations.

Matching works directly on the token stream: every token that belongs to
the argument list is removed, leaving only the invocation token behind.
"""

from typing import TypeAlias

from luatp.diagnostics import (
    MACRO_BAD_VARIADIC_SEPARATOR,
    MACRO_EXPECTED_COMMA,
    MACRO_EXPECTED_LPAREN,
    MACRO_EXPECTED_RPAREN,
    MACRO_UNEXPECTED_END,
    DiagnosticSpec,
    PreprocessError,
)
from luatp.lexer.tokens import TokenKind
from luatp.macros.registry import MacroDefinition
from luatp.stream import TokenNode, TokenStream
from luatp.text import escape_for_display, trim_argument

MacroArgument: TypeAlias = str | list[str]

ARGUMENT_TERMINATORS = (",", ")")


class ArgumentMatcher:
    def __init__(self, stream: TokenStream, invocation: TokenNode, macro: MacroDefinition) -> None:
        self._stream = stream
        self._invocation = invocation
        self._macro = macro

    def match(self) -> list[MacroArgument]:
        node = self._invocation.next
        if self._macro.arity == 0:
            self._match_empty_list(node)
            return []

        node = self._require(node)
        if node.text != "(":
            raise self._error(MACRO_EXPECTED_LPAREN, node)
        node = self._stream.remove(node)
        node = self._skip_whitespace(node)

        arguments: list[MacroArgument] = []
        last = self._macro.arity - 1
        for index in range(self._macro.arity):
            if index == last and self._macro.variadic:
                values, node = self._collect_variadic(node)
                arguments.append(values)
                continue

            value, node = self._collect_raw(node)
            arguments.append(value)
            if index != last:
                node = self._require(node)
                if node.text != ",":
                    raise self._error(MACRO_EXPECTED_COMMA, node)
                node = self._stream.remove(node)

        node = self._require(node)
        if node.text != ")":
            raise self._error(MACRO_EXPECTED_RPAREN, node)
        self._stream.remove(node)
        return arguments

    def _match_empty_list(self, node: TokenNode | None) -> None:
        # A zero-parameter macro may be written bare or with `()`.
        if node is None or node.text != "(":
            return
        closing = self._require(self._skip_whitespace(node.next))
        if closing.text != ")":
            raise self._error(MACRO_EXPECTED_RPAREN, closing)
        self._stream.remove(closing)
        self._stream.remove(node)

    def _collect_raw(self, node: TokenNode | None) -> tuple[str, TokenNode | None]:
        parts: list[str] = []
        while node is not None and node.text not in ARGUMENT_TERMINATORS:
            parts.append(node.text)
            node = self._stream.remove(node)
        return trim_argument("".join(parts)), node

    def _collect_variadic(self, node: TokenNode | None) -> tuple[list[str], TokenNode]:
        # Always collects at least one value, so `m()` yields [""].
        values: list[str] = []
        while True:
            value, node = self._collect_raw(node)
            values.append(value)
            node = self._require(node)
            if node.text == ")":
                return values, node
            if node.text != ",":
                raise self._error(MACRO_BAD_VARIADIC_SEPARATOR, node)
            node = self._stream.remove(node)

    def _skip_whitespace(self, node: TokenNode | None) -> TokenNode | None:
        while node is not None and node.token.kind == TokenKind.WHITESPACE:
            node = self._stream.remove(node)
        return node

    def _require(self, node: TokenNode | None) -> TokenNode:
        if node is None:
            raise PreprocessError.from_spec(
                MACRO_UNEXPECTED_END,
                f" [{self._macro.name}]",
                self._invocation.token.location,
            )
        return node

    def _error(self, spec: DiagnosticSpec, found: TokenNode) -> PreprocessError:
        return PreprocessError.from_spec(
            spec,
            f" but found [{escape_for_display(found.text)}] while processing macro [{self._macro.name}]",
            found.token.location,
        )


def match_arguments(stream: TokenStream, invocation: TokenNode, macro: MacroDefinition) -> list[MacroArgument]:
    """Consume the argument list following `invocation` and return the matched arguments."""
    return ArgumentMatcher(stream, invocation, macro).match()
