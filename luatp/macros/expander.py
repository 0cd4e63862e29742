"""Script block execution and macro expansion over a token stream."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from luatp.diagnostics import SCRIPT_BLOCK_FAILED, SCRIPT_MACRO_FAILED, PreprocessError
from luatp.lexer.tokens import TokenKind
from luatp.macros.arguments import match_arguments
from luatp.macros.registry import MacroDefinition
from luatp.runtime.interface import ScriptError
from luatp.stream import TokenNode, TokenStream

if TYPE_CHECKING:
    from luatp.pipeline.context import ProcessingContext


class Expander:
    """Walks a token stream once, running script blocks and macros in order.

    Macros registered by a script become callable for every token after it.
    """

    def __init__(self, context: ProcessingContext) -> None:
        self._context = context

    def expand(self, stream: TokenStream) -> None:
        for node in stream.nodes():
            token = node.token
            if token.kind == TokenKind.SCRIPT_BLOCK:
                self._execute_block(node)
            elif token.kind == TokenKind.SYMBOL:
                macro = self._context.macros.get(token.value)
                if macro is not None:
                    self._execute_macro(stream, node, macro)

    def _execute_block(self, node: TokenNode) -> None:
        block = node.token
        # The lexer emits an output slot right after every script block.
        slot = cast(TokenNode, node.next)
        self._context.bind_output_slot(slot.token, block.location)
        runtime = self._context.runtime
        try:
            self._context.run_script(lambda: runtime.execute(block.value))
        except ScriptError as exc:
            raise PreprocessError.from_spec(SCRIPT_BLOCK_FAILED, f"\n{exc}", block.location) from exc

    def _execute_macro(self, stream: TokenStream, node: TokenNode, macro: MacroDefinition) -> None:
        token = node.token
        location = token.location
        arguments = match_arguments(stream, node, macro)
        token.value = ""
        self._context.bind_output_slot(token, location)
        runtime = self._context.runtime
        try:
            self._context.run_script(lambda: runtime.call(macro.callback, arguments))
        except ScriptError as exc:
            raise PreprocessError.from_spec(SCRIPT_MACRO_FAILED, f" [{macro.name}]\n{exc}", location) from exc


def expand(stream: TokenStream, context: ProcessingContext) -> None:
    Expander(context).expand(stream)
