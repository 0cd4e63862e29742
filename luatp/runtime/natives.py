"""Native functions exposed to scripts.

The global names are a compatibility surface for existing macro scripts.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Final

from luatp.diagnostics import PreprocessError
from luatp.macros.registry import BlockHandle
from luatp.runtime.interface import ScriptError, ScriptRuntime

if TYPE_CHECKING:
    from luatp.pipeline.context import ProcessingContext

LOG = logging.getLogger(__name__)

CURRENT_BLOCK_GLOBAL: Final[str] = "currentBlock"

_MISSING: Final = object()


class NativeFunctions:
    """Native function surface bound to one processing context."""

    def __init__(self, context: ProcessingContext) -> None:
        self._context = context

    @property
    def _runtime(self) -> ScriptRuntime:
        return self._context.runtime

    def table(self) -> dict[str, Callable[..., object]]:
        functions: dict[str, Callable[..., object]] = {
            "writeToBlock": self.write_to_block,
            "markBlock": self.mark_block,
            "getMarkedBlock": self.get_marked_block,
            "macro": self.register_macro,
            "echo": self.echo,
            "registerGenerateLineInfoCallback": self.register_line_info_callback,
        }
        return {name: self._fatal_guard(function) for name, function in functions.items()}

    def _fatal_guard(self, function: Callable[..., object]) -> Callable[..., object]:
        # The runtime may hand the exception to a script-level error handler,
        # so the context keeps it for the caller to re-raise.
        @functools.wraps(function)
        def guarded(*args: object) -> object:
            try:
                return function(*args)
            except PreprocessError as exc:
                self._context.record_fatal(exc)
                raise

        return guarded

    def write_to_block(self, handle: object = _MISSING, text: object = _MISSING) -> None:
        block = self._check_handle("writeToBlock", 1, handle)
        self._check_any("writeToBlock", 2, text)
        block.write(self._runtime.to_text(text))

    def echo(self, text: object = _MISSING) -> None:
        self._check_any("echo", 1, text)
        current = self._runtime.get_global(CURRENT_BLOCK_GLOBAL)
        if not isinstance(current, BlockHandle):
            raise ScriptError(f"echo: '{CURRENT_BLOCK_GLOBAL}' is not a block handle")
        current.write(self._runtime.to_text(text))

    def register_macro(
        self,
        name: object = _MISSING,
        parameters: object = _MISSING,
        callback: object = _MISSING,
    ) -> None:
        macro_name = self._check_string("macro", 1, name)
        specs = self._runtime.to_string_list(parameters)
        if specs is None:
            raise ScriptError(self._bad_argument("macro", 2, "table", parameters))
        self._check_callable("macro", 3, callback)
        self._context.macros.define(macro_name, specs, callback, self._context.location)

    def mark_block(self, name: object = _MISSING, handle: object = _MISSING) -> None:
        block_name = self._check_string("markBlock", 1, name)
        block = self._check_handle("markBlock", 2, handle)
        self._context.blocks.mark(block_name, block, self._context.location)

    def get_marked_block(self, name: object = _MISSING) -> BlockHandle:
        block_name = self._check_string("getMarkedBlock", 1, name)
        return self._context.blocks.get(block_name, self._context.location)

    def register_line_info_callback(self, callback: object = _MISSING) -> None:
        self._check_callable("registerGenerateLineInfoCallback", 1, callback)
        self._context.line_info_callback = callback
        LOG.debug("Registered line info generator")

    def _check_any(self, function: str, index: int, value: object) -> None:
        if value is _MISSING:
            raise ScriptError(self._bad_argument(function, index, "value", None))

    def _check_string(self, function: str, index: int, value: object) -> str:
        if isinstance(value, (str, bytes)) or (isinstance(value, (int, float)) and not isinstance(value, bool)):
            return self._runtime.to_text(value)
        raise ScriptError(self._bad_argument(function, index, "string", value))

    def _check_handle(self, function: str, index: int, value: object) -> BlockHandle:
        if isinstance(value, BlockHandle):
            return value
        raise ScriptError(self._bad_argument(function, index, "block", value))

    def _check_callable(self, function: str, index: int, value: object) -> None:
        if value is _MISSING or not self._runtime.is_callable(value):
            raise ScriptError(self._bad_argument(function, index, "function", value))

    def _bad_argument(self, function: str, index: int, expected: str, value: object) -> str:
        got = "no value" if value is _MISSING or value is None else type(value).__name__
        return f"bad argument #{index} to {function} ({expected} expected, got {got})"


def install_natives(context: ProcessingContext) -> NativeFunctions:
    """Register the native function surface into the context's runtime."""
    natives = NativeFunctions(context)
    for name, function in natives.table().items():
        context.runtime.register_native(name, function)
    return natives
