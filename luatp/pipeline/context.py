"""Run-wide processing state shared by scripts, the expander and the renderer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from luatp.diagnostics import SCRIPT_LINE_INFO_FAILED, PreprocessError
from luatp.lexer.tokens import Token
from luatp.macros.registry import BlockHandle, MacroRegistry, MarkedBlockRegistry
from luatp.runtime.interface import ScriptError, ScriptRuntime
from luatp.runtime.natives import CURRENT_BLOCK_GLOBAL
from luatp.text import SourceLocation


@dataclass(slots=True)
class ProcessingContext:
    """Created once per run; registries accumulate across every file of the run.

    `location` is the construct currently executing, used to place errors
    raised from native functions. `fatal` holds the first such error until
    the script that triggered it returns.
    """

    runtime: ScriptRuntime
    macros: MacroRegistry = field(default_factory=MacroRegistry)
    blocks: MarkedBlockRegistry = field(default_factory=MarkedBlockRegistry)
    line_info_callback: object | None = None
    current_slot: BlockHandle | None = None
    location: SourceLocation | None = None
    fatal: PreprocessError | None = None

    def bind_output_slot(self, token: Token, location: SourceLocation | None = None) -> BlockHandle:
        """Make `token` the target of `echo` and expose it as the `currentBlock` global."""
        handle = BlockHandle(token)
        self.current_slot = handle
        self.location = location if location is not None else token.location
        self.runtime.set_global(CURRENT_BLOCK_GLOBAL, handle)
        return handle

    def finish_file(self) -> None:
        self.current_slot = None
        self.location = None
        self.runtime.set_global(CURRENT_BLOCK_GLOBAL, None)

    def record_fatal(self, error: PreprocessError) -> None:
        if self.fatal is None:
            self.fatal = error

    def run_script(self, action: Callable[[], object]) -> object:
        """Run one runtime operation.

        A fatal error raised by a native function is re-raised afterwards even
        if the script caught it (`pcall`) and carried on.
        """
        self.fatal = None
        try:
            result = action()
        except ScriptError:
            self._raise_fatal()
            raise
        self._raise_fatal()
        return result

    def generate_line_info(self, line: int, file: str) -> str | None:
        if self.line_info_callback is None:
            return None
        callback = self.line_info_callback
        try:
            result = self.run_script(lambda: self.runtime.call(callback, [line, file]))
        except ScriptError as exc:
            raise PreprocessError.from_spec(
                SCRIPT_LINE_INFO_FAILED, f"\n{exc}", SourceLocation(file, line)
            ) from exc
        return self.runtime.stringify(result)

    def _raise_fatal(self) -> None:
        error, self.fatal = self.fatal, None
        if error is not None:
            raise error
