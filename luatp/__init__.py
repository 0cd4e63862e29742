"""Lua Text Preprocessor: expand embedded Lua blocks and Lua-defined macros in text."""

__version__ = "0.2.0"

from luatp.diagnostics import Diagnostic, PreprocessError
from luatp.pipeline import (
    CONSOLE_OUTPUT,
    ProcessingContext,
    RunOptions,
    create_context,
    process_file,
    process_files,
    process_text,
    run,
    run_preload_scripts,
)
from luatp.runtime import LuaScriptRuntime, ScriptError, ScriptRuntime

__all__ = [
    "CONSOLE_OUTPUT",
    "Diagnostic",
    "LuaScriptRuntime",
    "PreprocessError",
    "ProcessingContext",
    "RunOptions",
    "ScriptError",
    "ScriptRuntime",
    "__version__",
    "create_context",
    "process_file",
    "process_files",
    "process_text",
    "run",
    "run_preload_scripts",
]
