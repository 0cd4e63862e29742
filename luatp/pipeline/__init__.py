"""Processing context, run options and entrypoints."""

from luatp.pipeline.context import ProcessingContext
from luatp.pipeline.entrypoints import (
    create_context,
    process_file,
    process_files,
    process_text,
    read_source,
    run,
    run_preload_scripts,
)
from luatp.pipeline.options import CONSOLE_OUTPUT, DEFAULT_ENCODING, RunOptions

__all__ = [
    "CONSOLE_OUTPUT",
    "DEFAULT_ENCODING",
    "ProcessingContext",
    "RunOptions",
    "create_context",
    "process_file",
    "process_files",
    "process_text",
    "read_source",
    "run",
    "run_preload_scripts",
]
