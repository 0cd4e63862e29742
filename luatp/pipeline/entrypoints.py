"""Run entrypoints: preload scripts, then tokenize, expand and render each file in order."""

from __future__ import annotations

import functools
import io
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from tqdm import tqdm

from luatp.diagnostics import IO_READ_FAILED, IO_WRITE_FAILED, SCRIPT_PRELOAD_FAILED, PreprocessError
from luatp.lexer import tokenize
from luatp.macros import Expander
from luatp.pipeline.context import ProcessingContext
from luatp.pipeline.options import DEFAULT_ENCODING, RunOptions
from luatp.render import Renderer
from luatp.runtime import LuaScriptRuntime, ScriptError, ScriptRuntime, install_natives

LOG = logging.getLogger(__name__)


def create_context(runtime: ScriptRuntime | None = None) -> ProcessingContext:
    """Create the run-wide context with the native functions installed."""
    context = ProcessingContext(runtime if runtime is not None else LuaScriptRuntime())
    install_natives(context)
    return context


def read_source(path: str, encoding: str = DEFAULT_ENCODING) -> str:
    try:
        return Path(path).read_bytes().decode(encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise PreprocessError.from_spec(IO_READ_FAILED, f" {path}: {exc}") from exc


def run_preload_scripts(
    context: ProcessingContext,
    paths: Iterable[str],
    *,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Execute each preload script once, in order, before any input file."""
    for path in paths:
        source = read_source(path, encoding)
        LOG.debug("Executing preload script %s", path)
        try:
            context.run_script(functools.partial(context.runtime.execute, source))
        except ScriptError as exc:
            raise PreprocessError.from_spec(SCRIPT_PRELOAD_FAILED, f" {path}\n{exc}") from exc


def process_text(
    context: ProcessingContext,
    text: str,
    file: str = "",
    out: TextIO | None = None,
) -> str:
    """Tokenize, expand and render one file's text.

    Output is produced only after the whole file is expanded; it is written
    to `out` (if given) and returned.
    """
    stream = tokenize(text, file)
    LOG.debug("Tokenized %s: %d tokens", file or "<text>", len(stream))
    buffer = io.StringIO()
    try:
        Expander(context).expand(stream)
        Renderer(buffer, context.generate_line_info).render(stream)
    finally:
        stream.clear()
        context.finish_file()
    rendered = buffer.getvalue()
    if out is not None:
        out.write(rendered)
    return rendered


def process_file(
    context: ProcessingContext,
    path: str,
    out: TextIO | None = None,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> str:
    return process_text(context, read_source(path, encoding), path, out)


def process_files(
    options: RunOptions,
    out: TextIO,
    *,
    context: ProcessingContext | None = None,
    progress: bool = False,
) -> ProcessingContext:
    """Run preload scripts, then every input file into one continuous output."""
    resolved = context if context is not None else create_context()
    run_preload_scripts(resolved, options.preload_scripts, encoding=options.encoding)
    files: Iterable[str] = (
        tqdm(options.input_files, desc="luatp", unit="file", file=sys.stderr)
        if progress
        else options.input_files
    )
    for path in files:
        process_file(resolved, path, out, encoding=options.encoding)
    return resolved


def run(
    options: RunOptions,
    *,
    stdout: TextIO | None = None,
    progress: bool = False,
) -> None:
    """Process a whole run and deliver the output to the console or the output file.

    A file destination is written only once every input succeeded.
    """
    if options.writes_to_console:
        out = stdout if stdout is not None else sys.stdout
        process_files(options, out, progress=progress)
        out.flush()
        return

    buffer = io.StringIO()
    process_files(options, buffer, progress=progress)
    try:
        with open(options.output, "w", encoding=options.encoding, newline="") as handle:
            handle.write(buffer.getvalue())
    except OSError as exc:
        raise PreprocessError.from_spec(IO_WRITE_FAILED, f" {options.output}: {exc}") from exc
    LOG.debug("Wrote %s", options.output)
