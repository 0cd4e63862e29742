"""Command line driver."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from luatp import __version__
from luatp.diagnostics import PreprocessError, format_diagnostic
from luatp.pipeline import CONSOLE_OUTPUT, DEFAULT_ENCODING, RunOptions, run

LOG = logging.getLogger("luatp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="luatp",
        description="Lua Text Preprocessor - tool that can preprocess text with lua scripts",
    )
    parser.add_argument(
        "-f",
        dest="input_files",
        action="append",
        default=[],
        metavar="FILE",
        help="File to process (repeatable, processed in order)",
    )
    parser.add_argument(
        "-o",
        dest="output",
        default=CONSOLE_OUTPUT,
        metavar="OUTPUT",
        help=f"Output file. If '{CONSOLE_OUTPUT}' output goes to the console (default: {CONSOLE_OUTPUT})",
    )
    parser.add_argument(
        "-l",
        dest="preload_scripts",
        action="append",
        default=[],
        metavar="LUA_FILE",
        help="Lua file executed before processing the input files (repeatable)",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Encoding of input, script and output files (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a tqdm progress bar over input files on stderr",
    )
    parser.add_argument("-v", "--version", action="version", version=f"luatp {__version__}")
    return parser


def _check_files(parser: argparse.ArgumentParser, paths: Sequence[str], label: str) -> None:
    for path in paths:
        if not Path(path).is_file():
            parser.error(f"Provided {label} {path} does not exist")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    arguments = list(sys.argv[1:] if argv is None else argv)
    if not arguments:
        parser.print_help()
        return 1

    args = parser.parse_args(arguments)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if not args.input_files:
        parser.error("Input file is not specified. Please provide -f input_file_path arguments")
    _check_files(parser, args.preload_scripts, "lua file")
    _check_files(parser, args.input_files, "input file")

    options = RunOptions(
        input_files=tuple(args.input_files),
        preload_scripts=tuple(args.preload_scripts),
        output=args.output,
        encoding=args.encoding,
    )
    LOG.debug(
        "Processing %d file(s) with %d preload script(s) into %s",
        len(options.input_files),
        len(options.preload_scripts),
        options.output,
    )
    try:
        run(options, progress=args.progress)
    except PreprocessError as exc:
        sys.stderr.write(format_diagnostic(exc.diagnostic) + "\n")
        return 1
    return 0
