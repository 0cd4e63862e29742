#!/usr/bin/env python
"""Dump the token stream of a file, one token per line."""

import argparse
from pathlib import Path

from luatp.diagnostics import PreprocessError, format_diagnostic
from luatp.lexer import Lexer, dump_tokens


def main() -> int:
    parser = argparse.ArgumentParser(description="Tokenize a file and print its tokens")
    parser.add_argument("input", type=Path, help="File to tokenize")
    parser.add_argument("--output", type=Path, default=None, help="Write the dump here instead of stdout")
    parser.add_argument("--encoding", default="utf-8", help="Input encoding (default: utf-8)")
    args = parser.parse_args()

    text = args.input.read_bytes().decode(args.encoding)
    try:
        tokens = Lexer(text, file=str(args.input)).lex()
    except PreprocessError as exc:
        print(format_diagnostic(exc.diagnostic))
        return 1

    if args.output is None:
        dump_tokens(tokens)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as f:
        dump_tokens(tokens, file=f)
    print(f"Wrote {len(tokens)} tokens to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
