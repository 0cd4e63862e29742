"""Diagnostics."""

from luatp.diagnostics.codes import (
    BLOCK_DUPLICATE_NAME,
    BLOCK_NOT_FOUND,
    IO_READ_FAILED,
    IO_WRITE_FAILED,
    LEXER_UNTERMINATED_SCRIPT_BLOCK,
    MACRO_BAD_VARIADIC_SEPARATOR,
    MACRO_DUPLICATE_NAME,
    MACRO_EXPECTED_COMMA,
    MACRO_EXPECTED_LPAREN,
    MACRO_EXPECTED_RPAREN,
    MACRO_INVALID_NAME,
    MACRO_INVALID_PARAMETER_KIND,
    MACRO_UNEXPECTED_END,
    MACRO_VARIADIC_NOT_LAST,
    SCRIPT_BLOCK_FAILED,
    SCRIPT_LINE_INFO_FAILED,
    SCRIPT_MACRO_FAILED,
    SCRIPT_PRELOAD_FAILED,
    DiagnosticSpec,
    Severity,
)
from luatp.diagnostics.diagnostic import Diagnostic, PreprocessError
from luatp.diagnostics.report import format_diagnostic

__all__ = [
    "BLOCK_DUPLICATE_NAME",
    "BLOCK_NOT_FOUND",
    "IO_READ_FAILED",
    "IO_WRITE_FAILED",
    "LEXER_UNTERMINATED_SCRIPT_BLOCK",
    "MACRO_BAD_VARIADIC_SEPARATOR",
    "MACRO_DUPLICATE_NAME",
    "MACRO_EXPECTED_COMMA",
    "MACRO_EXPECTED_LPAREN",
    "MACRO_EXPECTED_RPAREN",
    "MACRO_INVALID_NAME",
    "MACRO_INVALID_PARAMETER_KIND",
    "MACRO_UNEXPECTED_END",
    "MACRO_VARIADIC_NOT_LAST",
    "SCRIPT_BLOCK_FAILED",
    "SCRIPT_LINE_INFO_FAILED",
    "SCRIPT_MACRO_FAILED",
    "SCRIPT_PRELOAD_FAILED",
    "Diagnostic",
    "DiagnosticSpec",
    "PreprocessError",
    "Severity",
    "format_diagnostic",
]
