"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


IO_READ_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IO_READ_FAILED",
    message="Cannot read file",
    severity="error",
    category="io",
)

IO_WRITE_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IO_WRITE_FAILED",
    message="Cannot write output file",
    severity="error",
    category="io",
)

LEXER_UNTERMINATED_SCRIPT_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_SCRIPT_BLOCK",
    message="Read EOF while searching for the lua block end marker",
    hint="Close the script block with `lua?>`.",
    severity="error",
    category="lexer",
)

MACRO_EXPECTED_LPAREN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MACRO_EXPECTED_LPAREN",
    message="Expected '(' to start argument list",
    hint="Macros with parameters must be followed directly by `(`.",
    severity="error",
    category="macro",
)

MACRO_EXPECTED_RPAREN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MACRO_EXPECTED_RPAREN",
    message="Expected ')' to finish argument list",
    severity="error",
    category="macro",
)

MACRO_EXPECTED_COMMA: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MACRO_EXPECTED_COMMA",
    message="Expected ','",
    severity="error",
    category="macro",
)

MACRO_BAD_VARIADIC_SEPARATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MACRO_BAD_VARIADIC_SEPARATOR",
    message="Cannot parse variadic argument list. Expected [,] or [)]",
    severity="error",
    category="macro",
)

MACRO_UNEXPECTED_END: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MACRO_UNEXPECTED_END",
    message="Syntax error while calling macro",
    hint="The input ended before the argument list was closed.",
    severity="error",
    category="macro",
)

MACRO_DUPLICATE_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MACRO_DUPLICATE_NAME",
    message="Macro already exists",
    severity="error",
    category="macro",
)

MACRO_INVALID_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MACRO_INVALID_NAME",
    message="Macro name cannot be empty",
    severity="error",
    category="macro",
)

MACRO_VARIADIC_NOT_LAST: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MACRO_VARIADIC_NOT_LAST",
    message="Argument marked as variadic, but it is not the last argument",
    severity="error",
    category="macro",
)

MACRO_INVALID_PARAMETER_KIND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MACRO_INVALID_PARAMETER_KIND",
    message="Argument type should be [raw]",
    severity="error",
    category="macro",
)

BLOCK_DUPLICATE_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BLOCK_DUPLICATE_NAME",
    message="Marked block already exists",
    severity="error",
    category="block",
)

BLOCK_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BLOCK_NOT_FOUND",
    message="Marked block does not exist",
    severity="error",
    category="block",
)

SCRIPT_PRELOAD_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCRIPT_PRELOAD_FAILED",
    message="Error while processing lua file",
    severity="error",
    category="script",
)

SCRIPT_BLOCK_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCRIPT_BLOCK_FAILED",
    message="Error while executing lua block",
    severity="error",
    category="script",
)

SCRIPT_MACRO_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCRIPT_MACRO_FAILED",
    message="Error while executing lua macro",
    severity="error",
    category="script",
)

SCRIPT_LINE_INFO_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCRIPT_LINE_INFO_FAILED",
    message="Error while generating line information",
    severity="error",
    category="script",
)
