"""Diagnostics helpers."""

from luatp.diagnostics.diagnostic import Diagnostic


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic the way the command line prints it."""
    lines: list[str] = []
    if diagnostic.location is not None:
        lines.append(f"Error at {diagnostic.location}")
    lines.append(diagnostic.message)
    if diagnostic.hint:
        lines.append(f"hint: {diagnostic.hint}")
    return "\n".join(lines)
