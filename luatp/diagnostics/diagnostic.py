"""Diagnostics core types."""

from dataclasses import dataclass

from luatp.diagnostics.codes import DiagnosticSpec, Severity
from luatp.text import SourceLocation


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, expander and script bridge."""

    code: str
    message: str
    location: SourceLocation | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        detail: str | None = None,
        location: SourceLocation | None = None,
    ) -> "Diagnostic":
        message = spec.message if detail is None else spec.message + detail
        return Diagnostic(
            code=spec.code,
            message=message,
            location=location,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )


class PreprocessError(Exception):
    """Fatal preprocessing failure.

    There is no recovery path: whoever catches this reports the diagnostic
    and stops the run.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @classmethod
    def from_spec(
        cls,
        spec: DiagnosticSpec,
        detail: str | None = None,
        location: SourceLocation | None = None,
    ) -> "PreprocessError":
        return cls(Diagnostic.from_spec(spec, detail, location))

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation | None:
        return self.diagnostic.location
