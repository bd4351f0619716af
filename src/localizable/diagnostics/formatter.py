"""Render diagnostics for terminals, IDE build logs and tooling.

A build step reports the not-an-enum error (and reader failures) through
one of three layouts:

    COMPILER  error[NOT_AN_ENUM]: 'Localizable' macro can only be attached to enums
                --> line 1, column 1
                = help: Declare the type as an enum or remove the attribute

    XCODE     Strings.json:1:1: error: 'Localizable' macro can only be attached to enums
              Strings.json:1:1: note: Declare the type as an enum or remove the attribute

    JSON      {"code": "NOT_AN_ENUM", "id": "Localization.notAnEnum", ...}

Xcode turns ``path:line:column: severity: message`` lines in build-phase
output into inline issues, so XCODE is the layout for run-script phases.

Python 3.13+.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_RESET = "\033[0m"
_SEVERITY_COLORS = {"error": "\033[1;31m", "warning": "\033[1;33m"}


class OutputFormat(StrEnum):
    """Layout produced by DiagnosticFormatter."""

    COMPILER = "compiler"
    XCODE = "xcode"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Formats diagnostics in a fixed layout.

    Attributes:
        output_format: Layout to produce (default: COMPILER)
        color: Wrap the severity in ANSI colors (COMPILER layout only)
        source_name: File name used by the XCODE layout

    Example:
        >>> formatter = DiagnosticFormatter(OutputFormat.XCODE, source_name="Strings.json")
        >>> print(formatter.format(ErrorTemplate.identifier_invalid("2fast")))
        Strings.json: error: Invalid identifier '2fast'
        Strings.json: note: Identifiers start with a letter and contain only letters and digits
    """

    output_format: OutputFormat = OutputFormat.COMPILER
    color: bool = False
    source_name: str = "<declaration>"

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic."""
        match self.output_format:
            case OutputFormat.COMPILER:
                return self._compiler(diagnostic)
            case OutputFormat.XCODE:
                return self._xcode(diagnostic)
            case OutputFormat.JSON:
                return self._json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics.

        COMPILER blocks are separated by a blank line; XCODE and JSON emit
        one record per line so log scrapers can split on newlines.
        """
        separator = "\n\n" if self.output_format is OutputFormat.COMPILER else "\n"
        return separator.join(self.format(d) for d in diagnostics)

    def _severity(self, diagnostic: Diagnostic) -> str:
        if not self.color:
            return diagnostic.severity
        return f"{_SEVERITY_COLORS[diagnostic.severity]}{diagnostic.severity}{_ANSI_RESET}"

    def _compiler(self, diagnostic: Diagnostic) -> str:
        lines = [f"{self._severity(diagnostic)}[{diagnostic.code.name}]: {diagnostic.message}"]
        if diagnostic.span is not None:
            span = diagnostic.span
            lines.append(f"  --> line {span.line}, column {span.column}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)

    def _xcode(self, diagnostic: Diagnostic) -> str:
        location = self.source_name
        if diagnostic.span is not None:
            location = f"{location}:{diagnostic.span.line}:{diagnostic.span.column}"
        lines = [f"{location}: {diagnostic.severity}: {diagnostic.message}"]
        if diagnostic.hint:
            lines.append(f"{location}: note: {diagnostic.hint}")
        return "\n".join(lines)

    def _json(self, diagnostic: Diagnostic) -> str:
        record: dict[str, object] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "id": diagnostic.diagnostic_id,
            "severity": diagnostic.severity,
            "message": diagnostic.message,
        }
        if diagnostic.span is not None:
            span = diagnostic.span
            record["span"] = {
                "start": span.start,
                "end": span.end,
                "line": span.line,
                "column": span.column,
            }
        if diagnostic.hint:
            record["hint"] = diagnostic.hint
        return json.dumps(record, ensure_ascii=False)
