"""Diagnostic system for localizable.

Provides structured diagnostics with codes, spans and hints, plus the
exception hierarchy used for contract violations.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ArityMismatchError,
    DeclarationFormatError,
    InternalInvariantError,
    LocalizableError,
    UnknownCaseError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArityMismatchError",
    "DeclarationFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InternalInvariantError",
    "LocalizableError",
    "OutputFormat",
    "SourceSpan",
    "UnknownCaseError",
]
