"""Diagnostic value types shared by expansion, the reader and the runtime.

A Diagnostic pairs a numbered DiagnosticCode with message text, an optional
SourceSpan into the declaration, and a fix-it hint.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Numbered diagnostic codes.

    Ranges:
        1000-1999: Expansion errors (macro attached to the wrong declaration)
        2000-2999: Declaration input errors (malformed structured description)
        3000-3999: Runtime evaluation errors (dispatch misuse)
        9000-9999: Internal invariant failures
    """

    # Expansion errors (1000-1999)
    NOT_AN_ENUM = 1001
    UNKNOWN_KEY_FORMAT = 1002

    # Declaration input errors (2000-2999)
    DECLARATION_MALFORMED = 2001
    IDENTIFIER_INVALID = 2002
    DECLARATION_KIND_UNKNOWN = 2003

    # Runtime evaluation errors (3000-3999)
    CASE_NOT_FOUND = 3001
    ARITY_MISMATCH = 3002

    # Internal invariant failures (9000-9999)
    EMPTY_IDENTIFIER = 9001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Where in the declaration text a diagnostic points.

    Attributes:
        start: First character offset, counted from 0
        end: Offset one past the last character
        line: 1-based line of ``start``
        column: 1-based column of ``start``
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Reject negative offsets, reversed ranges and 0-based positions.

        Raises:
            ValueError: Naming the offending field
        """
        for field_name, value, minimum in (
            ("start", self.start, 0),
            ("end", self.end, self.start),
            ("line", self.line, 1),
            ("column", self.column, 1),
        ):
            if value < minimum:
                msg = f"SourceSpan.{field_name}={value} is below its minimum {minimum}"
                raise ValueError(msg)

    @classmethod
    def at_offset(cls, text: str, start: int, end: int | None = None) -> SourceSpan:
        """Span for ``text[start:end]`` with line and column derived from ``text``.

        >>> SourceSpan.at_offset("@Localizable\\nstruct S {}", 13)
        SourceSpan(start=13, end=13, line=2, column=1)
        """
        line = text.count("\n", 0, start) + 1
        column = start - (text.rfind("\n", 0, start) + 1) + 1
        return cls(start=start, end=start if end is None else end, line=line, column=column)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported problem.

    Attributes:
        code: DiagnosticCode identifying the problem
        message: Text shown to the developer
        span: Position in the declaration, None when not tied to one
        hint: How to fix it, if there is a standard fix
        severity: "error" or "warning"
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    @property
    def diagnostic_id(self) -> str:
        """Stable identifier of the form ``Localization.notAnEnum``."""
        head, *rest = self.code.name.lower().split("_")
        return "Localization." + head + "".join(part.capitalize() for part in rest)

    def format_error(self) -> str:
        """Render in the compiler layout, as exception messages do.

        Example:
            error[NOT_AN_ENUM]: 'Localizable' macro can only be attached to enums
              --> line 1, column 1
              = help: Declare the type as an enum or remove the attribute
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
