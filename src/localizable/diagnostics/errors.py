"""localizable exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.
The one user-facing failure of an expansion (a macro attached to something
that is not an enum) is reported as a Diagnostic, never raised.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocalizableError(Exception):
    """Base exception for all localizable errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizableError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DeclarationFormatError(LocalizableError, ValueError):
    """Structured declaration description does not have the expected shape.

    Raised by the declaration reader for missing fields, wrong types,
    unknown declaration kinds and invalid identifiers.
    """


class InternalInvariantError(LocalizableError, AssertionError):
    """A precondition guaranteed by the declaration producer was violated.

    Example:
        An empty identifier reaching the key formatter.

    Not a user diagnostic: indicates a broken upstream contract.
    """


class UnknownCaseError(LocalizableError, LookupError):
    """Runtime evaluation of a case name the dispatch does not cover."""


class ArityMismatchError(UnknownCaseError):
    """Runtime evaluation with a value count different from the declared one.

    Attributes:
        expected: Number of values the case declares
        received: Number of values supplied
    """

    def __init__(self, message: str | Diagnostic, *, expected: int, received: int) -> None:
        """Initialize ArityMismatchError.

        Args:
            message: Error message string OR Diagnostic object
            expected: Number of values the case declares
            received: Number of values supplied
        """
        super().__init__(message)
        self.expected = expected
        self.received = received
