"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def not_an_enum(macro_name: str, span: SourceSpan | None = None) -> Diagnostic:
        """Macro attached to a declaration without a closed variant set.

        Args:
            macro_name: Attribute name as written at the declaration site
            span: Declaration location, if known

        Returns:
            Diagnostic for NOT_AN_ENUM
        """
        msg = f"'{macro_name}' macro can only be attached to enums"
        return Diagnostic(
            code=DiagnosticCode.NOT_AN_ENUM,
            message=msg,
            span=span,
            hint="Declare the type as an enum or remove the attribute",
        )

    @staticmethod
    def unknown_key_format(value: str, fallback: str) -> Diagnostic:
        """Unrecognized keyFormat argument.

        Args:
            value: Argument value as written
            fallback: Convention used instead

        Returns:
            Warning diagnostic for UNKNOWN_KEY_FORMAT
        """
        msg = f"Unknown key format '{value}', using '{fallback}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_KEY_FORMAT,
            message=msg,
            hint="Use .camelCase, .lowerSnakeCase or .upperSnakeCase",
            severity="warning",
        )

    @staticmethod
    def declaration_malformed(
        path: str, reason: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Structured declaration has the wrong shape at ``path``.

        Args:
            path: Dotted location inside the description (e.g. "members[2].case")
            reason: What was wrong
            span: Position in the JSON text, when reading text

        Returns:
            Diagnostic for DECLARATION_MALFORMED
        """
        msg = f"Malformed declaration at '{path}': {reason}"
        return Diagnostic(code=DiagnosticCode.DECLARATION_MALFORMED, message=msg, span=span)

    @staticmethod
    def declaration_kind_unknown(kind: str) -> Diagnostic:
        """Declaration kind outside the known set.

        Args:
            kind: Kind string as supplied

        Returns:
            Diagnostic for DECLARATION_KIND_UNKNOWN
        """
        msg = f"Unknown declaration kind '{kind}'"
        return Diagnostic(
            code=DiagnosticCode.DECLARATION_KIND_UNKNOWN,
            message=msg,
            hint="Expected one of: enum, struct, class, actor, protocol, extension",
        )

    @staticmethod
    def identifier_invalid(name: str, path: str | None = None) -> Diagnostic:
        """Identifier contains characters other than letters and digits.

        Args:
            name: Identifier as supplied
            path: Location inside a structured description, when read from one

        Returns:
            Diagnostic for IDENTIFIER_INVALID
        """
        msg = f"Invalid identifier {name!r}"
        if path:
            msg = f"{msg} at '{path}'"
        return Diagnostic(
            code=DiagnosticCode.IDENTIFIER_INVALID,
            message=msg,
            hint="Identifiers start with a letter and contain only letters and digits",
        )

    @staticmethod
    def case_not_found(case_name: str) -> Diagnostic:
        """Runtime evaluation of an undeclared case.

        Args:
            case_name: Case name requested

        Returns:
            Diagnostic for CASE_NOT_FOUND
        """
        msg = f"Case '{case_name}' is not part of the generated dispatch"
        return Diagnostic(code=DiagnosticCode.CASE_NOT_FOUND, message=msg)

    @staticmethod
    def arity_mismatch(case_name: str, expected: int, received: int) -> Diagnostic:
        """Runtime evaluation with the wrong number of values.

        Args:
            case_name: Case name requested
            expected: Declared parameter count
            received: Supplied value count

        Returns:
            Diagnostic for ARITY_MISMATCH
        """
        msg = f"Case '{case_name}' takes {expected} value(s), got {received}"
        return Diagnostic(code=DiagnosticCode.ARITY_MISMATCH, message=msg)

    @staticmethod
    def empty_identifier() -> Diagnostic:
        """Empty identifier reached the key formatter.

        Returns:
            Diagnostic for EMPTY_IDENTIFIER
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_IDENTIFIER,
            message="Cannot derive a localization key from an empty identifier",
            hint="The declaration producer must supply non-empty case names",
        )
