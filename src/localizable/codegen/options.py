"""Generator configuration.

Provides a single frozen dataclass that encapsulates every name and layout
choice of the generated members. Constructing ``GeneratorOptions()`` with no
arguments reproduces the default Swift expansion.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from localizable.constants import (
    ACCESS_LEVELS,
    ACCESS_MODIFIER,
    ACCESSOR_NAME,
    HELPER_NAME,
    HELPER_PARAMETER_NAME,
    INDENT,
    LOOKUP_FUNCTION,
    MACRO_NAME,
    PLACEHOLDER_PREFIX,
)
from localizable.syntax.identifiers import is_valid_identifier

__all__ = ["GeneratorOptions"]


@dataclass(frozen=True, slots=True)
class GeneratorOptions:
    """Immutable configuration for accessor generation.

    Attributes:
        macro_name: Attribute name recognized on declarations and used in
            diagnostics (default: "Localizable").
        accessor_name: Public computed property name (default: "localized").
        helper_name: Private lookup helper name (default: "localized").
            Targets without overload resolution should pick a distinct name
            such as "lookupLocalizedTemplate".
        helper_parameter_name: Helper parameter name (default: "string").
        lookup_function: Run-time table lookup called by the helper
            (default: "NSLocalizedString").
        access_modifier: Access level of the accessor (default: "public").
        placeholder_prefix: Prefix of bound value names (default: "value").
        indent: One indentation level (default: four spaces).

    Example:
        >>> options = GeneratorOptions(helper_name="lookupLocalizedTemplate")
        >>> result = expand(declaration, options=options)
    """

    macro_name: str = MACRO_NAME
    accessor_name: str = ACCESSOR_NAME
    helper_name: str = HELPER_NAME
    helper_parameter_name: str = HELPER_PARAMETER_NAME
    lookup_function: str = LOOKUP_FUNCTION
    access_modifier: str = ACCESS_MODIFIER
    placeholder_prefix: str = PLACEHOLDER_PREFIX
    indent: str = INDENT

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a generated name is not a valid identifier, the
                access modifier is not a Swift access level, or the indent
                is empty or contains non-whitespace.
        """
        for field_name in (
            "macro_name",
            "accessor_name",
            "helper_name",
            "helper_parameter_name",
            "lookup_function",
            "placeholder_prefix",
        ):
            value = getattr(self, field_name)
            if not is_valid_identifier(value):
                msg = f"{field_name} must be a valid identifier, got {value!r}"
                raise ValueError(msg)
        if self.access_modifier not in ACCESS_LEVELS:
            levels = ", ".join(sorted(ACCESS_LEVELS))
            msg = f"access_modifier must be one of {levels}, got {self.access_modifier!r}"
            raise ValueError(msg)
        if not self.indent or self.indent.strip():
            msg = "indent must be non-empty whitespace"
            raise ValueError(msg)
