"""Shared constants for localizable.

Centralizes the names that appear in generated source and the defaults
used by the expansion controller. Placing them here avoids circular imports
between syntax, codegen and runtime packages.

Constants are grouped by domain:
- Macro surface: attribute name and option label
- Generated members: accessor, helper and lookup collaborator names
- Identifier rules: escape marker and placeholder prefix

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Macro surface
    "MACRO_NAME",
    "KEY_FORMAT_OPTION",
    # Generated members
    "ACCESSOR_NAME",
    "HELPER_NAME",
    "HELPER_PARAMETER_NAME",
    "LOOKUP_FUNCTION",
    "ACCESS_MODIFIER",
    "ACCESS_LEVELS",
    "INDENT",
    # Identifier rules
    "ESCAPE_MARKER",
    "PLACEHOLDER_PREFIX",
    "KEY_SEPARATOR",
    "MAX_IDENTIFIER_LENGTH",
]

# ============================================================================
# MACRO SURFACE
# ============================================================================

# Attribute name used in diagnostics ("'Localizable' macro can only be ...").
MACRO_NAME: str = "Localizable"

# Attribute argument label selecting the naming convention.
KEY_FORMAT_OPTION: str = "keyFormat"

# ============================================================================
# GENERATED MEMBERS
# ============================================================================

# Public computed property added to the enum.
ACCESSOR_NAME: str = "localized"

# Private lookup helper. Shares the accessor name; Swift resolves the two by
# signature (property vs. one-argument function).
HELPER_NAME: str = "localized"

# Parameter name of the lookup helper, emitted as `_ string: String`.
HELPER_PARAMETER_NAME: str = "string"

# Run-time table lookup called by the helper body.
LOOKUP_FUNCTION: str = "NSLocalizedString"

# Access modifier of the accessor property.
ACCESS_MODIFIER: str = "public"

# Access levels Swift allows on an enum member (`open` is class-only).
ACCESS_LEVELS: frozenset[str] = frozenset(
    {"public", "package", "internal", "fileprivate", "private"}
)

# One indentation level in generated source.
INDENT: str = "    "

# ============================================================================
# IDENTIFIER RULES
# ============================================================================

# Reserved-word escape marker: `for`, `case`, `while`.
ESCAPE_MARKER: str = "`"

# Bound placeholders are value0, value1, ... regardless of declared labels.
PLACEHOLDER_PREFIX: str = "value"

# Separator inserted at segment boundaries for snake-case conventions.
KEY_SEPARATOR: str = "_"

# Upper bound on declared identifier length accepted by the reader.
MAX_IDENTIFIER_LENGTH: int = 256
