"""Identifier rules for enum case names.

Single source of truth for how case identifiers are validated and how the
reserved-word escape marker (a pair of backticks) is added and removed.

Identifier grammar accepted from declaration producers:
    [a-zA-Z][a-zA-Z0-9]*      plain identifier
    `[a-zA-Z][a-zA-Z0-9]*`    escaped identifier (reserved words)

Escaping is a purely textual concern: the generated match pattern keeps the
spelling the declaration used, while keys are always derived from the
unescaped text.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import re

from localizable.constants import ESCAPE_MARKER, MAX_IDENTIFIER_LENGTH

__all__ = [
    "RESERVED_WORDS",
    "escape_identifier",
    "is_escaped",
    "is_valid_identifier",
    "strip_escape_markers",
]

# Swift keywords that must be wrapped in backticks to be used as case names.
RESERVED_WORDS: frozenset[str] = frozenset({
    "Any",
    "Self",
    "as",
    "associatedtype",
    "break",
    "case",
    "catch",
    "class",
    "continue",
    "default",
    "defer",
    "deinit",
    "do",
    "else",
    "enum",
    "extension",
    "fallthrough",
    "false",
    "fileprivate",
    "for",
    "func",
    "guard",
    "if",
    "import",
    "in",
    "init",
    "inout",
    "internal",
    "is",
    "let",
    "nil",
    "operator",
    "private",
    "protocol",
    "public",
    "repeat",
    "rethrows",
    "return",
    "self",
    "static",
    "struct",
    "subscript",
    "super",
    "switch",
    "throw",
    "throws",
    "true",
    "try",
    "typealias",
    "var",
    "where",
    "while",
})

_PLAIN_IDENTIFIER_PATTERN: re.Pattern[str] = re.compile(r"[a-zA-Z][a-zA-Z0-9]*")


def is_escaped(name: str) -> bool:
    """Check whether ``name`` is wrapped in escape markers.

    Example:
        >>> is_escaped("`for`")
        True
        >>> is_escaped("for")
        False
    """
    return len(name) >= 2 and name.startswith(ESCAPE_MARKER) and name.endswith(ESCAPE_MARKER)


def strip_escape_markers(name: str) -> str:
    """Remove every escape marker from ``name``.

    Markers are removed wherever they occur, so a malformed spelling such as
    ``"`for"`` still yields marker-free text.

    Example:
        >>> strip_escape_markers("`continue`")
        'continue'
    """
    return name.replace(ESCAPE_MARKER, "")


def escape_identifier(name: str) -> str:
    """Wrap ``name`` in escape markers when it is a reserved word.

    Already-escaped names are returned unchanged.

    Example:
        >>> escape_identifier("while")
        '`while`'
        >>> escape_identifier("welcome")
        'welcome'
    """
    if is_escaped(name):
        return name
    if name in RESERVED_WORDS:
        return f"{ESCAPE_MARKER}{name}{ESCAPE_MARKER}"
    return name


def is_valid_identifier(name: str) -> bool:
    """Validate a case or parameter identifier.

    Args:
        name: Identifier as written in the declaration, optionally escaped

    Returns:
        True if the (unescaped) identifier matches the grammar and length limit

    Example:
        >>> is_valid_identifier("noIRegretted")
        True
        >>> is_valid_identifier("`for`")
        True
        >>> is_valid_identifier("2fast")
        False
    """
    bare = name[1:-1] if is_escaped(name) else name
    if not bare or len(bare) > MAX_IDENTIFIER_LENGTH:
        return False
    return _PLAIN_IDENTIFIER_PATTERN.fullmatch(bare) is not None
