"""Localization key derivation from case identifiers.

Converts an enum case identifier into the key looked up in the localization
table, under one of three naming conventions.

Segmentation rule (applied to the unescaped identifier):
    A boundary sits between
    - a lowercase letter or digit and a following uppercase letter, and
    - two consecutive uppercase letters.

    No boundary precedes the first character. Digits never open a segment;
    they stay attached to whatever they follow.

    noIRegretted -> no | I | Regretted
    URL          -> U | R | L
    URl          -> U | Rl
    c0cDdd4d     -> c0c | Ddd4d
    ABC6         -> A | B | C6
    A1B          -> A1 | B

Snake-cased output is not a fixed point of the transform: segmenting
"U_R_L" again yields different boundaries than "URL" did.

Thread Safety:
    Pure functions, no shared state, no caching.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from localizable.constants import KEY_SEPARATOR
from localizable.diagnostics import ErrorTemplate, InternalInvariantError
from localizable.enums import NamingConvention
from localizable.syntax.identifiers import strip_escape_markers

__all__ = [
    "count_boundaries",
    "derive_key",
    "split_segments",
]

# Zero-width matches at every segment boundary.
_BOUNDARY_PATTERN: re.Pattern[str] = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z])")


def _require_identifier(identifier: str) -> str:
    bare = strip_escape_markers(identifier)
    if not bare:
        raise InternalInvariantError(ErrorTemplate.empty_identifier())
    return bare


def _boundary_offsets(bare: str) -> list[int]:
    return [match.start() for match in _BOUNDARY_PATTERN.finditer(bare)]


def split_segments(identifier: str) -> tuple[str, ...]:
    """Split an identifier into word segments.

    Escape markers are removed before segmentation.

    Args:
        identifier: Case identifier, optionally escaped

    Returns:
        Non-empty tuple of segments whose concatenation is the unescaped identifier

    Raises:
        InternalInvariantError: If the identifier is empty after unescaping

    Example:
        >>> split_segments("noIRegretted")
        ('no', 'I', 'Regretted')
        >>> split_segments("`for`")
        ('for',)
    """
    bare = _require_identifier(identifier)
    segments: list[str] = []
    start = 0
    for offset in _boundary_offsets(bare):
        segments.append(bare[start:offset])
        start = offset
    segments.append(bare[start:])
    return tuple(segments)


def count_boundaries(identifier: str) -> int:
    """Number of segment boundaries in an identifier.

    Always ``len(split_segments(identifier)) - 1``.
    """
    return len(_boundary_offsets(_require_identifier(identifier)))


def derive_key(identifier: str, convention: NamingConvention) -> str:
    """Derive the localization key for a case identifier.

    Args:
        identifier: Case identifier as declared, optionally escaped with backticks
        convention: Naming convention selected for the whole expansion

    Returns:
        Lookup key, never containing escape markers

    Raises:
        InternalInvariantError: If the identifier is empty after unescaping,
            or ``convention`` is not a NamingConvention

    Example:
        >>> derive_key("noIRegretted", NamingConvention.UPPER_SNAKE_CASE)
        'NO_I_REGRETTED'
        >>> derive_key("c0cDdd4d", NamingConvention.LOWER_SNAKE_CASE)
        'c0c_ddd4d'
        >>> derive_key("`for`", NamingConvention.PRESERVE_CASE)
        'for'
    """
    match convention:
        case NamingConvention.PRESERVE_CASE:
            return _require_identifier(identifier)
        case NamingConvention.UPPER_SNAKE_CASE:
            return KEY_SEPARATOR.join(split_segments(identifier)).upper()
        case NamingConvention.LOWER_SNAKE_CASE:
            return KEY_SEPARATOR.join(split_segments(identifier)).lower()
        case _:
            msg = f"Unsupported naming convention {convention!r}"
            raise InternalInvariantError(msg)
