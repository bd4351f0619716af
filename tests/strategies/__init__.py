"""Hypothesis strategies for localizable property-based testing.

Usage:
    from tests.strategies import case_identifiers, variant_decls
"""

from .declarations import (
    case_identifiers,
    escaped_identifiers,
    naming_conventions,
    parameter_decls,
    variant_decls,
    variant_sequences,
)

__all__ = [
    "case_identifiers",
    "escaped_identifiers",
    "naming_conventions",
    "parameter_decls",
    "variant_decls",
    "variant_sequences",
]
