"""Run-time evaluation of generated accessors.

Python 3.13+.
"""

from .accessor import LocalizedAccessor
from .collaborators import (
    FormatFunction,
    GettextCatalog,
    LocaleAwareFormatter,
    LookupFunction,
    PrintfFormatter,
    TemplateFormatError,
    identity_lookup,
    null_translations_lookup,
    printf_format,
    translations_lookup,
)

__all__ = [
    "FormatFunction",
    "GettextCatalog",
    "LocaleAwareFormatter",
    "LocalizedAccessor",
    "LookupFunction",
    "PrintfFormatter",
    "TemplateFormatError",
    "identity_lookup",
    "null_translations_lookup",
    "printf_format",
    "translations_lookup",
]
