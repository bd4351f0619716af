"""Lookup and format collaborators used by generated accessors.

Generated code calls two opaque functions: a one-argument table lookup
returning template text for a key, and a format function applying ordered
values to that template. This module defines their Python signatures and
ships adapters:

    identity_lookup        key -> key (what a table miss returns)
    translations_lookup    wraps a gettext-style catalog (babel.support.Translations)
    null_translations_lookup
                           Babel NullTranslations, i.e. identity through Babel
    printf_format          printf/String(format:) specifiers, %@ included
    LocaleAwareFormatter   printf_format with numbers rendered by babel.numbers

Table loading, plural selection and locale negotiation belong to the
caller's localization runtime, not to these adapters.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

from localizable.core.babel_compat import require_babel

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "FormatFunction",
    "GettextCatalog",
    "LocaleAwareFormatter",
    "LookupFunction",
    "PrintfFormatter",
    "TemplateFormatError",
    "identity_lookup",
    "null_translations_lookup",
    "printf_format",
    "translations_lookup",
]

type LookupFunction = Callable[[str], str]
"""Resolve a localization key to template text."""

type FormatFunction = Callable[[str, Sequence[object]], str]
"""Apply ordered positional values to template text."""


class GettextCatalog(Protocol):
    """Anything with a gettext() method (babel.support.Translations, gettext.GNUTranslations)."""

    def gettext(self, message: str) -> str:
        """Translate ``message``; return it unchanged when absent."""
        ...  # pylint: disable=unnecessary-ellipsis


class TemplateFormatError(ValueError):
    """Template specifiers do not match the supplied values."""


def identity_lookup(key: str) -> str:
    """Return the key itself, as a table lookup does on a miss."""
    return key


def translations_lookup(catalog: GettextCatalog) -> LookupFunction:
    """Adapt a gettext-style catalog to a lookup function.

    Example:
        >>> from babel.support import Translations
        >>> with open("messages.mo", "rb") as fp:
        ...     lookup = translations_lookup(Translations(fp))
    """
    return catalog.gettext


def null_translations_lookup() -> LookupFunction:
    """Lookup backed by an empty Babel catalog (every key maps to itself).

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("null_translations_lookup")
    from babel.support import NullTranslations  # noqa: PLC0415

    return translations_lookup(NullTranslations())


# printf / String(format:) conversion specifier:
#   %[index$][flags][width][.precision][length]conversion
_SPECIFIER_PATTERN: re.Pattern[str] = re.compile(
    r"%(?:(?P<index>[1-9]\d*)\$)?"
    r"(?P<flags>[-+ 0#]*)(?P<width>\d*)(?:\.(?P<precision>\d+))?"
    r"(?:hh|h|ll|l|q|L|z|t|j)?"
    r"(?P<conversion>[@dDiuUxXoOfFeEgGcCsS%])"
)

_INTEGER_CONVERSIONS = frozenset("dDiuU")

# Swift/C conversions with no Python %-operator spelling of their own.
_PYTHON_CONVERSIONS: dict[str, str] = {"D": "d", "U": "d", "u": "d", "O": "o", "C": "c", "S": "s"}


class PrintfFormatter:
    """Format function understanding printf and String(format:) specifiers.

    Supports sequential (``%@``, ``%d``) and positional (``%2$@``) arguments,
    flags, width and precision. ``%@`` renders any value with str().

    Usage:
        >>> printf_format("%@ has %d items", ["Cart", 3])
        'Cart has 3 items'
        >>> printf_format("%2$@, %1$@", ["world", "Hello"])
        'Hello, world'
    """

    __slots__ = ()

    def __call__(self, template: str, values: Sequence[object]) -> str:
        """Apply ``values`` to ``template``.

        Raises:
            TemplateFormatError: If a specifier refers to a missing value or
                a value does not fit its conversion
        """
        sequential = 0

        def substitute(match: re.Match[str]) -> str:
            nonlocal sequential
            conversion = match.group("conversion")
            if conversion == "%":
                return "%"
            if match.group("index") is not None:
                position = int(match.group("index")) - 1
            else:
                position = sequential
                sequential += 1
            if position >= len(values):
                msg = f"Template needs value #{position + 1}, only {len(values)} supplied"
                raise TemplateFormatError(msg)
            return self._render(values[position], match)

        return _SPECIFIER_PATTERN.sub(substitute, template)

    def _render(self, value: object, match: re.Match[str]) -> str:
        conversion = match.group("conversion")
        flags = match.group("flags")
        width = match.group("width")
        precision = match.group("precision")

        if conversion == "@":
            return f"%{flags}{width}s" % (value,)
        python_conversion = _PYTHON_CONVERSIONS.get(conversion, conversion)
        dot_precision = f".{precision}" if precision is not None else ""
        fmt = f"%{flags}{width}{dot_precision}{python_conversion}"
        try:
            return fmt % (value,)
        except (TypeError, ValueError) as e:
            msg = f"Value {value!r} does not fit specifier '{match.group(0)}'"
            raise TemplateFormatError(msg) from e


printf_format: FormatFunction = PrintfFormatter()


class LocaleAwareFormatter(PrintfFormatter):
    """printf_format with numeric values rendered for a locale by Babel.

    Numbers consumed by ``%@`` and integer conversions use
    ``babel.numbers.format_decimal``; float conversions keep their precision
    (printf default 6) and gain locale grouping and decimal symbols. Other
    values and conversions behave as in PrintfFormatter.

    Usage:
        >>> formatter = LocaleAwareFormatter("de_DE")
        >>> formatter("%@ Artikel", [1234])
        '1.234 Artikel'
        >>> formatter("%.2f EUR", [1234.5])
        '1.234,50 EUR'
    """

    __slots__ = ("_locale",)

    def __init__(self, locale: str | Locale) -> None:
        """Bind the formatter to a locale.

        Args:
            locale: Locale identifier (``"en_US"``) or babel.Locale

        Raises:
            BabelImportError: If Babel is not installed
        """
        require_babel("LocaleAwareFormatter")
        from babel import Locale  # noqa: PLC0415

        self._locale = locale if isinstance(locale, Locale) else Locale.parse(locale)

    @property
    def locale(self) -> Locale:
        """Locale used for number rendering."""
        return self._locale

    def _render(self, value: object, match: re.Match[str]) -> str:
        from babel.numbers import format_decimal  # noqa: PLC0415

        conversion = match.group("conversion")
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            return super()._render(value, match)
        if conversion == "@" or conversion in _INTEGER_CONVERSIONS:
            number = value if conversion == "@" else int(value)
            return format_decimal(number, locale=self._locale)
        if conversion in "fF":
            digits = int(match.group("precision") or 6)
            pattern = "#,##0" + ("." + "0" * digits if digits else "")
            return format_decimal(value, format=pattern, locale=self._locale)
        return super()._render(value, match)
