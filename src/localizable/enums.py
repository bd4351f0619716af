"""Enumerations for localizable type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "DeclKind",
    "NamingConvention",
]


class NamingConvention(StrEnum):
    """Transform applied to a variant name to derive its localization key.

    StrEnum provides automatic string conversion:
    str(NamingConvention.UPPER_SNAKE_CASE) == "upperSnakeCase"
    """

    PRESERVE_CASE = "preserveCase"
    """Name used verbatim: welcomeMessage -> welcomeMessage"""

    LOWER_SNAKE_CASE = "lowerSnakeCase"
    """Segments joined by underscores, lower-cased: welcomeMessage -> welcome_message"""

    UPPER_SNAKE_CASE = "upperSnakeCase"
    """Segments joined by underscores, upper-cased: welcomeMessage -> WELCOME_MESSAGE"""


class DeclKind(StrEnum):
    """Kind of declaration group a macro attribute can be attached to.

    Only ENUM has a closed variant set; every other kind is rejected by the
    expansion controller with a diagnostic.
    """

    ENUM = "enum"
    STRUCT = "struct"
    CLASS = "class"
    ACTOR = "actor"
    PROTOCOL = "protocol"
    EXTENSION = "extension"
