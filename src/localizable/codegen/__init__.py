"""Accessor code generation.

Synthesis of the localized dispatch, Swift serialization of the generated
members, and the expansion controller tying them to a declaration.

Python 3.13+.
"""

from .expansion import (
    DEFAULT_CONVENTION,
    ExpansionResult,
    expand,
    expand_declaration,
    resolve_convention,
)
from .options import GeneratorOptions
from .serializer import (
    SwiftSerializer,
    serialize_accessor,
    serialize_declaration,
    serialize_helper,
    serialize_members,
)
from .synthesizer import placeholder_names, synthesize, synthesize_branch

__all__ = [
    "DEFAULT_CONVENTION",
    "ExpansionResult",
    "GeneratorOptions",
    "SwiftSerializer",
    "expand",
    "expand_declaration",
    "placeholder_names",
    "resolve_convention",
    "serialize_accessor",
    "serialize_declaration",
    "serialize_helper",
    "serialize_members",
    "synthesize",
    "synthesize_branch",
]
