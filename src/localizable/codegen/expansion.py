"""Expansion controller for the Localizable attribute.

Receives an annotated declaration, checks that it is an enum, reads the
``keyFormat`` argument, and runs synthesis and serialization.

Failure model:
    The only user-facing failure is attaching the attribute to something
    that is not an enum. That case produces exactly one error diagnostic at
    the declaration site and no generated members; nothing is raised, so
    the surrounding build keeps going and can report further problems.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from localizable.constants import KEY_FORMAT_OPTION
from localizable.diagnostics import Diagnostic, ErrorTemplate
from localizable.enums import NamingConvention
from localizable.syntax.ast import DeclGroup, GeneratedAccessor, MacroAttribute

from .options import GeneratorOptions
from .serializer import SwiftSerializer
from .synthesizer import synthesize

__all__ = [
    "DEFAULT_CONVENTION",
    "ExpansionResult",
    "expand",
    "expand_declaration",
    "resolve_convention",
]

logger = logging.getLogger(__name__)

DEFAULT_CONVENTION: NamingConvention = NamingConvention.PRESERVE_CASE

# Accepted keyFormat spellings. "camelCase" is the attribute's public name for
# the identity transform.
_CONVENTION_SPELLINGS: dict[str, NamingConvention] = {
    "camelCase": NamingConvention.PRESERVE_CASE,
    "preserveCase": NamingConvention.PRESERVE_CASE,
    "lowerSnakeCase": NamingConvention.LOWER_SNAKE_CASE,
    "upperSnakeCase": NamingConvention.UPPER_SNAKE_CASE,
}


@dataclass(frozen=True, slots=True)
class ExpansionResult:
    """Outcome of one expansion.

    Attributes:
        members: Generated member sources (accessor, helper); empty on error
        accessor: Synthesized accessor, or None when expansion was rejected
        diagnostics: Diagnostics reported at the declaration site
        source: The declaration as it reads after expansion
    """

    members: tuple[str, ...]
    accessor: GeneratedAccessor | None
    diagnostics: tuple[Diagnostic, ...]
    source: str

    @property
    def is_expanded(self) -> bool:
        """True when members were generated."""
        return self.accessor is not None

    @property
    def has_errors(self) -> bool:
        """True when any error-severity diagnostic was reported."""
        return any(d.severity == "error" for d in self.diagnostics)


def resolve_convention(value: str | None) -> NamingConvention:
    """Map a ``keyFormat`` argument value to a naming convention.

    Accepts ``.upperSnakeCase``, ``upperSnakeCase`` and qualified spellings
    such as ``LocalizationKeyFormat.upperSnakeCase``. Absent or unrecognized
    values fall back to PRESERVE_CASE.

    Example:
        >>> resolve_convention(".lowerSnakeCase")
        <NamingConvention.LOWER_SNAKE_CASE: 'lowerSnakeCase'>
        >>> resolve_convention(None)
        <NamingConvention.PRESERVE_CASE: 'preserveCase'>
    """
    if value is None:
        return DEFAULT_CONVENTION
    spelling = value.strip().rpartition(".")[2]
    convention = _CONVENTION_SPELLINGS.get(spelling)
    if convention is None:
        logger.warning(
            "%s", ErrorTemplate.unknown_key_format(value, DEFAULT_CONVENTION.value).message
        )
        return DEFAULT_CONVENTION
    return convention


def expand(
    declaration: DeclGroup,
    attribute: MacroAttribute | None = None,
    *,
    options: GeneratorOptions | None = None,
) -> ExpansionResult:
    """Expand the Localizable attribute on a declaration.

    Args:
        declaration: Annotated declaration
        attribute: The attribute being expanded; looked up on the declaration
            by ``options.macro_name`` when omitted
        options: Generated member names and layout

    Returns:
        ExpansionResult with generated members, or a single diagnostic when
        the declaration is not an enum
    """
    opts = options if options is not None else GeneratorOptions()
    attr = attribute if attribute is not None else declaration.attribute(opts.macro_name)
    macro_name = attr.name if attr is not None else opts.macro_name
    serializer = SwiftSerializer(opts)

    if not declaration.is_enum:
        diagnostic = ErrorTemplate.not_an_enum(macro_name, declaration.span)
        logger.debug(
            "Rejected %s '%s': %s", declaration.kind.value, declaration.name, diagnostic.message
        )
        return ExpansionResult(
            members=(),
            accessor=None,
            diagnostics=(diagnostic,),
            source=serializer.serialize_declaration(declaration, omit_attribute=macro_name),
        )

    convention = resolve_convention(
        attr.argument(KEY_FORMAT_OPTION) if attr is not None else None
    )
    accessor = synthesize(declaration.variants, convention, options=opts)
    members = serializer.serialize_members(accessor)
    logger.debug(
        "Expanded enum '%s' with %d case(s) using %s keys",
        declaration.name,
        len(accessor.branches),
        convention.value,
    )
    return ExpansionResult(
        members=members,
        accessor=accessor,
        diagnostics=(),
        source=serializer.serialize_declaration(
            declaration, members, omit_attribute=macro_name
        ),
    )


def expand_declaration(
    declaration: DeclGroup,
    attribute: MacroAttribute | None = None,
    *,
    options: GeneratorOptions | None = None,
) -> str:
    """Expanded declaration source.

    Convenience function for ``expand(...).source``. Diagnostics are dropped;
    call expand() to inspect them.
    """
    return expand(declaration, attribute, options=options).source
