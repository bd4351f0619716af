"""Variant-accessor synthesis.

Turns the ordered variants of an enum into one exhaustive dispatch plus a
private lookup helper. For every variant, in declaration order:

- no parameters:   case .name:            lookup(key)
- N parameters:    case let .name(value0, ..., valueN-1):
                                          format(lookup(key), value0, ..., valueN-1)

Placeholders never reuse declared labels, so a label such as ``for`` or one
shadowing another member cannot leak into generated code. The match pattern
keeps the declared spelling (escaped reserved words stay escaped); the key is
always derived from the unescaped name.

There is no default branch: the variant set is closed and every variant gets
exactly one branch, so an empty enum yields an empty, still exhaustive
dispatch.

Thread Safety:
    Pure; never mutates its input.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from localizable.enums import NamingConvention
from localizable.keys import derive_key
from localizable.syntax.ast import (
    Branch,
    DirectBranch,
    FormattedBranch,
    GeneratedAccessor,
    LookupHelper,
    VariantDecl,
)

from .options import GeneratorOptions

__all__ = ["placeholder_names", "synthesize", "synthesize_branch"]

logger = logging.getLogger(__name__)


def placeholder_names(count: int, prefix: str = "value") -> tuple[str, ...]:
    """Synthetic bind names ``value0 ... value(count-1)``.

    Example:
        >>> placeholder_names(3)
        ('value0', 'value1', 'value2')
    """
    return tuple(f"{prefix}{index}" for index in range(count))


def synthesize_branch(
    variant: VariantDecl,
    convention: NamingConvention,
    options: GeneratorOptions,
) -> Branch:
    """Build the dispatch branch for a single variant."""
    key = derive_key(variant.name, convention)
    if not variant.parameters:
        return DirectBranch(case_name=variant.name, key=key)
    return FormattedBranch(
        case_name=variant.name,
        key=key,
        bindings=placeholder_names(variant.arity, options.placeholder_prefix),
    )


def synthesize(
    variants: Sequence[VariantDecl],
    convention: NamingConvention,
    *,
    options: GeneratorOptions | None = None,
) -> GeneratedAccessor:
    """Synthesize the localized accessor for an ordered variant set.

    Args:
        variants: Variants in declaration order (may be empty)
        convention: Naming convention applied to every variant
        options: Generated member names (default: GeneratorOptions())

    Returns:
        GeneratedAccessor with one branch per variant, in input order

    Example:
        >>> accessor = synthesize(
        ...     [VariantDecl("ok"), VariantDecl("itemCount", (ParameterDecl("Int", "count"),))],
        ...     NamingConvention.UPPER_SNAKE_CASE,
        ... )
        >>> accessor.keys
        ('OK', 'ITEM_COUNT')
    """
    opts = options if options is not None else GeneratorOptions()
    branches = tuple(synthesize_branch(variant, convention, opts) for variant in variants)
    logger.debug(
        "Synthesized %d branch(es) with %s keys", len(branches), convention.value
    )
    return GeneratedAccessor(
        name=opts.accessor_name,
        branches=branches,
        helper=LookupHelper(
            name=opts.helper_name,
            parameter_name=opts.helper_parameter_name,
            lookup_function=opts.lookup_function,
        ),
        convention=convention,
    )
