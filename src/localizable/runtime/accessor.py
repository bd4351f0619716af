"""Evaluate a generated accessor in Python.

LocalizedAccessor runs the same dispatch the generated Swift property runs,
against injected lookup and format collaborators. Useful for checking a
localization table against an enum's keys, and for testing the generated
dispatch with stub tables instead of a real localization runtime.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from localizable.diagnostics import ArityMismatchError, ErrorTemplate, UnknownCaseError
from localizable.syntax.ast import Branch, DirectBranch, FormattedBranch, GeneratedAccessor
from localizable.syntax.identifiers import strip_escape_markers

from .collaborators import FormatFunction, LookupFunction, identity_lookup, printf_format

__all__ = ["LocalizedAccessor"]

logger = logging.getLogger(__name__)


class LocalizedAccessor:
    """Python evaluator for a GeneratedAccessor.

    Case names may be given escaped ("`for`") or bare ("for").

    Thread Safety:
        Immutable after construction; safe to share when the collaborators are.

    Example:
        >>> table = {"ITEM_COUNT": "%d items", "OK": "OK!"}
        >>> accessor = LocalizedAccessor(
        ...     synthesize(decl.variants, NamingConvention.UPPER_SNAKE_CASE),
        ...     lookup=lambda key: table.get(key, key),
        ... )
        >>> accessor.localized("itemCount", 3)
        '3 items'
        >>> accessor.localized("ok")
        'OK!'
    """

    __slots__ = ("_accessor", "_branches", "_formatter", "_lookup")

    def __init__(
        self,
        accessor: GeneratedAccessor,
        lookup: LookupFunction | None = None,
        formatter: FormatFunction | None = None,
    ) -> None:
        """Bind a generated accessor to its collaborators.

        Args:
            accessor: Synthesized accessor
            lookup: Table lookup (default: identity, i.e. every key misses)
            formatter: Template formatter (default: printf_format)
        """
        self._accessor = accessor
        self._lookup = lookup if lookup is not None else identity_lookup
        self._formatter = formatter if formatter is not None else printf_format
        branches: dict[str, Branch] = {}
        for branch in accessor.branches:
            # First declaration wins; duplicate case names are rejected by the compiler.
            branches.setdefault(strip_escape_markers(branch.case_name), branch)
        self._branches = branches
        logger.debug("LocalizedAccessor bound to %d case(s)", len(branches))

    @property
    def accessor(self) -> GeneratedAccessor:
        """The evaluated accessor."""
        return self._accessor

    @property
    def keys(self) -> tuple[str, ...]:
        """Lookup keys in dispatch order."""
        return self._accessor.keys

    def __contains__(self, case_name: object) -> bool:
        return isinstance(case_name, str) and strip_escape_markers(case_name) in self._branches

    def __iter__(self) -> Iterator[str]:
        return iter(self._branches)

    def __len__(self) -> int:
        return len(self._branches)

    def _branch(self, case_name: str) -> Branch:
        branch = self._branches.get(strip_escape_markers(case_name))
        if branch is None:
            raise UnknownCaseError(ErrorTemplate.case_not_found(case_name))
        return branch

    def template(self, case_name: str) -> str:
        """Unformatted template text for a case.

        Raises:
            UnknownCaseError: If the case is not in the dispatch
        """
        return self._lookup(self._branch(case_name).key)

    def localized(self, case_name: str, *values: object) -> str:
        """Localized string for a case, formatted with its values.

        Args:
            case_name: Case to evaluate
            *values: Carried values, in declaration order

        Returns:
            ``lookup(key)`` for cases without values, otherwise
            ``formatter(lookup(key), values)``

        Raises:
            UnknownCaseError: If the case is not in the dispatch
            ArityMismatchError: If the number of values differs from the declaration
        """
        branch = self._branch(case_name)
        match branch:
            case DirectBranch():
                if values:
                    raise ArityMismatchError(
                        ErrorTemplate.arity_mismatch(case_name, 0, len(values)),
                        expected=0,
                        received=len(values),
                    )
                return self._lookup(branch.key)
            case FormattedBranch():
                if len(values) != branch.arity:
                    raise ArityMismatchError(
                        ErrorTemplate.arity_mismatch(case_name, branch.arity, len(values)),
                        expected=branch.arity,
                        received=len(values),
                    )
                return self._formatter(self._lookup(branch.key), values)
