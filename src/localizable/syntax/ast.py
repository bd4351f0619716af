"""Declaration and generated-member node definitions.

Two families of immutable nodes:
- Declaration input: the already-parsed enum (or other type) the macro is
  attached to, as supplied by the host parser or the structured reader.
- Generated members: the accessor dispatch and lookup helper produced by
  the synthesizer, consumed by the serializer and the runtime evaluator.

Includes type guards as static methods.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from localizable.diagnostics.codes import SourceSpan
from localizable.enums import DeclKind, NamingConvention

from .identifiers import strip_escape_markers

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Declaration input
    "ParameterDecl",
    "VariantDecl",
    "CaseDecl",
    "MemberDecl",
    "AttributeArgument",
    "MacroAttribute",
    "DeclGroup",
    # Generated members
    "DirectBranch",
    "FormattedBranch",
    "LookupHelper",
    "GeneratedAccessor",
    # Type aliases
    "Member",
    "Branch",
]

# ============================================================================
# DECLARATION INPUT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ParameterDecl:
    """One positional value carried by a variant.

    The label only matters for reproducing the declaration; the type is
    opaque text and never inspected.

    Example:
        case welcome(userName: String)
                     ^^^^^^^^^^^^^^^^  ParameterDecl(label="userName", type_name="String")
    """

    type_name: str
    label: str | None = None

    def __post_init__(self) -> None:
        """Validate parameter invariants."""
        if not self.type_name:
            msg = "ParameterDecl.type_name must not be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class VariantDecl:
    """One named case of an enum, with its ordered parameters.

    ``name`` keeps the declared spelling, including backticks for reserved
    words, e.g. "`for`".
    """

    name: str
    parameters: tuple[ParameterDecl, ...] = ()

    @property
    def arity(self) -> int:
        """Number of carried values."""
        return len(self.parameters)

    @staticmethod
    def guard(node: object) -> TypeIs["VariantDecl"]:
        """Type guard for VariantDecl."""
        return isinstance(node, VariantDecl)


@dataclass(frozen=True, slots=True)
class CaseDecl:
    """A single ``case`` line declaring one or more variants.

    Example:
        case ok, cancel, retry(count: Int)
    """

    elements: tuple[VariantDecl, ...]

    def __post_init__(self) -> None:
        """Validate case invariants."""
        if not self.elements:
            msg = "CaseDecl requires at least one element"
            raise ValueError(msg)

    @staticmethod
    def guard(member: object) -> TypeIs["CaseDecl"]:
        """Type guard for CaseDecl (used in member filtering)."""
        return isinstance(member, CaseDecl)


@dataclass(frozen=True, slots=True)
class MemberDecl:
    """Any non-case member, kept as opaque source text."""

    source: str

    @staticmethod
    def guard(member: object) -> TypeIs["MemberDecl"]:
        """Type guard for MemberDecl."""
        return isinstance(member, MemberDecl)


@dataclass(frozen=True, slots=True)
class AttributeArgument:
    """Labeled attribute argument: ``keyFormat: .upperSnakeCase``."""

    label: str | None
    value: str


@dataclass(frozen=True, slots=True)
class MacroAttribute:
    """Attribute attached to a declaration.

    Examples:
        @Localizable
        @Localizable(keyFormat: .lowerSnakeCase)
    """

    name: str
    arguments: tuple[AttributeArgument, ...] = ()

    def argument(self, label: str) -> str | None:
        """Value of the first argument with ``label``, or None."""
        for arg in self.arguments:
            if arg.label == label:
                return arg.value
        return None


@dataclass(frozen=True, slots=True)
class DeclGroup:
    """A type declaration with a member block.

    Only ``DeclKind.ENUM`` groups have a closed variant set; the expansion
    controller rejects every other kind.
    """

    kind: DeclKind
    name: str
    members: tuple["Member", ...] = ()
    attributes: tuple[MacroAttribute, ...] = ()
    span: SourceSpan | None = None

    @property
    def is_enum(self) -> bool:
        """True when the declaration is an enumeration."""
        return self.kind is DeclKind.ENUM

    @property
    def variants(self) -> tuple[VariantDecl, ...]:
        """All case elements, flattened in declaration order."""
        return tuple(
            element
            for member in self.members
            if CaseDecl.guard(member)
            for element in member.elements
        )

    def attribute(self, name: str) -> MacroAttribute | None:
        """First attached attribute called ``name``, or None."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None


# ============================================================================
# GENERATED MEMBERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class DirectBranch:
    """Dispatch branch for a case without values: ``lookup(key)``.

    Example:
        case .ok:
            localized("OK")
    """

    case_name: str
    key: str

    @staticmethod
    def guard(branch: object) -> TypeIs["DirectBranch"]:
        """Type guard for DirectBranch."""
        return isinstance(branch, DirectBranch)


@dataclass(frozen=True, slots=True)
class FormattedBranch:
    """Dispatch branch for a case with values: ``format(lookup(key), values...)``.

    ``bindings`` are the synthetic placeholder names in declared order.

    Example:
        case let .itemCount(value0):
            String(format: localized("ITEM_COUNT"), value0)
    """

    case_name: str
    key: str
    bindings: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate branch invariants."""
        if not self.bindings:
            msg = "FormattedBranch requires at least one binding"
            raise ValueError(msg)

    @property
    def arity(self) -> int:
        """Number of bound values."""
        return len(self.bindings)

    @staticmethod
    def guard(branch: object) -> TypeIs["FormattedBranch"]:
        """Type guard for FormattedBranch."""
        return isinstance(branch, FormattedBranch)


@dataclass(frozen=True, slots=True)
class LookupHelper:
    """Private one-argument helper resolving a key to template text.

    This is the seam to the run-time lookup collaborator.
    """

    name: str
    parameter_name: str
    lookup_function: str


@dataclass(frozen=True, slots=True)
class GeneratedAccessor:
    """Result of synthesis: one exhaustive dispatch plus the lookup helper.

    ``branches`` holds exactly one entry per declared variant, in declaration
    order. There is no default branch.
    """

    name: str
    branches: tuple["Branch", ...]
    helper: LookupHelper
    convention: NamingConvention

    @property
    def keys(self) -> tuple[str, ...]:
        """Lookup keys in dispatch order."""
        return tuple(branch.key for branch in self.branches)

    def branch_for(self, case_name: str) -> "Branch | None":
        """Branch matching ``case_name`` (escaped or not), or None."""
        bare = strip_escape_markers(case_name)
        for branch in self.branches:
            if strip_escape_markers(branch.case_name) == bare:
                return branch
        return None


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Member = CaseDecl | MemberDecl
type Branch = DirectBranch | FormattedBranch
