"""Serialize generated members and declarations to Swift source.

Converts a GeneratedAccessor into member source text, and re-emits the
annotated declaration with the generated members appended, exactly as the
compiler would see it after expansion.

Output shape (default options, one indentation level = four spaces):

    public var localized: String {
        switch self {
        case .ok:
            localized("OK")
        case let .itemCount(value0):
            String(format: localized("ITEM_COUNT"), value0)
        }
    }

    private func localized(_ string: String) -> String {
        NSLocalizedString(string, comment: "")
    }

Reserved words are written with backticks wherever they name a case, whether
or not the declaration spelled them that way.

Python 3.13+.
"""

from __future__ import annotations

from localizable.syntax.ast import (
    AttributeArgument,
    Branch,
    CaseDecl,
    DeclGroup,
    DirectBranch,
    FormattedBranch,
    GeneratedAccessor,
    LookupHelper,
    MacroAttribute,
    Member,
    MemberDecl,
    ParameterDecl,
    VariantDecl,
)
from localizable.syntax.identifiers import escape_identifier

from .options import GeneratorOptions

__all__ = [
    "SwiftSerializer",
    "serialize_accessor",
    "serialize_declaration",
    "serialize_helper",
    "serialize_members",
]


def _string_literal(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class SwiftSerializer:
    """Converts generated members and declarations to Swift source.

    Stateless apart from its options: all output is built locally per call,
    so one instance can be shared.

    Usage:
        >>> serializer = SwiftSerializer()
        >>> print(serializer.serialize_helper(accessor.helper))
        private func localized(_ string: String) -> String {
            NSLocalizedString(string, comment: "")
        }
    """

    __slots__ = ("_options",)

    def __init__(self, options: GeneratorOptions | None = None) -> None:
        self._options = options if options is not None else GeneratorOptions()

    @property
    def options(self) -> GeneratorOptions:
        """Options controlling names and indentation."""
        return self._options

    # ------------------------------------------------------------------
    # Generated members
    # ------------------------------------------------------------------

    def serialize_accessor(self, accessor: GeneratedAccessor) -> str:
        """Serialize the public computed property with its switch."""
        output: list[str] = [
            f"{self._options.access_modifier} var {accessor.name}: String {{",
            self._indent("switch self {", 1),
        ]
        for branch in accessor.branches:
            self._serialize_branch(branch, accessor.helper, output)
        output.append(self._indent("}", 1))
        output.append("}")
        return "\n".join(output)

    def serialize_helper(self, helper: LookupHelper) -> str:
        """Serialize the private lookup helper."""
        return "\n".join(
            (
                f"private func {helper.name}(_ {helper.parameter_name}: String) -> String {{",
                self._indent(f'{helper.lookup_function}({helper.parameter_name}, comment: "")', 1),
                "}",
            )
        )

    def serialize_members(self, accessor: GeneratedAccessor) -> tuple[str, str]:
        """Serialize both generated members, accessor first."""
        return (self.serialize_accessor(accessor), self.serialize_helper(accessor.helper))

    def _serialize_branch(
        self, branch: Branch, helper: LookupHelper, output: list[str]
    ) -> None:
        lookup = f"{helper.name}({_string_literal(branch.key)})"
        case_name = escape_identifier(branch.case_name)
        match branch:
            case DirectBranch():
                output.append(self._indent(f"case .{case_name}:", 1))
                output.append(self._indent(lookup, 2))
            case FormattedBranch():
                bindings = ", ".join(branch.bindings)
                output.append(self._indent(f"case let .{case_name}({bindings}):", 1))
                output.append(self._indent(f"String(format: {lookup}, {bindings})", 2))

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def serialize_declaration(
        self,
        declaration: DeclGroup,
        generated: tuple[str, ...] = (),
        *,
        omit_attribute: str | None = None,
    ) -> str:
        """Serialize a declaration, appending generated member source.

        Args:
            declaration: Declaration to re-emit
            generated: Member source blocks appended after the existing
                members, each preceded by a blank line
            omit_attribute: Attribute name dropped from the output (the
                expanded macro itself)

        Returns:
            Swift source of the declaration
        """
        output: list[str] = [
            self._serialize_attribute(attr)
            for attr in declaration.attributes
            if attr.name != omit_attribute
        ]
        output.append(f"{declaration.kind.value} {declaration.name} {{")
        for member in declaration.members:
            output.extend(self._indent_block(self._serialize_member(member), 1))
        for block in generated:
            output.append("")
            output.extend(self._indent_block(block, 1))
        output.append("}")
        return "\n".join(output)

    def _serialize_attribute(self, attr: MacroAttribute) -> str:
        if not attr.arguments:
            return f"@{attr.name}"
        args = ", ".join(self._serialize_argument(arg) for arg in attr.arguments)
        return f"@{attr.name}({args})"

    @staticmethod
    def _serialize_argument(arg: AttributeArgument) -> str:
        if arg.label is None:
            return arg.value
        return f"{arg.label}: {arg.value}"

    def _serialize_member(self, member: Member) -> str:
        match member:
            case CaseDecl():
                elements = ", ".join(self._serialize_variant(v) for v in member.elements)
                return f"case {elements}"
            case MemberDecl():
                return member.source

    def _serialize_variant(self, variant: VariantDecl) -> str:
        name = escape_identifier(variant.name)
        if not variant.parameters:
            return name
        params = ", ".join(self._serialize_parameter(p) for p in variant.parameters)
        return f"{name}({params})"

    @staticmethod
    def _serialize_parameter(param: ParameterDecl) -> str:
        if param.label is None:
            return param.type_name
        return f"{param.label}: {param.type_name}"

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _indent(self, line: str, level: int) -> str:
        return f"{self._options.indent * level}{line}"

    def _indent_block(self, block: str, level: int) -> list[str]:
        # Blank lines stay empty so the output carries no trailing whitespace.
        return [self._indent(line, level) if line.strip() else "" for line in block.split("\n")]


def serialize_accessor(accessor: GeneratedAccessor, options: GeneratorOptions | None = None) -> str:
    """Serialize the localized accessor property.

    Convenience function for SwiftSerializer.serialize_accessor().

    Example:
        >>> print(serialize_accessor(synthesize([], NamingConvention.PRESERVE_CASE)))
        public var localized: String {
            switch self {
            }
        }
    """
    return SwiftSerializer(options).serialize_accessor(accessor)


def serialize_helper(helper: LookupHelper, options: GeneratorOptions | None = None) -> str:
    """Serialize the private lookup helper."""
    return SwiftSerializer(options).serialize_helper(helper)


def serialize_members(
    accessor: GeneratedAccessor, options: GeneratorOptions | None = None
) -> tuple[str, str]:
    """Serialize accessor and helper, in that order."""
    return SwiftSerializer(options).serialize_members(accessor)


def serialize_declaration(
    declaration: DeclGroup,
    generated: tuple[str, ...] = (),
    *,
    options: GeneratorOptions | None = None,
    omit_attribute: str | None = None,
) -> str:
    """Serialize a declaration with generated members appended."""
    return SwiftSerializer(options).serialize_declaration(
        declaration, generated, omit_attribute=omit_attribute
    )
