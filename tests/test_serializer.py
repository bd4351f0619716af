"""Tests for Swift serialization of generated members and declarations.

Covers:
- Accessor and helper text for direct and formatted branches
- Key string literal escaping
- Declaration re-emission: attributes, case lines, opaque members
- Indentation options and blank-line hygiene
"""

from __future__ import annotations

from textwrap import dedent

from localizable.codegen import (
    GeneratorOptions,
    SwiftSerializer,
    serialize_accessor,
    serialize_declaration,
    serialize_helper,
    serialize_members,
    synthesize,
)
from localizable.enums import DeclKind, NamingConvention
from localizable.syntax.ast import (
    AttributeArgument,
    CaseDecl,
    DeclGroup,
    DirectBranch,
    GeneratedAccessor,
    LookupHelper,
    MacroAttribute,
    MemberDecl,
    VariantDecl,
)
from tests.helpers.declarations import make_enum, variant

UPPER = NamingConvention.UPPER_SNAKE_CASE


def _swift(text: str) -> str:
    return dedent(text).strip("\n")


class TestSerializeAccessor:
    """Public computed property."""

    def test_empty_switch(self) -> None:
        """No variants still give a closed switch."""
        accessor = synthesize([], NamingConvention.PRESERVE_CASE)
        assert serialize_accessor(accessor) == _swift(
            """
            public var localized: String {
                switch self {
                }
            }
            """
        )

    def test_direct_and_formatted_branches(self) -> None:
        """Direct branches look up; formatted branches wrap in String(format:)."""
        accessor = synthesize([VariantDecl("ok"), variant("itemCount", "count: Int")], UPPER)
        assert serialize_accessor(accessor) == _swift(
            """
            public var localized: String {
                switch self {
                case .ok:
                    localized("OK")
                case let .itemCount(value0):
                    String(format: localized("ITEM_COUNT"), value0)
                }
            }
            """
        )

    def test_escaped_case_pattern(self) -> None:
        """Reserved words stay escaped in the pattern only."""
        accessor = synthesize([VariantDecl("`for`")], UPPER)
        assert 'case .`for`:\n        localized("FOR")' in serialize_accessor(accessor)

    def test_bare_reserved_word_pattern(self) -> None:
        """Unescaped reserved words are escaped in the pattern; the key is not."""
        accessor = synthesize([VariantDecl("for"), variant("default", "String")], UPPER)
        text = serialize_accessor(accessor)
        assert 'case .`for`:\n        localized("FOR")' in text
        assert "case let .`default`(value0):" in text
        assert "case .for:" not in text


    def test_key_literal_is_escaped(self) -> None:
        """Quotes and backslashes in keys are escaped in the literal."""
        accessor = GeneratedAccessor(
            name="localized",
            branches=(DirectBranch(case_name="odd", key='a"b\\c'),),
            helper=LookupHelper("localized", "string", "NSLocalizedString"),
            convention=NamingConvention.PRESERVE_CASE,
        )
        assert 'localized("a\\"b\\\\c")' in serialize_accessor(accessor)

    def test_access_modifier_option(self) -> None:
        """The accessor's access level is configurable."""
        options = GeneratorOptions(access_modifier="internal")
        accessor = synthesize([], UPPER, options=options)
        assert serialize_accessor(accessor, options).startswith("internal var localized: String {")


class TestSerializeHelper:
    """Private lookup helper."""

    def test_default_helper(self) -> None:
        """Default helper wraps NSLocalizedString with an empty comment."""
        accessor = synthesize([], UPPER)
        assert serialize_helper(accessor.helper) == _swift(
            """
            private func localized(_ string: String) -> String {
                NSLocalizedString(string, comment: "")
            }
            """
        )

    def test_renamed_helper(self) -> None:
        """Renamed helpers are called by the accessor under their new name."""
        options = GeneratorOptions(helper_name="lookupLocalizedTemplate")
        accessor = synthesize([VariantDecl("ok")], UPPER, options=options)
        members = serialize_members(accessor, options)
        assert 'lookupLocalizedTemplate("OK")' in members[0]
        assert members[1].startswith("private func lookupLocalizedTemplate(_ string: String)")

    def test_members_order(self) -> None:
        """Accessor comes before helper."""
        accessor = synthesize([], UPPER)
        accessor_text, helper_text = serialize_members(accessor)
        assert accessor_text.startswith("public var")
        assert helper_text.startswith("private func")


class TestSerializeDeclaration:
    """Declaration re-emission."""

    def test_attribute_with_argument(self) -> None:
        """Attributes are kept unless omitted."""
        decl = make_enum("ok", key_format=".upperSnakeCase")
        assert serialize_declaration(decl) == _swift(
            """
            @Localizable(keyFormat: .upperSnakeCase)
            enum Localization {
                case ok
            }
            """
        )

    def test_omit_attribute(self) -> None:
        """The expanded attribute is dropped by name."""
        decl = make_enum("ok")
        assert serialize_declaration(decl, omit_attribute="Localizable") == _swift(
            """
            enum Localization {
                case ok
            }
            """
        )

    def test_multi_element_case_and_opaque_member(self) -> None:
        """Case lines keep their grouping; other members are copied."""
        decl = DeclGroup(
            kind=DeclKind.ENUM,
            name="Status",
            members=(
                CaseDecl(elements=(VariantDecl("ok"), variant("retry", "count: Int", "Bool"))),
                MemberDecl(source="static let table = \"Main\""),
            ),
            attributes=(
                MacroAttribute(name="Localizable"),
                MacroAttribute(name="frozen"),
            ),
        )
        assert serialize_declaration(decl, omit_attribute="Localizable") == _swift(
            """
            @frozen
            enum Status {
                case ok, retry(count: Int, Bool)
                static let table = "Main"
            }
            """
        )

    def test_unlabeled_attribute_argument(self) -> None:
        """Arguments without label are emitted bare."""
        decl = DeclGroup(
            kind=DeclKind.ENUM,
            name="E",
            attributes=(MacroAttribute("available", (AttributeArgument(None, "*"),)),),
        )
        assert serialize_declaration(decl).startswith("@available(*)\n")

    def test_reserved_word_case_lines(self) -> None:
        """Case lines escape reserved words and keep escaped ones as written."""
        decl = DeclGroup(
            kind=DeclKind.ENUM,
            name="Keywords",
            members=(
                CaseDecl(elements=(VariantDecl("for"), VariantDecl("`while`"))),
                CaseDecl(elements=(variant("in", "String"),)),
            ),
        )
        assert serialize_declaration(decl) == _swift(
            """
            enum Keywords {
                case `for`, `while`
                case `in`(String)
            }
            """
        )


    def test_generated_blocks_preceded_by_blank_line(self) -> None:
        """Each generated block is separated by an empty line without indentation."""
        text = serialize_declaration(make_enum(), ("var a: Int {\n\n    1\n}", "func b() {}"))
        assert text == _swift(
            """
            @Localizable
            enum Localization {

                var a: Int {

                    1
                }

                func b() {}
            }
            """
        )
        assert all(line == line.rstrip() for line in text.split("\n"))

    def test_custom_indent(self) -> None:
        """Indent option changes every level."""
        serializer = SwiftSerializer(GeneratorOptions(indent="  "))
        accessor = synthesize([VariantDecl("ok")], UPPER)
        assert serializer.serialize_accessor(accessor) == _swift(
            """
            public var localized: String {
              switch self {
              case .ok:
                localized("OK")
              }
            }
            """
        )
        assert serializer.options.indent == "  "
