"""Tests for the structured declaration reader.

Covers:
- Mapping and JSON input producing DeclGroup nodes in declared order
- Single-element and multi-element case members, opaque source members
- Attributes and spans
- DeclarationFormatError paths for every shape violation
"""

from __future__ import annotations

import json

import pytest

from localizable.codegen import expand_declaration
from localizable.diagnostics import DeclarationFormatError, DiagnosticCode, SourceSpan
from localizable.enums import DeclKind
from localizable.syntax import loads_declaration, read_attribute, read_declaration, read_variant
from localizable.syntax.ast import CaseDecl, MemberDecl, ParameterDecl, VariantDecl

SAMPLE = {
    "kind": "enum",
    "name": "Localization",
    "attributes": [
        {"name": "Localizable", "arguments": [{"label": "keyFormat", "value": ".upperSnakeCase"}]}
    ],
    "members": [
        {
            "case": [
                {"name": "ok"},
                {"name": "itemCount", "parameters": [{"label": "count", "type": "Int"}]},
            ]
        },
        {"case": {"name": "`for`"}},
        {"source": "static let table = \"Main\""},
    ],
    "span": {"start": 0, "end": 42, "line": 1, "column": 1},
}


class TestReadDeclaration:
    """Well-formed descriptions."""

    def test_sample(self) -> None:
        """Every part of the description is carried over."""
        decl = read_declaration(SAMPLE)
        assert decl.kind is DeclKind.ENUM
        assert decl.name == "Localization"
        assert decl.span == SourceSpan(start=0, end=42, line=1, column=1)
        assert [v.name for v in decl.variants] == ["ok", "itemCount", "`for`"]
        assert decl.variants[1].parameters == (ParameterDecl(type_name="Int", label="count"),)
        assert isinstance(decl.members[0], CaseDecl)
        assert len(decl.members[0].elements) == 2
        assert decl.members[2] == MemberDecl(source='static let table = "Main"')
        attr = decl.attribute("Localizable")
        assert attr is not None
        assert attr.argument("keyFormat") == ".upperSnakeCase"

    def test_minimal(self) -> None:
        """Members, attributes and span are optional."""
        decl = read_declaration({"kind": "struct", "name": "Strings"})
        assert decl.kind is DeclKind.STRUCT
        assert decl.members == ()
        assert decl.attributes == ()
        assert decl.span is None

    def test_loads_matches_read(self) -> None:
        """JSON text and mapping input agree."""
        assert loads_declaration(json.dumps(SAMPLE)) == read_declaration(SAMPLE)

    def test_reads_into_expansion(self) -> None:
        """Read declarations expand like hand-built ones."""
        source = expand_declaration(read_declaration(SAMPLE))
        assert "case ok, itemCount(count: Int)" in source
        assert 'String(format: localized("ITEM_COUNT"), value0)' in source
        assert 'case .`for`:\n            localized("FOR")' in source

    def test_underscore_parameter_label(self) -> None:
        """An explicit ``_`` label is accepted."""
        variant = read_variant({"name": "pair", "parameters": [{"label": "_", "type": "Int"}]})
        assert variant == VariantDecl("pair", (ParameterDecl("Int", "_"),))

    def test_unlabeled_attribute_argument(self) -> None:
        """Argument labels may be null."""
        attr = read_attribute({"name": "available", "arguments": [{"label": None, "value": "*"}]})
        assert attr.arguments[0].label is None


class TestReadDeclarationErrors:
    """Malformed descriptions raise DeclarationFormatError."""

    @pytest.mark.parametrize(
        ("data", "path"),
        [
            ({"name": "E"}, "'kind'"),
            ({"kind": "enum"}, "'name'"),
            ({"kind": "enum", "name": "E", "members": "ok"}, "'members'"),
            ({"kind": "enum", "name": "E", "members": [42]}, "'members[0]'"),
            ({"kind": "enum", "name": "E", "members": [{"other": 1}]}, "'members[0]'"),
            ({"kind": "enum", "name": "E", "members": [{"case": []}]}, "'members[0].case'"),
            (
                {
                    "kind": "enum",
                    "name": "E",
                    "members": [{"case": [{"name": "a", "parameters": [{}]}]}],
                },
                "'members[0].case[0].parameters[0].type'",
            ),
            (
                {"kind": "enum", "name": "E", "attributes": [{"name": "X", "arguments": [{}]}]},
                "'attributes[0].arguments[0].value'",
            ),
            ({"kind": "enum", "name": "E", "span": {"start": 0}}, "'span.end'"),
            (
                {
                    "kind": "enum",
                    "name": "E",
                    "span": {"start": 5, "end": 1, "line": 1, "column": 1},
                },
                "'span'",
            ),
        ],
    )
    def test_malformed_paths(self, data: dict[str, object], path: str) -> None:
        """The error message names the offending location."""
        with pytest.raises(DeclarationFormatError) as exc_info:
            read_declaration(data)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DECLARATION_MALFORMED
        assert path in str(exc_info.value)

    def test_unknown_kind(self) -> None:
        """Kinds outside DeclKind are rejected."""
        with pytest.raises(DeclarationFormatError) as exc_info:
            read_declaration({"kind": "union", "name": "U"})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DECLARATION_KIND_UNKNOWN

    @pytest.mark.parametrize(
        "name", ["2fast", "snake_case", "with space", "`unterminated", "ok\n", "`ok\n`"]
    )
    def test_invalid_case_identifier(self, name: str) -> None:
        """Case names must match the identifier grammar."""
        with pytest.raises(DeclarationFormatError) as exc_info:
            read_variant({"name": name})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.IDENTIFIER_INVALID

    def test_invalid_identifier_names_location(self) -> None:
        """Identifier errors carry the same dotted path as shape errors."""
        data = {
            "kind": "enum",
            "name": "E",
            "members": [{"case": [{"name": "ok"}, {"name": "ok\n"}]}],
        }
        with pytest.raises(DeclarationFormatError) as exc_info:
            read_declaration(data)
        assert "at 'members[0].case[1].name'" in str(exc_info.value)

    def test_invalid_declaration_name_location(self) -> None:
        """A top-level name error is located by its key alone."""
        with pytest.raises(DeclarationFormatError, match="at 'name'"):
            read_declaration({"kind": "enum", "name": "9Lives"})

    def test_invalid_parameter_label(self) -> None:
        """Parameter labels follow the same grammar."""
        with pytest.raises(DeclarationFormatError, match=r"at 'variant\.parameters\[0\]\.label'"):
            read_variant({"name": "a", "parameters": [{"label": "1x", "type": "Int"}]})

    def test_bare_reserved_word_is_accepted(self) -> None:
        """Reserved words may arrive unescaped; output escapes them."""
        decl = read_declaration(
            {"kind": "enum", "name": "L", "members": [{"case": [{"name": "for"}]}]}
        )
        source = expand_declaration(decl)
        assert "    case `for`\n" in source
        assert "        case .`for`:\n" in source
        assert 'localized("for")' in source


    def test_boolean_span_field(self) -> None:
        """Booleans are not accepted as span integers."""
        with pytest.raises(DeclarationFormatError, match="span.start"):
            read_declaration(
                {"kind": "enum", "name": "E",
                 "span": {"start": True, "end": 1, "line": 1, "column": 1}}
            )

    def test_invalid_json(self) -> None:
        """Non-JSON text is a format error."""
        with pytest.raises(DeclarationFormatError, match="invalid JSON"):
            loads_declaration("{not json")

    def test_invalid_json_position(self) -> None:
        """The decode position becomes the diagnostic span."""
        with pytest.raises(DeclarationFormatError) as excinfo:
            loads_declaration('{\n  "kind": "enum",\n  oops\n}')
        diagnostic = excinfo.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.span == SourceSpan(start=22, end=22, line=3, column=3)


    def test_json_array_root(self) -> None:
        """The JSON root must be an object."""
        with pytest.raises(DeclarationFormatError, match="expected an object"):
            loads_declaration("[]")

    def test_is_value_error(self) -> None:
        """DeclarationFormatError is catchable as ValueError."""
        with pytest.raises(ValueError):
            read_declaration({"kind": "enum"})
