"""Build declaration nodes from a structured description.

The host compiler normally hands over an already-parsed declaration. This
reader accepts the same information as plain data (a mapping, or JSON text)
so the generator can run as a standalone build step and in tests.

Description shape:

    {
      "kind": "enum",
      "name": "Localization",
      "attributes": [
        {"name": "Localizable",
         "arguments": [{"label": "keyFormat", "value": ".upperSnakeCase"}]}
      ],
      "members": [
        {"case": [{"name": "ok"},
                  {"name": "itemCount",
                   "parameters": [{"label": "count", "type": "Int"}]}]},
        {"source": "static let table = \\"Main\\""}
      ],
      "span": {"start": 0, "end": 42, "line": 1, "column": 1}
    }

Every shape violation raises DeclarationFormatError naming the offending
path, e.g. ``members[0].case[1].parameters[0].type``.

Python 3.13+.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence

from localizable.diagnostics import DeclarationFormatError, ErrorTemplate, SourceSpan
from localizable.enums import DeclKind

from .ast import (
    AttributeArgument,
    CaseDecl,
    DeclGroup,
    MacroAttribute,
    Member,
    MemberDecl,
    ParameterDecl,
    VariantDecl,
)
from .identifiers import is_valid_identifier

__all__ = [
    "loads_declaration",
    "read_attribute",
    "read_declaration",
    "read_variant",
]


def _malformed(path: str, reason: str) -> DeclarationFormatError:
    return DeclarationFormatError(ErrorTemplate.declaration_malformed(path, reason))


def _require_mapping(value: object, path: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise _malformed(path, f"expected an object, got {type(value).__name__}")
    return value


def _require_list(value: object, path: str) -> Sequence[object]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise _malformed(path, f"expected a list, got {type(value).__name__}")
    return value


def _require_str(data: Mapping[str, object], key: str, path: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise _malformed(f"{path}.{key}" if path else key, "expected a non-empty string")
    return value


def _optional_str(data: Mapping[str, object], key: str, path: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise _malformed(f"{path}.{key}", "expected a string or null")
    return value


def _require_identifier(data: Mapping[str, object], key: str, path: str) -> str:
    name = _require_str(data, key, path)
    if not is_valid_identifier(name):
        location = f"{path}.{key}" if path else key
        raise DeclarationFormatError(ErrorTemplate.identifier_invalid(name, location))
    return name


def _read_parameter(value: object, path: str) -> ParameterDecl:
    data = _require_mapping(value, path)
    label = _optional_str(data, "label", path)
    if label is not None and label != "_" and not is_valid_identifier(label):
        raise DeclarationFormatError(ErrorTemplate.identifier_invalid(label, f"{path}.label"))
    return ParameterDecl(type_name=_require_str(data, "type", path), label=label)


def read_variant(value: object, path: str = "variant") -> VariantDecl:
    """Read one case element.

    Args:
        value: ``{"name": ..., "parameters": [...]}``
        path: Location used in error messages

    Returns:
        VariantDecl with parameters in listed order

    Raises:
        DeclarationFormatError: If the element is malformed
    """
    data = _require_mapping(value, path)
    name = _require_identifier(data, "name", path)
    raw_params = _require_list(data.get("parameters", []), f"{path}.parameters")
    parameters = tuple(
        _read_parameter(param, f"{path}.parameters[{index}]")
        for index, param in enumerate(raw_params)
    )
    return VariantDecl(name=name, parameters=parameters)


def _read_member(value: object, path: str) -> Member:
    data = _require_mapping(value, path)
    if "case" in data:
        raw = data["case"]
        elements = [raw] if isinstance(raw, Mapping) else _require_list(raw, f"{path}.case")
        if not elements:
            raise _malformed(f"{path}.case", "a case declaration needs at least one element")
        return CaseDecl(
            elements=tuple(
                read_variant(element, f"{path}.case[{index}]")
                for index, element in enumerate(elements)
            )
        )
    if "source" in data:
        return MemberDecl(source=_require_str(data, "source", path))
    raise _malformed(path, "expected a 'case' or 'source' member")


def read_attribute(value: object, path: str = "attribute") -> MacroAttribute:
    """Read an attribute description.

    Args:
        value: ``{"name": ..., "arguments": [{"label": ..., "value": ...}]}``
        path: Location used in error messages

    Returns:
        MacroAttribute

    Raises:
        DeclarationFormatError: If the attribute is malformed
    """
    data = _require_mapping(value, path)
    name = _require_identifier(data, "name", path)
    raw_args = _require_list(data.get("arguments", []), f"{path}.arguments")
    arguments: list[AttributeArgument] = []
    for index, raw in enumerate(raw_args):
        arg_path = f"{path}.arguments[{index}]"
        arg = _require_mapping(raw, arg_path)
        arguments.append(
            AttributeArgument(
                label=_optional_str(arg, "label", arg_path),
                value=_require_str(arg, "value", arg_path),
            )
        )
    return MacroAttribute(name=name, arguments=tuple(arguments))


def _read_span(value: object) -> SourceSpan:
    data = _require_mapping(value, "span")
    fields: dict[str, int] = {}
    for key in ("start", "end", "line", "column"):
        raw = data.get(key)
        if not isinstance(raw, int) or isinstance(raw, bool):
            raise _malformed(f"span.{key}", "expected an integer")
        fields[key] = raw
    try:
        return SourceSpan(**fields)
    except ValueError as e:
        raise _malformed("span", str(e)) from e


def read_declaration(data: Mapping[str, object]) -> DeclGroup:
    """Read a declaration description into a DeclGroup.

    Args:
        data: Declaration description (see module docstring)

    Returns:
        DeclGroup preserving member and case order

    Raises:
        DeclarationFormatError: If the description is malformed

    Example:
        >>> decl = read_declaration({
        ...     "kind": "enum",
        ...     "name": "Localization",
        ...     "members": [{"case": [{"name": "ok"}]}],
        ... })
        >>> [v.name for v in decl.variants]
        ['ok']
    """
    root = _require_mapping(data, "declaration")
    kind_text = _require_str(root, "kind", "")
    try:
        kind = DeclKind(kind_text)
    except ValueError as e:
        raise DeclarationFormatError(ErrorTemplate.declaration_kind_unknown(kind_text)) from e

    raw_members = _require_list(root.get("members", []), "members")
    raw_attributes = _require_list(root.get("attributes", []), "attributes")
    span = root.get("span")

    return DeclGroup(
        kind=kind,
        name=_require_identifier(root, "name", ""),
        members=tuple(
            _read_member(member, f"members[{index}]") for index, member in enumerate(raw_members)
        ),
        attributes=tuple(
            read_attribute(attr, f"attributes[{index}]")
            for index, attr in enumerate(raw_attributes)
        ),
        span=_read_span(span) if span is not None else None,
    )


def loads_declaration(text: str) -> DeclGroup:
    """Read a declaration description from JSON text.

    Raises:
        DeclarationFormatError: If the text is not JSON or not a valid description
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        diagnostic = ErrorTemplate.declaration_malformed(
            "declaration",
            f"invalid JSON ({e.msg} at line {e.lineno})",
            SourceSpan.at_offset(text, e.pos),
        )
        raise DeclarationFormatError(diagnostic) from e
    return read_declaration(_require_mapping(data, "declaration"))
