"""Declaration syntax package.

Provides the declaration and generated-member node definitions, identifier
rules, and the structured declaration reader. Separate from codegen so
tooling can build and inspect declarations without generating code.

Python 3.13+.
"""

from .ast import (
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
from .identifiers import (
    RESERVED_WORDS,
    escape_identifier,
    is_escaped,
    is_valid_identifier,
    strip_escape_markers,
)
from .reader import loads_declaration, read_attribute, read_declaration, read_variant

__all__ = [
    "RESERVED_WORDS",
    "AttributeArgument",
    "Branch",
    "CaseDecl",
    "DeclGroup",
    "DirectBranch",
    "FormattedBranch",
    "GeneratedAccessor",
    "LookupHelper",
    "MacroAttribute",
    "Member",
    "MemberDecl",
    "ParameterDecl",
    "VariantDecl",
    "escape_identifier",
    "is_escaped",
    "is_valid_identifier",
    "loads_declaration",
    "read_attribute",
    "read_declaration",
    "read_variant",
    "strip_escape_markers",
]
