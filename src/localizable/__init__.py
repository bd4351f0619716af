"""localizable - localized accessors for enum cases, generated at build time.

Given a declaration of enum cases (optionally carrying values), derives a
localization key from each case name under a naming convention and emits a
``localized`` property that looks the key up and formats the carried values
into the resulting template.

Public API:
    derive_key - Case identifier -> localization key
    synthesize - Ordered variants -> GeneratedAccessor
    expand - Annotated declaration -> ExpansionResult (members + diagnostics)
    expand_declaration - Annotated declaration -> expanded Swift source
    read_declaration / loads_declaration - Structured description -> DeclGroup
    LocalizedAccessor - Evaluate a GeneratedAccessor with injected collaborators
    NamingConvention - Key naming conventions
    GeneratorOptions - Names and layout of generated members

Exceptions:
    LocalizableError - Base exception class
    DeclarationFormatError - Malformed structured declaration
    InternalInvariantError - Broken producer contract (e.g. empty identifier)
    UnknownCaseError - Runtime evaluation of an undeclared case

Submodules:
    localizable.syntax - Declaration nodes, identifier rules, reader
    localizable.codegen - Synthesizer, Swift serializer, expansion controller
    localizable.runtime - Python evaluation and lookup/format adapters
    localizable.diagnostics - Diagnostic codes, templates and formatting
"""

from .codegen import (
    ExpansionResult,
    GeneratorOptions,
    expand,
    expand_declaration,
    synthesize,
)
from .diagnostics import (
    DeclarationFormatError,
    Diagnostic,
    InternalInvariantError,
    LocalizableError,
    UnknownCaseError,
)
from .enums import DeclKind, NamingConvention
from .keys import derive_key, split_segments
from .runtime import LocalizedAccessor
from .syntax import loads_declaration, read_declaration

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("localizable")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DeclKind",
    "DeclarationFormatError",
    "Diagnostic",
    "ExpansionResult",
    "GeneratorOptions",
    "InternalInvariantError",
    "LocalizableError",
    "LocalizedAccessor",
    "NamingConvention",
    "UnknownCaseError",
    "__version__",
    "derive_key",
    "expand",
    "expand_declaration",
    "loads_declaration",
    "read_declaration",
    "split_segments",
    "synthesize",
]
