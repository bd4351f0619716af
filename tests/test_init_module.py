"""Tests for the package's public surface."""

from __future__ import annotations

import importlib

import pytest

import localizable

SUBPACKAGES = (
    "localizable.codegen",
    "localizable.core",
    "localizable.diagnostics",
    "localizable.runtime",
    "localizable.syntax",
)


class TestPublicApi:
    """Top-level exports."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is an attribute of the package."""
        for name in localizable.__all__:
            assert hasattr(localizable, name), name

    def test_version(self) -> None:
        """A version string is always present."""
        assert isinstance(localizable.__version__, str)
        assert localizable.__version__

    @pytest.mark.parametrize("module_name", SUBPACKAGES)
    def test_subpackage_all(self, module_name: str) -> None:
        """Subpackage __all__ entries resolve and are unique."""
        module = importlib.import_module(module_name)
        assert len(module.__all__) == len(set(module.__all__))
        for name in module.__all__:
            assert hasattr(module, name), f"{module_name}.{name}"

    def test_end_to_end(self) -> None:
        """Read, expand and evaluate through top-level names only."""
        decl = localizable.read_declaration(
            {
                "kind": "enum",
                "name": "Localization",
                "attributes": [
                    {
                        "name": "Localizable",
                        "arguments": [{"label": "keyFormat", "value": ".upperSnakeCase"}],
                    }
                ],
                "members": [{"case": [{"name": "helloWorld"}]}],
            }
        )
        result = localizable.expand(decl)
        assert result.accessor is not None
        assert 'localized("HELLO_WORLD")' in result.source
        evaluator = localizable.LocalizedAccessor(result.accessor, {"HELLO_WORLD": "Hi"}.get)
        assert evaluator.localized("helloWorld") == "Hi"
        assert localizable.derive_key(
            "helloWorld", localizable.NamingConvention.LOWER_SNAKE_CASE
        ) == "hello_world"
