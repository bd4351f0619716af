"""Pytest configuration for the localizable test suite.

Hypothesis profiles:
- dev: 500 examples per property, random seeds
- ci: 50 derandomized examples, failing blobs printed for replay
- verbose: 100 examples with per-example output

The profile comes from HYPOTHESIS_PROFILE when it names one of these,
otherwise "ci" when CI=true, otherwise "dev":

    HYPOTHESIS_PROFILE=verbose pytest tests/test_keys.py
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from localizable.syntax.ast import DeclGroup
from tests.helpers.declarations import make_enum, variant

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_PROFILES = ("dev", "ci", "verbose")

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


@pytest.fixture
def associated_values_enum() -> DeclGroup:
    """Enum with zero to three carried values, upper snake case keys."""
    return make_enum(
        "noValues",
        variant("singleString", "stringValue: String"),
        variant("twoValues2", "first: Double", "second: Float"),
        variant("threeValues", "first: String", "second: Int", "third: String"),
        key_format=".upperSnakeCase",
    )
