"""Optional Babel support for the run-time adapters.

Expansion, key derivation and the printf formatter never touch Babel.
Only ``LocaleAwareFormatter`` and ``null_translations_lookup`` need it, and
they call ``require_babel`` before importing anything from ``babel`` so a
generator-only install fails with an actionable message instead of a bare
``ModuleNotFoundError``:

    pip install localizable            # expansion and dispatch only
    pip install localizable[babel]     # plus locale-aware adapters

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache

__all__ = [
    "BabelImportError",
    "is_babel_available",
    "require_babel",
]

_INSTALL_HINT = "pip install localizable[babel]"


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import
    except ImportError:
        return False
    return True


class BabelImportError(ImportError):
    """A Babel-backed adapter was used without the ``babel`` extra.

    Attributes:
        feature: Adapter that asked for Babel
    """

    def __init__(self, feature: str) -> None:
        super().__init__(f"{feature} requires Babel. Install with: {_INSTALL_HINT}")
        self.feature = feature


def is_babel_available() -> bool:
    """Whether ``babel`` can be imported (checked once per process)."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Guard for adapters that import from ``babel``.

    Args:
        feature: Adapter name reported in the error

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)
