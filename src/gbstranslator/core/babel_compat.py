"""Optional Babel support.

The translator itself never needs Babel. Only locale presentation (the
display names printed by `gbstranslator locales`) reads CLDR data, so
Babel ships as the `babel` extra and is imported lazily:

    require_babel("display_name")
    from babel import Locale

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """A locale presentation feature was used without Babel installed."""

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install gbstranslator[babel]"
        )
        self.feature = feature


def is_babel_available() -> bool:
    """True when `babel` can be imported. The answer is computed once."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError naming feature unless Babel is installed."""
    if not _check_babel_available():
        raise BabelImportError(feature)
