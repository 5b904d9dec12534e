"""Locale name utilities.

Registry keys use BCP-47 style names ("en", "es-AR"). Babel and the
operating system use POSIX style ("es_AR", "es_AR.UTF-8"). This module
converts between them, detects the system locale, picks the closest
registered locale, and renders human-readable locale names.

Only display_name() needs Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Iterable
from typing import TYPE_CHECKING

from gbstranslator.core.babel_compat import require_babel

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "best_match",
    "display_name",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "to_posix",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a POSIX or BCP-47 locale code to the registry's BCP-47 form.

    Strips any encoding or modifier suffix and uses hyphens.

    Example:
        >>> normalize_locale("es_AR.UTF-8")
        'es-AR'
        >>> normalize_locale("en-GB")
        'en-GB'
    """
    code = locale_code.split(".")[0].split("@")[0]
    return code.replace("_", "-")


def to_posix(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> to_posix("es-AR")
        'es_AR'
    """
    return normalize_locale(locale_code).replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    require_babel("get_babel_locale")
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(to_posix(locale_code))


def display_name(locale_code: str, in_locale: str = "en") -> str | None:
    """Human-readable name of a locale, e.g. "Spanish (Argentina)".

    Args:
        locale_code: Locale to describe
        in_locale: Language to describe it in

    Returns:
        The display name, or None when CLDR does not know the locale
        (user-defined locales often use made-up names)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("display_name")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(locale_code)
        return locale.get_display_name(get_babel_locale(in_locale))
    except (UnknownLocaleError, ValueError):
        return None


def get_system_locale() -> str | None:
    """Detect the user's locale from the environment.

    Checks LC_ALL, LC_MESSAGES, LANG and LANGUAGE in that order, ignoring
    the "C" and "POSIX" pseudo-locales.

    Returns:
        Locale in registry (BCP-47) form, or None if none is set.

    Example:
        >>> os.environ["LANG"] = "es_AR.UTF-8"
        >>> get_system_locale()
        'es-AR'
    """
    for var in ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE"):
        value = os.environ.get(var)
        if not value:
            continue
        # LANGUAGE may hold a colon-separated priority list
        value = value.split(":")[0]
        if value in ("C", "POSIX") or value.startswith(("C.", "POSIX.")):
            continue
        return normalize_locale(value)
    return None


def best_match(requested: str, available: Iterable[str]) -> str | None:
    """Pick the registered locale closest to a requested one.

    Tries the normalized name, then the bare language, ignoring case.

    Example:
        >>> best_match("es_AR.UTF-8", ["en", "es", "es-AR"])
        'es-AR'
        >>> best_match("es-UY", ["en", "es"])
        'es'
        >>> best_match("fr", ["en", "es"]) is None
        True
    """
    names = list(available)
    lowered = {name.lower(): name for name in names}
    normalized = normalize_locale(requested)
    for candidate in (normalized, normalized.split("-")[0]):
        if candidate in names:
            return candidate
        if candidate.lower() in lowered:
            return lowered[candidate.lower()]
    return None
