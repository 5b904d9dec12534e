"""Type aliases for the translation domain.

Provides semantic type aliases used throughout the package and by user
code when annotating translator call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "DecoratedToken",
    "LocaleDefinition",
    "LocaleName",
    "Spelling",
    "TokenName",
]

type LocaleName = str
"""Registry key of a locale (e.g., 'en', 'es', 'en-GB')."""

type TokenName = str
"""Locale-agnostic name of a built-in keyword (e.g., 'GBS_COMMAND_DROP')."""

type DecoratedToken = str
"""Token name wrapped with prefix and suffix (e.g., '$GBS_COMMAND_DROP$')."""

type Spelling = str
"""Localized spelling of a token (e.g., 'Poner', 'Drop')."""

type LocaleDefinition = Mapping[str, str]
"""Token name to spelling mapping, optionally holding an 'extends' key."""
