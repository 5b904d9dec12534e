"""Gobstones locales: token names, built-in vocabularies and the registry.

Submodules:
    tokens   - Closed set of token names (TOKEN_NAMES)
    data     - Built-in locale definitions (BUILTIN_LOCALES)
    registry - LocaleRegistry, which resolves definitions into vocabularies

Python 3.13+. Zero external dependencies.
"""

from .data import BUILTIN_LOCALES
from .registry import LocaleRegistry, Vocabulary
from .tokens import TOKEN_NAMES, is_token_name

__all__ = [
    "BUILTIN_LOCALES",
    "TOKEN_NAMES",
    "LocaleRegistry",
    "Vocabulary",
    "is_token_name",
]
