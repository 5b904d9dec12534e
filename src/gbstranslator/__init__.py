"""gbstranslator - word-level translator for Gobstones code between locales.

Gobstones programs can be written with keywords and primitives spelled in
different natural languages. A Translator rewrites code word by word
through an abstract, locale-independent token form ("$GBS_COMMAND_DROP$"),
keeping spacing, punctuation and line breaks byte-for-byte.

Public API:
    Translator - Encode to tokens, decode from tokens, or translate
    TranslatorConfig - Frozen translator settings
    LocaleRegistry - Built-in plus user-supplied locale vocabularies
    BidirectionalMap - Two-way dictionary used by the registry
    WordScanner - Word/separator scanner used by the translator

Exceptions:
    TranslationError - Base exception class
    UnknownLocaleReference - Configured or extended locale not registered
    DuplicateLocaleName - Locale registered twice
    NoSourceLocale / NoDestinationLocale - Operation needs a missing locale
    NoNameOverridesConfigured - include_names requested without names
    DefinitionLoadError - JSON definitions could not be loaded

Submodules:
    gbstranslator.locales - Token names and built-in locale data
    gbstranslator.loading - JSON loaders for definitions and name overrides
    gbstranslator.locale_utils - Locale name helpers (Babel optional)
    gbstranslator.diagnostics - Error codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import BidirectionalMap
from .diagnostics import (
    DefinitionLoadError,
    DuplicateLocaleName,
    NoDestinationLocale,
    NoNameOverridesConfigured,
    NoSourceLocale,
    TranslationError,
    UnknownExtensionTarget,
    UnknownLocaleReference,
)
from .locales import LocaleRegistry
from .syntax import WordScanner
from .translation import Translator, TranslatorConfig

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("gbstranslator")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BidirectionalMap",
    "DefinitionLoadError",
    "DuplicateLocaleName",
    "LocaleRegistry",
    "NoDestinationLocale",
    "NoNameOverridesConfigured",
    "NoSourceLocale",
    "TranslationError",
    "Translator",
    "TranslatorConfig",
    "UnknownExtensionTarget",
    "UnknownLocaleReference",
    "WordScanner",
    "__version__",
]
