"""Diagnostic system for translator errors.

Provides structured error diagnostics with codes, hints, and optional
source spans. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DefinitionLoadError,
    DuplicateLocaleName,
    NoDestinationLocale,
    NoNameOverridesConfigured,
    NoSourceLocale,
    TranslationError,
    UnknownExtensionTarget,
    UnknownLocaleReference,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DefinitionLoadError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateLocaleName",
    "ErrorTemplate",
    "NoDestinationLocale",
    "NoNameOverridesConfigured",
    "NoSourceLocale",
    "OutputFormat",
    "SourceSpan",
    "TranslationError",
    "UnknownExtensionTarget",
    "UnknownLocaleReference",
]
