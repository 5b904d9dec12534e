"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    The numeric value is stable across releases so that callers can key
    their own localized messages on it.

    Organized by category:
        1000-1999: Registry errors (locale names and extension targets)
        2000-2999: Configuration errors (missing translator settings)
        3000-3999: Loading errors (user-supplied JSON definitions)
        4000-4999: Registry warnings (soft failures, never raised)
    """

    # Registry errors (1000-1999)
    UNKNOWN_LOCALE = 1001
    UNKNOWN_EXTENSION_TARGET = 1002
    DUPLICATE_LOCALE = 1003

    # Configuration errors (2000-2999)
    NO_SOURCE_LOCALE = 2001
    NO_DESTINATION_LOCALE = 2002
    NO_NAME_OVERRIDES = 2003

    # Loading errors (3000-3999)
    DEFINITION_LOAD_FAILED = 3001
    DEFINITION_INVALID_SHAPE = 3002

    # Registry warnings (4000-4999)
    INCOMPLETE_LOCALE = 4001
    UNKNOWN_OVERRIDE_TOKEN = 4002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries a stable code plus the
    context needed to render the message in any human language.

    Attributes:
        code: Unique error code
        message: Human-readable error description (English)
        hint: Suggestion for fixing the error
        locale_name: Locale the diagnostic refers to, if any
        attribute: Configuration slot involved ('source', 'destination', 'extends')
        location: File or option the diagnostic originated from
        span: Position inside the offending input (loading errors only)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_name: str | None = None
    attribute: str | None = None
    location: str | None = None
    span: SourceSpan | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNKNOWN_LOCALE]: Locale 'xx' given as source is not registered
              = locale: xx
              = help: Use one of the built-in locales or register it through the 'locales' option

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
