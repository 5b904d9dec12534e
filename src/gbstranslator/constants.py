"""Shared constants for gbstranslator.

Centralized defaults used by the scanner, the locale registry and the
translator.

Constants are grouped by domain:
- Token decoration: prefix and suffix wrapped around abstract token names
- Scanning: characters that end a word
- Locale definitions: reserved keys inside a definition mapping

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Token decoration
    "DEFAULT_TOKEN_PREFIX",
    "DEFAULT_TOKEN_SUFFIX",
    # Scanning
    "DEFAULT_SEPARATORS",
    # Locale definitions
    "EXTENDS_KEY",
    # Encoding
    "DEFAULT_ENCODING",
]

# ============================================================================
# TOKEN DECORATION
# ============================================================================

# Abstract code spells every built-in keyword as PREFIX + TOKEN_NAME + SUFFIX,
# e.g. "$GBS_COMMAND_DROP$". Neither character may be a separator, otherwise
# the scanner would split decorated tokens in half.
DEFAULT_TOKEN_PREFIX: str = "$"
DEFAULT_TOKEN_SUFFIX: str = "$"

# ============================================================================
# SCANNING
# ============================================================================

# Characters that terminate a word. Everything else is a word character,
# which keeps the scanner locale-agnostic (accented letters, digits, "_",
# "$" and any other symbol stay inside words).
DEFAULT_SEPARATORS: frozenset[str] = frozenset(" \n\t()[]{},;.:=<>-")

# ============================================================================
# LOCALE DEFINITIONS
# ============================================================================

# Key naming the locale a partial definition inherits from.
EXTENDS_KEY: str = "extends"

# ============================================================================
# ENCODING
# ============================================================================

DEFAULT_ENCODING: str = "utf-8"
