"""Enumerations for gbstranslator type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SpanKind(StrEnum):
    """Kind of text span produced by the word scanner.

    StrEnum provides automatic string conversion: str(SpanKind.WORD) == "word"
    """

    WORD = "word"
    """Maximal run of word characters: Poner, $GBS_COLOR_RED$, colorAPoner"""

    SEPARATOR = "separator"
    """Run of separator characters, copied verbatim: ' {', '(', '\\n    '"""


class Direction(StrEnum):
    """Direction of a translation operation.

    StrEnum provides automatic string conversion: str(Direction.TO_TOKENS) == "to_tokens"
    """

    TO_TOKENS = "to_tokens"
    """Localized code to abstract code (requires a source locale)"""

    FROM_TOKENS = "from_tokens"
    """Abstract code to localized code (requires a destination locale)"""

    TRANSLATE = "translate"
    """Localized code to localized code, through abstract code"""


__all__ = [
    "Direction",
    "SpanKind",
]
