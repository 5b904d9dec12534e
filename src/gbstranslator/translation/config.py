"""Translator configuration.

A TranslatorConfig fixes everything a Translator needs: which locales it
reads and writes, optional name overrides, extra locale definitions, and
how abstract tokens are decorated. It is immutable; derive variants with
dataclasses.replace().

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from gbstranslator.constants import (
    DEFAULT_SEPARATORS,
    DEFAULT_TOKEN_PREFIX,
    DEFAULT_TOKEN_SUFFIX,
)
from gbstranslator.types import LocaleDefinition, LocaleName

__all__ = ["NameOverrides", "TranslatorConfig"]

type NameOverrides = Mapping[str, str] | Iterable[tuple[str, str]]
"""Source identifier -> destination identifier, as a mapping or ordered pairs."""


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Immutable translator settings.

    Attributes:
        source: Locale of the code read by to_tokens() and translate()
        destination: Locale of the code written by from_tokens() and translate()
        names: Identifier overrides (procedures, functions, variables),
            applied only when an operation is called with include_names=True.
            Example: {"Poner__Veces": "Drop__Times"}
        locales: Extra locale definitions, registered after the built-ins in
            iteration order. Example:
            {"fr": {"extends": "en", "GBS_COMMAND_DROP": "Poser"}}
        token_prefix: Prepended to token names in abstract code
        token_suffix: Appended to token names in abstract code
        separators: Characters that end a word

    Example:
        >>> config = TranslatorConfig(source="es", destination="en")
        >>> config.token_prefix
        '$'
    """

    source: LocaleName | None = None
    destination: LocaleName | None = None
    names: NameOverrides | None = None
    locales: Mapping[LocaleName, LocaleDefinition] | None = None
    token_prefix: str = DEFAULT_TOKEN_PREFIX
    token_suffix: str = DEFAULT_TOKEN_SUFFIX
    separators: frozenset[str] = DEFAULT_SEPARATORS

    def __post_init__(self) -> None:
        """Normalize the separator set to a frozenset.

        Accepts any iterable of characters (including a plain string) so
        callers can write separators=" \\n(){}".
        """
        if not isinstance(self.separators, frozenset):
            object.__setattr__(self, "separators", frozenset(self.separators))
