"""Translation engine: localized code <-> abstract code.

Three operations, all pure string-to-string functions:

    to_tokens    localized code (source locale) -> abstract code
    from_tokens  abstract code -> localized code (destination locale)
    translate    to_tokens followed by from_tokens

Abstract code spells built-in keywords as decorated tokens
("$GBS_COMMAND_DROP$"), so it is locale agnostic. Words that the active
vocabulary does not know (identifiers, literals, code in another locale)
pass through unchanged, and every separator character is copied verbatim,
so layout survives any number of round trips.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from gbstranslator.core.bidi_map import BidirectionalMap
from gbstranslator.diagnostics import (
    ErrorTemplate,
    NoDestinationLocale,
    NoNameOverridesConfigured,
    NoSourceLocale,
    UnknownLocaleReference,
)
from gbstranslator.enums import Direction
from gbstranslator.locales.registry import LocaleRegistry
from gbstranslator.syntax.scanner import WordScanner
from gbstranslator.translation.config import TranslatorConfig
from gbstranslator.types import LocaleName

__all__ = ["Translator"]

logger = logging.getLogger(__name__)


class Translator:
    """Word-level translator between Gobstones locales.

    Built once from a TranslatorConfig and immutable afterwards. Locale
    names are validated eagerly, so a Translator that constructs
    successfully can only fail later because an operation needs a setting
    that was left out (a source locale, a destination locale, or names).

    Example:
        >>> translator = Translator(source="es", destination="en")
        >>> translator.to_tokens("program {Poner(Rojo)}")
        '$GBS_DEFINITION_PROGRAM$ {$GBS_COMMAND_DROP$($GBS_COLOR_RED$)}'
        >>> translator.translate("program {Poner( Rojo )}")
        'program {Drop( Red )}'

    Name overrides:
        Identifiers outside the token set (procedure, function and variable
        names) can be renamed by plain word match. They are merged after the
        locale vocabulary, so a name that collides with a locale spelling
        silently wins.

        >>> translator = Translator(source="es", destination="en",
        ...                         names={"Poner__Veces": "Drop__Times"})
        >>> translator.translate("Poner__Veces(5, Rojo)", include_names=True)
        'Drop__Times(5, Red)'

    Thread Safety:
        Thread-safe. Every operation builds its own scanner and reads only
        state fixed during __init__.
    """

    __slots__ = ("_config", "_names", "_registry")

    def __init__(self, config: TranslatorConfig | None = None, /, **options: Any) -> None:
        """Build the locale registry and validate the configuration.

        Args:
            config: Complete configuration. When omitted, keyword options are
                used to build one.
            **options: TranslatorConfig fields (source, destination, names,
                locales, token_prefix, token_suffix, separators). When config
                is also given, they replace its fields.

        Raises:
            UnknownExtensionTarget: If a locale extends an unregistered locale
            DuplicateLocaleName: If a user locale reuses a registered name
            UnknownLocaleReference: If source or destination is not registered
        """
        if config is None:
            config = TranslatorConfig(**options)
        elif options:
            config = dataclasses.replace(config, **options)

        registry = LocaleRegistry.with_builtins(
            config.locales,
            token_prefix=config.token_prefix,
            token_suffix=config.token_suffix,
        )
        for attribute, locale_name in (
            ("source", config.source),
            ("destination", config.destination),
        ):
            if locale_name is not None and locale_name not in registry:
                raise UnknownLocaleReference(
                    ErrorTemplate.unknown_locale(locale_name, attribute),
                    locale_name=locale_name,
                    attribute=attribute,
                )

        affixes = config.token_prefix + config.token_suffix
        if any(char in config.separators for char in affixes):
            logger.warning(
                "Token prefix %r or suffix %r contains a separator character; "
                "decorated tokens will not be recognized as words",
                config.token_prefix,
                config.token_suffix,
            )

        self._config = config
        self._registry = registry
        self._names: BidirectionalMap[str, str] | None = (
            BidirectionalMap(config.names) if config.names is not None else None
        )
        logger.debug(
            "Translator ready: source=%s destination=%s names=%s locales=%d",
            config.source,
            config.destination,
            len(self._names) if self._names is not None else None,
            len(registry),
        )

    @property
    def config(self) -> TranslatorConfig:
        """The configuration this translator was built from."""
        return self._config

    @property
    def source(self) -> LocaleName | None:
        """Locale of the code this translator reads."""
        return self._config.source

    @property
    def destination(self) -> LocaleName | None:
        """Locale of the code this translator writes."""
        return self._config.destination

    @property
    def registry(self) -> LocaleRegistry:
        """Resolved locales: the built-ins followed by the configured ones."""
        return self._registry

    @property
    def locales(self) -> tuple[LocaleName, ...]:
        """Names of every registered locale, in registration order."""
        return self._registry.names()

    @property
    def has_names(self) -> bool:
        """True if name overrides were configured."""
        return self._names is not None

    @property
    def token_prefix(self) -> str:
        """Prefix of decorated tokens."""
        return self._config.token_prefix

    @property
    def token_suffix(self) -> str:
        """Suffix of decorated tokens."""
        return self._config.token_suffix

    def to_tokens(self, code: str, include_names: bool = False) -> str:
        """Replace the source locale's spellings with decorated tokens.

        Args:
            code: Code written in the source locale
            include_names: Also rename identifiers with the name overrides

        Returns:
            Abstract code

        Raises:
            NoSourceLocale: If the translator has no source locale
            NoNameOverridesConfigured: If include_names is set without names
        """
        if self._config.source is None:
            raise NoSourceLocale(ErrorTemplate.no_source_locale())
        vocabulary = self._registry[self._config.source].by_values()
        names = self._names.by_keys() if self._names is not None else None
        mapping = self._effective_map(vocabulary, names, include_names)
        logger.debug(
            "%s: %d chars from locale '%s'", Direction.TO_TOKENS, len(code), self._config.source
        )
        return self._translate_with_map(code, mapping)

    def from_tokens(self, code: str, include_names: bool = False) -> str:
        """Replace decorated tokens with the destination locale's spellings.

        Args:
            code: Abstract code
            include_names: Also rename identifiers back with the name overrides

        Returns:
            Code written in the destination locale

        Raises:
            NoDestinationLocale: If the translator has no destination locale
            NoNameOverridesConfigured: If include_names is set without names
        """
        if self._config.destination is None:
            raise NoDestinationLocale(ErrorTemplate.no_destination_locale())
        vocabulary = self._registry[self._config.destination].by_keys()
        names = self._names.by_values() if self._names is not None else None
        mapping = self._effective_map(vocabulary, names, include_names)
        logger.debug(
            "%s: %d chars to locale '%s'",
            Direction.FROM_TOKENS,
            len(code),
            self._config.destination,
        )
        return self._translate_with_map(code, mapping)

    def translate(self, code: str, include_names: bool = False) -> str:
        """Translate code from the source locale to the destination locale.

        Equivalent to from_tokens(to_tokens(code, include_names)). Names are
        only applied while reading: applying them again while writing would
        rename already translated identifiers a second time.

        Args:
            code: Code written in the source locale
            include_names: Also rename identifiers with the name overrides

        Returns:
            Code written in the destination locale

        Raises:
            NoSourceLocale: If the translator has no source locale
            NoDestinationLocale: If the translator has no destination locale
            NoNameOverridesConfigured: If include_names is set without names
        """
        if self._config.source is None:
            raise NoSourceLocale(ErrorTemplate.no_source_locale())
        if self._config.destination is None:
            raise NoDestinationLocale(ErrorTemplate.no_destination_locale())
        logger.debug(
            "%s: locale '%s' -> '%s'",
            Direction.TRANSLATE,
            self._config.source,
            self._config.destination,
        )
        abstract = self.to_tokens(code, include_names)
        return self.from_tokens(abstract, include_names=False)

    def _effective_map(
        self,
        vocabulary: Mapping[str, str],
        names: Mapping[str, str] | None,
        include_names: bool,
    ) -> Mapping[str, str]:
        if not include_names:
            return vocabulary
        if names is None:
            raise NoNameOverridesConfigured(ErrorTemplate.no_name_overrides())
        # Locale entries first, names second: a colliding name wins
        return {**vocabulary, **names}

    def _translate_with_map(self, code: str, mapping: Mapping[str, str]) -> str:
        scanner = WordScanner(code, self._config.separators)
        parts: list[str] = []
        while (char := scanner.peek_char()) is not None:
            word = scanner.next_word()
            if word is None:
                # Separators are copied one character at a time
                scanner.next_char()
                parts.append(char)
            else:
                parts.append(mapping.get(word, word))
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"Translator(source={self._config.source!r}, "
            f"destination={self._config.destination!r}, "
            f"names={self.has_names})"
        )
