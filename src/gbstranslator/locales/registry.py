"""Locale registry: resolves locale definitions into vocabularies.

Each registered locale is a BidirectionalMap from decorated token
("$GBS_COMMAND_DROP$") to localized spelling ("Poner"). Definitions are
processed in the order supplied; a definition that extends another locale
is flattened against the already resolved target, so extending an
extension still yields a complete vocabulary.

Registration is all-or-nothing: an unknown extension target or a duplicate
name aborts construction, and no partially built registry is returned.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from gbstranslator.constants import DEFAULT_TOKEN_PREFIX, DEFAULT_TOKEN_SUFFIX, EXTENDS_KEY
from gbstranslator.core.bidi_map import BidirectionalMap
from gbstranslator.diagnostics import DuplicateLocaleName, ErrorTemplate, UnknownExtensionTarget
from gbstranslator.locales.data import BUILTIN_LOCALES
from gbstranslator.locales.tokens import TOKEN_NAMES
from gbstranslator.types import DecoratedToken, LocaleDefinition, LocaleName, Spelling, TokenName

__all__ = ["LocaleRegistry", "Vocabulary"]

logger = logging.getLogger(__name__)

type Vocabulary = BidirectionalMap[DecoratedToken, Spelling]
"""Resolved locale: decorated token <-> localized spelling."""


class LocaleRegistry(Mapping[LocaleName, Vocabulary]):
    """Read-only mapping from locale name to resolved vocabulary.

    Example:
        >>> crimson = {"extends": "en", "GBS_COLOR_RED": "Crimson"}
        >>> registry = LocaleRegistry.with_builtins({"en-XX": crimson})
        >>> registry["en-XX"].get_by_key("$GBS_COLOR_RED$")
        'Crimson'
        >>> registry["en-XX"].get_by_key("$GBS_COLOR_BLUE$")  # inherited
        'Blue'

    Thread Safety:
        Thread-safe for reads. All state is built in __init__; vocabularies
        must not be mutated afterwards.
    """

    __slots__ = ("_definitions", "_locales", "_prefix", "_suffix")

    def __init__(
        self,
        definitions: Iterable[tuple[LocaleName, LocaleDefinition]] = (),
        *,
        token_prefix: str = DEFAULT_TOKEN_PREFIX,
        token_suffix: str = DEFAULT_TOKEN_SUFFIX,
    ) -> None:
        """Register every definition, in order.

        Args:
            definitions: Ordered (name, definition) pairs. A definition holding
                an "extends" key inherits every token it does not override
                from the named locale, which must appear earlier.
            token_prefix: Prepended to token names in abstract code
            token_suffix: Appended to token names in abstract code

        Raises:
            UnknownExtensionTarget: If a definition extends an unregistered locale
            DuplicateLocaleName: If a name is registered twice
        """
        self._prefix = token_prefix
        self._suffix = token_suffix
        self._locales: dict[LocaleName, Vocabulary] = {}
        self._definitions: dict[LocaleName, Mapping[str, str]] = {}
        for name, definition in definitions:
            self._register(name, definition)

    @classmethod
    def with_builtins(
        cls,
        additional: Mapping[LocaleName, LocaleDefinition]
        | Iterable[tuple[LocaleName, LocaleDefinition]]
        | None = None,
        *,
        token_prefix: str = DEFAULT_TOKEN_PREFIX,
        token_suffix: str = DEFAULT_TOKEN_SUFFIX,
    ) -> LocaleRegistry:
        """Build a registry holding the built-in locales, then the additional ones.

        Args:
            additional: User-supplied definitions, registered after the built-ins
            token_prefix: Prepended to token names in abstract code
            token_suffix: Appended to token names in abstract code

        Raises:
            UnknownExtensionTarget: If a definition extends an unregistered locale
            DuplicateLocaleName: If a user locale collides with a built-in or another user locale
        """
        extra: Iterable[tuple[LocaleName, LocaleDefinition]]
        if additional is None:
            extra = ()
        elif isinstance(additional, Mapping):
            extra = additional.items()
        else:
            extra = additional
        return cls(
            [*BUILTIN_LOCALES, *extra],
            token_prefix=token_prefix,
            token_suffix=token_suffix,
        )

    @property
    def token_prefix(self) -> str:
        """Prefix of decorated tokens."""
        return self._prefix

    @property
    def token_suffix(self) -> str:
        """Suffix of decorated tokens."""
        return self._suffix

    def names(self) -> tuple[LocaleName, ...]:
        """Registered locale names, in registration order."""
        return tuple(self._locales)

    def definition_of(self, name: LocaleName) -> Mapping[str, str]:
        """Return the definition a locale was registered from (read-only).

        Raises:
            KeyError: If name is not registered
        """
        return self._definitions[name]

    def extends(self, name: LocaleName) -> LocaleName | None:
        """Return the locale name extended by name, or None for complete definitions.

        Raises:
            KeyError: If name is not registered
        """
        return self._definitions[name].get(EXTENDS_KEY)

    def missing_tokens(self, name: LocaleName) -> tuple[TokenName, ...]:
        """Token names the resolved locale leaves untranslated.

        Raises:
            KeyError: If name is not registered
        """
        vocabulary = self._locales[name]
        return tuple(
            token for token in TOKEN_NAMES if not vocabulary.has_key(self.decorate(token))
        )

    def decorate(self, token_name: TokenName) -> DecoratedToken:
        """Wrap a token name with the configured prefix and suffix."""
        return f"{self._prefix}{token_name}{self._suffix}"

    def strip(self, decorated: DecoratedToken) -> TokenName:
        """Remove the configured prefix and suffix from a decorated token.

        Each affix is only removed when present, so a bare token name is
        returned unchanged.
        """
        bare = decorated
        if self._prefix and bare.startswith(self._prefix):
            bare = bare[len(self._prefix) :]
        if self._suffix and bare.endswith(self._suffix):
            bare = bare[: -len(self._suffix)]
        return bare

    def _register(self, name: LocaleName, definition: LocaleDefinition) -> None:
        target = definition.get(EXTENDS_KEY)
        if target is not None and target not in self._locales:
            diagnostic = ErrorTemplate.unknown_extension_target(name, target)
            raise UnknownExtensionTarget(diagnostic, locale_name=target, attribute=EXTENDS_KEY)
        if name in self._locales:
            raise DuplicateLocaleName(ErrorTemplate.duplicate_locale(name), locale_name=name)

        if target is None:
            entries = self._complete_entries(name, definition)
        else:
            entries = self._extended_entries(name, definition, target)

        self._locales[name] = BidirectionalMap(entries)
        self._definitions[name] = MappingProxyType(dict(definition))
        logger.debug(
            "Registered locale '%s' (%d tokens%s)",
            name,
            len(entries),
            f", extends '{target}'" if target is not None else "",
        )

    def _complete_entries(
        self, name: LocaleName, definition: LocaleDefinition
    ) -> list[tuple[DecoratedToken, Spelling]]:
        # Missing tokens pass through untranslated; warn, never reject
        missing = tuple(token for token in TOKEN_NAMES if token not in definition)
        if missing:
            logger.warning("%s", ErrorTemplate.incomplete_locale(name, missing).message)
        return [(self.decorate(token), spelling) for token, spelling in definition.items()]

    def _extended_entries(
        self, name: LocaleName, definition: LocaleDefinition, target: LocaleName
    ) -> list[tuple[DecoratedToken, Spelling]]:
        base = self._locales[target]
        entries: list[tuple[DecoratedToken, Spelling]] = []
        for decorated, inherited in base.items():
            # Empty spellings do not override
            override = definition.get(self.strip(decorated))
            entries.append((decorated, override or inherited))

        for token in definition:
            if token != EXTENDS_KEY and not base.has_key(self.decorate(token)):
                diagnostic = ErrorTemplate.unknown_override_token(name, token, target)
                logger.warning("%s", diagnostic.message)
        return entries

    def __getitem__(self, name: LocaleName) -> Vocabulary:
        return self._locales[name]

    def __contains__(self, name: object) -> bool:
        return name in self._locales

    def __iter__(self) -> Iterator[LocaleName]:
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)

    def __repr__(self) -> str:
        return (
            f"LocaleRegistry({len(self._locales)} locales, "
            f"prefix={self._prefix!r}, suffix={self._suffix!r})"
        )
