"""Translator exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information. The
diagnostic code is the stable identity of an error; the English message is
only a default rendering.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DefinitionLoadError",
    "DuplicateLocaleName",
    "NoDestinationLocale",
    "NoNameOverridesConfigured",
    "NoSourceLocale",
    "TranslationError",
    "UnknownExtensionTarget",
    "UnknownLocaleReference",
]


class TranslationError(Exception):
    """Base exception for all translator errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TranslationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class UnknownLocaleReference(TranslationError):
    """A locale name does not resolve in the registry.

    Raised at translator construction when the configured source or
    destination locale is not registered.

    Attributes:
        locale_name: The unresolved locale name
        attribute: Which setting referenced it ('source', 'destination', 'extends')
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_name: str = "",
        attribute: str = "",
    ) -> None:
        """Initialize UnknownLocaleReference.

        Args:
            message: Error message string OR Diagnostic object
            locale_name: The unresolved locale name
            attribute: Which setting referenced it
        """
        super().__init__(message)
        self.locale_name = locale_name
        self.attribute = attribute


class UnknownExtensionTarget(UnknownLocaleReference):
    """A locale definition extends a locale that is not registered yet.

    Extension targets must be registered before the definitions that
    extend them; there are no forward references.
    """


class DuplicateLocaleName(TranslationError):
    """A locale name was registered twice.

    Either a user-supplied locale collides with a built-in one, or two
    user-supplied definitions share a name.
    """

    def __init__(self, message: str | Diagnostic, *, locale_name: str = "") -> None:
        """Initialize DuplicateLocaleName.

        Args:
            message: Error message string OR Diagnostic object
            locale_name: The offending locale name
        """
        super().__init__(message)
        self.locale_name = locale_name


class NoSourceLocale(TranslationError):
    """An operation that reads localized code ran without a source locale."""


class NoDestinationLocale(TranslationError):
    """An operation that writes localized code ran without a destination locale."""


class NoNameOverridesConfigured(TranslationError):
    """include_names was requested but the translator has no name overrides."""


class DefinitionLoadError(TranslationError):
    """User-supplied locale definitions or name overrides could not be loaded.

    Attributes:
        location: File path or option name the content came from
    """

    def __init__(self, message: str | Diagnostic, *, location: str = "") -> None:
        """Initialize DefinitionLoadError.

        Args:
            message: Error message string OR Diagnostic object
            location: File path or option name the content came from
        """
        super().__init__(message)
        self.location = location
