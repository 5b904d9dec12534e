"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistently formatted
        - Keyed by a stable DiagnosticCode, so callers can localize them
        - Documented in one place
    """

    @staticmethod
    def unknown_locale(locale_name: str, attribute: str) -> Diagnostic:
        """Configured locale is not registered.

        Args:
            locale_name: The locale name that could not be resolved
            attribute: Configuration slot that referenced it ('source', 'destination')

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        msg = f"Locale '{locale_name}' given as {attribute} is not registered"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=msg,
            hint=(
                "Use one of the built-in locales or register it through "
                "the 'locales' option"
            ),
            locale_name=locale_name,
            attribute=attribute,
        )

    @staticmethod
    def unknown_extension_target(locale_name: str, target: str) -> Diagnostic:
        """Locale definition extends a locale that is not registered yet.

        Args:
            locale_name: The locale being registered
            target: The locale named in its 'extends' key

        Returns:
            Diagnostic for UNKNOWN_EXTENSION_TARGET
        """
        msg = f"Locale '{locale_name}' extends '{target}', which is not registered"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_EXTENSION_TARGET,
            message=msg,
            hint=f"Register '{target}' before '{locale_name}'; extension targets must exist first",
            locale_name=target,
            attribute="extends",
        )

    @staticmethod
    def duplicate_locale(locale_name: str) -> Diagnostic:
        """Locale name registered more than once.

        Args:
            locale_name: The offending locale name

        Returns:
            Diagnostic for DUPLICATE_LOCALE
        """
        msg = f"Locale '{locale_name}' is already registered"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_LOCALE,
            message=msg,
            hint="Pick another name, or extend the existing locale instead of redefining it",
            locale_name=locale_name,
        )

    @staticmethod
    def no_source_locale() -> Diagnostic:
        """Operation reads localized code but no source locale was configured."""
        return Diagnostic(
            code=DiagnosticCode.NO_SOURCE_LOCALE,
            message="Cannot read localized code: the translator has no source locale",
            hint="Construct the translator with source=<locale>",
            attribute="source",
        )

    @staticmethod
    def no_destination_locale() -> Diagnostic:
        """Operation writes localized code but no destination locale was configured."""
        return Diagnostic(
            code=DiagnosticCode.NO_DESTINATION_LOCALE,
            message="Cannot write localized code: the translator has no destination locale",
            hint="Construct the translator with destination=<locale>",
            attribute="destination",
        )

    @staticmethod
    def no_name_overrides() -> Diagnostic:
        """include_names requested on a translator built without names."""
        return Diagnostic(
            code=DiagnosticCode.NO_NAME_OVERRIDES,
            message="Name overrides were requested but none were configured",
            hint="Either drop include_names or construct the translator with names=<mapping>",
            attribute="names",
        )

    @staticmethod
    def definition_load_failed(
        location: str,
        reason: str,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """User-supplied JSON could not be read or decoded.

        Args:
            location: File path or option name the JSON came from
            reason: Underlying error description
            span: Position of a decoding error, when known

        Returns:
            Diagnostic for DEFINITION_LOAD_FAILED
        """
        msg = f"Could not load {location}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DEFINITION_LOAD_FAILED,
            message=msg,
            hint="Pass a JSON object inline, or '@path' to read it from a UTF-8 file",
            location=location,
            span=span,
        )

    @staticmethod
    def definition_invalid_shape(location: str, detail: str) -> Diagnostic:
        """JSON decoded fine but does not have the expected structure.

        Args:
            location: File path or option name the JSON came from
            detail: What was wrong with the structure

        Returns:
            Diagnostic for DEFINITION_INVALID_SHAPE
        """
        msg = f"Invalid content in {location}: {detail}"
        return Diagnostic(
            code=DiagnosticCode.DEFINITION_INVALID_SHAPE,
            message=msg,
            hint="Expected a JSON object whose values are strings",
            location=location,
        )

    @staticmethod
    def incomplete_locale(locale_name: str, missing: tuple[str, ...]) -> Diagnostic:
        """Complete locale definition omits some token names.

        Args:
            locale_name: The locale being registered
            missing: Token names absent from the definition

        Returns:
            Warning diagnostic for INCOMPLETE_LOCALE
        """
        shown = ", ".join(missing[:5])
        if len(missing) > 5:
            shown += f", ... ({len(missing) - 5} more)"
        msg = f"Locale '{locale_name}' does not define {len(missing)} token(s): {shown}"
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_LOCALE,
            message=msg,
            hint="Missing tokens are left untranslated; extend a complete locale instead",
            locale_name=locale_name,
            severity="warning",
        )

    @staticmethod
    def unknown_override_token(locale_name: str, token_name: str, target: str) -> Diagnostic:
        """Extending definition overrides a token its base does not define.

        Args:
            locale_name: The locale being registered
            token_name: The token name that has no counterpart in the base
            target: The extended locale

        Returns:
            Warning diagnostic for UNKNOWN_OVERRIDE_TOKEN
        """
        msg = f"Locale '{locale_name}' overrides '{token_name}', unknown to '{target}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_OVERRIDE_TOKEN,
            message=msg,
            hint="Only tokens defined by the extended locale can be overridden",
            locale_name=locale_name,
            severity="warning",
        )
