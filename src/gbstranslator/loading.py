"""Loading of user-supplied locale definitions and name overrides.

Both arrive as JSON objects, either inline (a command line argument) or
from a UTF-8 file named with a leading "@" ("@locales.json"). Every failure
is reported as a DefinitionLoadError carrying a diagnostic; JSON decoding
errors include the line and column of the problem.

Expected shapes:
    names:   {"Poner__Veces": "Drop__Times", ...}
    locales: {"fr": {"extends": "en", "GBS_COMMAND_DROP": "Poser"}, ...}

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from gbstranslator.constants import DEFAULT_ENCODING
from gbstranslator.diagnostics import DefinitionLoadError, ErrorTemplate, SourceSpan
from gbstranslator.types import LocaleName

__all__ = [
    "FILE_MARKER",
    "load_json_mapping",
    "load_locale_definitions",
    "load_name_overrides",
]

logger = logging.getLogger(__name__)

FILE_MARKER = "@"
"""Prefix marking an argument as a path to a JSON file."""


def load_json_mapping(source: str, *, location: str = "<inline>") -> dict[str, Any]:
    """Decode a JSON object given inline or as "@path".

    Args:
        source: JSON text, or FILE_MARKER followed by a file path
        location: Name used in diagnostics for inline JSON

    Returns:
        The decoded object

    Raises:
        DefinitionLoadError: If the file cannot be read, the JSON is
            malformed, or the top-level value is not an object
    """
    text = source
    if source.startswith(FILE_MARKER):
        location = _location_of(source, location)
        path = Path(location)
        try:
            text = path.read_text(encoding=DEFAULT_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            diagnostic = ErrorTemplate.definition_load_failed(location, str(e))
            raise DefinitionLoadError(diagnostic, location=location) from e
        logger.debug("Read %d chars from %s", len(text), location)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        span = SourceSpan(start=e.pos, end=e.pos, line=e.lineno, column=e.colno)
        diagnostic = ErrorTemplate.definition_load_failed(location, e.msg, span)
        raise DefinitionLoadError(diagnostic, location=location) from e

    if not isinstance(data, dict):
        diagnostic = ErrorTemplate.definition_invalid_shape(
            location, f"expected a JSON object, got {type(data).__name__}"
        )
        raise DefinitionLoadError(diagnostic, location=location)
    return data


def load_name_overrides(source: str, *, location: str = "names") -> dict[str, str]:
    """Load identifier overrides ({"from name": "to name"}).

    Raises:
        DefinitionLoadError: If loading fails or a value is not a string
    """
    data = load_json_mapping(source, location=location)
    _require_string_values(data, _location_of(source, location))
    logger.debug("Loaded %d name overrides", len(data))
    return data


def load_locale_definitions(
    source: str, *, location: str = "locales"
) -> dict[LocaleName, dict[str, str]]:
    """Load additional locale definitions ({"name": {"TOKEN": "spelling"}}).

    Definition order is preserved, so a definition may extend one that
    appears earlier in the same object.

    Raises:
        DefinitionLoadError: If loading fails or a definition is not an
            object of strings
    """
    data = load_json_mapping(source, location=location)
    where = _location_of(source, location)
    for name, definition in data.items():
        if not isinstance(definition, dict):
            diagnostic = ErrorTemplate.definition_invalid_shape(
                where, f"locale '{name}' must be an object, got {type(definition).__name__}"
            )
            raise DefinitionLoadError(diagnostic, location=where)
        _require_string_values(definition, where, prefix=f"locale '{name}': ")
    logger.debug("Loaded %d locale definitions: %s", len(data), ", ".join(data))
    return data


def _location_of(source: str, default: str) -> str:
    return source[len(FILE_MARKER) :] if source.startswith(FILE_MARKER) else default


def _require_string_values(data: dict[str, Any], location: str, prefix: str = "") -> None:
    for key, value in data.items():
        if not isinstance(value, str):
            diagnostic = ErrorTemplate.definition_invalid_shape(
                location, f"{prefix}value of '{key}' must be a string, got {type(value).__name__}"
            )
            raise DefinitionLoadError(diagnostic, location=location)
