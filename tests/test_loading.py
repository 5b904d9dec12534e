"""Tests for JSON loaders of locale definitions and name overrides."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gbstranslator.diagnostics import DefinitionLoadError, DiagnosticCode
from gbstranslator.loading import (
    load_json_mapping,
    load_locale_definitions,
    load_name_overrides,
)


class TestLoadJsonMapping:
    """Inline JSON and @file references."""

    def test_inline_object(self) -> None:
        assert load_json_mapping('{"a": "b"}') == {"a": "b"}

    def test_file_reference(self, tmp_path: Path) -> None:
        path = tmp_path / "names.json"
        path.write_text('{"Poner__Veces": "Drop__Times"}', encoding="utf-8")
        assert load_json_mapping(f"@{path}") == {"Poner__Veces": "Drop__Times"}

    def test_file_with_accents(self, tmp_path: Path) -> None:
        path = tmp_path / "names.json"
        path.write_text('{"últimoValor": "lastValue"}', encoding="utf-8")
        assert load_json_mapping(f"@{path}") == {"últimoValor": "lastValue"}

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(DefinitionLoadError) as exc_info:
            load_json_mapping(f"@{path}")
        error = exc_info.value
        assert error.location == str(path)
        assert isinstance(error.__cause__, OSError)
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.DEFINITION_LOAD_FAILED

    def test_malformed_json_reports_position(self) -> None:
        with pytest.raises(DefinitionLoadError) as exc_info:
            load_json_mapping('{\n  "a": }', location="names")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.location == "names"
        assert diagnostic.span is not None
        assert diagnostic.span.line == 2
        assert diagnostic.span.column == 8
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_empty_input(self) -> None:
        with pytest.raises(DefinitionLoadError) as exc_info:
            load_json_mapping("")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.span is not None
        assert exc_info.value.diagnostic.span.line == 1

    @pytest.mark.parametrize("text", ["[]", '"text"', "42", "null"])
    def test_non_object_rejected(self, text: str) -> None:
        with pytest.raises(DefinitionLoadError) as exc_info:
            load_json_mapping(text)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DEFINITION_INVALID_SHAPE


class TestLoadNameOverrides:
    """Name override maps hold only strings."""

    def test_valid(self) -> None:
        assert load_name_overrides('{"a": "b", "c": "d"}') == {"a": "b", "c": "d"}

    def test_non_string_value(self) -> None:
        with pytest.raises(DefinitionLoadError, match="value of 'a' must be a string"):
            load_name_overrides('{"a": 1}')

    def test_file_location_in_diagnostic(self, tmp_path: Path) -> None:
        path = tmp_path / "names.json"
        path.write_text('{"a": ["b"]}', encoding="utf-8")
        with pytest.raises(DefinitionLoadError) as exc_info:
            load_name_overrides(f"@{path}")
        assert exc_info.value.location == str(path)


class TestLoadLocaleDefinitions:
    """Locale definitions are objects of strings, in order."""

    def test_valid_preserves_order(self) -> None:
        text = json.dumps(
            {
                "fr": {"extends": "en", "GBS_COMMAND_DROP": "Poser"},
                "fr-CA": {"extends": "fr"},
            }
        )
        definitions = load_locale_definitions(text)
        assert list(definitions) == ["fr", "fr-CA"]
        assert definitions["fr"]["GBS_COMMAND_DROP"] == "Poser"

    def test_definition_must_be_object(self) -> None:
        with pytest.raises(DefinitionLoadError, match="locale 'fr' must be an object"):
            load_locale_definitions('{"fr": "en"}')

    def test_spelling_must_be_string(self) -> None:
        with pytest.raises(DefinitionLoadError, match="locale 'fr': value of 'GBS_COMMAND_DROP'"):
            load_locale_definitions('{"fr": {"GBS_COMMAND_DROP": null}}')
