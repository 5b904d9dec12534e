"""Tests for WordScanner and iter_spans."""

from __future__ import annotations

import pytest

from gbstranslator.constants import DEFAULT_SEPARATORS
from gbstranslator.enums import SpanKind
from gbstranslator.syntax import Span, WordScanner, iter_spans

# ============================================================================
# CHARACTER ACCESS
# ============================================================================


class TestCharacterAccess:
    """peek_char, next_char and is_eof."""

    def test_peek_does_not_advance(self) -> None:
        scanner = WordScanner("ab")
        assert scanner.peek_char() == "a"
        assert scanner.peek_char() == "a"
        assert scanner.position == 0

    def test_next_char_advances_by_one(self) -> None:
        scanner = WordScanner("ab")
        assert scanner.next_char() == "a"
        assert scanner.position == 1
        assert scanner.next_char() == "b"
        assert scanner.is_eof()

    def test_eof_returns_none(self) -> None:
        scanner = WordScanner("")
        assert scanner.is_eof()
        assert scanner.peek_char() is None
        assert scanner.next_char() is None
        assert scanner.position == 0

    def test_next_char_consumes_separators_too(self) -> None:
        scanner = WordScanner("(x")
        assert scanner.next_char() == "("
        assert scanner.next_char() == "x"

    def test_position_is_clamped(self) -> None:
        assert WordScanner("abc", position=10).position == 3
        assert WordScanner("abc", position=-4).position == 0


# ============================================================================
# WORD ACCESS
# ============================================================================


class TestWordAccess:
    """peek_word, next_word and is_word."""

    def test_next_word_returns_maximal_run(self) -> None:
        scanner = WordScanner("Poner(Rojo)")
        assert scanner.next_word() == "Poner"
        assert scanner.position == 5

    def test_next_word_at_separator_returns_none_without_moving(self) -> None:
        scanner = WordScanner("(Rojo)")
        assert scanner.next_word() is None
        assert scanner.position == 0

    def test_next_word_at_eof_returns_none(self) -> None:
        scanner = WordScanner("Rojo", position=4)
        assert scanner.next_word() is None

    def test_peek_word_does_not_advance(self) -> None:
        scanner = WordScanner("Rojo Azul")
        assert scanner.peek_word() == "Rojo"
        assert scanner.position == 0

    def test_is_word(self) -> None:
        scanner = WordScanner("a b")
        assert scanner.is_word()
        scanner.next_char()
        assert not scanner.is_word()
        scanner.next_char()
        assert scanner.is_word()
        scanner.next_char()
        assert not scanner.is_word()

    @pytest.mark.parametrize(
        "word",
        ["$GBS_COMMAND_DROP$", "Poner__Veces", "nroBolitas2", "esVacía", "sinElÚltimo", "a+b"],
    )
    def test_word_characters(self, word: str) -> None:
        """Anything outside the separator set is part of a word."""
        assert WordScanner(word).next_word() == word

    @pytest.mark.parametrize("separator", sorted(DEFAULT_SEPARATORS))
    def test_default_separators_end_words(self, separator: str) -> None:
        scanner = WordScanner(f"left{separator}right")
        assert scanner.next_word() == "left"
        assert scanner.next_char() == separator
        assert scanner.next_word() == "right"

    def test_carriage_return_is_a_word_character(self) -> None:
        assert WordScanner("Rojo\r\n").next_word() == "Rojo\r"

    def test_custom_separators(self) -> None:
        scanner = WordScanner("a|b c", separators="|")
        assert scanner.next_word() == "a"
        assert scanner.next_char() == "|"
        assert scanner.next_word() == "b c"
        assert scanner.separators == frozenset("|")

    def test_next_separators(self) -> None:
        scanner = WordScanner("a ( b")
        assert scanner.next_separators() is None
        scanner.next_word()
        assert scanner.next_separators() == " ( "
        assert scanner.next_word() == "b"
        assert scanner.next_separators() is None


# ============================================================================
# SPANS
# ============================================================================


class TestSpans:
    """iter_spans covers the input with alternating word and separator runs."""

    def test_spans_of_program(self) -> None:
        texts = [span.text for span in iter_spans("program {Poner(Rojo)}")]
        assert texts == ["program", " {", "Poner", "(", "Rojo", ")}"]

    def test_span_offsets_and_kinds(self) -> None:
        spans = list(iter_spans("x = 1"))
        assert spans == [
            Span(SpanKind.WORD, "x", 0, 1),
            Span(SpanKind.SEPARATOR, " = ", 1, 4),
            Span(SpanKind.WORD, "1", 4, 5),
        ]
        assert spans[0].is_word
        assert not spans[1].is_word

    def test_empty_input_has_no_spans(self) -> None:
        assert list(iter_spans("")) == []

    def test_spans_start_mid_input(self) -> None:
        scanner = WordScanner("ab cd", position=3)
        assert [span.text for span in scanner.spans()] == ["cd"]
        assert scanner.is_eof()

    def test_spans_concatenate_to_source(self) -> None:
        source = "\n  program {\n\tPoner(Rojo);  Mover(Norte)\n}\n"
        assert "".join(span.text for span in iter_spans(source)) == source

    def test_repr(self) -> None:
        assert repr(WordScanner("abc", position=1)) == "WordScanner(position=1, length=3)"
