"""Word scanner for tokenizing translation.

Reads source code one word or one character at a time, so that words can
be looked up in a vocabulary while every other character is copied through
untouched.

Design:
    - A word character is any character NOT in the separator set
    - The scanner is single-pass; its only state is the position index
    - peek_* never moves the position; next_* returns None at end of input
    - next_word() returns None without moving when not at a word

Line Ending Support:
    Newline ("\\n") and tab are separators by default. A carriage return is
    NOT, so CRLF sources keep "\\r" glued to the preceding word. Pass a
    custom separator set including "\\r" when scanning CRLF input.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from gbstranslator.constants import DEFAULT_SEPARATORS
from gbstranslator.enums import SpanKind

__all__ = ["Span", "WordScanner", "iter_spans"]


@dataclass(frozen=True, slots=True)
class Span:
    """Contiguous run of source text of a single kind.

    Attributes:
        kind: WORD for maximal runs of word characters, SEPARATOR otherwise
        text: The exact characters covered
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)

    Example:
        >>> list(iter_spans("Poner(Rojo)"))[0]
        Span(kind=<SpanKind.WORD: 'word'>, text='Poner', start=0, end=5)
    """

    kind: SpanKind
    text: str
    start: int
    end: int

    @property
    def is_word(self) -> bool:
        """True for word spans."""
        return self.kind is SpanKind.WORD


class WordScanner:
    """Position-tracking reader over a source string.

    Translation reads the input as alternating words and separators: each
    word is looked up and possibly replaced, each separator character is
    copied verbatim. This preserves the exact formatting of the code,
    including repeated whitespace.

    Example:
        >>> scanner = WordScanner("Poner( Rojo )")
        >>> scanner.next_word()
        'Poner'
        >>> scanner.next_word() is None  # at '(' now
        True
        >>> scanner.next_char()
        '('
        >>> scanner.peek_char()
        ' '
        >>> scanner.position
        6

    Thread Safety:
        Not thread-safe. Create one scanner per input; they are cheap.
    """

    __slots__ = ("_position", "_separators", "_source")

    def __init__(
        self,
        source: str,
        separators: Iterable[str] = DEFAULT_SEPARATORS,
        position: int = 0,
    ) -> None:
        """Create a scanner positioned at the start of source.

        Args:
            source: Text to scan
            separators: Characters that end a word (single characters)
            position: Starting offset, clamped to [0, len(source)]
        """
        self._source = source
        self._separators = (
            separators if isinstance(separators, frozenset) else frozenset(separators)
        )
        self._position = max(0, min(position, len(source)))

    @property
    def source(self) -> str:
        """The scanned text."""
        return self._source

    @property
    def position(self) -> int:
        """Offset of the next unread character."""
        return self._position

    @property
    def separators(self) -> frozenset[str]:
        """Characters that end a word."""
        return self._separators

    def is_eof(self) -> bool:
        """Return True once every character has been consumed."""
        return self._position >= len(self._source)

    def is_word(self) -> bool:
        """Return True if the next unread character starts a word."""
        if self.is_eof():
            return False
        return self.is_word_char(self._source[self._position])

    def is_word_char(self, char: str) -> bool:
        """Return True if char can be part of a word."""
        return char not in self._separators

    def peek_char(self) -> str | None:
        """Return the next character without consuming it, or None at EOF."""
        if self.is_eof():
            return None
        return self._source[self._position]

    def next_char(self) -> str | None:
        """Consume and return the next character, or None at EOF."""
        char = self.peek_char()
        if char is not None:
            self._position += 1
        return char

    def peek_word(self) -> str | None:
        """Return the word at the current position without consuming it.

        Returns:
            The maximal run of word characters starting here, or None if the
            next character is a separator or the input is exhausted.
        """
        end = self._word_end()
        if end == self._position:
            return None
        return self._source[self._position : end]

    def next_word(self) -> str | None:
        """Consume and return the word at the current position.

        Returns:
            The maximal run of word characters starting here, or None if the
            next character is a separator or the input is exhausted. The
            position only moves when a word is returned.
        """
        word = self.peek_word()
        if word is not None:
            self._position += len(word)
        return word

    def next_separators(self) -> str | None:
        """Consume and return the maximal run of separators at the current position.

        Returns:
            The separator run, or None if at a word or at end of input.
        """
        end = self._separator_end()
        if end == self._position:
            return None
        run = self._source[self._position : end]
        self._position = end
        return run

    def spans(self) -> Iterator[Span]:
        """Consume the rest of the input as alternating word and separator spans.

        Concatenating the text of every yielded span reproduces the
        unread part of the source exactly.
        """
        while not self.is_eof():
            start = self._position
            if self.is_word():
                kind, end = SpanKind.WORD, self._word_end()
            else:
                kind, end = SpanKind.SEPARATOR, self._separator_end()
            self._position = end
            yield Span(kind, self._source[start:end], start, end)

    def _word_end(self) -> int:
        end = self._position
        source = self._source
        while end < len(source) and self.is_word_char(source[end]):
            end += 1
        return end

    def _separator_end(self) -> int:
        end = self._position
        source = self._source
        while end < len(source) and not self.is_word_char(source[end]):
            end += 1
        return end

    def __repr__(self) -> str:
        return f"WordScanner(position={self._position}, length={len(self._source)})"


def iter_spans(source: str, separators: Iterable[str] = DEFAULT_SEPARATORS) -> Iterator[Span]:
    """Split source into word and separator spans.

    Example:
        >>> [span.text for span in iter_spans("program {Poner(Rojo)}")]
        ['program', ' {', 'Poner', '(', 'Rojo', ')}']
    """
    return WordScanner(source, separators).spans()
