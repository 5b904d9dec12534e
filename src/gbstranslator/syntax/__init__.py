"""Lexical layer: splits code into words and separators.

The translator never parses Gobstones grammar; it only needs to know where
words begin and end.

Python 3.13+.
"""

from .scanner import Span, WordScanner, iter_spans

__all__ = ["Span", "WordScanner", "iter_spans"]
