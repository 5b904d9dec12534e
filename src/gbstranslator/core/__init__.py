"""Core utilities shared across the scanner, registry and translator.

Exports:
    BidirectionalMap: Two-way dictionary used for vocabularies and name overrides
    BabelImportError: Raised when an optional Babel feature is used without Babel

Python 3.13+.
"""

from .babel_compat import BabelImportError
from .bidi_map import BidirectionalMap

__all__ = ["BabelImportError", "BidirectionalMap"]
