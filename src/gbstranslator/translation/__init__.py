"""Translation engine and its configuration.

Python 3.13+. Zero external dependencies.
"""

from .config import NameOverrides, TranslatorConfig
from .translator import Translator

__all__ = ["NameOverrides", "Translator", "TranslatorConfig"]
