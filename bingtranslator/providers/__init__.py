"""
Translation provider implementations.
"""

from .base import TranslationProvider
from .bing import BingTranslatorProvider

__all__ = [
    "TranslationProvider",
    "BingTranslatorProvider"
]
