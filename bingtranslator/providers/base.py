"""
Base provider class for translation services.

This module provides the abstract base class for translation providers.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..schemas import TranslatedItem


class TranslationProvider(ABC):
    """Abstract base class for translation providers."""

    @abstractmethod
    def initialize(self) -> None:
        """Initialize the provider client."""
        pass

    @abstractmethod
    def translate_array(self, source_lang: str, target_lang: str,
                        texts: List[str]) -> Optional[List[TranslatedItem]]:
        """Translate an ordered batch of texts."""
        pass

    def translate(self, source_lang: str, target_lang: str, text: str) -> Optional[str]:
        """
        Translate a single text through the batch call.

        Returns:
            The translated text, or None if the batch call produced no result
        """
        results = self.translate_array(source_lang, target_lang, [text])
        if not results:
            return None
        return results[0].text
