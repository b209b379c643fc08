"""
Translation client for the Microsoft (Bing) Translator API.

This module provides a single entry point that validates requests, delegates
them to a translation provider and logs what happened.
"""

import time
import logging
from typing import List, Optional, Union

import requests

from .schemas import ProviderType, TranslationRequest, TranslatedItem
from .providers import TranslationProvider, BingTranslatorProvider
from .exceptions import TranslationError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class TranslationClient:
    """
    A client for translating single strings or ordered batches of strings.

    Each call obtains a fresh bearer token and then issues one batch
    translate request. Failures of either HTTP call raise; an unrecognized
    response body yields None.
    """

    def __init__(self,
                 client_id: Optional[str] = None,
                 client_secret: Optional[str] = None,
                 provider: Union[str, ProviderType] = ProviderType.BING,
                 timeout: float = BingTranslatorProvider.DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None,
                 custom_provider: Optional[TranslationProvider] = None):
        """
        Initialize the translation client.

        Args:
            client_id: OAuth2 client id (if not provided, will use environment variables)
            client_secret: OAuth2 client secret (if not provided, will use environment variables)
            provider: Translation provider ("bing", "custom", or ProviderType enum)
            timeout: Timeout in seconds for each HTTP request
            session: Optional requests session for the Bing provider
            custom_provider: Optional custom provider implementation
        """
        if isinstance(provider, str):
            try:
                self.provider_type = ProviderType(provider.lower())
            except ValueError:
                raise ValueError(f"Unsupported provider: {provider}")
        else:
            self.provider_type = provider

        if self.provider_type == ProviderType.BING:
            self.provider = BingTranslatorProvider(
                client_id=client_id,
                client_secret=client_secret,
                timeout=timeout,
                session=session
            )
        elif self.provider_type == ProviderType.CUSTOM:
            if not custom_provider:
                raise ValueError("Custom provider type specified but no custom_provider provided")
            self.provider = custom_provider
        else:
            raise ValueError(f"Unsupported provider type: {self.provider_type}")

        self.provider.initialize()

        logger.info(f"Initialized TranslationClient with provider={self.provider_type.value}")

    @property
    def token(self) -> Optional[str]:
        """The bearer token stored by the most recent call, if any."""
        return getattr(self.provider, "token", None)

    def translate(self, source_lang: str, target_lang: str, text: str) -> Optional[str]:
        """
        Translate a single text.

        Args:
            source_lang: Source language code
            target_lang: Target language code
            text: Text to translate

        Returns:
            The translated text, or None if the service returned no result
        """
        request = TranslationRequest(source_lang=source_lang, target_lang=target_lang, texts=[text])
        start_time = time.time()

        try:
            result = self.provider.translate(request.source_lang, request.target_lang, request.texts[0])
        except TranslationError as e:
            logger.error(f"Translation {request.source_lang}->{request.target_lang} failed: {str(e)}")
            raise

        latency = time.time() - start_time
        if result is None:
            logger.warning(f"Translation {request.source_lang}->{request.target_lang} returned no result "
                           f"after {latency:.2f}s")
        else:
            logger.info(f"Translated 1 text {request.source_lang}->{request.target_lang} in {latency:.2f}s")
        return result

    def translate_array(self, source_lang: str, target_lang: str,
                        texts: List[str]) -> Optional[List[TranslatedItem]]:
        """
        Translate an ordered batch of texts.

        Args:
            source_lang: Source language code
            target_lang: Target language code
            texts: Texts to translate

        Returns:
            Translated items in input order, or None if the service returned
            an unrecognized body
        """
        request = TranslationRequest(source_lang=source_lang, target_lang=target_lang, texts=texts)
        start_time = time.time()

        try:
            results = self.provider.translate_array(request.source_lang, request.target_lang, request.texts)
        except TranslationError as e:
            logger.error(f"Translation {request.source_lang}->{request.target_lang} failed: {str(e)}")
            raise

        latency = time.time() - start_time
        if results is None:
            logger.warning(f"Translation {request.source_lang}->{request.target_lang} returned no result "
                           f"after {latency:.2f}s")
        else:
            logger.info(f"Translated {len(results)} of {len(request.texts)} texts "
                        f"{request.source_lang}->{request.target_lang} in {latency:.2f}s")
        return results
