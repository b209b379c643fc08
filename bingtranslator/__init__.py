"""
Bing Translator Client

A small client for the Microsoft (Bing) Translator V2 HTTP API. It exchanges
OAuth2 client credentials for a bearer token and translates single strings or
ordered batches of strings through the TranslateArray2 endpoint.
"""

__version__ = "0.1.0"

from .client import TranslationClient
from .providers import TranslationProvider, BingTranslatorProvider
from .schemas import ProviderType, Credentials, TranslationRequest, TranslatedItem
from .exceptions import TranslationError, AuthError, RequestError

__all__ = [
    # Client
    'TranslationClient',

    # Providers
    'TranslationProvider',
    'BingTranslatorProvider',

    # Schemas
    'ProviderType',
    'Credentials',
    'TranslationRequest',
    'TranslatedItem',

    # Errors
    'TranslationError',
    'AuthError',
    'RequestError'
]
