"""
Exceptions raised by the translator client.
"""

from typing import Optional


class TranslationError(Exception):
    """Base class for translation failures."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AuthError(TranslationError):
    """Raised when a bearer token could not be obtained."""
    pass


class RequestError(TranslationError):
    """Raised when the translate endpoint rejects a request."""
    pass
