"""
Schemas for the translation client and providers.

This module contains Pydantic models and data structures for credentials,
translation requests and translation results.
"""

from enum import Enum
from typing import List
from dataclasses import dataclass
from pydantic import BaseModel, ConfigDict, Field


class ProviderType(str, Enum):
    """Supported translation providers."""
    BING = "bing"
    CUSTOM = "custom"


class Credentials(BaseModel):
    """OAuth2 client credentials, fixed for the lifetime of a client."""
    model_config = ConfigDict(frozen=True)

    client_id: str = Field(min_length=1)
    client_secret: str = Field(min_length=1)


class TranslationRequest(BaseModel):
    """Container for a batch translation request."""
    source_lang: str
    target_lang: str
    texts: List[str] = Field(default_factory=list)


@dataclass
class TranslatedItem:
    """A single translated string and the alignment returned with it."""
    text: str
    alignment: str = ""
