"""
Microsoft (Bing) Translator provider implementation.

This module provides the BingTranslatorProvider class for interacting with the
Microsoft Translator V2 HTTP API. Every call exchanges the client credentials
for a fresh OAuth2 bearer token and then posts an XML envelope to the
TranslateArray2 endpoint.
"""

import os
import re
import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Union

import requests

from .base import TranslationProvider
from ..schemas import Credentials, TranslatedItem
from ..exceptions import AuthError, RequestError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """Strip the '{namespace}' prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _status_line(response: requests.Response) -> str:
    return f"{response.status_code} {response.reason}"


class BingTranslatorProvider(TranslationProvider):
    """
    Translation provider using the Microsoft Translator V2 HTTP API.
    """

    AUTH_URL = "https://datamarket.accesscontrol.windows.net/v2/OAuth2-13"
    AUTH_SCOPE = "http://api.microsofttranslator.com"
    AUTH_GRANT_TYPE = "client_credentials"
    TRANSLATE_ARRAY_URL = "http://api.microsofttranslator.com/V2/Http.svc/TranslateArray2"
    ARRAYS_NAMESPACE = "http://schemas.microsoft.com/2003/10/Serialization/Arrays"
    RESPONSE_ROOT_TAG = "ArrayOfTranslateArray2Response"
    RESPONSE_ITEM_TAG = "TranslateArray2Response"
    DEFAULT_TIMEOUT = 30.0

    def __init__(self,
                 client_id: Optional[str] = None,
                 client_secret: Optional[str] = None,
                 timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        """
        Initialize the Bing Translator provider.

        Args:
            client_id: Optional client id (if not provided, will use environment variables)
            client_secret: Optional client secret (if not provided, will use environment variables)
            timeout: Timeout in seconds applied to every HTTP request
            session: Optional requests session to send requests through
        """
        super().__init__()
        client_id = client_id or os.getenv("BING_TRANSLATOR_CLIENT_ID")
        client_secret = client_secret or os.getenv("BING_TRANSLATOR_CLIENT_SECRET")
        if not client_id or not client_secret:
            raise ValueError("Bing Translator client credentials not provided and not found in environment variables")

        self.credentials = Credentials(client_id=client_id, client_secret=client_secret)
        self.timeout = timeout
        self.session = session or requests.Session()
        self.token: Optional[str] = None

    def initialize(self):
        """Initialize the provider. Tokens are fetched per call, so nothing to do here."""
        pass

    def get_access_token(self) -> str:
        """
        Exchange the client credentials for a bearer token.

        The token is stored on the provider and returned. A new token is
        requested on every call; expiry is not tracked.

        Returns:
            Authorization header value of the form "Bearer <access_token>"

        Raises:
            AuthError: If the token endpoint fails or returns no usable token
        """
        form = {
            "client_id": self.credentials.client_id,
            "client_secret": self.credentials.client_secret,
            "scope": self.AUTH_SCOPE,
            "grant_type": self.AUTH_GRANT_TYPE
        }

        logger.debug(f"Requesting access token from {self.AUTH_URL}")
        try:
            response = self.session.post(self.AUTH_URL, data=form, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise AuthError(f"Failed to get access token: {str(e)}")

        if not response.ok:
            raise AuthError(f"Failed to get access token: {_status_line(response)}",
                            status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            raise AuthError("Failed to initialize access token: response is not valid JSON",
                            status_code=response.status_code)

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            raise AuthError("Failed to initialize access token", status_code=response.status_code)

        self.token = f"Bearer {access_token}"
        return self.token

    def build_request_body(self, source_lang: str, target_lang: str, texts: List[str]) -> bytes:
        """
        Serialize a TranslateArray request envelope.

        Element order is fixed: AppId, From, Texts, To. Each text becomes a
        <string> element in the serialization arrays namespace.

        Raises:
            ValueError: If a text or language code holds a character XML cannot carry
        """
        for value in [source_lang, target_lang] + list(texts):
            match = _INVALID_XML_CHARS.search(value)
            if match:
                raise ValueError(f"Character {match.group()!r} cannot be sent in an XML request: {value!r}")

        root = ET.Element("TranslateArrayRequest")
        ET.SubElement(root, "AppId")
        ET.SubElement(root, "From").text = source_lang
        texts_element = ET.SubElement(root, "Texts")
        for text in texts:
            ET.SubElement(texts_element, "string", xmlns=self.ARRAYS_NAMESPACE).text = text
        ET.SubElement(root, "To").text = target_lang

        # ElementTree leaves \r raw in text, which parsers normalize to \n
        xml = ET.tostring(root, encoding="unicode").replace("\r", "&#13;")
        return xml.encode("utf-8")

    def parse_response(self, content: Union[bytes, str]) -> Optional[List[TranslatedItem]]:
        """
        Parse a TranslateArray2 response body.

        Args:
            content: Raw response body

        Returns:
            One TranslatedItem per response block in document order, or None
            if the body is not an ArrayOfTranslateArray2Response document
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            logger.warning(f"Unparseable TranslateArray2 response: {str(e)}")
            return None

        if _local_name(root.tag) != self.RESPONSE_ROOT_TAG:
            logger.warning(f"Unexpected TranslateArray2 response root: {_local_name(root.tag)}")
            return None

        results = []
        for block in root:
            if _local_name(block.tag) != self.RESPONSE_ITEM_TAG:
                continue
            fields = {_local_name(child.tag): child.text or "" for child in block}
            results.append(TranslatedItem(
                text=fields.get("TranslatedText", ""),
                alignment=fields.get("Alignment", "")
            ))
        return results

    def translate_array(self, source_lang: str, target_lang: str,
                        texts: List[str]) -> Optional[List[TranslatedItem]]:
        """
        Translate an ordered batch of texts with the TranslateArray2 endpoint.

        Args:
            source_lang: Source language code
            target_lang: Target language code
            texts: Texts to translate

        Returns:
            Translated items index-aligned with texts, or None if the
            response body was not recognized

        Raises:
            ValueError: If a text cannot be carried in the XML envelope
            AuthError: If no token could be obtained
            RequestError: If the translate endpoint fails
        """
        body = self.build_request_body(source_lang, target_lang, texts)
        token = self.get_access_token()
        headers = {
            "Authorization": token,
            "Content-Type": "text/xml",
            "Content-Length": str(len(body))
        }

        logger.debug(f"Sending {len(texts)} texts ({len(body)} bytes) to {self.TRANSLATE_ARRAY_URL}")
        try:
            response = self.session.post(self.TRANSLATE_ARRAY_URL, data=body,
                                         headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise RequestError(f"Bing Translator request failed: {str(e)}")

        if not response.ok:
            raise RequestError(f"Bing Translator request failed: {_status_line(response)}",
                               status_code=response.status_code)

        return self.parse_response(response.content)
