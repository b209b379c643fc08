"""
Shared fakes for the translation tests.
"""

import json
from typing import Any, Optional
from unittest import mock

import requests

from bingtranslator.providers import BingTranslatorProvider

RESPONSE_NS = "http://schemas.datacontract.org/2004/07/Microsoft.MT.Web.Service.V2"


def make_response(status_code: int = 200, content: Any = b"", reason: Optional[str] = None) -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason or ("OK" if status_code < 400 else "Error")
    if isinstance(content, dict):
        content = json.dumps(content)
    if isinstance(content, str):
        content = content.encode("utf-8")
    response._content = content
    response.encoding = "utf-8"
    return response


def token_response(access_token: str = "abc123") -> requests.Response:
    return make_response(200, {"access_token": access_token, "token_type": "http://schemas.xmlsoap.org/ws/2009/11/swt-token-profile-1.0", "expires_in": "600"})


def translate_response(*pairs) -> requests.Response:
    """Build a TranslateArray2 response from (translated text, alignment) pairs."""
    blocks = "".join(
        f"<TranslateArray2Response><Alignment>{alignment}</Alignment><From>en</From>"
        f"<TranslatedText>{text}</TranslatedText></TranslateArray2Response>"
        for text, alignment in pairs
    )
    body = (f'<ArrayOfTranslateArray2Response xmlns="{RESPONSE_NS}" '
            f'xmlns:i="http://www.w3.org/2001/XMLSchema-instance">{blocks}</ArrayOfTranslateArray2Response>')
    return make_response(200, body)


def make_provider(*responses) -> BingTranslatorProvider:
    """Build a provider whose session returns the given responses in order."""
    session = mock.Mock(spec=requests.Session)
    session.post.side_effect = list(responses)
    return BingTranslatorProvider(client_id="my-client", client_secret="s3cret", timeout=5.0, session=session)
