"""Shared fixtures for the test suite."""

import base64
from unittest.mock import AsyncMock, MagicMock

import pytest

from nanobanana_mcp.config import settings
from nanobanana_mcp.models.response import GenerateContentResponse


PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x01\x02\x03\xff\xfe"
PNG_B64 = base64.b64encode(PNG_BYTES).decode("ascii")


def make_response(*parts: dict, finish_reason: str = "STOP") -> GenerateContentResponse:
    """Build a response with a single candidate holding ``parts``."""
    return GenerateContentResponse.model_validate(
        {
            "candidates": [
                {
                    "content": {"role": "model", "parts": list(parts)},
                    "finishReason": finish_reason,
                    "index": 0,
                }
            ],
            "modelVersion": "test-model",
        }
    )


def text_part(text: str) -> dict:
    return {"text": text}


def image_part(data: str = PNG_B64, mime_type: str = "image/png") -> dict:
    return {"inlineData": {"mimeType": mime_type, "data": data}}


def http_response(status_code: int = 200, payload=None, text: str = "") -> MagicMock:
    """Fake curl_cffi response."""
    response = MagicMock()
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Error"
    response.text = text
    response.json = MagicMock(return_value=payload if payload is not None else {})
    return response


def session_factory(response) -> tuple[MagicMock, MagicMock]:
    """Fake ``AsyncSession`` class whose session's ``post`` returns ``response``."""
    session = MagicMock()
    session.post = AsyncMock(return_value=response)
    factory = MagicMock()
    factory.return_value.__aenter__ = AsyncMock(return_value=session)
    factory.return_value.__aexit__ = AsyncMock(return_value=False)
    return factory, session


@pytest.fixture
def api_key(monkeypatch) -> str:
    """Configure a test API key."""
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch) -> None:
    monkeypatch.setattr(settings, "gemini_api_key", None)


@pytest.fixture
def fake_client() -> MagicMock:
    """Client double whose ``generate_content`` is an ``AsyncMock``."""
    client = MagicMock()
    client.generate_content = AsyncMock()
    return client
