"""Tests for services/images.py - the generate/edit pipeline."""

import base64
import os
from unittest.mock import patch

import pytest
from curl_cffi.requests.exceptions import HTTPError, Timeout

from nanobanana_mcp.config import GEMINI_FLASH_MODEL, GEMINI_PRO_MODEL
from nanobanana_mcp.models.request import InlineDataPart, TextPart
from nanobanana_mcp.services.errors import InputError
from nanobanana_mcp.services.images import (
    check_image_options,
    decode_image_base64,
    edit_image,
    edit_image_file,
    generate_image,
)

from conftest import PNG_B64, PNG_BYTES, http_response, image_part, make_response, session_factory, text_part


class TestGenerateImage:
    @pytest.mark.asyncio
    async def test_success(self, fake_client) -> None:
        fake_client.generate_content.return_value = make_response(
            text_part("Here is your balloon"), image_part(PNG_B64, "image/png")
        )

        result = await generate_image("a red balloon", GEMINI_PRO_MODEL, client=fake_client)

        assert result.success is True
        assert result.text == "Here is your balloon"
        assert result.image.mimeType == "image/png"
        assert result.image.data == PNG_B64
        assert result.model == GEMINI_PRO_MODEL

        model, request = fake_client.generate_content.await_args.args
        assert model == GEMINI_PRO_MODEL
        parts = request.contents[0].parts
        assert len(parts) == 1
        assert isinstance(parts[0], TextPart)

    @pytest.mark.asyncio
    async def test_refusal(self, fake_client) -> None:
        fake_client.generate_content.return_value = make_response(
            text_part("I can't create that image.")
        )

        result = await generate_image("disallowed content", client=fake_client)

        assert result.success is False
        assert result.error == (
            "No image was generated. The model may have refused or encountered an issue."
        )
        assert result.text == "I can't create that image."
        assert result.model == GEMINI_FLASH_MODEL

    @pytest.mark.asyncio
    async def test_timeout_is_classified(self, fake_client) -> None:
        fake_client.generate_content.side_effect = Timeout("Operation timed out")

        result = await generate_image("slow", client=fake_client)

        assert result.success is False
        assert result.error == (
            "Error: Request timed out. Image generation can take a while - please try again."
        )

    @pytest.mark.asyncio
    async def test_http_error_is_classified(self, fake_client) -> None:
        fake_client.generate_content.side_effect = HTTPError(
            "HTTP Error 404", response=http_response(404, {})
        )

        result = await generate_image("x", client=fake_client)

        assert result.error == "Error: Model not found. Please check the model name."

    @pytest.mark.asyncio
    async def test_unexpected_error_is_classified(self, fake_client) -> None:
        fake_client.generate_content.side_effect = RuntimeError("malformed payload")

        result = await generate_image("x", client=fake_client)

        assert result.success is False
        assert result.error == "Error: malformed payload"

    @pytest.mark.asyncio
    async def test_missing_api_key_fails_before_network(self, no_api_key) -> None:
        factory, session = session_factory(http_response(200, {}))

        with patch("nanobanana_mcp.services.client.AsyncSession", factory):
            result = await generate_image("a red balloon")

        assert result.success is False
        assert "GEMINI_API_KEY" in result.error
        assert result.error.startswith("Error: GEMINI_API_KEY environment variable is required.")
        factory.assert_not_called()
        session.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_image_size_on_flash_is_rejected(self, fake_client) -> None:
        result = await generate_image("x", GEMINI_FLASH_MODEL, image_size="2K", client=fake_client)

        assert result.success is False
        assert "only supported by" in result.error
        fake_client.generate_content.assert_not_called()

    @pytest.mark.asyncio
    async def test_aspect_ratio_is_sent(self, fake_client) -> None:
        fake_client.generate_content.return_value = make_response(image_part())

        await generate_image("x", aspect_ratio="9:16", client=fake_client)

        _, request = fake_client.generate_content.await_args.args
        assert request.generationConfig.imageConfig.aspectRatio == "9:16"

    @pytest.mark.asyncio
    async def test_unknown_part_does_not_hide_image(self, api_key) -> None:
        payload = {
            "candidates": [
                {
                    "content": {
                        "parts": [
                            {"executableCode": {"language": "PYTHON", "code": "print(1)"}},
                            image_part(),
                        ]
                    },
                    "finishReason": "STOP",
                }
            ]
        }
        factory, _ = session_factory(http_response(200, payload))

        with patch("nanobanana_mcp.services.client.AsyncSession", factory):
            result = await generate_image("a red balloon")

        assert result.success is True
        assert result.error is None
        assert result.image.mimeType == "image/png"
        assert result.image.data == PNG_B64

    @pytest.mark.asyncio
    async def test_end_to_end_over_http(self, api_key) -> None:
        payload = {
            "candidates": [
                {
                    "content": {"parts": [text_part("Here is your balloon"), image_part()]},
                    "finishReason": "STOP",
                }
            ]
        }
        factory, session = session_factory(http_response(200, payload))

        with patch("nanobanana_mcp.services.client.AsyncSession", factory):
            result = await generate_image("a red balloon")

        assert result.success is True
        assert result.text == "Here is your balloon"
        assert session.post.await_args.kwargs["params"] == {"key": "test-key"}


class TestEditImage:
    @pytest.mark.asyncio
    async def test_sends_image_after_text(self, fake_client) -> None:
        fake_client.generate_content.return_value = make_response(image_part())

        result = await edit_image(
            "make it blue", PNG_BYTES, "image/jpeg", GEMINI_FLASH_MODEL, client=fake_client
        )

        assert result.success is True
        _, request = fake_client.generate_content.await_args.args
        text, image = request.contents[0].parts
        assert isinstance(text, TextPart)
        assert text.text == "make it blue"
        assert isinstance(image, InlineDataPart)
        assert image.inlineData.mimeType == "image/jpeg"
        assert base64.b64decode(image.inlineData.data) == PNG_BYTES

    @pytest.mark.asyncio
    async def test_refusal_uses_edit_message(self, fake_client) -> None:
        fake_client.generate_content.return_value = make_response(text_part("No."))

        result = await edit_image("x", PNG_BYTES, client=fake_client)

        assert result.error == (
            "No edited image was generated. The model may have refused or encountered an issue."
        )
        assert result.text == "No."

    @pytest.mark.asyncio
    async def test_edit_from_file(self, fake_client, tmp_path) -> None:
        path = tmp_path / "input.webp"
        path.write_bytes(PNG_BYTES)
        fake_client.generate_content.return_value = make_response(image_part())

        result = await edit_image_file("x", path, client=fake_client)

        assert result.success is True
        _, request = fake_client.generate_content.await_args.args
        assert request.contents[0].parts[1].inlineData.mimeType == "image/webp"

    @pytest.mark.asyncio
    async def test_unreadable_file(self, fake_client, tmp_path) -> None:
        result = await edit_image_file("x", tmp_path / "missing.png", client=fake_client)

        assert result.success is False
        assert result.error.startswith("Failed to read image file:")
        fake_client.generate_content.assert_not_called()


class TestCheckImageOptions:
    def test_accepts_supported_values(self) -> None:
        check_image_options(GEMINI_PRO_MODEL, "21:9", "4K")
        check_image_options(GEMINI_FLASH_MODEL, "1:1", None)

    def test_rejects_unknown_aspect_ratio(self) -> None:
        with pytest.raises(InputError, match="aspect ratio"):
            check_image_options(GEMINI_FLASH_MODEL, "2:1", None)

    def test_rejects_unknown_size(self) -> None:
        with pytest.raises(InputError, match="image size"):
            check_image_options(GEMINI_PRO_MODEL, None, "8K")


class TestDecodeImageBase64:
    def test_plain(self) -> None:
        image = decode_image_base64(PNG_B64, "image/gif")
        assert image.data == PNG_BYTES
        assert image.mime_type == "image/gif"

    def test_data_url_mime_type_wins(self) -> None:
        image = decode_image_base64(f"data:image/webp;base64,{PNG_B64}", "image/png")
        assert image.data == PNG_BYTES
        assert image.mime_type == "image/webp"

    def test_line_wrapped_input(self) -> None:
        data = os.urandom(300)
        wrapped = base64.encodebytes(data).decode("ascii")
        assert "\n" in wrapped.strip()

        assert decode_image_base64(wrapped).data == data

    def test_invalid(self) -> None:
        with pytest.raises(InputError):
            decode_image_base64("not base64!!")
