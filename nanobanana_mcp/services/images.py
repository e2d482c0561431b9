"""Image generation and editing pipeline."""

import base64
import binascii
from pathlib import Path

from loguru import logger

from nanobanana_mcp.config import (
    ASPECT_RATIOS,
    GEMINI_FLASH_MODEL,
    GEMINI_PRO_MODEL,
    IMAGE_SIZES,
)
from nanobanana_mcp.models.result import GenerationMode, GenerationResult
from nanobanana_mcp.services.builder import (
    DEFAULT_MIME_TYPE,
    InputImage,
    build_request,
    load_image,
)
from nanobanana_mcp.services.client import GeminiClient
from nanobanana_mcp.services.errors import InputError, describe_error
from nanobanana_mcp.services.extractor import extract_result


def check_image_options(model: str, aspect_ratio: str | None, image_size: str | None) -> None:
    """Raise ``InputError`` for image options the model cannot honour."""
    if aspect_ratio is not None and aspect_ratio not in ASPECT_RATIOS:
        raise InputError(
            f"Unsupported aspect ratio: {aspect_ratio}. Supported: {', '.join(ASPECT_RATIOS)}"
        )
    if image_size is not None:
        if image_size not in IMAGE_SIZES:
            raise InputError(
                f"Unsupported image size: {image_size}. Supported: {', '.join(IMAGE_SIZES)}"
            )
        if model != GEMINI_PRO_MODEL:
            raise InputError(f"Image size is only supported by {GEMINI_PRO_MODEL}")


async def run_pipeline(
    mode: GenerationMode,
    prompt: str,
    model: str,
    image: InputImage | None = None,
    aspect_ratio: str | None = None,
    image_size: str | None = None,
    client: GeminiClient | None = None,
) -> GenerationResult:
    """
    Build the request, send it and extract the result.

    Every failure along the way is returned as a failed result carrying a
    classified message; nothing is raised to the caller.
    """
    logger.info(f"Received {mode.value} request for model: {model}")

    try:
        check_image_options(model, aspect_ratio, image_size)
        client = client or GeminiClient()
        request = build_request(prompt, image, aspect_ratio, image_size)
        response = await client.generate_content(model, request)
        result = extract_result(response, model, mode)
    except Exception as e:
        message = describe_error(e)
        logger.error(f"{mode.value.capitalize()} failed: {message}")
        return GenerationResult.failure(model, message)

    if result.success:
        logger.info(f"{mode.value.capitalize()} successful for model: {model}")
    return result


async def generate_image(
    prompt: str,
    model: str | None = None,
    aspect_ratio: str | None = None,
    image_size: str | None = None,
    client: GeminiClient | None = None,
) -> GenerationResult:
    """Generate an image from a text prompt."""
    return await run_pipeline(
        GenerationMode.GENERATE,
        prompt,
        model or GEMINI_FLASH_MODEL,
        aspect_ratio=aspect_ratio,
        image_size=image_size,
        client=client,
    )


async def edit_image(
    prompt: str,
    image_bytes: bytes,
    image_mime_type: str = DEFAULT_MIME_TYPE,
    model: str | None = None,
    aspect_ratio: str | None = None,
    image_size: str | None = None,
    client: GeminiClient | None = None,
) -> GenerationResult:
    """Edit an image given as raw bytes."""
    return await run_pipeline(
        GenerationMode.EDIT,
        prompt,
        model or GEMINI_FLASH_MODEL,
        image=InputImage(data=image_bytes, mime_type=image_mime_type),
        aspect_ratio=aspect_ratio,
        image_size=image_size,
        client=client,
    )


async def edit_image_file(
    prompt: str,
    image_path: str | Path,
    model: str | None = None,
    aspect_ratio: str | None = None,
    image_size: str | None = None,
    client: GeminiClient | None = None,
) -> GenerationResult:
    """Edit an image read from disk; the MIME type comes from the file extension."""
    model = model or GEMINI_FLASH_MODEL
    try:
        image = load_image(image_path)
    except OSError as e:
        logger.error(f"Failed to read image file {image_path}: {e}")
        return GenerationResult.failure(model, f"Failed to read image file: {e}")

    return await edit_image(
        prompt,
        image.data,
        image.mime_type,
        model,
        aspect_ratio=aspect_ratio,
        image_size=image_size,
        client=client,
    )


def decode_image_base64(data: str, mime_type: str = DEFAULT_MIME_TYPE) -> InputImage:
    """
    Decode base64 image input, optionally given as a ``data:`` URL.

    Whitespace (e.g. line wrapping) is ignored. A data URL's own MIME type
    takes precedence over ``mime_type``. Raises ``InputError`` on malformed data.
    """
    data = data.strip()
    if data.startswith("data:") and "," in data:
        header, data = data.split(",", 1)
        declared = header[len("data:"):].split(";", 1)[0].strip()
        if declared:
            mime_type = declared
    data = "".join(data.split())
    try:
        decoded = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InputError(f"Invalid base64 image data: {e}") from e
    return InputImage(data=decoded, mime_type=mime_type)
