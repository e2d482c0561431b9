"""Builds generateContent requests from tool input."""

import base64
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from nanobanana_mcp.models.request import (
    Content,
    GenerateContentRequest,
    GenerationConfig,
    ImageConfig,
    InlineData,
    InlineDataPart,
    TextPart,
)


MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
    ".gif": "image/gif",
}

DEFAULT_MIME_TYPE = "image/png"


class InputImage(BaseModel):
    """Raw image bytes to send alongside the prompt."""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., description="Raw image bytes")
    mime_type: str = Field(default=DEFAULT_MIME_TYPE, description="MIME type of the image")


def mime_type_for_path(path: str | Path) -> str:
    """Guess an image MIME type from the file extension."""
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


def load_image(path: str | Path) -> InputImage:
    """Read an image file. Raises ``OSError`` if it cannot be read."""
    path = Path(path)
    return InputImage(data=path.read_bytes(), mime_type=mime_type_for_path(path))


def build_request(
    prompt: str,
    image: InputImage | None = None,
    aspect_ratio: str | None = None,
    image_size: str | None = None,
) -> GenerateContentRequest:
    """
    Build a request for the given prompt.

    The text part always comes first; the image part, if any, follows it.
    """
    parts = [TextPart(text=prompt)]
    if image is not None:
        parts.append(
            InlineDataPart(
                inlineData=InlineData(
                    mimeType=image.mime_type,
                    data=base64.b64encode(image.data).decode("ascii"),
                )
            )
        )

    config = GenerationConfig()
    if aspect_ratio or image_size:
        config.imageConfig = ImageConfig(aspectRatio=aspect_ratio, imageSize=image_size)

    return GenerateContentRequest(contents=[Content(parts=parts)], generationConfig=config)
