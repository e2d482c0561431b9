"""Input types for the MCP tools, validated by the framework before a tool runs."""

from typing import Annotated, Literal

from pydantic import Field

from nanobanana_mcp.config import GEMINI_FLASH_MODEL, GEMINI_PRO_MODEL


ModelName = Annotated[
    Literal[GEMINI_FLASH_MODEL, GEMINI_PRO_MODEL],
    Field(
        description=(
            f"Gemini model to use. '{GEMINI_FLASH_MODEL}' is optimized for image generation."
        )
    ),
]

Prompt = Annotated[
    str,
    Field(
        min_length=1,
        max_length=10000,
        description=(
            "Text description of the image to generate or the edit to apply. Be specific "
            "about subject, style, lighting, composition, and mood for best results."
        ),
    ),
]

OutputPath = Annotated[
    str | None,
    Field(
        min_length=1,
        description=(
            "File path to save the image. The extension matching the returned image "
            "type is appended when the path has none."
        ),
    ),
]

ImagePath = Annotated[
    str | None,
    Field(
        min_length=1,
        description="File path to the image to edit. Supports PNG, JPEG, WebP, and GIF formats.",
    ),
]

ImageBase64 = Annotated[
    str | None,
    Field(min_length=1, description="Base64-encoded image data to edit (instead of image_path). A data: URL is also accepted."),
]

ImageMimeType = Annotated[
    Literal["image/png", "image/jpeg", "image/webp", "image/gif"],
    Field(description="MIME type of image_base64 (ignored for image_path and when a data: URL names one)."),
]

AspectRatio = Annotated[
    Literal["1:1", "16:9", "9:16", "4:3", "3:4", "21:9", "9:21"] | None,
    Field(description="Aspect ratio of the output image."),
]

ImageSize = Annotated[
    Literal["1K", "2K", "4K"] | None,
    Field(description=f"Output resolution ({GEMINI_PRO_MODEL} only)."),
]

ResponseFormat = Annotated[
    Literal["markdown", "json"],
    Field(
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable"
    ),
]
