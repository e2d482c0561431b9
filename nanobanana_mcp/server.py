"""MCP tools for Gemini image generation."""

import asyncio
import json

from loguru import logger
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from nanobanana_mcp.config import CHARACTER_LIMIT, GEMINI_FLASH_MODEL
from nanobanana_mcp.models.catalog import models_as_dict, render_models_markdown
from nanobanana_mcp.models.result import GenerationResult
from nanobanana_mcp.schemas import (
    AspectRatio,
    ImageBase64,
    ImageMimeType,
    ImagePath,
    ImageSize,
    ModelName,
    OutputPath,
    Prompt,
    ResponseFormat,
)
from nanobanana_mcp.services.errors import InputError, describe_error
from nanobanana_mcp.services.images import (
    decode_image_base64,
    edit_image,
    edit_image_file,
    generate_image,
)
from nanobanana_mcp.services.storage import save_image


SERVER_NAME = "nanobanana-mcp-server"

mcp = FastMCP(SERVER_NAME)


def to_json(payload: dict) -> str:
    """Serialize a tool payload, leaving out unset fields."""
    return json.dumps({k: v for k, v in payload.items() if v is not None}, indent=2)


def truncate_text(text: str | None) -> str | None:
    if text is None or len(text) <= CHARACTER_LIMIT:
        return text
    return text[:CHARACTER_LIMIT] + f"\n\n[Truncated: {len(text) - CHARACTER_LIMIT} characters omitted]"


async def format_result(result: GenerationResult, output_path: str | None) -> str:
    """Shape a generation result into the tool's JSON output, saving the image if asked."""
    if not result.success or result.image is None:
        return to_json(
            {
                "success": False,
                "error": result.error or "Unknown error occurred",
                "model": result.model,
                "text": truncate_text(result.text),
            }
        )

    if output_path:
        try:
            saved_to = await asyncio.to_thread(
                save_image, result.image.data, output_path, result.image.mimeType
            )
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save image to {output_path}: {e}")
            return to_json(
                {
                    "success": False,
                    "error": f"Failed to save image: {e}",
                    "model": result.model,
                }
            )
        return to_json(
            {
                "success": True,
                "saved_to": str(saved_to),
                "mime_type": result.image.mimeType,
                "model": result.model,
                "text": truncate_text(result.text),
            }
        )

    return to_json(
        {
            "success": True,
            "image_base64": result.image.data,
            "mime_type": result.image.mimeType,
            "model": result.model,
            "text": truncate_text(result.text),
        }
    )


def failure_json(error: BaseException, model: str) -> str:
    return to_json({"success": False, "error": describe_error(error), "model": model})


@mcp.tool(
    name="nanobanana_generate_image",
    description="""Generate an image from a text prompt using Google's Gemini image generation models.

For best results, be specific about subject matter and composition, art style
(photorealistic, illustration, oil painting, etc.), lighting and atmosphere,
and colors and mood.

Returns a JSON object with:
  - success (boolean): Whether generation succeeded
  - image_base64 (string): Base64-encoded image data (if no output_path)
  - saved_to (string): File path where the image was saved (if output_path provided)
  - mime_type (string): Image MIME type
  - model (string): Model used for generation
  - text (string, optional): Any text response from the model
  - error (string, optional): Error message if generation failed""",
    annotations=ToolAnnotations(
        title="Generate Image",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def nanobanana_generate_image(
    prompt: Prompt,
    model: ModelName = GEMINI_FLASH_MODEL,
    output_path: OutputPath = None,
    aspect_ratio: AspectRatio = None,
    image_size: ImageSize = None,
) -> str:
    try:
        result = await generate_image(
            prompt, model, aspect_ratio=aspect_ratio, image_size=image_size
        )
        return await format_result(result, output_path)
    except Exception as e:
        logger.exception(f"Unexpected error during generation: {e}")
        return failure_json(e, model)


@mcp.tool(
    name="nanobanana_edit_image",
    description="""Edit an existing image using a text prompt with Gemini's image editing capabilities.

You can change colors, objects, or elements, add or remove items from the scene,
transform the style or mood, or apply effects. Give the image either as
image_path or as image_base64 (with image_mime_type), not both.

Returns a JSON object with:
  - success (boolean): Whether editing succeeded
  - image_base64 (string): Base64-encoded edited image data (if no output_path)
  - saved_to (string): File path where the image was saved (if output_path provided)
  - mime_type (string): Image MIME type
  - model (string): Model used for editing
  - text (string, optional): Any text response from the model
  - error (string, optional): Error message if editing failed""",
    annotations=ToolAnnotations(
        title="Edit Image",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def nanobanana_edit_image(
    prompt: Prompt,
    image_path: ImagePath = None,
    image_base64: ImageBase64 = None,
    image_mime_type: ImageMimeType = "image/png",
    model: ModelName = GEMINI_FLASH_MODEL,
    output_path: OutputPath = None,
    aspect_ratio: AspectRatio = None,
    image_size: ImageSize = None,
) -> str:
    try:
        if (image_path is None) == (image_base64 is None):
            raise InputError("Provide exactly one of image_path or image_base64")

        if image_path is not None:
            result = await edit_image_file(
                prompt, image_path, model, aspect_ratio=aspect_ratio, image_size=image_size
            )
        else:
            image = decode_image_base64(image_base64, image_mime_type)
            result = await edit_image(
                prompt,
                image.data,
                image.mime_type,
                model,
                aspect_ratio=aspect_ratio,
                image_size=image_size,
            )
        return await format_result(result, output_path)
    except InputError as e:
        logger.warning(f"Rejected edit request: {e}")
        return failure_json(e, model)
    except Exception as e:
        logger.exception(f"Unexpected error during editing: {e}")
        return failure_json(e, model)


@mcp.tool(
    name="nanobanana_list_models",
    description="""List the available Gemini models for image generation.

Returns information about each supported model including its capabilities and
recommended use cases, as markdown (default) or JSON.""",
    annotations=ToolAnnotations(
        title="List Available Models",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def nanobanana_list_models(response_format: ResponseFormat = "markdown") -> str:
    if response_format == "json":
        return json.dumps(models_as_dict(), indent=2)
    return render_models_markdown()

