"""Turns a generateContent response into a generation result."""

from loguru import logger

from nanobanana_mcp.models.request import InlineDataPart
from nanobanana_mcp.models.response import GenerateContentResponse
from nanobanana_mcp.models.result import GeneratedImage, GenerationMode, GenerationResult


NO_CANDIDATES_MESSAGE = "No candidates returned from the API"


def extract_result(
    response: GenerateContentResponse, model: str, mode: GenerationMode
) -> GenerationResult:
    """
    Extract text and image from the first candidate.

    Every part is scanned; when several parts of the same kind are present the
    last one wins. A candidate without an image part is a failure even if the
    model returned text.
    """
    if not response.candidates:
        logger.warning(f"No candidates returned for model: {model}")
        return GenerationResult.failure(model, NO_CANDIDATES_MESSAGE)

    candidate = response.candidates[0]
    text: str | None = None
    image: GeneratedImage | None = None

    for part in candidate.content.parts:
        if isinstance(part, InlineDataPart):
            image = GeneratedImage(
                mimeType=part.inlineData.mimeType,
                data=part.inlineData.data,
            )
        else:
            text = part.text

    if image is None:
        logger.warning(
            f"Request succeeded but no image in response, finish reason: {candidate.finishReason}"
        )
        return GenerationResult.failure(model, mode.no_image_message, text=text)

    return GenerationResult(
        success=True,
        model=model,
        text=text,
        image=image,
        finishReason=candidate.finishReason,
    )
