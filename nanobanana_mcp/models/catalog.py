"""Static catalog of the supported image models."""

from pydantic import BaseModel, Field

from nanobanana_mcp.config import GEMINI_FLASH_MODEL, GEMINI_PRO_MODEL


class ModelInfo(BaseModel):
    """Metadata describing a supported model."""

    id: str = Field(..., description="Model identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Short description")
    capabilities: list[str] = Field(default_factory=list, description="Capabilities")
    recommended_for: str = Field(..., description="Recommended use")


MODELS = [
    ModelInfo(
        id=GEMINI_FLASH_MODEL,
        name="Gemini 2.0 Flash (Image Generation)",
        description="Optimized for fast, high-quality image generation from text prompts.",
        capabilities=["text-to-image", "image-editing"],
        recommended_for="General image generation tasks requiring speed and quality",
    ),
    ModelInfo(
        id=GEMINI_PRO_MODEL,
        name="Gemini 2.0 Flash Exp",
        description="Experimental model with multimodal capabilities.",
        capabilities=["text-to-image", "image-editing", "image-understanding"],
        recommended_for="Complex image tasks requiring advanced reasoning",
    ),
]


def models_as_dict() -> dict:
    """Structured form of the catalog."""
    return {"models": [model.model_dump() for model in MODELS]}


def render_models_markdown() -> str:
    """Human-readable form of the catalog."""
    lines = ["# Available Gemini Image Generation Models", ""]

    for model in MODELS:
        lines.append(f"## {model.name}")
        lines.append(f"**Model ID:** `{model.id}`")
        lines.append("")
        lines.append(model.description)
        lines.append("")
        lines.append(f"**Capabilities:** {', '.join(model.capabilities)}")
        lines.append("")
        lines.append(f"**Recommended for:** {model.recommended_for}")
        lines.append("")
        lines.append("---")
        lines.append("")

    return "\n".join(lines)
