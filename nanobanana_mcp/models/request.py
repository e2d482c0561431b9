"""Request models for the Gemini generateContent API."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Discriminator, Field, Tag, field_validator


class InlineData(BaseModel):
    """Inline data for image content."""

    mimeType: str = Field(..., description="MIME type of the data")
    data: str = Field(..., description="Base64 encoded data")


class TextPart(BaseModel):
    """Text segment of a message."""

    text: str = Field(..., description="Text content")


class InlineDataPart(BaseModel):
    """Inline binary segment of a message."""

    inlineData: InlineData = Field(..., description="Inline data")


def _part_kind(value: Any) -> str | None:
    if isinstance(value, dict):
        if "inlineData" in value:
            return "inline_data"
        if "text" in value:
            return "text"
        return None
    if isinstance(value, InlineDataPart):
        return "inline_data"
    if isinstance(value, TextPart):
        return "text"
    return None


# A part is exactly one of the two variants, chosen by field presence.
Part = Annotated[
    Union[
        Annotated[TextPart, Tag("text")],
        Annotated[InlineDataPart, Tag("inline_data")],
    ],
    Discriminator(_part_kind),
]


class Content(BaseModel):
    """Content with optional role and parts."""

    role: Literal["user", "model"] | None = Field(
        default=None, description="Role of the content"
    )
    parts: list[Part] = Field(default_factory=list, description="Parts of the content")

    @field_validator("parts", mode="before")
    @classmethod
    def _drop_unknown_parts(cls, value: Any) -> Any:
        # Parts such as functionCall or executableCode carry no text or image.
        if isinstance(value, list):
            return [part for part in value if _part_kind(part) is not None]
        return value


class ImageConfig(BaseModel):
    """Image configuration for generation."""

    aspectRatio: str | None = Field(default=None, description="Aspect ratio (e.g., '1:1', '16:9')")
    imageSize: str | None = Field(default=None, description="Image size (e.g., '2K')")


class GenerationConfig(BaseModel):
    """Generation configuration."""

    responseModalities: list[str] = Field(
        default_factory=lambda: ["TEXT", "IMAGE"], description="Response modalities"
    )
    imageConfig: ImageConfig | None = Field(default=None, description="Image configuration")


class GenerateContentRequest(BaseModel):
    """Request model for generateContent endpoint."""

    contents: list[Content] = Field(..., min_length=1, description="Contents to generate from")
    generationConfig: GenerationConfig = Field(
        default_factory=GenerationConfig, description="Generation configuration"
    )

    def to_payload(self) -> dict:
        """Return the JSON body sent on the wire."""
        return self.model_dump(exclude_none=True)
