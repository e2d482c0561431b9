"""Result models returned by the image pipeline."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class GenerationMode(Enum):
    """Kind of call driving the pipeline."""

    GENERATE = "generate"
    EDIT = "edit"

    @property
    def no_image_message(self) -> str:
        if self is GenerationMode.EDIT:
            return "No edited image was generated. The model may have refused or encountered an issue."
        return "No image was generated. The model may have refused or encountered an issue."


class GeneratedImage(BaseModel):
    """Image returned by the model."""

    mimeType: str = Field(..., description="MIME type of the image")
    data: str = Field(..., description="Base64 encoded image data")


class GenerationResult(BaseModel):
    """Outcome of a single generate or edit call."""

    success: bool = Field(..., description="Whether an image was produced")
    model: str = Field(..., description="Model used for the call")
    text: str | None = Field(default=None, description="Text returned by the model")
    image: GeneratedImage | None = Field(default=None, description="Generated image")
    error: str | None = Field(default=None, description="Error message on failure")
    finishReason: str | None = Field(default=None, description="Upstream finish reason")

    @model_validator(mode="after")
    def _success_matches_image(self) -> "GenerationResult":
        if self.success != (self.image is not None):
            raise ValueError("success must be true exactly when an image is present")
        return self

    @classmethod
    def failure(cls, model: str, error: str, text: str | None = None) -> "GenerationResult":
        """Build a failed result."""
        return cls(success=False, model=model, error=error, text=text)
