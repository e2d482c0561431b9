"""Response models for the Gemini generateContent API."""

from pydantic import BaseModel, Field
from .request import Content


class Candidate(BaseModel):
    """Candidate response from the model."""

    content: Content = Field(default_factory=Content, description="Content of the candidate")
    finishReason: str | None = Field(default=None, description="Reason for finishing")
    index: int = Field(default=0, description="Index of the candidate")


class UsageMetadata(BaseModel):
    """Usage metadata for the response."""

    promptTokenCount: int = Field(default=0, description="Prompt token count")
    candidatesTokenCount: int = Field(default=0, description="Candidates token count")
    totalTokenCount: int = Field(default=0, description="Total token count")


class GenerateContentResponse(BaseModel):
    """Response model for generateContent endpoint."""

    candidates: list[Candidate] = Field(
        default_factory=list, description="Candidates from generation"
    )
    usageMetadata: UsageMetadata | None = Field(default=None, description="Usage metadata")
    modelVersion: str | None = Field(default=None, description="Model version used")


class ErrorDetail(BaseModel):
    """Error detail in an upstream error envelope."""

    code: int = Field(default=0, description="Error code")
    message: str | None = Field(default=None, description="Error message")
    status: str | None = Field(default=None, description="Error status")


class ErrorResponse(BaseModel):
    """Upstream error envelope."""

    error: ErrorDetail = Field(..., description="Error details")
