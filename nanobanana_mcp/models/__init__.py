"""Data models for the application."""

from .request import (
    GenerateContentRequest,
    Content,
    Part,
    TextPart,
    InlineDataPart,
    InlineData,
    GenerationConfig,
    ImageConfig,
)
from .response import GenerateContentResponse, Candidate, UsageMetadata, ErrorResponse, ErrorDetail
from .result import GenerationMode, GeneratedImage, GenerationResult
from .catalog import ModelInfo, MODELS

__all__ = [
    "GenerateContentRequest",
    "Content",
    "Part",
    "TextPart",
    "InlineDataPart",
    "InlineData",
    "GenerationConfig",
    "ImageConfig",
    "GenerateContentResponse",
    "Candidate",
    "UsageMetadata",
    "ErrorResponse",
    "ErrorDetail",
    "GenerationMode",
    "GeneratedImage",
    "GenerationResult",
    "ModelInfo",
    "MODELS",
]
