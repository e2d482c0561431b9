"""Services for the application."""

from .client import GeminiClient
from .errors import ConfigurationError, InputError, NanobananaError, describe_error
from .images import edit_image, edit_image_file, generate_image

__all__ = [
    "GeminiClient",
    "ConfigurationError",
    "InputError",
    "NanobananaError",
    "describe_error",
    "edit_image",
    "edit_image_file",
    "generate_image",
]
