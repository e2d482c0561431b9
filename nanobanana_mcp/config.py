"""Configuration management for the MCP server."""

from pydantic_settings import BaseSettings
from pydantic import Field


# Gemini API
API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
API_KEY_ENV = "GEMINI_API_KEY"
API_KEY_URL = "https://aistudio.google.com/apikey"

# Supported models
GEMINI_FLASH_MODEL = "gemini-2.0-flash-exp-image-generation"
GEMINI_PRO_MODEL = "gemini-2.0-flash-exp"
SUPPORTED_MODELS = [GEMINI_FLASH_MODEL, GEMINI_PRO_MODEL]

# Image options
ASPECT_RATIOS = ["1:1", "16:9", "9:16", "4:3", "3:4", "21:9", "9:21"]
IMAGE_SIZES = ["1K", "2K", "4K"]

# Tool output
CHARACTER_LIMIT = 25000


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Gemini API Configuration
    gemini_api_key: str | None = Field(
        default=None, description="Gemini API key (GEMINI_API_KEY)"
    )
    api_base_url: str = Field(default=API_BASE_URL, description="Gemini API base URL")

    # Proxy Configuration
    proxy: str | None = Field(default=None, description="HTTP proxy URL")

    # Timeout Configuration
    timeout: int = Field(default=60, description="Request timeout in seconds")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level for stderr output")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
