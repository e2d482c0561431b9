"""MCP server for Gemini image generation and editing."""

__version__ = "1.0.0"
