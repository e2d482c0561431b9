"""Main MCP server entry point."""

import sys

from loguru import logger

from nanobanana_mcp import __version__
from nanobanana_mcp.config import API_KEY_ENV, API_KEY_URL, settings
from nanobanana_mcp.server import SERVER_NAME, mcp


def configure_logging(level: str | None = None) -> None:
    """Send logs to stderr; stdout carries the MCP protocol."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level or settings.log_level,
    )


def check_api_key() -> bool:
    """Warn when the API key is missing. The server still starts."""
    if settings.gemini_api_key:
        return True
    logger.warning(f"{API_KEY_ENV} environment variable is not set.")
    logger.warning(f"Get your API key from {API_KEY_URL}")
    logger.warning("The server will start but API calls will fail without a valid key.")
    return False


def run():
    """Run the MCP server over stdio."""
    configure_logging()
    logger.info(f"Starting {SERVER_NAME} v{__version__}")
    logger.info(f"API base URL: {settings.api_base_url}")
    logger.info(f"Proxy: {settings.proxy or 'None'}")
    logger.info(f"Timeout: {settings.timeout}s")
    check_api_key()

    mcp.run(transport="stdio")
    logger.info("Shutdown complete")


if __name__ == "__main__":
    run()
