"""Error types and classification of upstream failures into user-facing messages."""

from curl_cffi.requests.exceptions import (
    ConnectionError as TransportConnectionError,
    RequestException,
    Timeout,
)
from pydantic import ValidationError

from nanobanana_mcp.config import API_KEY_ENV, API_KEY_URL
from nanobanana_mcp.models.response import ErrorResponse


class NanobananaError(Exception):
    """Base error for the MCP server."""


class ConfigurationError(NanobananaError):
    """Required configuration is missing."""


class InputError(NanobananaError):
    """Tool input could not be turned into a request."""


def missing_api_key_error() -> ConfigurationError:
    return ConfigurationError(
        f"{API_KEY_ENV} environment variable is required. "
        f"Get your API key from {API_KEY_URL}"
    )


STATUS_MESSAGES = {
    401: f"Error: Invalid API key. Please check your {API_KEY_ENV} environment variable.",
    404: "Error: Model not found. Please check the model name.",
    429: "Error: Rate limit exceeded. Please wait before making more requests.",
    500: "Error: Gemini API server error. Please try again later.",
    503: "Error: Gemini API service unavailable. Please try again later.",
}

TIMEOUT_MESSAGE = (
    "Error: Request timed out. Image generation can take a while - please try again."
)
NETWORK_MESSAGE = "Error: Unable to reach Gemini API. Please check your network connection."


def upstream_message(response) -> str | None:
    """Extract ``error.message`` from a Gemini error body, if there is one."""
    try:
        payload = response.json()
    except (ValueError, TypeError, AttributeError):
        return None
    try:
        envelope = ErrorResponse.model_validate(payload)
    except ValidationError:
        return None
    return envelope.error.message or None


def describe_status(status: int, message: str | None) -> str:
    """Map an HTTP status and optional upstream message to a user-facing message."""
    if status == 400:
        return f"Error: Invalid request. {message or 'Check your prompt and parameters.'}"
    if status == 403:
        return f"Error: Access denied. {message or 'Your API key may not have access to this model.'}"
    if status in STATUS_MESSAGES:
        return STATUS_MESSAGES[status]
    return f"Error: API request failed with status {status}. {message or ''}".rstrip()


def describe_error(error: BaseException) -> str:
    """
    Turn any failure from the request pipeline into a single message.

    HTTP failures are classified by status code first, then timeouts, then
    connectivity failures. Anything else is reported with its own description.
    This function never raises.
    """
    if isinstance(error, RequestException):
        response = getattr(error, "response", None)
        status = getattr(response, "status_code", None)
        if isinstance(status, int) and status:
            return describe_status(status, upstream_message(response))
        if isinstance(error, Timeout):
            return TIMEOUT_MESSAGE
        if isinstance(error, TransportConnectionError):
            return NETWORK_MESSAGE

    description = str(error) or type(error).__name__
    return f"Error: {description}"
