"""HTTP client for the Gemini generateContent endpoint."""

from curl_cffi.requests import AsyncSession
from curl_cffi.requests.exceptions import HTTPError
from loguru import logger

from nanobanana_mcp.config import settings
from nanobanana_mcp.models.request import GenerateContentRequest
from nanobanana_mcp.models.response import GenerateContentResponse
from nanobanana_mcp.services.errors import missing_api_key_error


class GeminiClient:
    """Single-attempt client for the Gemini API.

    Each call opens its own session, so concurrent calls share nothing.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        proxy: str | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        if not self.api_key:
            raise missing_api_key_error()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout
        self.proxy = proxy if proxy is not None else settings.proxy

    def endpoint(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent"

    async def generate_content(
        self, model: str, request: GenerateContentRequest
    ) -> GenerateContentResponse:
        """
        POST the request and return the parsed response.

        Raises:
            curl_cffi.requests.exceptions.HTTPError: on a non-2xx status
            curl_cffi.requests.exceptions.RequestException: on transport failures
        """
        async with AsyncSession() as session:
            response = await session.post(
                url=self.endpoint(model),
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=request.to_payload(),
                timeout=self.timeout,
                proxy=self.proxy,
            )

            if not 200 <= response.status_code < 300:
                logger.error(
                    f"API request failed - status: {response.status_code}, "
                    f"response: {response.text[:1024] if response.text else 'empty'}"
                )
                raise HTTPError(
                    f"HTTP Error {response.status_code}: {response.reason}",
                    response=response,
                )

            return GenerateContentResponse.model_validate(response.json())
