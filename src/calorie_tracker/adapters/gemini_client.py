"""Google Generative Language (Gemini) API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class GeminiClient(Protocol):
    """Interface for the model directory and per-model invoke endpoints."""

    async def list_models(self, api_key: str) -> object:
        """Return the raw model listing payload."""

    async def invoke(
        self, api_key: str, model: str, operation: str, body: dict[str, object]
    ) -> object:
        """Call `operation` on `model` and return the decoded reply."""


@dataclass
class HttpxGeminiClient(GeminiClient):
    """HTTPX-backed Gemini client."""

    models_url: str
    api_base_url: str
    timeout_seconds: float
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, models_url: str, api_base_url: str, timeout_seconds: float = 15.0
    ) -> "HttpxGeminiClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(
            models_url=models_url,
            api_base_url=api_base_url,
            timeout_seconds=timeout_seconds,
            http_client=httpx.AsyncClient(),
        )

    async def list_models(self, api_key: str) -> object:
        """Fetch the model listing."""
        response = await self.http_client.get(
            self.models_url,
            headers=_auth_headers(api_key),
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def invoke(
        self, api_key: str, model: str, operation: str, body: dict[str, object]
    ) -> object:
        """POST an operation request to a single model."""
        url = f"{self.api_base_url.rstrip('/')}/{model}:{operation}"
        response = await self.http_client.post(
            url,
            headers=_auth_headers(api_key),
            json=body,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _auth_headers(api_key: str) -> dict[str, str]:
    # Header auth keeps the key out of request URLs and error messages.
    return {"x-goog-api-key": api_key}
