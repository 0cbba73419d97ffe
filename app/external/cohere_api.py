from __future__ import annotations

import httpx

from app.core.config import Settings, settings
from app.core.errors import LLMProviderError


class CohereClient:
    """Cohere `generate` endpoint; returns the first generation's text."""

    provider = "cohere"

    def __init__(self, config: Settings = settings, transport: httpx.AsyncBaseTransport | None = None):
        self.api_key = config.cohere_api_key
        self.model = config.cohere_model
        self.max_tokens = config.cohere_max_tokens
        self.url = config.cohere_url
        self.timeout = config.llm_timeout_seconds
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise LLMProviderError(self.provider, "COHERE_API_KEY is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {"model": self.model, "prompt": prompt, "max_tokens": self.max_tokens}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.url, headers=headers, json=payload)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise LLMProviderError(
                self.provider, f"HTTP {exc.response.status_code}: {exc.response.text[:500]}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise LLMProviderError(self.provider, str(exc) or exc.__class__.__name__) from exc

        try:
            return data["generations"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise LLMProviderError(self.provider, "response carried no generations") from exc
