from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.core.config import Settings, settings
from app.core.errors import LLMProviderError

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Thin wrapper over the Generative Language REST `generateContent` call.
    Raises LLMProviderError for missing credentials, transport and HTTP status
    failures; returns None when the reply carries no text part.
    """

    provider = "gemini"

    def __init__(self, config: Settings = settings, transport: httpx.AsyncBaseTransport | None = None):
        self.api_key = config.gemini_api_key
        self.model = config.gemini_model
        self.url = f"{config.gemini_base_url.rstrip('/')}/{config.gemini_model}:generateContent"
        self.timeout = config.llm_timeout_seconds
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def generate(
        self,
        prompt: str | None = None,
        *,
        contents: Optional[List[Dict[str, Any]]] = None,
        json_mode: bool = False,
    ) -> Optional[str]:
        if not self.api_key:
            raise LLMProviderError(self.provider, "GEMINI_API_KEY is not configured")

        payload: Dict[str, Any] = {"contents": contents or [{"parts": [{"text": prompt or ""}]}]}
        if json_mode:
            payload["generationConfig"] = {"responseMimeType": "application/json"}
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

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

        text = extract_text(data)
        if text is None:
            logger.warning("Gemini returned no text part: %s", data)
        return text


def extract_text(data: Any) -> Optional[str]:
    """candidates[0].content.parts[0].text, or None when any step is missing."""
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return None
    parts = (candidates[0].get("content") or {}).get("parts") or []
    if not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) else None
