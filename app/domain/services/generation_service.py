from __future__ import annotations

import logging
from typing import Any

from app.ai.prompts import PACKING_LIST_PROMPT, TRIP_PROMPT
from app.ai.response_parsing import loads_json
from app.api.models.schemas import GenerateTripRequest, PackingListRequest
from app.core.errors import LLMProviderError, UpstreamError
from app.external.cohere_api import CohereClient
from app.external.gemini_api import GeminiClient

logger = logging.getLogger(__name__)


class GenerationService:
    """
    Strict JSON generators and plain prompt proxies. Unlike chat-plan there is
    no salvage step: anything other than clean JSON is an upstream error.
    """

    def __init__(self, gemini: GeminiClient, cohere: CohereClient):
        self.gemini = gemini
        self.cohere = cohere

    async def generate_trip(self, body: GenerateTripRequest) -> Any:
        prompt = TRIP_PROMPT.format(destination=body.destination, days=body.days)
        return await self._generate_json(prompt, "Failed to generate trip")

    async def generate_packing_list(self, body: PackingListRequest) -> Any:
        activities = body.activities
        if isinstance(activities, list):
            activities = ", ".join(activities)
        prompt = PACKING_LIST_PROMPT.format(
            destination=body.destination,
            duration=body.duration,
            activities=activities,
            season=body.season,
        )
        return await self._generate_json(prompt, "Failed to generate packing list")

    async def ask_gemini(self, prompt: str) -> str:
        try:
            text = await self.gemini.generate(prompt)
        except LLMProviderError as exc:
            logger.error("gemini proxy error: %s", exc)
            raise UpstreamError("Error calling Gemini API") from exc
        if text is None:
            raise UpstreamError("Error calling Gemini API")
        return text

    async def ask_cohere(self, prompt: str) -> str:
        try:
            return await self.cohere.generate(prompt)
        except LLMProviderError as exc:
            logger.error("cohere proxy error: %s", exc)
            raise UpstreamError("Error calling Cohere API") from exc

    async def _generate_json(self, prompt: str, failure_message: str) -> Any:
        try:
            text = await self.gemini.generate(prompt, json_mode=True)
            return loads_json(text)
        except LLMProviderError as exc:
            logger.error("%s: %s", failure_message, exc)
            raise UpstreamError(failure_message) from exc
        except (TypeError, ValueError) as exc:
            logger.error("%s: model returned unusable content: %s", failure_message, exc)
            raise UpstreamError(failure_message) from exc
