from __future__ import annotations

import logging
from typing import List

from app.ai.chat_plan_graph import ChatPlanState, build_chat_plan_graph
from app.ai.response_parsing import ERROR_MESSAGE
from app.api.models.schemas import ChatPlanResponse, ChatTurn
from app.external.gemini_api import GeminiClient

logger = logging.getLogger(__name__)


class ChatPlanService:
    def __init__(self, llm: GeminiClient):
        self.llm = llm
        self._graph = build_chat_plan_graph(llm)

    async def plan(self, messages: List[ChatTurn]) -> ChatPlanResponse:
        """
        Run the conversation through the model and normalize whatever comes
        back. Never raises; failures become an apology message with no plan.
        """
        state: ChatPlanState = {
            "messages": messages,
            "reply_text": None,
            "upstream_failed": False,
            "response": None,
        }
        try:
            result = await self._graph.ainvoke(state)
        except Exception as exc:
            logger.exception("Chat plan graph failed: %s", exc)
            return ChatPlanResponse(assistant_message=ERROR_MESSAGE, plan=None)
        return result["response"] or ChatPlanResponse(assistant_message=ERROR_MESSAGE, plan=None)
