from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Literal, Optional, TypedDict

from langgraph.graph import END, StateGraph

from app.ai.prompts import CHAT_PLAN_PROMPT
from app.ai.response_parsing import ERROR_MESSAGE, normalize_model_reply
from app.api.models.schemas import ChatPlanResponse, ChatTurn
from app.core.errors import LLMProviderError
from app.external.gemini_api import GeminiClient

logger = logging.getLogger(__name__)


class ChatPlanState(TypedDict):
    messages: List[ChatTurn]
    reply_text: Optional[str]
    upstream_failed: bool
    response: Optional[ChatPlanResponse]


def build_chat_plan_prompt(messages: List[ChatTurn]) -> str:
    conversation = json.dumps(
        [turn.model_dump() for turn in messages], ensure_ascii=False, separators=(",", ":")
    )
    return CHAT_PLAN_PROMPT + "\n\nConversation:\n" + conversation


def build_chat_plan_graph(llm: GeminiClient):
    async def call_model(state: ChatPlanState) -> Dict[str, Any]:
        contents = [{"role": "user", "parts": [{"text": build_chat_plan_prompt(state["messages"])}]}]
        try:
            text = await llm.generate(contents=contents, json_mode=True)
        except LLMProviderError as exc:
            logger.error("chat-plan upstream error: %s", exc)
            return {"upstream_failed": True}
        return {"reply_text": text}

    async def normalize(state: ChatPlanState) -> Dict[str, Any]:
        return {"response": normalize_model_reply(state.get("reply_text"))}

    async def upstream_error(state: ChatPlanState) -> Dict[str, Any]:
        return {"response": ChatPlanResponse(assistant_message=ERROR_MESSAGE, plan=None)}

    def _route_after_call(state: ChatPlanState) -> Literal["failed", "ok"]:
        return "failed" if state.get("upstream_failed") else "ok"

    builder = StateGraph(ChatPlanState)
    builder.add_node("call_model", call_model)
    builder.add_node("normalize", normalize)
    builder.add_node("upstream_error", upstream_error)
    builder.set_entry_point("call_model")
    builder.add_conditional_edges("call_model", _route_after_call, {"ok": "normalize", "failed": "upstream_error"})
    builder.add_edge("normalize", END)
    builder.add_edge("upstream_error", END)
    return builder.compile()
