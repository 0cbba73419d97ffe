"""
Best-effort decoding of a model reply into a ChatPlanResponse.

Models do not always honor a "JSON only" instruction, so the reply is tried
against an ordered list of parse attempts. Each attempt returns a response or
None; the first response wins. Text that no attempt accepts is handed back to
the caller verbatim as the assistant message.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Optional, Tuple

from app.api.models.schemas import ChatPlanResponse

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = "Sorry, I didn't get a response from the AI."
ERROR_MESSAGE = "Sorry, I encountered an error."

ParseAttempt = Callable[[str], Optional[ChatPlanResponse]]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def loads_json(text: str) -> Any:
    """json.loads without the NaN and Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant)


def _from_object(payload: Dict[str, Any]) -> ChatPlanResponse:
    message = payload.get("assistant_message")
    if message is not None and not isinstance(message, str):
        # keep the value recoverable by the client instead of a Python repr
        message = json.dumps(message, ensure_ascii=False)
    return ChatPlanResponse(assistant_message=message, plan=payload.get("plan"))


def parse_strict(text: str) -> Optional[ChatPlanResponse]:
    """The whole reply is a JSON object or a JSON string."""
    try:
        parsed = loads_json(text)
    except ValueError:
        return None
    if isinstance(parsed, str):
        return ChatPlanResponse(assistant_message=parsed, plan=None)
    if isinstance(parsed, dict):
        return _from_object(parsed)
    # arrays, numbers, booleans and null carry nothing we can use
    return None


def _strip_trailing_fence(text: str) -> str:
    body = text.rstrip()
    if body.endswith("```"):
        body = body[:-3].rstrip()
    return body


def parse_trailing_object(text: str) -> Optional[ChatPlanResponse]:
    """
    Salvage a JSON object that closes the reply, e.g. prose followed by
    `{"assistant_message": ..., "plan": ...}`. Candidates start at each `{`
    from the left, so the widest object running to the end is preferred.
    """
    body = _strip_trailing_fence(text)
    if not body.endswith("}"):
        return None

    start = body.find("{")
    while start != -1:
        try:
            parsed = loads_json(body[start:])
        except ValueError:
            parsed = None
        if isinstance(parsed, dict):
            return _from_object(parsed)
        start = body.find("{", start + 1)
    return None


PARSE_ATTEMPTS: Tuple[ParseAttempt, ...] = (parse_strict, parse_trailing_object)


def normalize_model_reply(text: Optional[str]) -> ChatPlanResponse:
    if not text:
        return ChatPlanResponse(assistant_message=NO_RESPONSE_MESSAGE, plan=None)

    for attempt in PARSE_ATTEMPTS:
        result = attempt(text)
        if result is not None:
            return result

    logger.info("Model reply was not JSON; returning raw text (%d chars)", len(text))
    return ChatPlanResponse(assistant_message=text, plan=None)
