import json

from app.ai.chat_plan_graph import build_chat_plan_prompt
from app.ai.prompts import CHAT_PLAN_PROMPT
from app.ai.response_parsing import ERROR_MESSAGE, NO_RESPONSE_MESSAGE
from app.api.models.schemas import ChatTurn
from app.domain.services.chat_plan_service import ChatPlanService

from conftest import FakeGemini


def test_prompt_carries_template_and_conversation():
    turns = [
        ChatTurn(role="user", content="3 days in Goa, beach focus"),
        ChatTurn(role="assistant", content="Sounds fun!"),
    ]
    prompt = build_chat_plan_prompt(turns)
    assert prompt.startswith(CHAT_PLAN_PROMPT)
    conversation = prompt.split("Conversation:\n", 1)[1]
    assert json.loads(conversation) == [
        {"role": "user", "content": "3 days in Goa, beach focus"},
        {"role": "assistant", "content": "Sounds fun!"},
    ]


async def test_service_sends_json_mode_request():
    llm = FakeGemini(reply='{"assistant_message": "Hi", "plan": null}')
    result = await ChatPlanService(llm=llm).plan([ChatTurn(role="user", content="hello")])
    assert result.assistant_message == "Hi"
    assert len(llm.calls) == 1
    call = llm.calls[0]
    assert call["json_mode"] is True
    assert call["contents"][0]["role"] == "user"
    assert "hello" in call["contents"][0]["parts"][0]["text"]


async def test_service_converts_upstream_failure(provider_down):
    llm = FakeGemini(error=provider_down)
    result = await ChatPlanService(llm=llm).plan([])
    assert result.assistant_message == ERROR_MESSAGE
    assert result.plan is None


async def test_service_survives_unexpected_errors():
    llm = FakeGemini(error=RuntimeError("boom"))
    result = await ChatPlanService(llm=llm).plan([])
    assert result.assistant_message == ERROR_MESSAGE


def test_chat_plan_endpoint_salvages_goa_plan(client, fake_gemini):
    payload = {
        "assistant_message": "Here's your Goa plan",
        "plan": {
            "destination": "Goa",
            "days": 3,
            "itinerary": [
                {"day": 1, "title": "North Goa", "activities": ["Baga beach"], "food_suggestions": "Prawn curry"}
            ],
        },
    }
    fake_gemini.reply = "Okay, here it is!\n" + json.dumps(payload)
    resp = client.post(
        "/api/chat-plan", json={"messages": [{"role": "user", "content": "3 days in Goa, beach focus"}]}
    )
    assert resp.status_code == 200
    assert resp.json() == payload


def test_chat_plan_endpoint_empty_conversation(client, fake_gemini):
    fake_gemini.reply = '"Where would you like to travel?"'
    resp = client.post("/api/chat-plan", json={"messages": []})
    assert resp.status_code == 200
    assert resp.json() == {"assistant_message": "Where would you like to travel?", "plan": None}


def test_chat_plan_endpoint_missing_messages_defaults_to_empty(client, fake_gemini):
    fake_gemini.reply = '{"assistant_message": "Tell me more", "plan": null}'
    resp = client.post("/api/chat-plan", json={})
    assert resp.status_code == 200
    assert resp.json()["assistant_message"] == "Tell me more"


def test_chat_plan_endpoint_no_text(client, fake_gemini):
    fake_gemini.reply = None
    resp = client.post("/api/chat-plan", json={"messages": []})
    assert resp.status_code == 200
    assert resp.json() == {"assistant_message": NO_RESPONSE_MESSAGE, "plan": None}


def test_chat_plan_endpoint_upstream_error_is_200(client, fake_gemini, provider_down):
    fake_gemini.error = provider_down
    resp = client.post("/api/chat-plan", json={"messages": [{"role": "user", "content": "hi"}]})
    assert resp.status_code == 200
    assert resp.json() == {"assistant_message": ERROR_MESSAGE, "plan": None}


def test_chat_plan_endpoint_rejects_unknown_role(client):
    resp = client.post("/api/chat-plan", json={"messages": [{"role": "system", "content": "hi"}]})
    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"


def test_chat_plan_endpoint_null_messages(client, fake_gemini):
    fake_gemini.reply = '{"assistant_message": "Where to?", "plan": null}'
    resp = client.post("/api/chat-plan", json={"messages": None})
    assert resp.status_code == 200
    assert resp.json() == {"assistant_message": "Where to?", "plan": None}
    prompt = fake_gemini.calls[0]["contents"][0]["parts"][0]["text"]
    assert json.loads(prompt.split("Conversation:\n", 1)[1]) == []
