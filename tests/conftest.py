from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.errors import LLMProviderError
from app.core.security import get_password_hash
from app.dependencies import (
    get_chat_plan_service,
    get_cohere_client,
    get_document_repo,
    get_gemini_client,
    get_hotel_catalog,
    get_user_repo,
)
from app.domain.models import UserEntity
from app.domain.repositories import HotelCatalog, InMemoryDocumentRepository, InMemoryUserRepository
from app.domain.services.chat_plan_service import ChatPlanService
from app.main import app


class FakeGemini:
    """Stands in for GeminiClient: returns canned text or raises."""

    provider = "gemini"

    def __init__(self, reply: Optional[str] = None, error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def generate(self, prompt=None, *, contents=None, json_mode=False):
        self.calls.append({"prompt": prompt, "contents": contents, "json_mode": json_mode})
        if self.error is not None:
            raise self.error
        return self.reply


class FakeCohere:
    provider = "cohere"

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


def make_hotel(**overrides: str) -> Dict[str, str]:
    row = {
        "property_id": "h1",
        "property_name": "Test Hotel",
        "city": "Mumbai",
        "area": "Colaba",
        "state": "Maharashtra",
        "property_address": "1 Test Road",
        "site_review_rating": "4.2",
        "site_review_count": "120",
        "highlight_value": "Free WiFi",
        "image_urls": "https://img/1.jpg,https://img/2.jpg",
        "pageurl": "https://hotels/h1",
        "hotel_overview": "A test hotel.",
        "hotel_star_rating": "4",
        "traveller_rating": "Very Good",
    }
    row.update(overrides)
    return row


@pytest.fixture
def provider_down() -> LLMProviderError:
    return LLMProviderError("gemini", "HTTP 401: API key not valid")


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def fake_cohere() -> FakeCohere:
    return FakeCohere()


@pytest.fixture
def hotel_catalog() -> HotelCatalog:
    return HotelCatalog(
        [
            make_hotel(),
            make_hotel(property_id="h2", property_name="Juhu Inn", city="MUMBAI", area="Juhu"),
            make_hotel(property_id="h3", property_name="Goa Shack", city="Goa", area="Baga", state="Goa"),
        ]
    )


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository(
        [
            UserEntity(
                id="user1",
                uid="firebase-uid-1",
                display_name="Asha Traveller",
                email="asha@example.com",
                password_hash=get_password_hash("secret123"),
            ),
            UserEntity(
                id="user2",
                uid="firebase-uid-2",
                display_name="Ravi Traveller",
                email="ravi@example.com",
                password_hash=get_password_hash("hunter22"),
            ),
        ]
    )


@pytest.fixture
def client(fake_gemini, fake_cohere, hotel_catalog, user_repo):
    app.dependency_overrides[get_gemini_client] = lambda: fake_gemini
    app.dependency_overrides[get_cohere_client] = lambda: fake_cohere
    app.dependency_overrides[get_chat_plan_service] = lambda: ChatPlanService(llm=fake_gemini)
    app.dependency_overrides[get_hotel_catalog] = lambda: hotel_catalog
    app.dependency_overrides[get_user_repo] = lambda: user_repo
    documents = InMemoryDocumentRepository()
    app.dependency_overrides[get_document_repo] = lambda: documents
    # no context manager: the CSV startup load is not needed here
    yield TestClient(app)
    app.dependency_overrides.clear()
