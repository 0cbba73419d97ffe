from fastapi import Depends

from app.core.config import settings
from app.core.security import get_password_hash
from app.domain.models import UserEntity
from app.domain.repositories import (
    DocumentRepository,
    HotelCatalog,
    InMemoryDocumentRepository,
    InMemoryUserRepository,
    SupabaseDocumentRepository,
    UserRepository,
)
from app.domain.services.chat_plan_service import ChatPlanService
from app.domain.services.document_service import DocumentService
from app.domain.services.generation_service import GenerationService
from app.domain.services.hotel_service import HotelService
from app.domain.services.user_service import UserService
from app.external.cohere_api import CohereClient
from app.external.gemini_api import GeminiClient
from app.external.supabase_client import get_supabase_client

_hotel_catalog = HotelCatalog()

_gemini = GeminiClient(settings)
_cohere = CohereClient(settings)
_chat_plan_service = ChatPlanService(llm=_gemini)

_user_repo: UserRepository = InMemoryUserRepository(
    [
        UserEntity(
            id="user1",
            uid="firebase-uid-1",
            display_name="Demo Traveller",
            email="demo@voyagemate.app",
            password_hash=get_password_hash("password123"),
            photo_url="https://i.pravatar.cc/80?img=1",
            access_token="mock-token-123",
        )
    ]
)

_supabase_client = get_supabase_client()
if _supabase_client:
    _document_repo: DocumentRepository = SupabaseDocumentRepository(_supabase_client)
else:
    _document_repo = InMemoryDocumentRepository()


def get_hotel_catalog() -> HotelCatalog:
    return _hotel_catalog


def get_gemini_client() -> GeminiClient:
    return _gemini


def get_cohere_client() -> CohereClient:
    return _cohere


def get_user_repo() -> UserRepository:
    return _user_repo


def get_document_repo() -> DocumentRepository:
    return _document_repo


def get_chat_plan_service() -> ChatPlanService:
    return _chat_plan_service


def get_generation_service(
    gemini: GeminiClient = Depends(get_gemini_client),
    cohere: CohereClient = Depends(get_cohere_client),
) -> GenerationService:
    return GenerationService(gemini=gemini, cohere=cohere)


def get_hotel_service(catalog: HotelCatalog = Depends(get_hotel_catalog)) -> HotelService:
    return HotelService(catalog=catalog, limit=settings.hotel_search_limit)


def get_user_service(repo: UserRepository = Depends(get_user_repo)) -> UserService:
    return UserService(repo=repo)


def get_document_service(repo: DocumentRepository = Depends(get_document_repo)) -> DocumentService:
    return DocumentService(repo=repo)


__all__ = [
    "get_hotel_catalog",
    "get_gemini_client",
    "get_cohere_client",
    "get_user_repo",
    "get_document_repo",
    "get_chat_plan_service",
    "get_generation_service",
    "get_hotel_service",
    "get_user_service",
    "get_document_service",
    "settings",
]
