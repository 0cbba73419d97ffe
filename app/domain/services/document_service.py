from __future__ import annotations

from typing import Any, Dict, List
from uuid import uuid4

from app.domain.models import UserDocumentEntity
from app.domain.repositories import DocumentRepository

COLLECTIONS = ("trips", "savedHotels", "packingLists", "todos", "budgetPlanner")


class DocumentService:
    """Per-user document namespace. Payloads are stored as given, never validated."""

    def __init__(self, repo: DocumentRepository):
        self.repo = repo

    async def list_documents(self, user_id: str, collection: str) -> List[UserDocumentEntity]:
        return await self.repo.list(user_id, collection)

    async def get_document(self, user_id: str, collection: str, doc_id: str) -> UserDocumentEntity:
        return await self.repo.get(user_id, collection, doc_id)

    async def create_document(self, user_id: str, collection: str, data: Dict[str, Any]) -> UserDocumentEntity:
        entity = UserDocumentEntity(
            id=f"doc_{uuid4().hex[:12]}",
            user_id=user_id,
            collection=collection,
            data=dict(data),
        )
        return await self.repo.save(entity)

    async def merge_document(
        self, user_id: str, collection: str, doc_id: str, data: Dict[str, Any]
    ) -> UserDocumentEntity:
        """Firestore-style `set(..., merge=True)`: creates the document when missing."""
        try:
            entity = await self.repo.get(user_id, collection, doc_id)
        except KeyError:
            entity = UserDocumentEntity(id=doc_id, user_id=user_id, collection=collection, data=dict(data))
            return await self.repo.save(entity)
        entity.data = {**entity.data, **data}
        return await self.repo.update(entity)

    async def delete_document(self, user_id: str, collection: str, doc_id: str) -> None:
        await self.repo.delete(user_id, collection, doc_id)
