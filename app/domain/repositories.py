from abc import ABC, abstractmethod
import asyncio
import csv
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from .models import HotelRecord, UserDocumentEntity, UserEntity


# ---------- Hotels ----------


def _read_hotels_csv(path: Path) -> List[HotelRecord]:
    with open(path, newline="", encoding="utf-8-sig") as fh:
        reader = csv.DictReader(fh)
        return [
            {key: (value if value is not None else "") for key, value in row.items() if key is not None}
            for row in reader
        ]


class HotelCatalog:
    """
    Immutable in-memory hotel table. Rows are swapped in once by `load_csv`;
    until then every query sees an empty table.
    """

    def __init__(self, rows: Iterable[HotelRecord] = ()):
        self._rows: Tuple[HotelRecord, ...] = tuple(rows)

    def __len__(self) -> int:
        return len(self._rows)

    async def load_csv(self, path: Path) -> int:
        rows = await asyncio.to_thread(_read_hotels_csv, path)
        self._rows = tuple(rows)
        return len(self._rows)

    def search(self, city: str | None, area: str | None, limit: int) -> List[HotelRecord]:
        """Case-insensitive substring match on city and area, ANDed, in table order."""
        city_key = city.casefold() if city else None
        area_key = area.casefold() if area else None
        matches: List[HotelRecord] = []
        for row in self._rows:
            if city_key and city_key not in (row.get("city") or "").casefold():
                continue
            if area_key and area_key not in (row.get("area") or "").casefold():
                continue
            matches.append(row)
            if len(matches) >= limit:
                break
        return matches

    def get(self, hotel_id: str) -> HotelRecord:
        for row in self._rows:
            if row.get("property_id") == hotel_id:
                return row
        raise KeyError("Hotel not found")


# ---------- Users ----------


class UserRepository(ABC):
    @abstractmethod
    async def get(self, user_id: str) -> UserEntity:
        raise NotImplementedError

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[UserEntity]:
        raise NotImplementedError

    @abstractmethod
    async def update(self, user: UserEntity) -> UserEntity:
        raise NotImplementedError


class InMemoryUserRepository(UserRepository):
    """Process-lifetime user list; concurrent updates are not synchronized."""

    def __init__(self, users: Iterable[UserEntity] = ()):
        self._users: List[UserEntity] = list(users)

    async def get(self, user_id: str) -> UserEntity:
        for user in self._users:
            if user.matches(user_id):
                return user
        raise KeyError("User not found")

    async def find_by_email(self, email: str) -> Optional[UserEntity]:
        return next((user for user in self._users if user.email == email), None)

    async def update(self, user: UserEntity) -> UserEntity:
        for idx, existing in enumerate(self._users):
            if existing.id == user.id:
                self._users[idx] = user
                return user
        raise KeyError("User not found")


# ---------- Per-user documents ----------


class DocumentRepository(ABC):
    @abstractmethod
    async def list(self, user_id: str, collection: str) -> List[UserDocumentEntity]:
        raise NotImplementedError

    @abstractmethod
    async def get(self, user_id: str, collection: str, doc_id: str) -> UserDocumentEntity:
        raise NotImplementedError

    @abstractmethod
    async def save(self, document: UserDocumentEntity) -> UserDocumentEntity:
        raise NotImplementedError

    @abstractmethod
    async def update(self, document: UserDocumentEntity) -> UserDocumentEntity:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, user_id: str, collection: str, doc_id: str) -> None:
        raise NotImplementedError


class InMemoryDocumentRepository(DocumentRepository):
    def __init__(self):
        self._store: Dict[Tuple[str, str, str], UserDocumentEntity] = {}

    async def list(self, user_id: str, collection: str) -> List[UserDocumentEntity]:
        docs = [
            doc for (uid, coll, _), doc in self._store.items() if uid == user_id and coll == collection
        ]
        return sorted(docs, key=lambda doc: doc.created_at, reverse=True)

    async def get(self, user_id: str, collection: str, doc_id: str) -> UserDocumentEntity:
        key = (user_id, collection, doc_id)
        if key not in self._store:
            raise KeyError("Document not found")
        return self._store[key]

    async def save(self, document: UserDocumentEntity) -> UserDocumentEntity:
        self._store[(document.user_id, document.collection, document.id)] = document
        return document

    async def update(self, document: UserDocumentEntity) -> UserDocumentEntity:
        document.updated_at = datetime.utcnow()
        self._store[(document.user_id, document.collection, document.id)] = document
        return document

    async def delete(self, user_id: str, collection: str, doc_id: str) -> None:
        if self._store.pop((user_id, collection, doc_id), None) is None:
            raise KeyError("Document not found")


class SupabaseDocumentRepository(DocumentRepository):
    """
    Supabase-backed repository storing each document as one JSONB row in
    `user_documents` (id, user_id, collection, data, created_at, updated_at).
    Raises KeyError on missing rows to align with service usage.
    """

    def __init__(self, client):
        if client is None:
            raise ValueError("Supabase client is required for SupabaseDocumentRepository")
        self.client = client
        self.table_name = "user_documents"

    def _scoped(self, user_id: str, collection: str):
        return self.client.table(self.table_name).select("*").eq("user_id", user_id).eq("collection", collection)

    async def list(self, user_id: str, collection: str) -> List[UserDocumentEntity]:
        response = await asyncio.to_thread(
            lambda: self._scoped(user_id, collection).order("created_at", desc=True).execute()
        )
        rows = getattr(response, "data", None) or []
        return [self._row_to_entity(row) for row in rows]

    async def get(self, user_id: str, collection: str, doc_id: str) -> UserDocumentEntity:
        response = await asyncio.to_thread(lambda: self._scoped(user_id, collection).eq("id", doc_id).execute())
        rows = getattr(response, "data", None) or []
        if not rows:
            raise KeyError("Document not found")
        return self._row_to_entity(rows[0])

    async def save(self, document: UserDocumentEntity) -> UserDocumentEntity:
        payload = self._entity_to_row(document)
        await asyncio.to_thread(lambda: self.client.table(self.table_name).insert(payload).execute())
        return document

    async def update(self, document: UserDocumentEntity) -> UserDocumentEntity:
        document.updated_at = datetime.utcnow()
        payload = self._entity_to_row(document)
        await asyncio.to_thread(
            lambda: self.client.table(self.table_name)
            .update(payload)
            .eq("id", document.id)
            .eq("user_id", document.user_id)
            .eq("collection", document.collection)
            .execute()
        )
        return document

    async def delete(self, user_id: str, collection: str, doc_id: str) -> None:
        response = await asyncio.to_thread(
            lambda: self.client.table(self.table_name)
            .delete()
            .eq("id", doc_id)
            .eq("user_id", user_id)
            .eq("collection", collection)
            .execute()
        )
        if not (getattr(response, "data", None) or []):
            raise KeyError("Document not found")

    @staticmethod
    def _entity_to_row(document: UserDocumentEntity) -> Dict:
        return {
            "id": document.id,
            "user_id": document.user_id,
            "collection": document.collection,
            "data": document.data,
            "created_at": document.created_at.isoformat(),
            "updated_at": document.updated_at.isoformat(),
        }

    @staticmethod
    def _row_to_entity(row: Dict) -> UserDocumentEntity:
        def _parse_dt(value) -> datetime:
            if isinstance(value, datetime):
                return value
            if value.endswith("Z"):
                value = value.replace("Z", "+00:00")
            return datetime.fromisoformat(value)

        now = datetime.utcnow().isoformat()
        return UserDocumentEntity(
            id=row["id"],
            user_id=row["user_id"],
            collection=row["collection"],
            data=row.get("data") or {},
            created_at=_parse_dt(row.get("created_at", now)),
            updated_at=_parse_dt(row.get("updated_at", now)),
        )
