from types import SimpleNamespace

import pytest

from app.domain.models import UserDocumentEntity
from app.domain.repositories import SupabaseDocumentRepository


class FakeQuery:
    """Records the postgrest-style call chain and filters an in-memory row list."""

    def __init__(self, rows, action="select", payload=None):
        self.rows = rows
        self.action = action
        self.payload = payload
        self.filters = {}

    def select(self, _columns):
        return self

    def insert(self, payload):
        return FakeQuery(self.rows, "insert", payload)

    def update(self, payload):
        return FakeQuery(self.rows, "update", payload)

    def delete(self):
        return FakeQuery(self.rows, "delete")

    def eq(self, column, value):
        self.filters[column] = value
        return self

    def order(self, _column, desc=False):
        return self

    def _matches(self, row):
        return all(row.get(key) == value for key, value in self.filters.items())

    def execute(self):
        if self.action == "insert":
            self.rows.append(dict(self.payload))
            return SimpleNamespace(data=[self.payload])
        matched = [row for row in self.rows if self._matches(row)]
        if self.action == "update":
            for row in matched:
                row.update(self.payload)
        elif self.action == "delete":
            for row in matched:
                self.rows.remove(row)
        return SimpleNamespace(data=matched)


class FakeSupabase:
    def __init__(self):
        self.rows = []

    def table(self, name):
        assert name == "user_documents"
        return FakeQuery(self.rows)


async def test_round_trip_through_rows():
    client = FakeSupabase()
    repo = SupabaseDocumentRepository(client)
    doc = UserDocumentEntity(id="doc_1", user_id="uid-1", collection="trips", data={"destination": "Goa"})

    await repo.save(doc)
    assert client.rows[0]["data"] == {"destination": "Goa"}

    fetched = await repo.get("uid-1", "trips", "doc_1")
    assert fetched.data == {"destination": "Goa"}
    assert fetched.created_at == doc.created_at

    fetched.data = {"destination": "Goa", "days": 4}
    await repo.update(fetched)
    assert [d.data for d in await repo.list("uid-1", "trips")] == [{"destination": "Goa", "days": 4}]
    assert await repo.list("uid-2", "trips") == []

    await repo.delete("uid-1", "trips", "doc_1")
    with pytest.raises(KeyError):
        await repo.get("uid-1", "trips", "doc_1")
    with pytest.raises(KeyError):
        await repo.delete("uid-1", "trips", "doc_1")


def test_requires_client():
    with pytest.raises(ValueError):
        SupabaseDocumentRepository(None)
