"""MongoDB-backed user storage."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from bson import ObjectId

from users_api.database import MongoConnection
from users_api.models import User

COLLECTION_NAME = "users"


def _to_user(document: dict[str, Any]) -> User:
    return User(id=str(document["_id"]), name=document["name"], email=document["email"])


class MongoUserRepository:
    """Store users as documents in the ``users`` collection.

    Documents hold ``name``, ``email`` and ``created_at`` next to the
    generated ``_id``. Identifiers that are not valid ObjectIds are reported as
    missing without querying the server.
    """

    name = "mongo"

    def __init__(self, connection: MongoConnection):
        self.connection = connection

    @property
    def _collection(self):
        return self.connection.collection(COLLECTION_NAME)

    @staticmethod
    def parse_id(raw_id: str) -> ObjectId | None:
        if not ObjectId.is_valid(raw_id):
            return None
        return ObjectId(raw_id)

    async def create(self, name: str, email: str) -> User:
        document = {"name": name, "email": email, "created_at": datetime.now(timezone.utc)}
        result = await self._collection.insert_one(document)
        document["_id"] = result.inserted_id
        return _to_user(document)

    async def list(self) -> list[User]:
        cursor = self._collection.find({}, sort=[("created_at", 1), ("_id", 1)])
        documents = await cursor.to_list(length=None)
        return [_to_user(document) for document in documents]

    async def get_by_id(self, raw_id: str) -> User | None:
        object_id = self.parse_id(raw_id)
        if object_id is None:
            return None
        document = await self._collection.find_one({"_id": object_id})
        return _to_user(document) if document else None

    async def delete_by_id(self, raw_id: str) -> bool:
        object_id = self.parse_id(raw_id)
        if object_id is None:
            return False
        result = await self._collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    async def reset(self) -> None:
        await self._collection.delete_many({})

    async def close(self) -> None:
        self.connection.disconnect()
