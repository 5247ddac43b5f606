"""
Base class for per-entity repositories.

A repository wraps one injected motor collection and a mapper; every read
returns mapped output models, never raw documents.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Mapping, TypeVar

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from .pagination import PageQuery, paginate
from .schemas import Paginated

T = TypeVar("T")


class DocumentRepository(Generic[T]):
    def __init__(self, collection: AsyncIOMotorCollection, mapper: Callable[[dict[str, Any]], T]):
        self.collection = collection
        self.mapper = mapper

    async def find_document(self, object_id: ObjectId) -> dict[str, Any] | None:
        return await self.collection.find_one({"_id": object_id})

    async def get_by_id(self, object_id: ObjectId) -> T | None:
        document = await self.find_document(object_id)
        return self.mapper(document) if document is not None else None

    async def exists(self, object_id: ObjectId) -> bool:
        return await self.collection.find_one({"_id": object_id}, {"_id": 1}) is not None

    async def list_page(self, query: PageQuery, filter: Mapping[str, Any] | None = None) -> Paginated[T]:
        return await paginate(self.collection, query, self.mapper, filter)

    async def create(self, document: dict[str, Any]) -> T:
        """
        Insert `document` and return it re-read from the store.
        """
        result = await self.collection.insert_one(dict(document))
        created = await self.find_document(result.inserted_id)
        if created is None:
            raise RuntimeError(f"Failed to read back inserted document {result.inserted_id}.")
        return self.mapper(created)

    async def update_fields(self, object_id: ObjectId, fields: Mapping[str, Any]) -> bool:
        # Callers never pass _id/createdAt; those are fixed at creation.
        result = await self.collection.update_one({"_id": object_id}, {"$set": dict(fields)})
        return result.matched_count > 0

    async def delete(self, object_id: ObjectId) -> bool:
        result = await self.collection.delete_one({"_id": object_id})
        return result.deleted_count > 0
