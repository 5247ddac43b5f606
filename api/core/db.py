"""
Async document-store access using motor (MongoDB).

This module owns the client. FastAPI creates it on startup and closes it on
shutdown (see `api/main.py`).

Repositories never reach for a global collection: routers resolve the
database through `get_database` and hand collections to repository
constructors. Tests override `get_database` with an in-memory database.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

from bson import ObjectId
from fastapi import HTTPException, status
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)

BLOGS = "blogs"
POSTS = "posts"
COMMENTS = "comments"
USERS = "users"

COLLECTIONS = (BLOGS, POSTS, COMMENTS, USERS)

_client: AsyncIOMotorClient | None = None


def mongo_url() -> str:
    return os.environ.get("MONGO_URL", "").strip() or "mongodb://localhost:27017"


def database_name() -> str:
    return os.environ.get("MONGO_DB_NAME", "").strip() or "blogger_platform"


async def init_client() -> None:
    global _client
    if _client is not None:
        return None
    _client = AsyncIOMotorClient(mongo_url())
    logger.info("mongo_client_started db=%s", database_name())


async def close_client() -> None:
    global _client
    if _client is None:
        return None
    _client.close()
    _client = None
    logger.info("mongo_client_closed")


def database() -> AsyncIOMotorDatabase:
    if _client is None:
        raise RuntimeError("Mongo client is not initialized. Call init_client() on startup.")
    return _client[database_name()]


async def get_database() -> AsyncIOMotorDatabase:
    """
    FastAPI dependency returning the application database.
    """
    return database()


def parse_object_id(raw: str | None) -> ObjectId | None:
    """
    Return an ObjectId for `raw`, or None when it is not a valid id.

    Routers treat None exactly like a missing document (404).
    """
    raw = (raw or "").strip()
    if not ObjectId.is_valid(raw):
        return None
    return ObjectId(raw)


def utc_now_iso() -> str:
    # Millisecond precision with a trailing "Z", matching JavaScript's toISOString().
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def require_object_id(raw: str | None, *, detail: str = "Not found.") -> ObjectId:
    """
    Like `parse_object_id`, but a malformed id is answered with 404 right away.
    """
    object_id = parse_object_id(raw)
    if object_id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return object_id
