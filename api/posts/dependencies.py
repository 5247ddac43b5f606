"""
FastAPI providers wiring the post service to the request's database.
"""

from __future__ import annotations

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from blogs.dependencies import get_blog_repository
from blogs.repository import BlogRepository
from core import db

from .repository import PostRepository
from .service import PostService


def get_post_repository(database: AsyncIOMotorDatabase = Depends(db.get_database)) -> PostRepository:
    return PostRepository(database[db.POSTS])


def get_post_service(
    posts: PostRepository = Depends(get_post_repository),
    blogs: BlogRepository = Depends(get_blog_repository),
) -> PostService:
    return PostService(posts, blogs)
