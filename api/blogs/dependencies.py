"""
FastAPI providers wiring the blog service to the request's database.
"""

from __future__ import annotations

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from core import db

from .repository import BlogRepository
from .service import BlogService


def get_blog_repository(database: AsyncIOMotorDatabase = Depends(db.get_database)) -> BlogRepository:
    return BlogRepository(database[db.BLOGS])


def get_blog_service(blogs: BlogRepository = Depends(get_blog_repository)) -> BlogService:
    return BlogService(blogs)
