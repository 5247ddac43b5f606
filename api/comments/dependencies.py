"""
FastAPI providers wiring the comment service to the request's database.
"""

from __future__ import annotations

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from core import db
from posts.dependencies import get_post_repository
from posts.repository import PostRepository
from users.dependencies import get_user_repository
from users.repository import UserRepository

from .repository import CommentRepository
from .service import CommentService


def get_comment_repository(database: AsyncIOMotorDatabase = Depends(db.get_database)) -> CommentRepository:
    return CommentRepository(database[db.COMMENTS])


def get_comment_service(
    comments: CommentRepository = Depends(get_comment_repository),
    posts: PostRepository = Depends(get_post_repository),
    users: UserRepository = Depends(get_user_repository),
) -> CommentService:
    return CommentService(comments, posts, users)
