"""
Comment business logic.

A comment stores the commenting user's login next to the user id
(`commentatorInfo`). The login is copied once, when the comment is created.
"""

from __future__ import annotations

import logging

from bson import ObjectId
from fastapi import HTTPException, status

from core.db import parse_object_id, utc_now_iso
from core.errors import FieldValidationError
from core.pagination import PageQuery
from core.schemas import Paginated
from posts.repository import PostRepository
from users.repository import UserRepository

from .repository import CommentRepository
from .schemas import CommentInput, CommentOutput, CommentUpdate

logger = logging.getLogger(__name__)


def _comment_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found.")


def _post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found.")


class CommentService:
    def __init__(self, comments: CommentRepository, posts: PostRepository, users: UserRepository):
        self.comments = comments
        self.posts = posts
        self.users = users

    async def list_post_comments(self, post_id: ObjectId, query: PageQuery) -> Paginated[CommentOutput]:
        if not await self.posts.exists(post_id):
            raise _post_not_found()
        return await self.comments.list_post_comments(str(post_id), query)

    async def get_comment(self, comment_id: ObjectId) -> CommentOutput:
        comment = await self.comments.get_by_id(comment_id)
        if comment is None:
            raise _comment_not_found()
        return comment

    async def create_comment(self, post_id: ObjectId, payload: CommentInput) -> CommentOutput:
        if not await self.posts.exists(post_id):
            raise _post_not_found()

        user_id = parse_object_id(payload.user_id)
        user = await self.users.get_by_id(user_id) if user_id is not None else None
        if user is None:
            raise FieldValidationError.single("userId", "User with this id does not exist.")

        comment = await self.comments.create(
            {
                "content": payload.content,
                "commentatorInfo": {"userId": user.id, "userLogin": user.login},
                "postId": str(post_id),
                "createdAt": utc_now_iso(),
            }
        )
        logger.info("comment_created id=%s post_id=%s user_id=%s", comment.id, post_id, user.id)
        return comment

    async def update_comment(self, comment_id: ObjectId, payload: CommentUpdate) -> None:
        if not await self.comments.update_fields(comment_id, {"content": payload.content}):
            raise _comment_not_found()
        logger.info("comment_updated id=%s", comment_id)

    async def delete_comment(self, comment_id: ObjectId) -> None:
        if not await self.comments.delete(comment_id):
            raise _comment_not_found()
        logger.info("comment_deleted id=%s", comment_id)
