"""
Post business logic.

Posts carry a denormalized `blogName`. It is copied from the blog when the
post is created (or moved to another blog by an update); renaming a blog does
not touch its existing posts.
"""

from __future__ import annotations

import logging

from bson import ObjectId
from fastapi import HTTPException, status

from blogs.repository import BlogRepository
from blogs.schemas import BlogOutput
from core.db import parse_object_id, utc_now_iso
from core.errors import FieldValidationError
from core.pagination import PageQuery
from core.schemas import Paginated

from .repository import PostRepository
from .schemas import BlogPostInput, PostInput, PostOutput

logger = logging.getLogger(__name__)


def _post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found.")


def _blog_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found.")


class PostService:
    def __init__(self, posts: PostRepository, blogs: BlogRepository):
        self.posts = posts
        self.blogs = blogs

    async def _referenced_blog(self, raw_blog_id: str) -> BlogOutput:
        # A missing blog here is an input error on the blogId field, not a 404.
        blog_id = parse_object_id(raw_blog_id)
        blog = await self.blogs.get_by_id(blog_id) if blog_id is not None else None
        if blog is None:
            raise FieldValidationError.single("blogId", "Blog with this id does not exist.")
        return blog

    async def list_posts(self, query: PageQuery) -> Paginated[PostOutput]:
        return await self.posts.list_posts(query)

    async def list_blog_posts(self, blog_id: ObjectId, query: PageQuery) -> Paginated[PostOutput]:
        if not await self.blogs.exists(blog_id):
            raise _blog_not_found()
        return await self.posts.list_blog_posts(str(blog_id), query)

    async def get_post(self, post_id: ObjectId) -> PostOutput:
        post = await self.posts.get_by_id(post_id)
        if post is None:
            raise _post_not_found()
        return post

    async def _insert(self, payload: BlogPostInput, blog: BlogOutput) -> PostOutput:
        post = await self.posts.create(
            {
                "title": payload.title,
                "shortDescription": payload.short_description,
                "content": payload.content,
                "blogId": blog.id,
                "blogName": blog.name,
                "createdAt": utc_now_iso(),
            }
        )
        logger.info("post_created id=%s blog_id=%s", post.id, blog.id)
        return post

    async def create_post(self, payload: PostInput) -> PostOutput:
        blog = await self._referenced_blog(payload.blog_id)
        return await self._insert(payload, blog)

    async def create_blog_post(self, blog_id: ObjectId, payload: BlogPostInput) -> PostOutput:
        blog = await self.blogs.get_by_id(blog_id)
        if blog is None:
            raise _blog_not_found()
        return await self._insert(payload, blog)

    async def update_post(self, post_id: ObjectId, payload: PostInput) -> None:
        blog = await self._referenced_blog(payload.blog_id)
        updated = await self.posts.update_fields(
            post_id,
            {
                "title": payload.title,
                "shortDescription": payload.short_description,
                "content": payload.content,
                "blogId": blog.id,
                "blogName": blog.name,
            },
        )
        if not updated:
            raise _post_not_found()
        logger.info("post_updated id=%s blog_id=%s", post_id, blog.id)

    async def delete_post(self, post_id: ObjectId) -> None:
        if not await self.posts.delete(post_id):
            raise _post_not_found()
        logger.info("post_deleted id=%s", post_id)
