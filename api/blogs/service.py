"""
Blog business logic.
"""

from __future__ import annotations

import logging

from bson import ObjectId
from fastapi import HTTPException, status

from core.db import utc_now_iso
from core.pagination import PageQuery
from core.schemas import Paginated

from .repository import BlogRepository
from .schemas import BlogInput, BlogOutput

logger = logging.getLogger(__name__)


def _blog_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found.")


class BlogService:
    def __init__(self, blogs: BlogRepository):
        self.blogs = blogs

    async def list_blogs(self, query: PageQuery, *, search_name_term: str | None = None) -> Paginated[BlogOutput]:
        return await self.blogs.list_blogs(query, search_name_term=search_name_term)

    async def get_blog(self, blog_id: ObjectId) -> BlogOutput:
        blog = await self.blogs.get_by_id(blog_id)
        if blog is None:
            raise _blog_not_found()
        return blog

    async def create_blog(self, payload: BlogInput) -> BlogOutput:
        blog = await self.blogs.create(
            {
                "name": payload.name,
                "description": payload.description,
                "websiteUrl": payload.website_url,
                "createdAt": utc_now_iso(),
                "isMembership": False,
            }
        )
        logger.info("blog_created id=%s", blog.id)
        return blog

    async def update_blog(self, blog_id: ObjectId, payload: BlogInput) -> None:
        # Posts keep the blogName they were created with.
        updated = await self.blogs.update_fields(
            blog_id,
            {
                "name": payload.name,
                "description": payload.description,
                "websiteUrl": payload.website_url,
            },
        )
        if not updated:
            raise _blog_not_found()
        logger.info("blog_updated id=%s", blog_id)

    async def delete_blog(self, blog_id: ObjectId) -> None:
        if not await self.blogs.delete(blog_id):
            raise _blog_not_found()
        logger.info("blog_deleted id=%s", blog_id)
