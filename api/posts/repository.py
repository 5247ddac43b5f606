"""
Post persistence.
"""

from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorCollection

from core.pagination import PageQuery
from core.repository import DocumentRepository
from core.schemas import Paginated

from . import mapper
from .schemas import PostOutput


class PostRepository(DocumentRepository[PostOutput]):
    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection, mapper.to_output)

    async def list_posts(self, query: PageQuery) -> Paginated[PostOutput]:
        return await self.list_page(query)

    async def list_blog_posts(self, blog_id: str, query: PageQuery) -> Paginated[PostOutput]:
        return await self.list_page(query, {"blogId": blog_id})
