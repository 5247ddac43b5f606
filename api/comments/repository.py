"""
Comment persistence.
"""

from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorCollection

from core.pagination import PageQuery
from core.repository import DocumentRepository
from core.schemas import Paginated

from . import mapper
from .schemas import CommentOutput


class CommentRepository(DocumentRepository[CommentOutput]):
    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection, mapper.to_output)

    async def list_post_comments(self, post_id: str, query: PageQuery) -> Paginated[CommentOutput]:
        return await self.list_page(query, {"postId": post_id})
