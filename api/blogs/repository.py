"""
Blog persistence.
"""

from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorCollection

from core.pagination import PageQuery, search_filter
from core.repository import DocumentRepository
from core.schemas import Paginated

from . import mapper
from .schemas import BlogOutput


class BlogRepository(DocumentRepository[BlogOutput]):
    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection, mapper.to_output)

    async def list_blogs(
        self,
        query: PageQuery,
        *,
        search_name_term: str | None = None,
    ) -> Paginated[BlogOutput]:
        return await self.list_page(query, search_filter({"name": search_name_term}))
