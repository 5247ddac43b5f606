"""
User persistence.
"""

from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorCollection

from core.pagination import PageQuery, search_filter
from core.repository import DocumentRepository
from core.schemas import Paginated

from . import mapper
from .schemas import UserOutput


class UserRepository(DocumentRepository[UserOutput]):
    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection, mapper.to_output)

    async def list_users(
        self,
        query: PageQuery,
        *,
        search_login_term: str | None = None,
        search_email_term: str | None = None,
    ) -> Paginated[UserOutput]:
        # Both terms given -> a user matching either one is returned.
        terms = {"login": search_login_term, "email": search_email_term}
        return await self.list_page(query, search_filter(terms))

    async def login_taken(self, login: str) -> bool:
        return await self.collection.find_one({"login": login}, {"_id": 1}) is not None

    async def email_taken(self, email: str) -> bool:
        return await self.collection.find_one({"email": email}, {"_id": 1}) is not None
