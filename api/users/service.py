"""
User business logic.
"""

from __future__ import annotations

import logging

from bson import ObjectId
from fastapi import HTTPException, status

from auth import security
from core.db import utc_now_iso
from core.errors import FieldValidationError
from core.pagination import PageQuery
from core.schemas import Paginated

from .repository import UserRepository
from .schemas import UserInput, UserOutput

logger = logging.getLogger(__name__)


def _user_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    async def list_users(
        self,
        query: PageQuery,
        *,
        search_login_term: str | None = None,
        search_email_term: str | None = None,
    ) -> Paginated[UserOutput]:
        return await self.users.list_users(
            query,
            search_login_term=search_login_term,
            search_email_term=search_email_term,
        )

    async def get_user(self, user_id: ObjectId) -> UserOutput:
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise _user_not_found()
        return user

    async def create_user(self, payload: UserInput) -> UserOutput:
        errors: list[tuple[str, str]] = []
        if await self.users.login_taken(payload.login):
            errors.append(("login", "Login is already taken."))
        if await self.users.email_taken(payload.email):
            errors.append(("email", "Email is already registered."))
        if errors:
            raise FieldValidationError(errors)

        user = await self.users.create(
            {
                "login": payload.login,
                "email": payload.email,
                "passwordHash": security.hash_password(payload.password),
                "createdAt": utc_now_iso(),
            }
        )
        logger.info("user_created id=%s login=%s", user.id, user.login)
        return user

    async def delete_user(self, user_id: ObjectId) -> None:
        if not await self.users.delete(user_id):
            raise _user_not_found()
        logger.info("user_deleted id=%s", user_id)
