"""
User API endpoints. Every route here requires the admin credentials.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from core.db import require_object_id
from core.pagination import PageQuery, page_query
from core.schemas import Paginated

from .dependencies import get_user_service
from .schemas import UserInput, UserOutput
from .service import UserService

router = APIRouter(prefix="/users", dependencies=[Depends(auth_dependencies.require_basic_auth)])

USER_NOT_FOUND = "User not found."


@router.get("")
async def list_users(
    query: PageQuery = Depends(page_query),
    search_login_term: str | None = Query(default=None, alias="searchLoginTerm"),
    search_email_term: str | None = Query(default=None, alias="searchEmailTerm"),
    service: UserService = Depends(get_user_service),
) -> Paginated[UserOutput]:
    return await service.list_users(
        query,
        search_login_term=search_login_term,
        search_email_term=search_email_term,
    )


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserOutput:
    return await service.get_user(require_object_id(user_id, detail=USER_NOT_FOUND))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserInput,
    service: UserService = Depends(get_user_service),
) -> UserOutput:
    return await service.create_user(payload)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> None:
    await service.delete_user(require_object_id(user_id, detail=USER_NOT_FOUND))
