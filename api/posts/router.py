"""
Post API endpoints, including the post-scoped comment routes.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies
from comments.dependencies import get_comment_service
from comments.schemas import CommentInput, CommentOutput
from comments.service import CommentService
from core.db import require_object_id
from core.pagination import PageQuery, page_query
from core.schemas import Paginated

from .dependencies import get_post_service
from .schemas import PostInput, PostOutput
from .service import PostService

router = APIRouter(prefix="/posts")

POST_NOT_FOUND = "Post not found."


@router.get("")
async def list_posts(
    query: PageQuery = Depends(page_query),
    service: PostService = Depends(get_post_service),
) -> Paginated[PostOutput]:
    return await service.list_posts(query)


@router.get("/{post_id}")
async def get_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> PostOutput:
    return await service.get_post(require_object_id(post_id, detail=POST_NOT_FOUND))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: PostInput,
    _: str = Depends(auth_dependencies.require_basic_auth),
    service: PostService = Depends(get_post_service),
) -> PostOutput:
    return await service.create_post(payload)


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_post(
    post_id: str,
    payload: PostInput,
    _: str = Depends(auth_dependencies.require_basic_auth),
    service: PostService = Depends(get_post_service),
) -> None:
    await service.update_post(require_object_id(post_id, detail=POST_NOT_FOUND), payload)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    _: str = Depends(auth_dependencies.require_basic_auth),
    service: PostService = Depends(get_post_service),
) -> None:
    await service.delete_post(require_object_id(post_id, detail=POST_NOT_FOUND))


@router.get("/{post_id}/comments")
async def list_post_comments(
    post_id: str,
    query: PageQuery = Depends(page_query),
    service: CommentService = Depends(get_comment_service),
) -> Paginated[CommentOutput]:
    return await service.list_post_comments(require_object_id(post_id, detail=POST_NOT_FOUND), query)


@router.post("/{post_id}/comments", status_code=status.HTTP_201_CREATED)
async def create_post_comment(
    post_id: str,
    payload: CommentInput,
    _: str = Depends(auth_dependencies.require_basic_auth),
    service: CommentService = Depends(get_comment_service),
) -> CommentOutput:
    return await service.create_comment(require_object_id(post_id, detail=POST_NOT_FOUND), payload)
