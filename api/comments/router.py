"""
Comment API endpoints. Comments are created under `/posts/{postId}/comments`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies
from core.db import require_object_id

from .dependencies import get_comment_service
from .schemas import CommentOutput, CommentUpdate
from .service import CommentService

router = APIRouter(prefix="/comments")

COMMENT_NOT_FOUND = "Comment not found."


@router.get("/{comment_id}")
async def get_comment(
    comment_id: str,
    service: CommentService = Depends(get_comment_service),
) -> CommentOutput:
    return await service.get_comment(require_object_id(comment_id, detail=COMMENT_NOT_FOUND))


@router.put("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_comment(
    comment_id: str,
    payload: CommentUpdate,
    _: str = Depends(auth_dependencies.require_basic_auth),
    service: CommentService = Depends(get_comment_service),
) -> None:
    await service.update_comment(require_object_id(comment_id, detail=COMMENT_NOT_FOUND), payload)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    _: str = Depends(auth_dependencies.require_basic_auth),
    service: CommentService = Depends(get_comment_service),
) -> None:
    await service.delete_comment(require_object_id(comment_id, detail=COMMENT_NOT_FOUND))
