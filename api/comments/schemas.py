"""
Comment API schemas (request/response models).
"""

from __future__ import annotations

from core.schemas import CamelModel, trimmed

CommentContent = trimmed(min_length=20, max_length=300)
UserIdField = trimmed(max_length=100)


class CommentUpdate(CamelModel):
    content: CommentContent


class CommentInput(CommentUpdate):
    user_id: UserIdField


class CommentatorInfo(CamelModel):
    user_id: str
    user_login: str


class CommentOutput(CamelModel):
    id: str
    content: str
    commentator_info: CommentatorInfo
    created_at: str
