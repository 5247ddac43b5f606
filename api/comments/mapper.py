from __future__ import annotations

from typing import Any

from .schemas import CommentatorInfo, CommentOutput


def to_output(document: dict[str, Any]) -> CommentOutput:
    # postId is only used for lookups and is not part of the public shape.
    commentator = document["commentatorInfo"]
    return CommentOutput(
        id=str(document["_id"]),
        content=str(document["content"]),
        commentator_info=CommentatorInfo(
            user_id=str(commentator["userId"]),
            user_login=str(commentator["userLogin"]),
        ),
        created_at=str(document["createdAt"]),
    )
