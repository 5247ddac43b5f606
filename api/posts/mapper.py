from __future__ import annotations

from typing import Any

from .schemas import PostOutput


def to_output(document: dict[str, Any]) -> PostOutput:
    return PostOutput(
        id=str(document["_id"]),
        title=str(document["title"]),
        short_description=str(document["shortDescription"]),
        content=str(document["content"]),
        blog_id=str(document["blogId"]),
        blog_name=str(document["blogName"]),
        created_at=str(document["createdAt"]),
    )
