from __future__ import annotations

from typing import Any

from .schemas import BlogOutput


def to_output(document: dict[str, Any]) -> BlogOutput:
    return BlogOutput(
        id=str(document["_id"]),
        name=str(document["name"]),
        description=str(document["description"]),
        website_url=str(document["websiteUrl"]),
        created_at=str(document["createdAt"]),
        is_membership=bool(document.get("isMembership", False)),
    )
