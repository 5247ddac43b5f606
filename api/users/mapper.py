from __future__ import annotations

from typing import Any

from .schemas import UserOutput


def to_output(document: dict[str, Any]) -> UserOutput:
    # passwordHash stays in the store.
    return UserOutput(
        id=str(document["_id"]),
        login=str(document["login"]),
        email=str(document["email"]),
        created_at=str(document["createdAt"]),
    )
