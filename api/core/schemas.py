"""
Pydantic building blocks shared by feature schemas.
"""

from __future__ import annotations

from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """
    Python attributes are snake_case; the wire (and stored documents) use camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def trimmed(*, min_length: int = 1, max_length: int, pattern: str | None = None) -> type[str]:
    """
    A string type that is stripped before its length (and pattern) is checked.
    """
    return Annotated[
        str,
        StringConstraints(
            strip_whitespace=True,
            min_length=min_length,
            max_length=max_length,
            pattern=pattern,
        ),
    ]


class Paginated(CamelModel, Generic[T]):
    items: list[T]
    page: int
    pages_count: int
    page_size: int
    total_count: int
