"""
Paginated list queries shared by every repository.

A list request carries page/sort parameters plus optional search terms.
`search_filter` turns the terms into a Mongo filter and `paginate` runs it:

    filter = search_filter({"login": login_term, "email": email_term})
    envelope = await paginate(collection, query, mapper, filter)

Tie order within a sort key is whatever Mongo returns; nothing here adds a
secondary key.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping, TypeVar

from fastapi import Query
from motor.motor_asyncio import AsyncIOMotorCollection

from .errors import FieldValidationError
from .schemas import Paginated

T = TypeVar("T")

SortDirection = Literal["asc", "desc"]

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT_BY = "createdAt"

MAX_PAGE_SIZE = 1000
# Keeps (pageNumber - 1) * pageSize inside a BSON int64.
MAX_PAGE_NUMBER = (2**63 - 1) // MAX_PAGE_SIZE


@dataclass(frozen=True)
class PageQuery:
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: str = DEFAULT_SORT_BY
    sort_direction: SortDirection = "desc"

    @property
    def skip(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def sort_order(self) -> int:
        return 1 if self.sort_direction == "asc" else -1


def stored_sort_key(sort_by: str) -> str:
    """
    Map a public field name to the stored key used for sorting.

    `id` is stored as `_id`; operator-like keys (`$...`) are rejected.
    """
    sort_by = sort_by.strip()
    if not sort_by or sort_by.startswith("$"):
        raise FieldValidationError.single("sortBy", "sortBy must name a field.")
    if sort_by == "id":
        return "_id"
    return sort_by


def page_query(
    page_number: int = Query(DEFAULT_PAGE_NUMBER, alias="pageNumber", ge=1, le=MAX_PAGE_NUMBER),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=MAX_PAGE_SIZE),
    sort_by: str = Query(DEFAULT_SORT_BY, alias="sortBy", min_length=1),
    sort_direction: SortDirection = Query("desc", alias="sortDirection"),
) -> PageQuery:
    """
    FastAPI dependency: query-string params -> PageQuery (ints already coerced).
    """
    return PageQuery(
        page_number=page_number,
        page_size=page_size,
        sort_by=stored_sort_key(sort_by),
        sort_direction=sort_direction,
    )


def contains_filter(field: str, term: str) -> dict[str, Any]:
    # Case-insensitive substring match; the term is literal text, not a pattern.
    return {field: {"$regex": re.escape(term), "$options": "i"}}


def search_filter(terms: Mapping[str, str | None]) -> dict[str, Any]:
    """
    Build a filter from `{field: term}`.

    Several supplied terms are OR-ed, a single term filters on its field alone,
    and no terms (all None/blank) matches everything.
    """
    clauses = [contains_filter(field, term) for field, term in terms.items() if term]
    if not clauses:
        return {}
    if len(clauses) == 1:
        return clauses[0]
    return {"$or": clauses}


def pages_count(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size)


async def paginate(
    collection: AsyncIOMotorCollection,
    query: PageQuery,
    mapper: Callable[[dict[str, Any]], T],
    filter: Mapping[str, Any] | None = None,
) -> Paginated[T]:
    """
    Run one page of `filter` sorted by `query` and wrap it in the envelope.

    totalCount counts the whole filtered set, not the page.
    """
    filter = dict(filter or {})
    cursor = (
        collection.find(filter)
        .sort(query.sort_by, query.sort_order)
        .skip(query.skip)
        .limit(query.page_size)
    )
    documents = await cursor.to_list(length=query.page_size)
    total_count = await collection.count_documents(filter)

    return Paginated(
        items=[mapper(doc) for doc in documents],
        page=query.page_number,
        pages_count=pages_count(total_count, query.page_size),
        page_size=query.page_size,
        total_count=total_count,
    )
