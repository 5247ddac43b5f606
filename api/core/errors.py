"""
Error shapes shared by every feature.

Validation failures are reported as:
    {"errorsMessages": [{"message": "...", "field": "title"}, ...]}

Both request-parsing errors (pydantic) and business-rule errors raised by
services (`FieldValidationError`) end up in that shape with status 400.
"""

from __future__ import annotations

from typing import Any, Iterable

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class FieldValidationError(Exception):
    """
    One or more input fields failed a rule that needs the store to check
    (referenced entity exists, value is unique, ...).
    """

    def __init__(self, errors: list[tuple[str, str]]):
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors))
        self.errors = errors

    @classmethod
    def single(cls, field: str, message: str) -> "FieldValidationError":
        return cls([(field, message)])


def errors_body(errors: Iterable[tuple[str, str]]) -> dict[str, Any]:
    # Only the first message per field is reported.
    seen: set[str] = set()
    messages: list[dict[str, str]] = []
    for field, message in errors:
        if field in seen:
            continue
        seen.add(field)
        messages.append({"message": message, "field": field})
    return {"errorsMessages": messages}


def _field_from_loc(loc: tuple[Any, ...]) -> str:
    # ("body", "title") -> "title"; ("query", "pageSize") -> "pageSize"; ("body",) -> "body"
    # ("body", 12) is a JSON decode position, reported on "body".
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header") and not isinstance(p, int)]
    if not parts:
        return str(loc[0]) if loc else "unknown"
    return ".".join(parts)


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [(_field_from_loc(tuple(err.get("loc", ()))), str(err.get("msg", ""))) for err in exc.errors()]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors_body(errors))


async def field_validation_handler(_: Request, exc: FieldValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors_body(exc.errors))
