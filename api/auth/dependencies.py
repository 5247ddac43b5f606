"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

import logging

from fastapi import Header, HTTPException, status

from . import security

logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def _extract_basic_credentials(authorization: str | None) -> tuple[str, str]:
    raw = (authorization or "").strip()
    if not raw:
        raise _unauthorized("Missing Authorization header.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise _unauthorized("Invalid Authorization header format.")

    scheme, encoded = parts[0].strip().lower(), parts[1].strip()
    if scheme != "basic" or not encoded:
        raise _unauthorized("Authorization must be: Basic <credentials>.")

    try:
        return security.decode_basic_credentials(encoded)
    except security.AuthSecurityError as exc:
        raise _unauthorized(str(exc)) from exc


async def require_basic_auth(authorization: str | None = Header(default=None)) -> str:
    """
    Check the shared admin credentials; returns the login on success.
    """
    login, password = _extract_basic_credentials(authorization)
    if not security.credentials_match(login, password):
        logger.warning("basic_auth_rejected login=%s", login)
        raise _unauthorized("Invalid credentials.")
    return login
