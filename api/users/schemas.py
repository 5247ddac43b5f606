"""
User API schemas (request/response models).
"""

from __future__ import annotations

from typing import Annotated

from pydantic import StringConstraints

from core.schemas import CamelModel, trimmed

LOGIN_PATTERN = r"^[a-zA-Z0-9_-]*$"
EMAIL_PATTERN = r"^[\w.-]+@([\w-]+\.)+[\w-]{2,4}$"

Login = trimmed(min_length=3, max_length=10, pattern=LOGIN_PATTERN)
# Passwords are taken verbatim; surrounding spaces are part of the secret.
Password = Annotated[str, StringConstraints(min_length=6, max_length=20)]
Email = trimmed(max_length=320, pattern=EMAIL_PATTERN)


class UserInput(CamelModel):
    login: Login
    password: Password
    email: Email


class UserOutput(CamelModel):
    id: str
    login: str
    email: str
    created_at: str
