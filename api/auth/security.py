"""
Auth security helpers.
"""

from __future__ import annotations

import base64
import binascii
import os
import secrets

import bcrypt


class AuthSecurityError(RuntimeError):
    pass


def basic_auth_login() -> str:
    # Local defaults keep development simple.
    # In production, set BASIC_AUTH_LOGIN / BASIC_AUTH_PASSWORD in environment.
    return os.environ.get("BASIC_AUTH_LOGIN", "admin").strip() or "admin"


def basic_auth_password() -> str:
    return os.environ.get("BASIC_AUTH_PASSWORD", "qwerty").strip() or "qwerty"


def decode_basic_credentials(encoded: str) -> tuple[str, str]:
    """
    Decode the `<base64>` part of `Basic <base64>` into (login, password).
    """
    raw = (encoded or "").strip()
    if not raw:
        raise AuthSecurityError("Credentials are empty.")
    try:
        decoded = base64.b64decode(raw, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise AuthSecurityError("Credentials are not valid base64.") from exc

    login, sep, password = decoded.partition(":")
    if not sep:
        raise AuthSecurityError("Credentials must be login:password.")
    return login, password


def credentials_match(login: str, password: str) -> bool:
    login_ok = secrets.compare_digest(login.encode("utf-8"), basic_auth_login().encode("utf-8"))
    password_ok = secrets.compare_digest(password.encode("utf-8"), basic_auth_password().encode("utf-8"))
    return login_ok and password_ok


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")

