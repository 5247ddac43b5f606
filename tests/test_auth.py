"""
Tests for the Basic-auth guard.
"""

import base64

import pytest

from auth import security
from conftest import AUTH


def _basic(raw: str) -> dict:
    return {"Authorization": "Basic " + base64.b64encode(raw.encode()).decode()}


class TestDecodeBasicCredentials:
    def test_valid(self):
        assert security.decode_basic_credentials("YWRtaW46cXdlcnR5") == ("admin", "qwerty")

    def test_password_may_contain_colons(self):
        encoded = base64.b64encode(b"admin:a:b").decode()
        assert security.decode_basic_credentials(encoded) == ("admin", "a:b")

    @pytest.mark.parametrize("encoded", ["", "not base64!", base64.b64encode(b"no-colon").decode()])
    def test_invalid(self, encoded):
        with pytest.raises(security.AuthSecurityError):
            security.decode_basic_credentials(encoded)


def test_credentials_come_from_environment(monkeypatch):
    monkeypatch.setenv("BASIC_AUTH_LOGIN", "root")
    monkeypatch.setenv("BASIC_AUTH_PASSWORD", "s3cret")
    assert security.credentials_match("root", "s3cret")
    assert not security.credentials_match("admin", "qwerty")


def test_hash_password_rejects_empty():
    with pytest.raises(security.AuthSecurityError):
        security.hash_password("")


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": ""},
        {"Authorization": "Basic"},
        {"Authorization": "Bearer YWRtaW46cXdlcnR5"},
        {"Authorization": "Basic %%%"},
        _basic("admin:wrong"),
        _basic("someone:qwerty"),
    ],
)
async def test_rejected_headers(client, headers):
    res = await client.delete("/blogs/64b7f0c2a1b2c3d4e5f60718", headers=headers)
    assert res.status_code == 401
    assert res.headers["www-authenticate"] == "Basic"


async def test_scheme_is_case_insensitive(client):
    headers = {"Authorization": AUTH["Authorization"].replace("Basic", "basic")}
    res = await client.delete("/blogs/64b7f0c2a1b2c3d4e5f60718", headers=headers)
    assert res.status_code == 404
