import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from core import db
from main import app

# admin:qwerty
AUTH = {"Authorization": "Basic YWRtaW46cXdlcnR5"}

EMPTY_PAGE = {"items": [], "page": 1, "pagesCount": 0, "pageSize": 10, "totalCount": 0}


@pytest.fixture(autouse=True)
def default_credentials(monkeypatch):
    """Make sure the suite runs against the development credentials."""
    monkeypatch.delenv("BASIC_AUTH_LOGIN", raising=False)
    monkeypatch.delenv("BASIC_AUTH_PASSWORD", raising=False)


@pytest_asyncio.fixture
async def database():
    """A fresh in-memory database for each test."""
    mongo = AsyncMongoMockClient()
    yield mongo["blogger_platform_test"]


@pytest_asyncio.fixture
async def client(database):
    """HTTP client bound to the app, with the store swapped for `database`."""
    app.dependency_overrides[db.get_database] = lambda: database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def blog(client):
    res = await client.post(
        "/blogs",
        headers=AUTH,
        json={
            "name": "new name2",
            "description": "new description2",
            "websiteUrl": "https://someurl2.com",
        },
    )
    assert res.status_code == 201
    return res.json()


@pytest_asyncio.fixture
async def post(client, blog):
    res = await client.post(
        "/posts",
        headers=AUTH,
        json={
            "title": "first post",
            "shortDescription": "short",
            "content": "post content",
            "blogId": blog["id"],
        },
    )
    assert res.status_code == 201
    return res.json()


@pytest_asyncio.fixture
async def user(client):
    res = await client.post(
        "/users",
        headers=AUTH,
        json={"login": "reader_1", "password": "secret123", "email": "reader1@example.com"},
    )
    assert res.status_code == 201
    return res.json()
