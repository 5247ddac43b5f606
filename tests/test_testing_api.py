"""
Tests for /testing/all-data and the small service routes.
"""

from conftest import AUTH, EMPTY_PAGE


async def test_delete_all_data(client, post, user):
    await client.post(
        f"/posts/{post['id']}/comments",
        headers=AUTH,
        json={"content": "a comment that is long enough", "userId": user["id"]},
    )

    res = await client.delete("/testing/all-data")
    assert res.status_code == 204

    assert (await client.get("/blogs")).json() == EMPTY_PAGE
    assert (await client.get("/posts")).json() == EMPTY_PAGE
    assert (await client.get("/users", headers=AUTH)).json() == EMPTY_PAGE
    assert (await client.get(f"/posts/{post['id']}/comments")).status_code == 404


async def test_delete_all_data_on_empty_store(client):
    assert (await client.delete("/testing/all-data")).status_code == 204


async def test_health(client):
    res = await client.get("/health")
    assert res.json() == {"status": "ok"}
