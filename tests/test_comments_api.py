"""
End-to-end tests for comments (/posts/{postId}/comments and /comments).
"""

from conftest import AUTH, EMPTY_PAGE

CONTENT = "a comment that is long enough"


async def _create_comment(client, post, user, content=CONTENT):
    return await client.post(
        f"/posts/{post['id']}/comments",
        headers=AUTH,
        json={"content": content, "userId": user["id"]},
    )


async def test_create_and_read(client, post, user):
    res = await _create_comment(client, post, user)
    assert res.status_code == 201
    created = res.json()
    assert created == {
        "id": created["id"],
        "content": CONTENT,
        "commentatorInfo": {"userId": user["id"], "userLogin": user["login"]},
        "createdAt": created["createdAt"],
    }

    assert (await client.get(f"/comments/{created['id']}")).json() == created
    res = await client.get(f"/posts/{post['id']}/comments")
    assert res.json() == {**EMPTY_PAGE, "items": [created], "pagesCount": 1, "totalCount": 1}


async def test_list_is_scoped_to_the_post(client, blog, post, user):
    res = await client.post(
        "/posts",
        headers=AUTH,
        json={"title": "other", "shortDescription": "s", "content": "c", "blogId": blog["id"]},
    )
    other_post = res.json()
    await _create_comment(client, post, user)

    res = await client.get(f"/posts/{other_post['id']}/comments")
    assert res.json() == EMPTY_PAGE


async def test_comments_for_missing_post(client, user):
    missing = "64b7f0c2a1b2c3d4e5f60718"
    assert (await client.get(f"/posts/{missing}/comments")).status_code == 404
    res = await client.post(
        f"/posts/{missing}/comments", headers=AUTH, json={"content": CONTENT, "userId": user["id"]}
    )
    assert res.status_code == 404


async def test_create_with_unknown_user(client, post):
    res = await client.post(
        f"/posts/{post['id']}/comments",
        headers=AUTH,
        json={"content": CONTENT, "userId": "64b7f0c2a1b2c3d4e5f60718"},
    )
    assert res.status_code == 400
    assert res.json()["errorsMessages"] == [
        {"message": "User with this id does not exist.", "field": "userId"}
    ]
    assert (await client.get(f"/posts/{post['id']}/comments")).json() == EMPTY_PAGE


async def test_content_length_is_checked(client, post, user):
    assert (await _create_comment(client, post, user, content="too short")).status_code == 400
    assert (await _create_comment(client, post, user, content="x" * 301)).status_code == 400
    assert (await client.get(f"/posts/{post['id']}/comments")).json()["totalCount"] == 0


async def test_update_and_delete(client, post, user):
    created = (await _create_comment(client, post, user)).json()
    new_content = "an updated comment body, still long"

    res = await client.put(f"/comments/{created['id']}", headers=AUTH, json={"content": new_content})
    assert res.status_code == 204
    assert (await client.get(f"/comments/{created['id']}")).json() == {**created, "content": new_content}

    res = await client.put(f"/comments/{created['id']}", headers=AUTH, json={"content": ""})
    assert res.status_code == 400

    assert (await client.delete(f"/comments/{created['id']}", headers=AUTH)).status_code == 204
    assert (await client.get(f"/comments/{created['id']}")).status_code == 404
    assert (await client.delete(f"/comments/{created['id']}", headers=AUTH)).status_code == 404
    res = await client.put(f"/comments/{created['id']}", headers=AUTH, json={"content": new_content})
    assert res.status_code == 404


async def test_user_login_is_copied_once(client, post, user):
    created = (await _create_comment(client, post, user)).json()
    assert (await client.delete(f"/users/{user['id']}", headers=AUTH)).status_code == 204

    res = await client.get(f"/comments/{created['id']}")
    assert res.json()["commentatorInfo"]["userLogin"] == user["login"]


async def test_comment_routes_require_auth(client, post, user):
    created = (await _create_comment(client, post, user)).json()
    body = {"content": "an updated comment body, still long"}

    assert (await client.post(f"/posts/{post['id']}/comments", json={**body, "userId": user["id"]})).status_code == 401
    assert (await client.put(f"/comments/{created['id']}", json=body)).status_code == 401
    assert (await client.delete(f"/comments/{created['id']}")).status_code == 401
    assert (await client.get(f"/comments/{created['id']}")).json() == created


async def test_malformed_comment_id(client):
    assert (await client.get("/comments/-1")).status_code == 404
