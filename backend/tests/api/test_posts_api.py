"""Post Routes — list, create, update, delete over HTTP.

Invariants:
    - Posts returned as JSON with `id` and embedded owner
    - Creating without a token → 401; without title/url → 400, nothing stored
    - Missing likes stored as 0
    - Delete by owner → 204; by anyone else → 403
"""

from uuid import uuid4

from bloglist.config import get_settings
from bloglist.core.domain_types import LIKES_MAX
from bloglist.infrastructure.auth import create_access_token
from tests.api.post_data import INITIAL_POSTS

NEW_POST = {
    "title": "Type wars",
    "author": "Robert C. Martin",
    "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
    "likes": 2,
}


# -- GET -----------------------------------------------------------------------

async def test_posts_are_returned_as_json(client, seed_posts):
    res = await client.get("/api/posts")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    assert len(res.json()) == len(INITIAL_POSTS)


async def test_every_post_has_id_and_owner(client, seed_posts, seed_user):
    body = (await client.get("/api/posts")).json()
    for post in body:
        assert post["id"]
        assert "_id" not in post
        assert post["user"]["username"] == seed_user.username
        assert "password_hash" not in post["user"]


async def test_posts_listed_in_creation_order(client, seed_posts):
    body = (await client.get("/api/posts")).json()
    assert [p["title"] for p in body] == [p["title"] for p in INITIAL_POSTS]


# -- POST ----------------------------------------------------------------------

async def test_valid_post_can_be_added(client, seed_posts, auth_headers, posts_in_db):
    res = await client.post("/api/posts", json=NEW_POST, headers=auth_headers)
    assert res.status_code == 201
    assert res.json()["title"] == NEW_POST["title"]

    posts = await posts_in_db()
    assert len(posts) == len(INITIAL_POSTS) + 1
    assert NEW_POST["url"] in [p.url for p in posts]


async def test_new_post_is_linked_to_its_creator(client, auth_headers, seed_user):
    res = await client.post("/api/posts", json=NEW_POST, headers=auth_headers)
    assert res.json()["user"]["id"] == str(seed_user.id)

    users = (await client.get("/api/users")).json()
    root = next(u for u in users if u["username"] == "root")
    assert [p["title"] for p in root["posts"]] == [NEW_POST["title"]]


async def test_missing_likes_default_to_zero(client, seed_posts, auth_headers, posts_in_db):
    new_post = {k: v for k, v in NEW_POST.items() if k != "likes"}
    res = await client.post("/api/posts", json=new_post, headers=auth_headers)
    assert res.status_code == 201
    assert res.json()["likes"] == 0

    posts = await posts_in_db()
    assert posts[-1].likes == 0


async def test_post_without_title_and_url_is_rejected(
    client, seed_posts, auth_headers, posts_in_db,
):
    res = await client.post(
        "/api/posts", json={"author": "Robert C. Martin"}, headers=auth_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert len(await posts_in_db()) == len(INITIAL_POSTS)


async def test_post_with_negative_likes_is_rejected(client, auth_headers):
    res = await client.post(
        "/api/posts", json={**NEW_POST, "likes": -1}, headers=auth_headers,
    )
    assert res.status_code == 400


async def test_post_without_token_is_unauthorized(client, seed_posts, posts_in_db):
    res = await client.post("/api/posts", json=NEW_POST)
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "TOKEN_MISSING"
    assert res.headers["www-authenticate"] == "Bearer"
    assert len(await posts_in_db()) == len(INITIAL_POSTS)


async def test_post_with_bad_token_is_unauthorized(client):
    res = await client.post(
        "/api/posts", json=NEW_POST,
        headers={"Authorization": "bearer not-a-real-token"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "TOKEN_INVALID"


async def test_post_with_non_bearer_scheme_is_unauthorized(client):
    res = await client.post(
        "/api/posts", json=NEW_POST, headers={"Authorization": "Basic abc"},
    )
    assert res.status_code == 401


def _token_for(user_id, username: str, ttl_minutes: int = 60) -> dict:
    settings = get_settings()
    token = create_access_token(
        user_id, username, settings.secret_key, settings.token_algorithm,
        ttl_minutes,
    )
    return {"Authorization": f"Bearer {token}"}


async def test_post_with_token_for_missing_user_is_unauthorized(
    client, seed_posts, posts_in_db,
):
    res = await client.post(
        "/api/posts", json=NEW_POST, headers=_token_for(uuid4(), "removed"),
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "TOKEN_INVALID"
    assert len(await posts_in_db()) == len(INITIAL_POSTS)


async def test_post_with_expired_token_is_unauthorized(
    client, seed_user, posts_in_db,
):
    headers = _token_for(seed_user.id, seed_user.username, ttl_minutes=-1)
    res = await client.post("/api/posts", json=NEW_POST, headers=headers)
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "TOKEN_INVALID"
    assert await posts_in_db() == []


async def test_post_with_likes_beyond_column_limit_is_rejected(
    client, seed_posts, auth_headers, posts_in_db,
):
    res = await client.post(
        "/api/posts", json={**NEW_POST, "likes": 2**70}, headers=auth_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert len(await posts_in_db()) == len(INITIAL_POSTS)


async def test_update_with_likes_beyond_column_limit_is_rejected(
    client, seed_posts, auth_headers, posts_in_db,
):
    res = await client.put(
        f"/api/posts/{seed_posts[0].id}",
        json={"likes": LIKES_MAX + 1}, headers=auth_headers,
    )
    assert res.status_code == 400
    stored = await posts_in_db()
    assert stored[0].likes == INITIAL_POSTS[0]["likes"]


# -- PUT -----------------------------------------------------------------------

async def test_update_existing_post(client, seed_posts, auth_headers, posts_in_db):
    target = seed_posts[0]
    res = await client.put(
        f"/api/posts/{target.id}",
        json={
            "title": target.title, "author": target.author,
            "url": target.url, "likes": 22,
        },
        headers=auth_headers,
    )
    assert res.status_code == 200
    assert res.json()["likes"] == 22

    posts = await posts_in_db()
    assert len(posts) == len(INITIAL_POSTS)
    assert posts[0].likes == 22


async def test_any_authenticated_user_can_like(
    client, seed_posts, other_auth_headers,
):
    target = seed_posts[1]
    res = await client.put(
        f"/api/posts/{target.id}", json={"likes": target.likes + 1},
        headers=other_auth_headers,
    )
    assert res.status_code == 200
    assert res.json()["likes"] == target.likes + 1
    assert res.json()["title"] == target.title


async def test_update_without_token_is_unauthorized(client, seed_posts):
    res = await client.put(f"/api/posts/{seed_posts[0].id}", json={"likes": 1})
    assert res.status_code == 401


async def test_update_unknown_post_returns_404(client, auth_headers):
    res = await client.put(
        f"/api/posts/{uuid4()}", json={"likes": 1}, headers=auth_headers,
    )
    assert res.status_code == 404


async def test_update_with_empty_body_is_rejected(client, seed_posts, auth_headers):
    res = await client.put(
        f"/api/posts/{seed_posts[0].id}", json={}, headers=auth_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["field"] == "body"


async def test_malformed_id_is_rejected(client, auth_headers):
    res = await client.put(
        "/api/posts/not-a-uuid", json={"likes": 1}, headers=auth_headers,
    )
    assert res.status_code == 400


# -- DELETE --------------------------------------------------------------------

async def test_delete_by_owner_returns_204(client, seed_posts, auth_headers, posts_in_db):
    target = seed_posts[0]
    res = await client.delete(f"/api/posts/{target.id}", headers=auth_headers)
    assert res.status_code == 204
    assert res.content == b""

    posts = await posts_in_db()
    assert len(posts) == len(INITIAL_POSTS) - 1
    assert target.url not in [p.url for p in posts]


async def test_delete_by_other_user_is_forbidden(
    client, seed_posts, other_auth_headers, posts_in_db,
):
    res = await client.delete(
        f"/api/posts/{seed_posts[0].id}", headers=other_auth_headers,
    )
    assert res.status_code == 403
    assert len(await posts_in_db()) == len(INITIAL_POSTS)


async def test_delete_without_token_is_unauthorized(client, seed_posts):
    res = await client.delete(f"/api/posts/{seed_posts[0].id}")
    assert res.status_code == 401


async def test_delete_unknown_post_returns_404(client, auth_headers):
    res = await client.delete(f"/api/posts/{uuid4()}", headers=auth_headers)
    assert res.status_code == 404
