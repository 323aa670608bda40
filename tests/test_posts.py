"""게시글 CRUD API 테스트.

Post CRUD API tests — authenticated writes, category reference check,
pagination over many posts, title search.
"""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.models.post import Post

URL = "/api/v1/posts"


def post_payload(category_id: int, **overrides) -> dict:
    payload = {
        "title": "A title",
        "body": "Some body",
        "file": "",
        "category_id": category_id,
        "user_name": "Jane Doe",
    }
    payload.update(overrides)
    return payload


class TestPostCreate:
    """게시글 생성 테스트."""

    async def test_create_post(self, client: AsyncClient, category, user, auth_headers):
        """인증된 사용자가 작성자로 기록됨."""
        res = await client.post(URL, json=post_payload(category.id), headers=auth_headers)
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["user_id"] == user.id
        assert data["category_id"] == category.id
        assert data["img"] == ""
        assert res.json()["message"] == "Post created successfully"

    async def test_create_post_keeps_image_reference(self, client: AsyncClient, category, auth_headers):
        res = await client.post(
            URL, json=post_payload(category.id, file="uploads/cat.png"), headers=auth_headers
        )
        assert res.json()["data"]["img"] == "uploads/cat.png"

    async def test_create_post_no_auth(self, client: AsyncClient, category):
        """인증 없이 작성 시 401."""
        res = await client.post(URL, json=post_payload(category.id))
        assert res.status_code == 401
        assert res.json()["status"] == "error"

    async def test_create_post_bad_token(self, client: AsyncClient, category):
        res = await client.post(
            URL, json=post_payload(category.id), headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert res.status_code == 401

    async def test_create_post_unknown_category(self, client: AsyncClient, auth_headers):
        """존재하지 않는 카테고리는 404."""
        res = await client.post(URL, json=post_payload(999), headers=auth_headers)
        assert res.status_code == 404
        assert res.json()["message"] == "Category with id 999 not found"

    async def test_create_post_category_id_out_of_range(self, client: AsyncClient, auth_headers):
        """카테고리 ID 0은 조회 없이 400."""
        res = await client.post(URL, json=post_payload(0), headers=auth_headers)
        assert res.status_code == 400
        assert res.json()["message"] == "category_id must be between 1 and 2147483647"

    async def test_create_post_missing_title(self, client: AsyncClient, category, auth_headers):
        res = await client.post(URL, json=post_payload(category.id, title=""), headers=auth_headers)
        assert res.status_code == 400
        assert res.json()["message"] == "title is required"


class TestPostList:
    """게시글 목록/페이지네이션 테스트."""

    async def test_twenty_five_posts(self, client: AsyncClient, db: AsyncSession, category, user):
        """25개 게시글, 페이지 크기 10 → 10개, 3페이지."""
        for i in range(25):
            db.add(Post(
                title=f"Post {i}",
                body="b",
                img="",
                category_id=category.id,
                user_id=user.id,
                user_name="Jane Doe",
            ))
        await db.flush()

        res = await client.get(URL, params={"page": 1, "page_size": 10})
        assert res.status_code == 200
        body = res.json()
        assert len(body["data"]) == 10
        assert body["pagination"] == {
            "page": 1,
            "page_size": 10,
            "total_count": 25,
            "total_pages": 3,
        }

        last = (await client.get(URL, params={"page": 3, "page_size": 10})).json()
        assert len(last["data"]) == 5

        beyond = (await client.get(URL, params={"page": 9, "page_size": 10})).json()
        assert beyond["pagination"]["page"] == 3
        assert len(beyond["data"]) == 5

    async def test_oversized_page_size_is_clamped(self, client: AsyncClient, post):
        res = await client.get(URL, params={"page_size": 1000})
        assert res.json()["pagination"]["page_size"] == 100

    async def test_search_by_title(self, client: AsyncClient, post, category, auth_headers):
        """제목 대소문자 무시 검색."""
        await client.post(URL, json=post_payload(category.id, title="Other"), headers=auth_headers)
        res = await client.get(URL, params={"search": "hel"})
        titles = [p["title"] for p in res.json()["data"]]
        assert titles == ["Hello"]


class TestPostReadUpdateDelete:
    """게시글 조회/수정/삭제 테스트."""

    async def test_find_post(self, client: AsyncClient, post):
        res = await client.get(f"{URL}/{post.id}")
        assert res.status_code == 200
        assert res.json()["data"]["title"] == "Hello"
        assert "pagination" not in res.json()

    async def test_find_missing_post(self, client: AsyncClient):
        res = await client.get(f"{URL}/3")
        assert res.status_code == 404
        assert res.json() == {"status": "error", "message": "Post with id 3 not found"}

    async def test_update_post(self, client: AsyncClient, post, category, auth_headers):
        """전체 교체 — 작성자 이름 스냅샷도 다시 기록."""
        res = await client.put(
            f"{URL}/{post.id}",
            json=post_payload(category.id, title="Updated", user_name="J. Doe"),
            headers=auth_headers,
        )
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["title"] == "Updated"
        assert data["user_name"] == "J. Doe"

    async def test_update_post_no_auth(self, client: AsyncClient, post, category):
        res = await client.put(f"{URL}/{post.id}", json=post_payload(category.id))
        assert res.status_code == 401

    async def test_update_missing_post(self, client: AsyncClient, category, auth_headers):
        res = await client.put(f"{URL}/999", json=post_payload(category.id), headers=auth_headers)
        assert res.status_code == 404

    async def test_delete_post(self, client: AsyncClient, post, auth_headers):
        res = await client.delete(f"{URL}/{post.id}", headers=auth_headers)
        assert res.status_code == 200
        assert res.json() == {"status": "success", "message": "Post deleted successfully"}

        res = await client.delete(f"{URL}/{post.id}", headers=auth_headers)
        assert res.status_code == 404

    async def test_delete_post_removes_comments(self, client: AsyncClient, post, comment, auth_headers):
        """게시글 삭제 시 댓글도 삭제."""
        await client.delete(f"{URL}/{post.id}", headers=auth_headers)
        res = await client.get(f"/api/v1/comments/{comment.id}")
        assert res.status_code == 404
