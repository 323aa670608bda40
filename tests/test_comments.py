"""댓글 CRUD API 테스트.

Comment CRUD API tests — post reference check, required fields, search.
Reads are public; writes require a bearer token.
"""

from httpx import AsyncClient

URL = "/api/v1/comments"


class TestCommentCreate:
    """댓글 생성 테스트."""

    async def test_create_comment(self, client: AsyncClient, post, auth_headers):
        res = await client.post(URL, json={
            "id_post_comment": post.id,
            "user_name_comment": "Alice",
            "comment": "Great read",
        }, headers=auth_headers)
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["id_post_comment"] == post.id
        assert data["comment"] == "Great read"

    async def test_create_comment_unknown_post(self, client: AsyncClient, auth_headers):
        res = await client.post(URL, json={
            "id_post_comment": 77,
            "user_name_comment": "Alice",
            "comment": "Hi",
        }, headers=auth_headers)
        assert res.status_code == 404
        assert res.json()["message"] == "Post with id 77 not found"

    async def test_create_comment_post_id_out_of_range(self, client: AsyncClient, auth_headers):
        """범위 밖 게시글 참조는 400."""
        res = await client.post(URL, json={
            "id_post_comment": 2**31,
            "user_name_comment": "Alice",
            "comment": "Hi",
        }, headers=auth_headers)
        assert res.status_code == 400
        assert res.json()["message"] == "id_post_comment must be between 1 and 2147483647"

    async def test_create_comment_empty_body(self, client: AsyncClient, post, auth_headers):
        res = await client.post(URL, json={
            "id_post_comment": post.id,
            "user_name_comment": "Alice",
            "comment": "   ",
        }, headers=auth_headers)
        assert res.status_code == 400
        assert res.json()["message"] == "comment is required"

    async def test_create_comment_no_auth(self, client: AsyncClient, post):
        """인증 없이 작성 시 401, 댓글은 저장되지 않음."""
        res = await client.post(URL, json={
            "id_post_comment": post.id,
            "user_name_comment": "Alice",
            "comment": "Anonymous",
        })
        assert res.status_code == 401
        assert res.json()["status"] == "error"

        res = await client.get(URL)
        assert res.json()["data"] == []

    async def test_created_comment_shows_in_relation(self, client: AsyncClient, post, auth_headers):
        """작성한 댓글이 관계 조회에 포함."""
        await client.post(URL, json={
            "id_post_comment": post.id,
            "user_name_comment": "Alice",
            "comment": "Shown",
        }, headers=auth_headers)
        rows = (await client.get(f"/api/v1/posts/{post.id}/relation")).json()["data"]
        assert [r["comment"] for r in rows] == ["Shown"]


class TestCommentReadUpdateDelete:
    """댓글 조회/수정/삭제 테스트."""

    async def test_list_and_search(self, client: AsyncClient, comment):
        res = await client.get(URL, params={"search": "NICE"})
        body = res.json()
        assert body["pagination"]["total_count"] == 1
        assert body["data"][0]["id"] == comment.id

        res = await client.get(URL, params={"search": "absent"})
        assert res.json()["data"] == []

    async def test_find_comment(self, client: AsyncClient, comment):
        res = await client.get(f"{URL}/{comment.id}")
        assert res.status_code == 200
        assert res.json()["data"]["user_name_comment"] == "Bob"

    async def test_update_comment(self, client: AsyncClient, comment, post, auth_headers):
        res = await client.put(f"{URL}/{comment.id}", json={
            "id_post_comment": post.id,
            "user_name_comment": "Bobby",
            "comment": "Edited",
        }, headers=auth_headers)
        assert res.status_code == 200
        assert res.json()["data"]["comment"] == "Edited"

    async def test_update_missing_comment(self, client: AsyncClient, post, auth_headers):
        res = await client.put(f"{URL}/999", json={
            "id_post_comment": post.id,
            "user_name_comment": "Bobby",
            "comment": "Edited",
        }, headers=auth_headers)
        assert res.status_code == 404

    async def test_update_no_auth(self, client: AsyncClient, comment, post):
        res = await client.put(f"{URL}/{comment.id}", json={
            "id_post_comment": post.id,
            "user_name_comment": "Mallory",
            "comment": "Defaced",
        })
        assert res.status_code == 401

        res = await client.get(f"{URL}/{comment.id}")
        assert res.json()["data"]["comment"] == "Nice post"

    async def test_delete_twice(self, client: AsyncClient, comment, auth_headers):
        res = await client.delete(f"{URL}/{comment.id}", headers=auth_headers)
        assert res.status_code == 200
        res = await client.delete(f"{URL}/{comment.id}", headers=auth_headers)
        assert res.status_code == 404

    async def test_delete_no_auth(self, client: AsyncClient, comment):
        res = await client.delete(f"{URL}/{comment.id}")
        assert res.status_code == 401
