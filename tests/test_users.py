"""사용자 CRUD API 테스트.

User CRUD API tests — create, read, search, update, delete-by-email.
Writes require a bearer token.
"""

from httpx import AsyncClient

URL = "/api/v1/users"

NEW_USER = {
    "firstname": "John",
    "lastname": "Smith",
    "email": "john@example.com",
    "password": "pw123456",
}


class TestUserCreate:
    """사용자 생성 테스트."""

    async def test_create_user(self, client: AsyncClient, auth_headers):
        """사용자 생성 성공, 비밀번호는 응답에 없음."""
        res = await client.post(URL, json=NEW_USER, headers=auth_headers)
        assert res.status_code == 201
        body = res.json()
        assert body["status"] == "success"
        assert body["message"] == "User created successfully"
        assert body["data"]["email"] == "john@example.com"
        assert "password" not in body["data"]
        assert "pagination" not in body

    async def test_create_users_get_distinct_ids(self, client: AsyncClient, auth_headers):
        """두 사용자는 서로 다른 ID."""
        first = await client.post(URL, json=NEW_USER, headers=auth_headers)
        second = await client.post(
            URL, json={**NEW_USER, "email": "other@example.com"}, headers=auth_headers
        )
        assert first.json()["data"]["id"] != second.json()["data"]["id"]

    async def test_create_duplicate_email(self, client: AsyncClient, user, auth_headers):
        """중복 이메일은 409."""
        res = await client.post(URL, json={**NEW_USER, "email": user.email}, headers=auth_headers)
        assert res.status_code == 409
        assert res.json() == {"status": "error", "message": "Email already exists"}

    async def test_create_missing_field(self, client: AsyncClient, auth_headers):
        """필수 필드 누락 시 400."""
        res = await client.post(URL, json={**NEW_USER, "lastname": ""}, headers=auth_headers)
        assert res.status_code == 400
        assert res.json()["status"] == "error"
        assert "lastname" in res.json()["message"]

    async def test_create_no_auth(self, client: AsyncClient):
        """인증 없이 생성 시 401."""
        res = await client.post(URL, json=NEW_USER)
        assert res.status_code == 401
        assert res.json()["status"] == "error"


class TestUserRead:
    """사용자 조회 테스트."""

    async def test_find_user(self, client: AsyncClient, user):
        res = await client.get(f"{URL}/{user.id}")
        assert res.status_code == 200
        assert res.json()["data"]["firstname"] == "Jane"

    async def test_find_missing_user(self, client: AsyncClient):
        res = await client.get(f"{URL}/999")
        assert res.status_code == 404
        assert res.json() == {"status": "error", "message": "User with id 999 not found"}

    async def test_find_id_out_of_range(self, client: AsyncClient):
        """32비트 범위 밖 ID와 0은 저장소 전에 400."""
        res = await client.get(f"{URL}/{2**31}")
        assert res.status_code == 400
        assert res.json()["status"] == "error"

        res = await client.get(f"{URL}/0")
        assert res.status_code == 400

    async def test_create_then_find(self, client: AsyncClient, auth_headers):
        """생성 후 조회 시 같은 값."""
        created = (await client.post(URL, json=NEW_USER, headers=auth_headers)).json()["data"]
        found = (await client.get(f"{URL}/{created['id']}")).json()["data"]
        assert found == created

    async def test_list_users(self, client: AsyncClient, user):
        res = await client.get(URL)
        assert res.status_code == 200
        body = res.json()
        assert body["pagination"] == {
            "page": 1,
            "page_size": 10,
            "total_count": 1,
            "total_pages": 1,
        }

    async def test_search_matches_full_name(self, client: AsyncClient, user, auth_headers):
        """이름+성+이메일 결합 문자열 검색."""
        await client.post(URL, json=NEW_USER, headers=auth_headers)
        res = await client.get(URL, params={"search": "jane doe"})
        data = res.json()["data"]
        assert [u["email"] for u in data] == ["jane@example.com"]

    async def test_search_by_email_fragment(self, client: AsyncClient, user):
        res = await client.get(URL, params={"search": "EXAMPLE.COM"})
        assert res.json()["pagination"]["total_count"] == 1


class TestUserUpdate:
    """사용자 수정 테스트."""

    async def test_update_user(self, client: AsyncClient, user, auth_headers):
        res = await client.put(f"{URL}/{user.id}", json={
            "firstname": "Janet",
            "lastname": "Roe",
            "email": "janet@example.com",
            "password": "newpass1",
        }, headers=auth_headers)
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["firstname"] == "Janet"
        assert data["email"] == "janet@example.com"

    async def test_update_keeps_own_email(self, client: AsyncClient, user, auth_headers):
        """자기 이메일 유지는 충돌이 아님."""
        res = await client.put(f"{URL}/{user.id}", json={
            "firstname": "Jane",
            "lastname": "Doe",
            "email": user.email,
            "password": "x",
        }, headers=auth_headers)
        assert res.status_code == 200

    async def test_update_to_taken_email(self, client: AsyncClient, user, auth_headers):
        other = (await client.post(URL, json=NEW_USER, headers=auth_headers)).json()["data"]
        res = await client.put(
            f"{URL}/{other['id']}", json={**NEW_USER, "email": user.email}, headers=auth_headers
        )
        assert res.status_code == 409

    async def test_update_missing_user(self, client: AsyncClient, auth_headers):
        res = await client.put(f"{URL}/999", json=NEW_USER, headers=auth_headers)
        assert res.status_code == 404

    async def test_update_no_auth(self, client: AsyncClient, user):
        res = await client.put(f"{URL}/{user.id}", json=NEW_USER)
        assert res.status_code == 401


class TestUserDelete:
    """사용자 삭제 (이메일 기준) 테스트."""

    async def test_delete_by_email(self, client: AsyncClient, user, auth_headers):
        res = await client.delete(URL, params={"email": user.email}, headers=auth_headers)
        assert res.status_code == 200
        assert res.json() == {"status": "success", "message": "User deleted successfully"}

        res = await client.get(f"{URL}/{user.id}")
        assert res.status_code == 404

    async def test_delete_unknown_email(self, client: AsyncClient, user, auth_headers):
        """존재하지 않는 이메일 삭제는 404이며 다른 사용자는 유지."""
        res = await client.delete(URL, params={"email": "ghost@example.com"}, headers=auth_headers)
        assert res.status_code == 404
        assert res.json()["status"] == "error"

        res = await client.get(URL)
        assert res.json()["pagination"]["total_count"] == 1

    async def test_delete_without_email(self, client: AsyncClient, auth_headers):
        """이메일 파라미터 누락 시 400."""
        res = await client.delete(URL, headers=auth_headers)
        assert res.status_code == 400

    async def test_delete_no_auth(self, client: AsyncClient, user):
        """인증 없이 삭제 시 401, 사용자는 유지."""
        res = await client.delete(URL, params={"email": user.email})
        assert res.status_code == 401

        res = await client.get(f"{URL}/{user.id}")
        assert res.status_code == 200
