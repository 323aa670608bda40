"""인증 API 테스트.

Auth API tests — register, login, current user.
"""

from httpx import AsyncClient

URL = "/api/v1/auth"


class TestRegister:
    """회원가입 테스트."""

    async def test_register(self, client: AsyncClient):
        res = await client.post(f"{URL}/register", json={
            "firstname": "New",
            "lastname": "User",
            "email": "new@example.com",
            "password": "pw123456",
        })
        assert res.status_code == 201
        body = res.json()
        assert body["message"] == "User registered successfully"
        assert body["data"]["email"] == "new@example.com"

    async def test_register_duplicate(self, client: AsyncClient, user):
        res = await client.post(f"{URL}/register", json={
            "firstname": "A",
            "lastname": "B",
            "email": user.email,
            "password": "pw",
        })
        assert res.status_code == 409


class TestLogin:
    """로그인 테스트."""

    async def test_login_success(self, client: AsyncClient, user):
        """로그인 후 발급된 토큰으로 /me 조회."""
        res = await client.post(f"{URL}/login", json={
            "email": user.email,
            "password": "secret123!",
        })
        assert res.status_code == 200
        token = res.json()["data"]["access_token"]
        assert res.json()["data"]["token_type"] == "bearer"

        me = await client.get(f"{URL}/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["data"]["id"] == user.id

    async def test_login_wrong_password(self, client: AsyncClient, user):
        res = await client.post(f"{URL}/login", json={
            "email": user.email,
            "password": "wrong",
        })
        assert res.status_code == 401
        assert res.json() == {"status": "error", "message": "Invalid email or password"}

    async def test_login_unknown_email(self, client: AsyncClient):
        res = await client.post(f"{URL}/login", json={
            "email": "nobody@example.com",
            "password": "x",
        })
        assert res.status_code == 401

    async def test_login_blank_fields(self, client: AsyncClient):
        res = await client.post(f"{URL}/login", json={"email": "", "password": ""})
        assert res.status_code == 400


class TestMe:
    """내 정보 조회 테스트."""

    async def test_me_no_auth(self, client: AsyncClient):
        res = await client.get(f"{URL}/me")
        assert res.status_code == 401
        assert res.headers["www-authenticate"] == "Bearer"

    async def test_me_deleted_user(self, client: AsyncClient, user, auth_headers):
        """삭제된 사용자의 토큰은 401."""
        await client.delete("/api/v1/users", params={"email": user.email}, headers=auth_headers)
        res = await client.get(f"{URL}/me", headers=auth_headers)
        assert res.status_code == 401
