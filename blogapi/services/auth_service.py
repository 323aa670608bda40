"""인증 서비스 — 회원가입, 로그인, 내 정보 조회.

Auth service — Registration, login and the current-user lookup.
Tokens are PyJWT access tokens whose ``sub`` is the user id.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.models.user import User
from blogapi.repositories.user_repository import user_repository
from blogapi.schemas.user import (
    ApiResponseToken,
    ApiResponseUser,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from blogapi.services.base import require_fields
from blogapi.services.user_service import user_service
from blogapi.utils import envelope
from blogapi.utils.exceptions import UnauthorizedError
from blogapi.utils.jwt import create_access_token
from blogapi.utils.operation import service_operation
from blogapi.utils.password import verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS: str = "Invalid email or password"


class AuthService:
    """인증 비즈니스 로직 서비스."""

    @service_operation("Register")
    async def register(
        self,
        db: AsyncSession,
        request: RegisterRequest,
    ) -> ApiResponseUser:
        """회원가입 — 사용자 생성과 동일한 검증 및 중복 규칙.

        Register a new user. Same validation and conflict rules as user
        creation.
        """
        response: ApiResponseUser = await user_service.create(db, request)
        response.message = "User registered successfully"
        return response

    @service_operation("Login")
    async def login(
        self,
        db: AsyncSession,
        request: LoginRequest,
    ) -> ApiResponseToken:
        """이메일/비밀번호 로그인.

        Verify the credentials and issue an access token.

        Raises:
            ValidationError: 이메일 또는 비밀번호가 비어 있을 때 (Email or password blank)
            UnauthorizedError: 자격 증명이 틀릴 때 (Unknown email or wrong password)
        """
        require_fields(email=request.email, password=request.password)

        user: User | None = await user_repository.get_by_email(db, request.email)
        if user is None or not verify_password(request.password, user.password):
            logger.info("Failed login for %s", request.email)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        token: str = create_access_token({"sub": str(user.id), "email": user.email})
        return envelope.ok("Login successful", TokenResponse(access_token=token))

    @service_operation("Me")
    async def me(self, db: AsyncSession, user_id: int) -> ApiResponseUser:
        """인증된 사용자 자신의 정보 — The principal's own user record."""
        return await user_service.find(db, user_id)


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
