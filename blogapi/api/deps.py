"""FastAPI 의존성 주입 모듈 — 인증.

FastAPI dependency injection module — Authentication.
Extracts the principal's user id from the bearer JWT. Post writes record
that id as the post's ``user_id``.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies the JWT and returns its payload)
    3. 페이로드의 "sub" 필드로 사용자가 존재하는지 확인
       (The "sub" user must still exist)
"""

from typing import Annotated

import jwt
from fastapi import Depends, Path, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.config import settings
from blogapi.database import get_db
from blogapi.repositories.user_repository import user_repository
from blogapi.schemas.common import MAX_ID, FindAllRequest
from blogapi.utils.exceptions import UnauthorizedError
from blogapi.utils.jwt import TOKEN_TYPE_ACCESS, decode_token

# 헤더 누락 시 직접 401 봉투를 반환하도록 auto_error=False
# (auto_error=False so a missing header yields our 401 envelope instead of a bare 403)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> int:
    """JWT 토큰에서 현재 인증된 사용자 ID를 추출합니다.

    Decode the bearer token and return the authenticated user's id.

    Raises:
        UnauthorizedError(401): 토큰 누락, 만료, 위조 또는 사용자 없음
                                (Missing, expired or invalid token, or unknown user)
    """
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    try:
        payload: dict = decode_token(credentials.credentials)
        if payload.get("type") != TOKEN_TYPE_ACCESS:
            raise UnauthorizedError("Invalid token type")
        user_id: int = int(payload["sub"])
    except (jwt.ExpiredSignatureError, jwt.InvalidTokenError, KeyError, ValueError, TypeError):
        raise UnauthorizedError("Invalid or expired token")

    if await user_repository.get_by_id(db, user_id) is None:
        raise UnauthorizedError("User not found")

    return user_id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]


def find_all_params(
    page: Annotated[int, Query(description="페이지 번호 (1부터)")] = 1,
    page_size: Annotated[int, Query(description="페이지 크기")] = settings.DEFAULT_PAGE_SIZE,
    search: Annotated[str, Query(description="검색어 (부분 일치)")] = "",
) -> FindAllRequest:
    """목록 조회 쿼리 파라미터 — List query parameters. Out-of-range values are clamped, not rejected."""
    return FindAllRequest(page=page, page_size=page_size, search=search)


FindAllParams = Annotated[FindAllRequest, Depends(find_all_params)]

# 경로 ID — 범위 밖이면 저장소에 닿기 전에 400 (Out-of-range ids are rejected before storage)
EntityId = Annotated[int, Path(ge=1, le=MAX_ID, description="엔티티 ID")]
