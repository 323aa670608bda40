"""인증 라우터 — 회원가입, 로그인, 내 정보.

Auth Router — Registration, login and the current-user endpoint.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.api.deps import CurrentUserId
from blogapi.database import commit, get_db
from blogapi.schemas.user import ApiResponseToken, ApiResponseUser, LoginRequest, RegisterRequest
from blogapi.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/register", response_model=ApiResponseUser, status_code=201)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseUser:
    """회원가입 — Register a new user account."""
    result: ApiResponseUser = await auth_service.register(db, data)
    await commit(db)
    return result


@router.post("/login", response_model=ApiResponseToken)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseToken:
    """이메일/비밀번호 로그인.

    Authenticate with email and password and receive an access token.
    """
    return await auth_service.login(db, data)


@router.get("/me", response_model=ApiResponseUser)
async def me(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseUser:
    """내 정보를 조회합니다 — The authenticated user's own record."""
    return await auth_service.me(db, user_id)
