"""사용자 라우터 — 사용자 CRUD 엔드포인트.

User Router — CRUD endpoints for users. Users are deleted by email
(``DELETE /users?email=...``), not by id. Writes require a bearer
token; new accounts without one go through ``/auth/register``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.api.deps import CurrentUserId, EntityId, FindAllParams
from blogapi.database import commit, get_db
from blogapi.schemas.common import ApiResponseEmpty
from blogapi.schemas.user import (
    ApiResponseUser,
    ApiResponseUsersPaginated,
    CreateUserRequest,
    UpdateUserRequest,
)
from blogapi.services.user_service import user_service

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponseUsersPaginated)
async def find_all_users(
    params: FindAllParams,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseUsersPaginated:
    """사용자 목록을 조회합니다.

    List users. ``search`` matches first name, last name and email.
    """
    return await user_service.find_all(db, params)


@router.get("/{user_id}", response_model=ApiResponseUser)
async def find_user(
    user_id: EntityId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseUser:
    """사용자를 조회합니다 — Retrieve one user."""
    return await user_service.find(db, user_id)


@router.post("", response_model=ApiResponseUser, status_code=201)
async def create_user(
    data: CreateUserRequest,
    current_user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseUser:
    """새 사용자를 생성합니다.

    Create a new user.
    """
    result: ApiResponseUser = await user_service.create(db, data)
    await commit(db)
    return result


@router.put("/{user_id}", response_model=ApiResponseUser)
async def update_user(
    user_id: EntityId,
    data: UpdateUserRequest,
    current_user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseUser:
    """사용자 정보를 수정합니다 (전체 교체).

    Replace every field of an existing user.
    """
    result: ApiResponseUser = await user_service.update(db, user_id, data)
    await commit(db)
    return result


@router.delete("", response_model=ApiResponseEmpty)
async def delete_user(
    email: Annotated[str, Query(description="삭제할 사용자 이메일")],
    current_user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseEmpty:
    """이메일로 사용자를 삭제합니다.

    Delete the user owning ``email``.
    """
    result: ApiResponseEmpty = await user_service.delete(db, email)
    await commit(db)
    return result
