"""카테고리 라우터 — 카테고리 CRUD 엔드포인트.

Category Router — CRUD endpoints for categories. Reads are public; writes
require a bearer token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.api.deps import CurrentUserId, EntityId, FindAllParams
from blogapi.database import commit, get_db
from blogapi.schemas.category import (
    ApiResponseCategoriesPaginated,
    ApiResponseCategory,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from blogapi.schemas.common import ApiResponseEmpty
from blogapi.services.category_service import category_service

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponseCategoriesPaginated)
async def find_all_categories(
    params: FindAllParams,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseCategoriesPaginated:
    """카테고리 목록을 조회합니다 — List categories, filtered by name."""
    return await category_service.find_all(db, params)


@router.get("/{category_id}", response_model=ApiResponseCategory)
async def find_category(
    category_id: EntityId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseCategory:
    return await category_service.find(db, category_id)


@router.post("", response_model=ApiResponseCategory, status_code=201)
async def create_category(
    data: CreateCategoryRequest,
    current_user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseCategory:
    """새 카테고리를 생성합니다.

    Create a new category.
    """
    result: ApiResponseCategory = await category_service.create(db, data)
    await commit(db)
    return result


@router.put("/{category_id}", response_model=ApiResponseCategory)
async def update_category(
    category_id: EntityId,
    data: UpdateCategoryRequest,
    current_user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseCategory:
    """카테고리 이름을 수정합니다.

    Rename an existing category.
    """
    result: ApiResponseCategory = await category_service.update(db, category_id, data)
    await commit(db)
    return result


@router.delete("/{category_id}", response_model=ApiResponseEmpty)
async def delete_category(
    category_id: EntityId,
    current_user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseEmpty:
    """카테고리를 삭제합니다.

    Delete a category. Posts that reference it are kept.
    """
    result: ApiResponseEmpty = await category_service.delete(db, category_id)
    await commit(db)
    return result
