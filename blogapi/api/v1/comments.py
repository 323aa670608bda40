"""댓글 라우터 — 댓글 CRUD 엔드포인트.

Comment Router — CRUD endpoints for comments. Reads are public; writes
require a bearer token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.api.deps import CurrentUserId, EntityId, FindAllParams
from blogapi.database import commit, get_db
from blogapi.schemas.comment import (
    ApiResponseComment,
    ApiResponseCommentsPaginated,
    CreateCommentRequest,
    UpdateCommentRequest,
)
from blogapi.schemas.common import ApiResponseEmpty
from blogapi.services.comment_service import comment_service

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponseCommentsPaginated)
async def find_all_comments(
    params: FindAllParams,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseCommentsPaginated:
    """댓글 목록을 조회합니다 — List comments, filtered by body text."""
    return await comment_service.find_all(db, params)


@router.get("/{comment_id}", response_model=ApiResponseComment)
async def find_comment(
    comment_id: EntityId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseComment:
    return await comment_service.find(db, comment_id)


@router.post("", response_model=ApiResponseComment, status_code=201)
async def create_comment(
    data: CreateCommentRequest,
    current_user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseComment:
    """게시글에 댓글을 작성합니다.

    Add a comment to an existing post.
    """
    result: ApiResponseComment = await comment_service.create(db, data)
    await commit(db)
    return result


@router.put("/{comment_id}", response_model=ApiResponseComment)
async def update_comment(
    comment_id: EntityId,
    data: UpdateCommentRequest,
    current_user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseComment:
    result: ApiResponseComment = await comment_service.update(db, comment_id, data)
    await commit(db)
    return result


@router.delete("/{comment_id}", response_model=ApiResponseEmpty)
async def delete_comment(
    comment_id: EntityId,
    current_user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseEmpty:
    """댓글을 삭제합니다 — Delete a comment."""
    result: ApiResponseEmpty = await comment_service.delete(db, comment_id)
    await commit(db)
    return result
