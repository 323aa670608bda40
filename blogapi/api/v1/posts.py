"""게시글 라우터 — 게시글 CRUD 및 게시글-댓글 관계 엔드포인트.

Post Router — CRUD endpoints for posts plus the post/comment relation.
Reads are public; writes require a bearer token and record the
principal as the post's author.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.api.deps import CurrentUserId, EntityId, FindAllParams
from blogapi.database import commit, get_db
from blogapi.schemas.common import ApiResponseEmpty
from blogapi.schemas.post import (
    ApiResponsePost,
    ApiResponsePostRelation,
    ApiResponsePostsPaginated,
    CreatePostRequest,
    UpdatePostRequest,
)
from blogapi.services.post_service import post_service

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponsePostsPaginated)
async def find_all_posts(
    params: FindAllParams,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponsePostsPaginated:
    """게시글 목록을 조회합니다.

    List posts. ``search`` matches the title.
    """
    return await post_service.find_all(db, params)


@router.get("/{post_id}", response_model=ApiResponsePost)
async def find_post(
    post_id: EntityId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponsePost:
    """게시글을 조회합니다 — Retrieve one post."""
    return await post_service.find(db, post_id)


@router.get("/{post_id}/relation", response_model=ApiResponsePostRelation)
async def find_post_relation(
    post_id: EntityId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponsePostRelation:
    """게시글과 댓글을 함께 조회합니다.

    Retrieve the post joined with its comments, one row per comment.
    """
    return await post_service.find_relation(db, post_id)


@router.post("", response_model=ApiResponsePost, status_code=201)
async def create_post(
    data: CreatePostRequest,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponsePost:
    """새 게시글을 작성합니다.

    Create a post authored by the authenticated user.
    """
    result: ApiResponsePost = await post_service.create(db, data, user_id)
    await commit(db)
    return result


@router.put("/{post_id}", response_model=ApiResponsePost)
async def update_post(
    post_id: EntityId,
    data: UpdatePostRequest,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponsePost:
    """게시글을 수정합니다 (전체 교체).

    Replace every field of a post.
    """
    result: ApiResponsePost = await post_service.update(db, post_id, data, user_id)
    await commit(db)
    return result


@router.delete("/{post_id}", response_model=ApiResponseEmpty)
async def delete_post(
    post_id: EntityId,
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponseEmpty:
    """게시글과 댓글을 삭제합니다.

    Delete a post and its comments.
    """
    result: ApiResponseEmpty = await post_service.delete(db, post_id)
    await commit(db)
    return result
