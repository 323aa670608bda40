"""게시글 서비스 — 게시글 CRUD 및 게시글-댓글 관계 비즈니스 로직.

Post service — Post CRUD and post/comment relation business logic.
The author id comes from the authenticated principal; ``user_name`` is a
snapshot taken at write time and is never re-synced with the user record.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.cache import cache
from blogapi.models.post import Post
from blogapi.repositories.category_repository import category_repository
from blogapi.repositories.comment_repository import comment_repository
from blogapi.repositories.post_repository import post_repository
from blogapi.schemas.common import ApiResponse, ApiResponseEmpty, FindAllRequest
from blogapi.schemas.post import (
    ApiResponsePost,
    ApiResponsePostRelation,
    ApiResponsePostsPaginated,
    CreatePostRequest,
    PostRelationResponse,
    PostResponse,
    UpdatePostRequest,
)
from blogapi.services.base import CrudService, require_fields, require_positive_id
from blogapi.services.relation_aggregator import relation_aggregator
from blogapi.utils import envelope
from blogapi.utils.exceptions import NotFoundError
from blogapi.utils.operation import service_operation

RELATION_CACHE_PREFIX: str = "posts:relation"


def relation_cache_key(post_id: int) -> str:
    return f"{RELATION_CACHE_PREFIX}:id={post_id}"


class PostService(CrudService[Post, PostResponse]):
    """게시글 비즈니스 로직 서비스."""

    entity = "Post"
    entity_plural = "Posts"
    cache_prefix = "posts"

    def __init__(self) -> None:
        super().__init__(post_repository, PostResponse)

    @staticmethod
    def _validate(request: CreatePostRequest | UpdatePostRequest) -> None:
        require_fields(title=request.title, body=request.body, user_name=request.user_name)

    @staticmethod
    async def _ensure_category(db: AsyncSession, category_id: int) -> None:
        """카테고리 존재 여부 확인 — The referenced category must exist."""
        require_positive_id("category_id", category_id)
        if await category_repository.get_by_id(db, category_id) is None:
            raise NotFoundError(f"Category with id {category_id} not found")

    @staticmethod
    def _to_row(request: CreatePostRequest | UpdatePostRequest, user_id: int) -> dict[str, Any]:
        return {
            "title": request.title,
            "body": request.body,
            "img": request.file,
            "category_id": request.category_id,
            "user_id": user_id,
            "user_name": request.user_name,
        }

    @service_operation("FindAllPosts")
    async def find_all(
        self,
        db: AsyncSession,
        request: FindAllRequest,
    ) -> ApiResponsePostsPaginated:
        """게시글 목록을 조회합니다 — One page of posts, filtered by title."""
        return await self._find_all(db, request)

    @service_operation("FindPost")
    async def find(self, db: AsyncSession, post_id: int) -> ApiResponsePost:
        """ID로 게시글을 조회합니다 — One post by id."""
        return await self._find(db, post_id)

    @service_operation("FindPostRelation")
    async def find_relation(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> ApiResponsePostRelation:
        """게시글과 댓글을 평탄한 행으로 조회합니다.

        Return the post joined with its comments, one row per comment.
        A post without comments yields exactly one row whose comment
        fields are null.

        Raises:
            NotFoundError: 게시글이 없을 때 (No such post)
        """
        require_positive_id("id", post_id)
        cache_key: str = relation_cache_key(post_id)
        cached = await cache.get(cache_key)
        if cached is not None:
            return ApiResponse[list[PostRelationResponse]].model_validate(cached)

        rows: list[PostRelationResponse] | None = await relation_aggregator.find_post_with_comments(
            db, post_id
        )
        if rows is None:
            raise self._not_found(post_id)

        response = envelope.ok("Post relation retrieved successfully", rows)
        await cache.set(cache_key, response.model_dump(mode="json"))
        return response

    @service_operation("CreatePost")
    async def create(
        self,
        db: AsyncSession,
        request: CreatePostRequest,
        user_id: int,
    ) -> ApiResponsePost:
        """새 게시글을 생성합니다.

        Create a post authored by *user_id*.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            request: 게시글 생성 요청 (Post creation request)
            user_id: 인증된 사용자 ID (Authenticated principal's id)

        Raises:
            ValidationError: 필수 필드가 비어 있을 때 (A required field is blank)
            NotFoundError: 카테고리가 없을 때 (Category does not exist)
        """
        self._validate(request)
        await self._ensure_category(db, request.category_id)

        post: Post = await post_repository.create(db, self._to_row(request, user_id))
        self._mark_stale(db)
        return self._created(post)

    @service_operation("UpdatePost")
    async def update(
        self,
        db: AsyncSession,
        post_id: int,
        request: UpdatePostRequest,
        user_id: int,
    ) -> ApiResponsePost:
        """게시글을 전체 교체합니다.

        Replace every field of the post. The author id and the author name
        snapshot are retaken from this write.

        Raises:
            ValidationError: 필수 필드가 비어 있을 때 (A required field is blank)
            NotFoundError: 게시글 또는 카테고리가 없을 때 (Post or category missing)
        """
        self._validate(request)
        await self._get_or_404(db, post_id)
        await self._ensure_category(db, request.category_id)

        post: Post | None = await post_repository.update(db, post_id, self._to_row(request, user_id))
        if post is None:
            raise self._not_found(post_id)

        self._mark_stale(db)
        return self._updated(post)

    @service_operation("DeletePost")
    async def delete(self, db: AsyncSession, post_id: int) -> ApiResponseEmpty:
        """게시글을 삭제합니다. 댓글은 함께 삭제됩니다.

        Delete a post; its comments go with it.
        """
        await self._get_or_404(db, post_id)
        await comment_repository.delete_by_post(db, post_id)
        response: ApiResponseEmpty = await self._delete(db, post_id)
        cache.mark_stale(db, "comments")
        return response


# 싱글턴 인스턴스 — Singleton instance
post_service: PostService = PostService()
