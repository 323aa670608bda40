"""댓글 서비스 — 댓글 CRUD 비즈니스 로직.

Comment service — Comment CRUD business logic.
Every comment write also drops the cached post/comment relations.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.cache import cache
from blogapi.models.comment import Comment
from blogapi.repositories.comment_repository import comment_repository
from blogapi.repositories.post_repository import post_repository
from blogapi.schemas.comment import (
    ApiResponseComment,
    ApiResponseCommentsPaginated,
    CommentResponse,
    CreateCommentRequest,
    UpdateCommentRequest,
)
from blogapi.schemas.common import ApiResponseEmpty, FindAllRequest
from blogapi.services.base import CrudService, require_fields, require_positive_id
from blogapi.services.post_service import RELATION_CACHE_PREFIX
from blogapi.utils.exceptions import NotFoundError
from blogapi.utils.operation import service_operation


class CommentService(CrudService[Comment, CommentResponse]):
    """댓글 비즈니스 로직 서비스."""

    entity = "Comment"
    entity_plural = "Comments"
    cache_prefix = "comments"

    def __init__(self) -> None:
        super().__init__(comment_repository, CommentResponse)

    @staticmethod
    def _validate(request: CreateCommentRequest | UpdateCommentRequest) -> None:
        require_fields(
            user_name_comment=request.user_name_comment,
            comment=request.comment,
        )

    @staticmethod
    async def _ensure_post(db: AsyncSession, post_id: int) -> None:
        require_positive_id("id_post_comment", post_id)
        if await post_repository.get_by_id(db, post_id) is None:
            raise NotFoundError(f"Post with id {post_id} not found")

    def _mark_stale(self, db: AsyncSession) -> None:
        super()._mark_stale(db)
        cache.mark_stale(db, RELATION_CACHE_PREFIX)

    @service_operation("FindAllComments")
    async def find_all(
        self,
        db: AsyncSession,
        request: FindAllRequest,
    ) -> ApiResponseCommentsPaginated:
        return await self._find_all(db, request)

    @service_operation("FindComment")
    async def find(self, db: AsyncSession, comment_id: int) -> ApiResponseComment:
        return await self._find(db, comment_id)

    @service_operation("CreateComment")
    async def create(
        self,
        db: AsyncSession,
        request: CreateCommentRequest,
    ) -> ApiResponseComment:
        """게시글에 댓글을 작성합니다.

        Add a comment to an existing post.

        Raises:
            ValidationError: 작성자 또는 본문이 비어 있을 때 (Author or body is blank)
            NotFoundError: 게시글이 없을 때 (Post does not exist)
        """
        self._validate(request)
        await self._ensure_post(db, request.id_post_comment)

        data: dict[str, Any] = request.model_dump()
        comment: Comment = await comment_repository.create(db, data)
        self._mark_stale(db)
        return self._created(comment)

    @service_operation("UpdateComment")
    async def update(
        self,
        db: AsyncSession,
        comment_id: int,
        request: UpdateCommentRequest,
    ) -> ApiResponseComment:
        """댓글을 전체 교체합니다.

        Replace every field of the comment, including the post it belongs to.
        """
        self._validate(request)
        await self._get_or_404(db, comment_id)
        await self._ensure_post(db, request.id_post_comment)

        comment: Comment | None = await comment_repository.update(
            db, comment_id, request.model_dump()
        )
        if comment is None:
            raise self._not_found(comment_id)

        self._mark_stale(db)
        return self._updated(comment)

    @service_operation("DeleteComment")
    async def delete(self, db: AsyncSession, comment_id: int) -> ApiResponseEmpty:
        return await self._delete(db, comment_id)


# 싱글턴 인스턴스 — Singleton instance
comment_service: CommentService = CommentService()
