"""댓글 레포지토리 — 댓글 CRUD 및 게시글별 조회.

Comment Repository — CRUD for comments plus the per-post lookup the
relation aggregator uses.
"""

from sqlalchemy import ColumnElement, Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.models.comment import Comment
from blogapi.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """댓글 테이블 레포지토리.

    Repository handling database queries for the comments table.
    """

    def __init__(self) -> None:
        super().__init__(Comment)

    def search_expression(self) -> ColumnElement[str]:
        return Comment.comment

    async def get_by_post(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> list[Comment]:
        """게시글에 달린 모든 댓글을 id 순으로 조회합니다.

        Retrieve every comment of *post_id*, ordered by id. Unbounded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post id)

        Returns:
            list[Comment]: 댓글 목록, 없으면 빈 목록 (Comments; empty when none)
        """
        query: Select = (
            select(Comment)
            .where(Comment.id_post_comment == post_id)
            .order_by(Comment.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def delete_by_post(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> int:
        """게시글의 댓글을 모두 삭제합니다 — Delete every comment of *post_id*; returns the row count."""
        result = await db.execute(delete(Comment).where(Comment.id_post_comment == post_id))
        await db.flush()
        return result.rowcount or 0


# 싱글턴 인스턴스 — Singleton instance
comment_repository: CommentRepository = CommentRepository()
