"""게시글 레포지토리 — 게시글 CRUD.

Post Repository — CRUD for posts, searchable by title.
"""

from sqlalchemy import ColumnElement

from blogapi.models.post import Post
from blogapi.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """게시글 테이블 레포지토리 — Repository for the posts table."""

    def __init__(self) -> None:
        super().__init__(Post)

    def search_expression(self) -> ColumnElement[str]:
        return Post.title


# 싱글턴 인스턴스 — Singleton instance
post_repository: PostRepository = PostRepository()
