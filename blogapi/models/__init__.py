"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata before tables are created.

Modules:
    user: 사용자 (Users, addressed by id for reads and by email for deletes)
    category: 카테고리 (Post categories)
    post: 게시글 (Posts with an author-name snapshot)
    comment: 댓글 (Comments under a post)
"""

from blogapi.models.user import User
from blogapi.models.category import Category
from blogapi.models.post import Post
from blogapi.models.comment import Comment

__all__ = [
    "User",
    "Category",
    "Post",
    "Comment",
]
