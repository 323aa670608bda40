"""게시글 SQLAlchemy ORM 모델 정의.

Post SQLAlchemy ORM model definition.

Tables:
    - posts: 게시글 (Posts; category_id/user_id are logical references)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blogapi.database import Base


class Post(Base):
    """게시글 모델.

    Post model. ``user_name`` is a snapshot of the author's name taken when
    the post is written; it is not refreshed when the user record changes.

    Attributes:
        id: 정수 식별자 (Integer identifier)
        title: 제목 (Title, the searchable field)
        body: 본문 (Body text)
        img: 이미지 참조 문자열, 빈 값 허용 (Opaque image reference, may be empty)
        category_id: 카테고리 ID (Logical reference to categories.id)
        user_id: 작성자 ID (Logical reference to users.id)
        user_name: 작성자 이름 스냅샷 (Author name snapshot)

    Comments reference the post through ``comments.id_post_comment``; the
    post service removes them before deleting the post.
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    img: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    category_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    # 작성자 이름 스냅샷 — Denormalized, never re-synced
    user_name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
