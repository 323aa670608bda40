"""카테고리 SQLAlchemy ORM 모델 정의.

Category SQLAlchemy ORM model definition.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from blogapi.database import Base


class Category(Base):
    """카테고리 모델.

    Post category. Posts point at it through ``posts.category_id`` without a
    database-level constraint, so deleting a category leaves its posts alone.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 카테고리 이름 — 고유 (Unique name)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
