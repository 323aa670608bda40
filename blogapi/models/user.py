"""사용자 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.

Tables:
    - users: 사용자 계정 (User accounts, email is unique)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from blogapi.database import Base


class User(Base):
    """사용자 모델.

    User account model. The password column holds a bcrypt hash and is
    never serialised into any response schema.

    Attributes:
        id: 정수 식별자, 저장소가 할당 (Integer identifier assigned on insert)
        firstname: 이름 (First name)
        lastname: 성 (Last name)
        email: 이메일, 고유 (Email address, unique; also the delete key)
        password: bcrypt 해시 (Bcrypt password hash)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    firstname: Mapped[str] = mapped_column(String(100), nullable=False)
    lastname: Mapped[str] = mapped_column(String(100), nullable=False)
    # 이메일 — 고유 제약 (Unique constraint; duplicate → Conflict)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    # 비밀번호 해시 — Never returned to callers
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
