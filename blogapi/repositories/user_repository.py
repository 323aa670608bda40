"""사용자 레포지토리 — 사용자 CRUD 및 이메일 조회.

User Repository — CRUD plus email lookups for users.
Users are deleted by email, not id.
"""

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.models.user import User
from blogapi.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    def search_expression(self) -> ColumnElement[str]:
        """이름, 성, 이메일을 이어 붙인 검색 대상 — firstname + lastname + email."""
        return User.firstname + " " + User.lastname + " " + User.email

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> User | None:
        """이메일로 사용자를 조회합니다.

        Retrieve a user by email.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 이메일 주소 (Email address)

        Returns:
            User | None: 사용자 또는 None (User or None)
        """
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def delete_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> bool:
        """이메일로 사용자를 삭제합니다.

        Delete the user owning *email*.

        Returns:
            bool: 삭제 성공 여부 (False when no user has that email)
        """
        user: User | None = await self.get_by_email(db, email)
        if user is None:
            return False

        await db.delete(user)
        await db.flush()
        return True


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
