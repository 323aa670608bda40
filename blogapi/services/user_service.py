"""사용자 서비스 — 사용자 CRUD 비즈니스 로직.

User service — User CRUD business logic.
Passwords are stored as bcrypt hashes and never returned. Users are
deleted by email rather than by id.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.models.user import User
from blogapi.repositories.user_repository import user_repository
from blogapi.schemas.common import ApiResponseEmpty, FindAllRequest
from blogapi.schemas.user import (
    ApiResponseUser,
    ApiResponseUsersPaginated,
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from blogapi.services.base import CrudService, require_fields
from blogapi.utils import envelope
from blogapi.utils.exceptions import ConflictError, NotFoundError
from blogapi.utils.operation import service_operation
from blogapi.utils.password import hash_password


class UserService(CrudService[User, UserResponse]):
    """사용자 비즈니스 로직 서비스."""

    entity = "User"
    entity_plural = "Users"
    cache_prefix = "users"

    def __init__(self) -> None:
        super().__init__(user_repository, UserResponse)

    @staticmethod
    def _validate(request: CreateUserRequest | UpdateUserRequest) -> None:
        require_fields(
            firstname=request.firstname,
            lastname=request.lastname,
            email=request.email,
            password=request.password,
        )

    @staticmethod
    def _to_row(request: CreateUserRequest | UpdateUserRequest) -> dict[str, Any]:
        data: dict[str, Any] = request.model_dump()
        data["password"] = hash_password(request.password)
        return data

    @service_operation("FindAllUsers")
    async def find_all(
        self,
        db: AsyncSession,
        request: FindAllRequest,
    ) -> ApiResponseUsersPaginated:
        """사용자 목록을 조회합니다.

        One page of users. The search term matches
        ``firstname lastname email`` as a single string.
        """
        return await self._find_all(db, request)

    @service_operation("FindUser")
    async def find(self, db: AsyncSession, user_id: int) -> ApiResponseUser:
        return await self._find(db, user_id)

    @service_operation("CreateUser")
    async def create(
        self,
        db: AsyncSession,
        request: CreateUserRequest,
    ) -> ApiResponseUser:
        """새 사용자를 생성합니다.

        Create a new user.

        Raises:
            ValidationError: 필수 필드가 비어 있을 때 (A required field is blank)
            ConflictError: 이메일 중복 시 (Email already registered)
        """
        self._validate(request)

        if await user_repository.exists(db, {"email": request.email}):
            raise ConflictError("Email already exists")

        user: User = await user_repository.create(db, self._to_row(request))
        self._mark_stale(db)
        return self._created(user)

    @service_operation("UpdateUser")
    async def update(
        self,
        db: AsyncSession,
        user_id: int,
        request: UpdateUserRequest,
    ) -> ApiResponseUser:
        """사용자 정보를 전체 교체합니다.

        Replace every field of the user; the password is re-hashed.

        Raises:
            ValidationError: 필수 필드가 비어 있을 때 (A required field is blank)
            NotFoundError: 사용자가 없을 때 (No such user)
            ConflictError: 이메일이 다른 사용자와 중복될 때 (Email owned by another user)
        """
        self._validate(request)

        await self._get_or_404(db, user_id)
        if await user_repository.exists(db, {"email": request.email}, exclude_id=user_id):
            raise ConflictError("Email already exists")

        user: User | None = await user_repository.update(db, user_id, self._to_row(request))
        if user is None:
            raise self._not_found(user_id)

        self._mark_stale(db)
        return self._updated(user)

    @service_operation("DeleteUser")
    async def delete(self, db: AsyncSession, email: str) -> ApiResponseEmpty:
        """이메일로 사용자를 삭제합니다.

        Delete the user owning *email*.

        Raises:
            ValidationError: 이메일이 비어 있을 때 (Email is blank)
            NotFoundError: 해당 이메일의 사용자가 없을 때 (No user has that email)
        """
        require_fields(email=email)

        deleted: bool = await user_repository.delete_by_email(db, email)
        if not deleted:
            raise NotFoundError(f"User with email {email} not found")

        self._mark_stale(db)
        return envelope.empty("User deleted successfully")


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
