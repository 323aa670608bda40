"""공통 서비스 파사드 — 모든 엔티티 서비스의 부모 클래스.

Shared service facade logic.
``CrudService`` implements the parts of the uniform operation set that are
identical for every entity: paged listing, lookup by id, delete by id,
required-field validation, response conversion and read caching.
Entity services add create/update and give every public operation its
name through ``service_operation``.
"""

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.cache import cache
from blogapi.database import Base
from blogapi.repositories.base import BaseRepository
from blogapi.schemas.common import MAX_ID, ApiResponse, ApiResponseEmpty, ApiResponsePaginated, FindAllRequest
from blogapi.utils import envelope
from blogapi.utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
ResponseType = TypeVar("ResponseType", bound=BaseModel)


def require_fields(**fields: Any) -> None:
    """필수 문자열 필드가 비어 있지 않은지 확인합니다.

    Raise ``ValidationError`` naming the first blank field. Runs before any
    repository call. Whitespace-only strings count as blank.

    Raises:
        ValidationError: 빈 필드가 있을 때 (A required field is blank)
    """
    for name, value in fields.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{name} is required")


def require_positive_id(name: str, value: int) -> None:
    """ID 값이 저장소 정수 범위 안인지 확인합니다.

    Reject ids outside ``[1, MAX_ID]`` as a bad request before any storage
    call, so an oversized id never reaches the driver.

    Raises:
        ValidationError: 범위 밖 ID (Id out of range)
    """
    if value is None or not 1 <= value <= MAX_ID:
        raise ValidationError(f"{name} must be between 1 and {MAX_ID}")


class CrudService(Generic[ModelType, ResponseType]):
    """엔티티 공통 파사드 로직.

    Common facade logic parameterised by entity.

    Attributes:
        repository: 엔티티 레포지토리 (Entity repository)
        response_model: 응답 스키마 클래스 (Response schema class)
        entity: 단수 표시 이름, 예: "Post" (Singular display name)
        entity_plural: 복수 표시 이름, 예: "Posts" (Plural display name)
        cache_prefix: 캐시 키 접두사 (Cache key prefix)
    """

    entity: str = ""
    entity_plural: str = ""
    cache_prefix: str = ""

    def __init__(
        self,
        repository: BaseRepository[ModelType],
        response_model: type[ResponseType],
    ) -> None:
        self.repository: BaseRepository[ModelType] = repository
        self.response_model: type[ResponseType] = response_model

    def _to_response(self, obj: ModelType) -> ResponseType:
        """ORM 모델을 응답 스키마로 변환합니다 — Convert an ORM row to its response schema."""
        return self.response_model.model_validate(obj, from_attributes=True)

    def _not_found(self, record_id: int) -> NotFoundError:
        return NotFoundError(f"{self.entity} with id {record_id} not found")

    async def _get_or_404(self, db: AsyncSession, record_id: int) -> ModelType:
        require_positive_id("id", record_id)
        obj: ModelType | None = await self.repository.get_by_id(db, record_id)
        if obj is None:
            raise self._not_found(record_id)
        return obj

    def _mark_stale(self, db: AsyncSession) -> None:
        """커밋 후 무효화할 캐시 접두사 기록 — Queue this entity's cache keys for purge after commit."""
        cache.mark_stale(db, self.cache_prefix)

    async def _find_all(
        self,
        db: AsyncSession,
        request: FindAllRequest,
    ) -> ApiResponsePaginated[ResponseType]:
        """검색어가 적용된 페이지 목록을 조회합니다.

        Return one page of entities matching ``request.search``. An empty
        result is a success with ``total_count == 0``, never a NotFound.
        """
        cache_key: str = (
            f"{self.cache_prefix}:page={request.page}:size={request.page_size}:search={request.search}"
        )
        cached = await cache.get(cache_key)
        if cached is not None:
            return ApiResponsePaginated[self.response_model].model_validate(cached)

        items, meta = await self.repository.get_paginated(
            db, request.search, request.page, request.page_size
        )
        response = envelope.ok_paginated(
            f"{self.entity_plural} retrieved successfully",
            [self._to_response(item) for item in items],
            meta,
        )
        await cache.set(cache_key, response.model_dump(mode="json"))
        return response

    async def _find(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ApiResponse[ResponseType]:
        """ID로 단일 엔티티를 조회합니다.

        Return one entity by id.

        Raises:
            NotFoundError: 엔티티가 없을 때 (No entity with that id)
        """
        require_positive_id("id", record_id)
        cache_key: str = f"{self.cache_prefix}:id={record_id}"
        cached = await cache.get(cache_key)
        if cached is not None:
            return ApiResponse[self.response_model].model_validate(cached)

        obj: ModelType = await self._get_or_404(db, record_id)
        response = envelope.ok(f"{self.entity} retrieved successfully", self._to_response(obj))
        await cache.set(cache_key, response.model_dump(mode="json"))
        return response

    async def _delete(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ApiResponseEmpty:
        """ID로 엔티티를 삭제합니다.

        Delete one entity by id. Deleting an id that is already gone is a
        NotFound, not a success.
        """
        require_positive_id("id", record_id)
        deleted: bool = await self.repository.delete(db, record_id)
        if not deleted:
            raise self._not_found(record_id)

        self._mark_stale(db)
        return envelope.empty(f"{self.entity} deleted successfully")

    def _created(self, obj: ModelType) -> ApiResponse[ResponseType]:
        return envelope.ok(f"{self.entity} created successfully", self._to_response(obj))

    def _updated(self, obj: ModelType) -> ApiResponse[ResponseType]:
        return envelope.ok(f"{self.entity} updated successfully", self._to_response(obj))
