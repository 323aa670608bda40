"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all entity repositories.
Provides generic read/insert/update/delete plus the paged, searchable range
query every list operation uses.

Usage:
    class CategoryRepository(BaseRepository[Category]):
        def __init__(self) -> None:
            super().__init__(Category)

        def search_expression(self):
            return Category.name
"""

import logging
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.database import Base
from blogapi.utils.pagination import Pagination, paginate

logger = logging.getLogger(__name__)

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)

# LIKE 패턴 이스케이프 문자 — Escape character for LIKE patterns
LIKE_ESCAPE: str = "\\"


def escape_like(term: str) -> str:
    """검색어의 LIKE 와일드카드를 문자 그대로 매칭되도록 이스케이프합니다.

    Escape ``%``, ``_`` and the escape character itself so *term* matches
    literally inside a LIKE pattern.
    """
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def search_expression(self) -> ColumnElement[str] | None:
        """검색 대상 컬럼 표현식 — 하위 클래스에서 지정.

        Column expression the search term is matched against. None disables
        searching for the entity.
        """
        return None

    def filtered_query(self, search: str = "") -> Select:
        """검색어가 적용된 기본 SELECT 쿼리를 생성합니다.

        Build the base SELECT, filtered by a case-insensitive substring match
        when *search* is non-empty.

        Args:
            search: 검색어, 빈 값이면 필터 없음 (Search term; empty means no filter)

        Returns:
            Select: 필터가 적용된 쿼리 (Filtered query)
        """
        query: Select = select(self.model)
        expression = self.search_expression()
        if search and expression is not None:
            pattern: str = f"%{escape_like(search)}%"
            query = query.where(expression.ilike(pattern, escape=LIKE_ESCAPE))
        return query

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its integer id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Id of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def count(self, db: AsyncSession, search: str = "") -> int:
        """검색 조건에 맞는 전체 레코드 수를 조회합니다.

        Count the records matching *search*.
        """
        count_query: Select = select(func.count()).select_from(self.filtered_query(search).subquery())
        return (await db.execute(count_query)).scalar() or 0

    async def fetch_range(
        self,
        db: AsyncSession,
        search: str,
        offset: int,
        limit: int,
    ) -> Sequence[ModelType]:
        """검색 조건에 맞는 레코드를 id 순으로 범위 조회합니다.

        Fetch one window of matching records, ordered by id so pages are
        stable between calls.
        """
        query: Select = self.filtered_query(search).order_by(self.model.id).offset(offset).limit(limit)
        result = await db.execute(query)
        return result.scalars().all()

    async def get_paginated(
        self,
        db: AsyncSession,
        search: str = "",
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[Sequence[ModelType], Pagination]:
        """페이지네이션이 적용된 레코드 목록을 조회합니다.

        Retrieve one page of records. The total is counted first so the
        pagination engine can clamp the requested page before the range
        query runs.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 검색어 (Search term)
            page: 요청 페이지 번호 (Requested page)
            page_size: 요청 페이지 크기 (Requested page size)

        Returns:
            tuple[Sequence[ModelType], Pagination]: (레코드 목록, 페이지네이션)
                                                    (Records, pagination metadata)
        """
        # 전체 카운트 → 페이지 보정 → 범위 조회 (Count, clamp, then fetch)
        total: int = await self.count(db, search)
        meta: Pagination = paginate(page, page_size, total)
        items: Sequence[ModelType] = await self.fetch_range(db, search, meta.offset, meta.page_size)

        logger.debug(
            "Fetched %d %s row(s) of %d (page %d/%d, search=%r)",
            len(items), self.model.__tablename__, total, meta.page, meta.total_pages, search,
        )
        return items, meta

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Insert a new record and return it with its storage-assigned id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        logger.debug("Inserted %s id=%s", self.model.__tablename__, db_obj.id)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """기존 레코드를 업데이트합니다.

        Update an existing record by id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 업데이트할 레코드 ID (Id of the record to update)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)

        Returns:
            ModelType | None: 업데이트된 레코드 또는 None (Updated record or None)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        logger.debug("Updated %s id=%s", self.model.__tablename__, record_id)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> bool:
        """레코드를 삭제합니다.

        Delete a record by id.

        Returns:
            bool: 삭제 성공 여부 (False when no such record)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        logger.debug("Deleted %s id=%s", self.model.__tablename__, record_id)
        return True

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
        exclude_id: int | None = None,
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching *filters* exists, optionally ignoring the
        record *exclude_id* (used when an update keeps its own unique value).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 (Filter criteria dictionary)
            exclude_id: 제외할 레코드 ID (Record id to ignore)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
