"""카테고리 서비스 — 카테고리 CRUD 비즈니스 로직.

Category service — Category CRUD business logic.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.models.category import Category
from blogapi.repositories.category_repository import category_repository
from blogapi.schemas.category import (
    ApiResponseCategoriesPaginated,
    ApiResponseCategory,
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from blogapi.schemas.common import ApiResponseEmpty, FindAllRequest
from blogapi.services.base import CrudService, require_fields
from blogapi.utils.exceptions import ConflictError
from blogapi.utils.operation import service_operation


class CategoryService(CrudService[Category, CategoryResponse]):
    """카테고리 비즈니스 로직 서비스.

    Category names are unique.
    """

    entity = "Category"
    entity_plural = "Categories"
    cache_prefix = "categories"

    def __init__(self) -> None:
        super().__init__(category_repository, CategoryResponse)

    @service_operation("FindAllCategories")
    async def find_all(
        self,
        db: AsyncSession,
        request: FindAllRequest,
    ) -> ApiResponseCategoriesPaginated:
        """카테고리 목록을 조회합니다 — One page of categories, filtered by name."""
        return await self._find_all(db, request)

    @service_operation("FindCategory")
    async def find(self, db: AsyncSession, category_id: int) -> ApiResponseCategory:
        """ID로 카테고리를 조회합니다 — One category by id."""
        return await self._find(db, category_id)

    @service_operation("CreateCategory")
    async def create(
        self,
        db: AsyncSession,
        request: CreateCategoryRequest,
    ) -> ApiResponseCategory:
        """새 카테고리를 생성합니다.

        Create a new category.

        Raises:
            ValidationError: 이름이 비어 있을 때 (Name is blank)
            ConflictError: 이름이 중복될 때 (Name already taken)
        """
        require_fields(name=request.name)

        if await category_repository.exists(db, {"name": request.name}):
            raise ConflictError(f"Category '{request.name}' already exists")

        category: Category = await category_repository.create(db, request.model_dump())
        self._mark_stale(db)
        return self._created(category)

    @service_operation("UpdateCategory")
    async def update(
        self,
        db: AsyncSession,
        category_id: int,
        request: UpdateCategoryRequest,
    ) -> ApiResponseCategory:
        """카테고리를 수정합니다.

        Replace the category's name.

        Raises:
            ValidationError: 이름이 비어 있을 때, 저장소 호출 전 (Name is blank; raised before storage)
            NotFoundError: 카테고리가 없을 때 (No such category)
            ConflictError: 다른 카테고리가 같은 이름을 쓸 때 (Another category has the name)
        """
        require_fields(name=request.name)

        await self._get_or_404(db, category_id)
        if await category_repository.exists(db, {"name": request.name}, exclude_id=category_id):
            raise ConflictError(f"Category '{request.name}' already exists")

        category: Category | None = await category_repository.update(
            db, category_id, request.model_dump()
        )
        if category is None:
            raise self._not_found(category_id)

        self._mark_stale(db)
        return self._updated(category)

    @service_operation("DeleteCategory")
    async def delete(self, db: AsyncSession, category_id: int) -> ApiResponseEmpty:
        """카테고리를 삭제합니다. 게시글은 연쇄 삭제되지 않습니다.

        Delete a category. Posts referencing it are left as they are.
        """
        return await self._delete(db, category_id)


# 싱글턴 인스턴스 — Singleton instance
category_service: CategoryService = CategoryService()
