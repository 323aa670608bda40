"""카테고리 레포지토리 — 카테고리 CRUD.

Category Repository — CRUD for categories, searchable by name.
"""

from sqlalchemy import ColumnElement

from blogapi.models.category import Category
from blogapi.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """카테고리 테이블 레포지토리 — Repository for the categories table."""

    def __init__(self) -> None:
        super().__init__(Category)

    def search_expression(self) -> ColumnElement[str]:
        return Category.name


# 싱글턴 인스턴스 — Singleton instance
category_repository: CategoryRepository = CategoryRepository()
