"""카테고리 Pydantic 요청/응답 스키마 정의.

Category Pydantic request/response schema definitions.
"""

from pydantic import BaseModel

from blogapi.schemas.common import ApiResponse, ApiResponsePaginated


class CreateCategoryRequest(BaseModel):
    """카테고리 생성 요청 스키마.

    Attributes:
        name: 카테고리 이름, 고유 (Category name, unique)
    """

    name: str = ""


class UpdateCategoryRequest(BaseModel):
    """카테고리 수정 요청 스키마 (전체 교체)."""

    name: str = ""


class CategoryResponse(BaseModel):
    """카테고리 응답 스키마."""

    id: int
    name: str


ApiResponseCategory = ApiResponse[CategoryResponse]
ApiResponseCategoriesPaginated = ApiResponsePaginated[CategoryResponse]
