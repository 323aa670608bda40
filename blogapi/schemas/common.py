"""공통 Pydantic 요청/응답 스키마 정의.

Common Pydantic request/response schema definitions.
Holds the generic response envelopes shared by every entity and the list
request parameters used by every find-all operation.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

from blogapi.config import settings
from blogapi.utils.pagination import Pagination

T = TypeVar("T")

# 저장소 정수 ID 상한 (32비트) — Largest id the storage integer column holds
MAX_ID: int = 2**31 - 1


# === 목록 요청 (List request) 스키마 ===

class FindAllRequest(BaseModel):
    """목록 조회 요청 스키마.

    Find-all request parameters. Defaults are applied here, before the
    pagination engine runs; out-of-range values are clamped there.

    Attributes:
        page: 요청 페이지 번호 (Requested page, default 1)
        page_size: 요청 페이지 크기 (Requested page size, default from settings)
        search: 검색어, 빈 값이면 전체 (Substring filter; empty matches everything)
    """

    page: int = 1  # 요청 페이지 번호 (Requested page)
    page_size: int = settings.DEFAULT_PAGE_SIZE  # 요청 페이지 크기 (Requested page size)
    search: str = ""  # 검색어 — 대소문자 무시 부분 일치 (Case-insensitive substring)


# === 응답 봉투 (Response envelope) 스키마 ===

class ApiResponse(BaseModel, Generic[T]):
    """단일 항목 응답 봉투.

    Single-entity envelope. Has no pagination field at all.

    Attributes:
        status: "success" 또는 "error" (Outcome)
        message: 호출자용 메시지 (Caller-facing message)
        data: 결과 데이터 (Result payload)
    """

    status: str  # "success" | "error"
    message: str  # 호출자용 메시지 (Human-readable message)
    data: T | None = None  # 결과 데이터 (Result payload)


class ApiResponsePaginated(BaseModel, Generic[T]):
    """목록 응답 봉투 — 페이지네이션 필수.

    List envelope. ``pagination`` is always present and non-null.
    """

    status: str
    message: str
    data: list[T]  # 현재 페이지 항목 목록 (Items for the current page)
    pagination: Pagination  # 페이지네이션 메타데이터 (Pagination metadata)


class ApiResponseEmpty(BaseModel):
    """데이터 없는 응답 봉투 — 삭제 성공 및 모든 오류 응답.

    Envelope without data; used for deletes and for every error response.
    """

    status: str
    message: str
