"""페이지네이션 엔진 모듈.

Pagination engine shared by every list operation.
``paginate`` is pure: it clamps whatever the caller sent into a valid page
and never rejects input. Repositories read ``offset``/``page_size`` from the
result to build their range query.
"""

import math

from pydantic import BaseModel

from blogapi.config import settings


class Pagination(BaseModel):
    """페이지네이션 메타데이터 모델.

    Pagination metadata attached to every list envelope.

    Attributes:
        page: 실제 사용된 페이지 번호, 1부터 시작 (Clamped page actually used, 1-based)
        page_size: 실제 사용된 페이지 크기 (Clamped page size actually used)
        total_count: 전체 항목 수 (Total matching rows)
        total_pages: 전체 페이지 수, 최소 1 (Total pages, never below 1)
    """

    page: int  # 현재 페이지 번호 — 1부터 시작 (Current page, 1-indexed)
    page_size: int  # 페이지당 항목 수 (Items per page)
    total_count: int  # 전체 항목 수 (Total item count)
    total_pages: int  # 전체 페이지 수 (max(1, ceil(total_count/page_size)))

    @property
    def offset(self) -> int:
        """범위 조회용 OFFSET 값 — OFFSET for the repository range query."""
        return (self.page - 1) * self.page_size


def clamp_page_size(
    page_size: int,
    min_page_size: int | None = None,
    max_page_size: int | None = None,
) -> int:
    """페이지 크기를 설정된 범위로 제한합니다.

    Clamp *page_size* into ``[MIN_PAGE_SIZE, MAX_PAGE_SIZE]``.
    """
    low: int = settings.MIN_PAGE_SIZE if min_page_size is None else min_page_size
    high: int = settings.MAX_PAGE_SIZE if max_page_size is None else max_page_size
    return max(low, min(page_size, high))


def paginate(
    page: int,
    page_size: int,
    total_count: int,
    *,
    min_page_size: int | None = None,
    max_page_size: int | None = None,
) -> Pagination:
    """요청 페이지 값을 보정하고 페이지네이션 메타데이터를 계산합니다.

    Compute pagination metadata for a list query.

    Zero, negative or oversized values are clamped instead of rejected:
    page_size into ``[min, max]``, page into ``[1, total_pages]``. The
    returned page is the value actually used, so callers can detect a
    silent correction by comparing it with what they sent.

    Args:
        page: 요청 페이지 번호 (Requested page, any integer)
        page_size: 요청 페이지 크기 (Requested page size, any integer)
        total_count: 조건에 맞는 전체 항목 수 (Total matching rows)
        min_page_size: 최소 페이지 크기, 기본값은 설정값 (Defaults to settings.MIN_PAGE_SIZE)
        max_page_size: 최대 페이지 크기, 기본값은 설정값 (Defaults to settings.MAX_PAGE_SIZE)

    Returns:
        Pagination: 보정된 페이지네이션 메타데이터 (Clamped pagination metadata)
    """
    size: int = clamp_page_size(page_size, min_page_size, max_page_size)
    total: int = max(total_count, 0)
    total_pages: int = max(1, math.ceil(total / size))
    current: int = min(max(page, 1), total_pages)

    return Pagination(
        page=current,
        page_size=size,
        total_count=total,
        total_pages=total_pages,
    )
