"""응답 봉투 빌더 모듈.

Response envelope builder.
Every operation result, success or failure, leaves the service layer as one
of these shapes::

    {"status": "success", "message": "...", "data": {...}}
    {"status": "success", "message": "...", "data": [...], "pagination": {...}}
    {"status": "success", "message": "..."}
    {"status": "error",   "message": "..."}

The builders are pure functions with no side effects.
"""

from typing import TypeVar

from blogapi.schemas.common import ApiResponse, ApiResponseEmpty, ApiResponsePaginated
from blogapi.utils.exceptions import INTERNAL_ERROR_MESSAGE, ErrorKind
from blogapi.utils.pagination import Pagination

T = TypeVar("T")

STATUS_SUCCESS: str = "success"
STATUS_ERROR: str = "error"


def ok(message: str, data: T) -> ApiResponse[T]:
    """단일 항목 성공 응답을 생성합니다.

    Build a single-entity success envelope. It carries no pagination field.
    """
    return ApiResponse(status=STATUS_SUCCESS, message=message, data=data)


def ok_paginated(message: str, data: list[T], pagination: Pagination) -> ApiResponsePaginated[T]:
    """목록 성공 응답을 생성합니다.

    Build a list success envelope. Pagination is mandatory.
    """
    return ApiResponsePaginated(
        status=STATUS_SUCCESS,
        message=message,
        data=list(data),
        pagination=pagination,
    )


def empty(message: str) -> ApiResponseEmpty:
    """데이터 없는 성공 응답 (삭제 등) — Success envelope without data, used by deletes."""
    return ApiResponseEmpty(status=STATUS_SUCCESS, message=message)


def fail(message: str, kind: ErrorKind) -> ApiResponseEmpty:
    """실패 응답을 생성합니다.

    Build a failure envelope. Infrastructure failures never echo the given
    message; callers always see the generic text.

    Args:
        message: 호출자용 메시지 (Caller-facing message)
        kind: 오류 종류 (Error kind from the taxonomy)

    Returns:
        ApiResponseEmpty: status="error" 봉투 (Error envelope)
    """
    if kind is ErrorKind.INFRASTRUCTURE:
        message = INTERNAL_ERROR_MESSAGE
    elif not message:
        message = kind.value.replace("_", " ")
    return ApiResponseEmpty(status=STATUS_ERROR, message=message)
