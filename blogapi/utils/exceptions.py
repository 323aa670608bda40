"""서비스 오류 분류 및 HTTP 예외 클래스 모듈.

Service error taxonomy and HTTP exception classes.
Every failure a facade reports is one of these kinds. Repository and storage
errors are translated into them at the facade boundary, so the response
envelope builder only ever sees a kind and a caller-safe message.

Usage:
    from blogapi.utils.exceptions import NotFoundError, ConflictError
    raise NotFoundError("Post with id 3 not found")
    raise ConflictError("Email already exists")
"""

from enum import Enum

from fastapi import HTTPException, status


class ErrorKind(str, Enum):
    """오류 종류 — 응답 봉투와 HTTP 상태 코드 매핑 기준.

    Error kind; decides the envelope message policy and the HTTP status.
    """

    VALIDATION = "bad_request"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    INFRASTRUCTURE = "internal_error"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INFRASTRUCTURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# 내부 오류 시 외부에 노출되는 유일한 메시지 — The only message callers see for infrastructure failures
INTERNAL_ERROR_MESSAGE: str = "Internal server error"


class ServiceError(HTTPException):
    """서비스 오류 베이스 클래스.

    Base class for every error a facade may raise. Subclasses fix the kind;
    the HTTP status follows from it.

    Args:
        detail: 호출자에게 보여줄 메시지 (Caller-facing message)
    """

    kind: ErrorKind = ErrorKind.INFRASTRUCTURE
    default_detail: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(status_code=self.kind.http_status, detail=detail or self.default_detail)

    @property
    def message(self) -> str:
        return str(self.detail)


class ValidationError(ServiceError):
    """400 Bad Request 예외 — 필수 입력값 누락/오류 시 사용.

    Raised when a required request field is missing or empty. Always raised
    before the repository is touched.
    """

    kind = ErrorKind.VALIDATION
    default_detail = "Bad request"


class NotFoundError(ServiceError):
    """404 Not Found 예외 — id/email 조회 실패 시 사용.

    Raised when an id or email lookup misses. List queries never raise it;
    an empty page is a valid result.
    """

    kind = ErrorKind.NOT_FOUND
    default_detail = "Resource not found"


class ConflictError(ServiceError):
    """409 Conflict 예외 — 고유 제약 위반 시 사용.

    Raised on a uniqueness violation (duplicate email, duplicate category name).
    """

    kind = ErrorKind.CONFLICT
    default_detail = "Resource already exists"


class UnauthorizedError(ServiceError):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    Raised when a bearer token is missing, invalid or expired, or when login
    credentials do not match.
    """

    kind = ErrorKind.UNAUTHORIZED
    default_detail = "Authentication required"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail)
        self.headers = {"WWW-Authenticate": "Bearer"}


class InfrastructureError(ServiceError):
    """500 예외 — 저장소 장애, 타임아웃 등 인프라 오류.

    Storage unavailable, timeout or transport failure. The caller-facing
    message is always the generic one; the cause is logged, not returned.
    """

    kind = ErrorKind.INFRASTRUCTURE

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(INTERNAL_ERROR_MESSAGE)
