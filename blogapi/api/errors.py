"""예외 핸들러 모듈 — 모든 오류를 실패 봉투로 변환.

Exception handlers. Every failure leaves the API as
``{"status": "error", "message": ...}`` with the HTTP status of its kind.
Each failure is scoped to its own request.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from blogapi.utils.envelope import fail
from blogapi.utils.exceptions import INTERNAL_ERROR_MESSAGE, ErrorKind, ServiceError

logger = logging.getLogger(__name__)

_STATUS_KIND: dict[int, ErrorKind] = {
    400: ErrorKind.VALIDATION,
    401: ErrorKind.UNAUTHORIZED,
    404: ErrorKind.NOT_FOUND,
    409: ErrorKind.CONFLICT,
}


def _error_response(message: str, kind: ErrorKind, status_code: int, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=fail(message, kind).model_dump(),
        headers=headers,
    )


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return _error_response(exc.message, exc.kind, exc.status_code, exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 형식 오류 → 400 — Malformed requests are bad requests, not 422."""
    errors = exc.errors()
    message: str = "Bad request"
    if errors:
        first = errors[0]
        location: str = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg", message)
    return _error_response(message, ErrorKind.VALIDATION, 400)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    kind: ErrorKind = _STATUS_KIND.get(exc.status_code, ErrorKind.VALIDATION)
    if exc.status_code >= 500:
        kind = ErrorKind.INFRASTRUCTURE
    return _error_response(str(exc.detail), kind, exc.status_code, getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(INTERNAL_ERROR_MESSAGE, ErrorKind.INFRASTRUCTURE, 500)


def register_error_handlers(app: FastAPI) -> None:
    """애플리케이션에 예외 핸들러를 등록합니다 — Install every handler on *app*."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
