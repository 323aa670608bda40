"""작업 경계 및 오류 분류 테스트.

Operation boundary and error taxonomy tests — storage error translation,
cancellation, and listener notification.
"""

import asyncio

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from blogapi.utils.exceptions import (
    INTERNAL_ERROR_MESSAGE,
    ConflictError,
    ErrorKind,
    InfrastructureError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from blogapi.utils.operation import (
    OperationEvent,
    add_operation_listener,
    operation_name,
    remove_operation_listener,
    service_operation,
)


@pytest.fixture
def events():
    """작업 경계 이벤트 수집기."""
    collected: list[OperationEvent] = []
    add_operation_listener(collected.append)
    yield collected
    remove_operation_listener(collected.append)


class TestErrorKinds:
    """오류 종류별 HTTP 상태 테스트."""

    def test_status_codes(self):
        assert ValidationError().status_code == 400
        assert UnauthorizedError().status_code == 401
        assert NotFoundError().status_code == 404
        assert ConflictError().status_code == 409
        assert InfrastructureError().status_code == 500

    def test_infrastructure_message_is_generic(self):
        """인프라 오류 메시지는 항상 일반 메시지."""
        assert InfrastructureError("disk full").message == INTERNAL_ERROR_MESSAGE

    def test_unauthorized_has_bearer_header(self):
        assert UnauthorizedError().headers == {"WWW-Authenticate": "Bearer"}

    def test_kind_values(self):
        assert ErrorKind.VALIDATION.value == "bad_request"
        assert ErrorKind.VALIDATION.http_status == 400


class TestServiceOperation:
    """service_operation 데코레이터 테스트."""

    async def test_success_notifies_start_and_end(self, events):
        """성공 시 시작/종료 이벤트."""
        @service_operation("FindAllPosts")
        async def handler() -> str:
            return "done"

        assert await handler() == "done"
        assert [e.phase for e in events] == ["start", "end"]
        assert events[-1].name == "FindAllPosts"
        assert events[-1].outcome == "success"
        assert events[-1].duration is not None

    async def test_operation_name_attribute(self):
        @service_operation("FindPost")
        async def handler() -> None:
            return None

        assert operation_name(handler) == "FindPost"

    async def test_service_error_passes_through(self, events):
        """비즈니스 오류는 그대로 전달."""
        @service_operation("FindPost")
        async def handler() -> None:
            raise NotFoundError("Post with id 3 not found")

        with pytest.raises(NotFoundError):
            await handler()
        assert events[-1].outcome == "not_found"

    async def test_integrity_error_becomes_conflict(self):
        """무결성 오류는 ConflictError로 변환."""
        @service_operation("CreateCategory")
        async def handler() -> None:
            raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

        with pytest.raises(ConflictError):
            await handler()

    async def test_storage_error_becomes_infrastructure(self, events):
        """저장소 오류는 InfrastructureError로 변환."""
        @service_operation("FindAllUsers")
        async def handler() -> None:
            raise OperationalError("SELECT", {}, Exception("connection refused"))

        with pytest.raises(InfrastructureError) as exc_info:
            await handler()
        assert exc_info.value.message == INTERNAL_ERROR_MESSAGE
        assert events[-1].outcome == "internal_error"

    async def test_timeout_becomes_infrastructure(self):
        @service_operation("FindAllUsers")
        async def handler() -> None:
            raise TimeoutError()

        with pytest.raises(InfrastructureError):
            await handler()

    async def test_cancellation_propagates(self, events):
        """취소는 변환 없이 전파."""
        @service_operation("FindAllPosts")
        async def handler() -> None:
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await handler()
        assert events[-1].outcome == "cancelled"

    async def test_failing_listener_does_not_break_call(self):
        """리스너 실패가 작업을 깨뜨리지 않음."""
        def broken(event: OperationEvent) -> None:
            raise RuntimeError("boom")

        @service_operation("FindPost")
        async def handler() -> int:
            return 1

        add_operation_listener(broken)
        try:
            assert await handler() == 1
        finally:
            remove_operation_listener(broken)
