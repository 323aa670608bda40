"""서비스 작업 경계 모듈 — 이름 있는 작업 단위와 저장소 오류 변환.

Service operation boundary.
``service_operation`` wraps one facade call as a named unit of work:

- storage errors are translated into the error taxonomy before they leave
  the facade (``IntegrityError`` → ``ConflictError``; any other
  ``SQLAlchemyError``, ``OSError`` or ``TimeoutError`` → ``InfrastructureError``);
- cancellation propagates untouched, so no envelope is built for a
  cancelled request;
- registered listeners are told when each operation starts and ends, which
  is where external tracing/metrics attach. Nothing here emits telemetry.
"""

import asyncio
import functools
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, ParamSpec, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from blogapi.utils.exceptions import ConflictError, InfrastructureError, ServiceError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

OUTCOME_SUCCESS: str = "success"
OUTCOME_CANCELLED: str = "cancelled"


@dataclass(frozen=True)
class OperationEvent:
    """작업 경계 이벤트 — 시작 시 outcome/duration은 None.

    Boundary event handed to listeners. ``outcome`` and ``duration`` are
    None on the start event.
    """

    name: str
    phase: str  # "start" | "end"
    outcome: str | None = None
    duration: float | None = None


OperationListener = Callable[[OperationEvent], None]

_listeners: list[OperationListener] = []


def add_operation_listener(listener: OperationListener) -> None:
    """작업 경계 리스너를 등록합니다 — Register a boundary listener."""
    _listeners.append(listener)


def remove_operation_listener(listener: OperationListener) -> None:
    """등록된 리스너를 제거합니다 — Unregister a boundary listener."""
    if listener in _listeners:
        _listeners.remove(listener)


def _notify(event: OperationEvent) -> None:
    for listener in list(_listeners):
        try:
            listener(event)
        except Exception:
            # 계측 실패가 요청을 깨뜨리지 않도록 — Instrumentation must never break a request
            logger.warning("Operation listener failed for %s", event.name, exc_info=True)


def service_operation(name: str) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """파사드 메서드를 이름 있는 작업 경계로 감쌉니다.

    Decorate an async facade method as the named operation *name*.

    Args:
        name: 작업 이름, 예: "FindAllPosts" (Operation name, e.g. "FindAllPosts")

    Returns:
        데코레이터 (Decorator preserving the wrapped signature)
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            started: float = time.perf_counter()
            outcome: str = OUTCOME_SUCCESS
            logger.info("Starting operation: %s", name)
            _notify(OperationEvent(name=name, phase="start"))
            try:
                return await func(*args, **kwargs)
            except ServiceError as exc:
                outcome = exc.kind.value
                logger.info("Operation %s rejected: %s", name, exc.message)
                raise
            except IntegrityError as exc:
                outcome = ConflictError.kind.value
                logger.info("Operation %s hit a uniqueness constraint: %s", name, exc.orig)
                raise ConflictError() from exc
            except (SQLAlchemyError, OSError, TimeoutError) as exc:
                outcome = InfrastructureError.kind.value
                logger.exception("Operation %s failed on storage", name)
                raise InfrastructureError() from exc
            except asyncio.CancelledError:
                outcome = OUTCOME_CANCELLED
                logger.info("Operation %s cancelled", name)
                raise
            finally:
                elapsed: float = time.perf_counter() - started
                logger.info("Operation %s finished: %s (%.3fs)", name, outcome, elapsed)
                _notify(OperationEvent(name=name, phase="end", outcome=outcome, duration=elapsed))

        setattr(wrapper, "operation_name", name)
        return wrapper

    return decorator


def operation_name(func: Any) -> str | None:
    """함수에 지정된 작업 이름을 반환합니다 — Operation name of a decorated callable."""
    return getattr(func, "operation_name", None)
