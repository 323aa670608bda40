"""데이터베이스 엔진 및 세션 설정 모듈.

Async SQLAlchemy engine, session factory and declarative base.
Repositories never hold a session: the request's session is handed to them
on every call, which is what lets tests swap in an SQLite session.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from blogapi.cache import cache
from blogapi.config import settings


def engine_options(url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션 — Pool options for *url*; SQLite takes no pool sizing."""
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options.update(pool_size=5, max_overflow=10)
    return options


engine: AsyncEngine = create_async_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

# 커밋 후에도 응답 변환을 위해 속성 유지 (Rows stay readable after the router commits)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """모든 ORM 모델의 선언적 베이스 — Declarative base for the blog models."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 DB 세션 의존성.

    Yield one session per request. Work the router did not commit is
    rolled back when the request fails.

    Yields:
        AsyncSession: 요청 전용 세션 (Request-scoped session)
    """
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            cache.discard_stale(session)
            raise


async def commit(db: AsyncSession) -> None:
    """트랜잭션을 커밋한 뒤 캐시를 무효화합니다.

    Commit *db*, then purge the cache prefixes its writes marked stale.
    Purging after the commit keeps a concurrent read from re-caching the
    previous row.
    """
    await db.commit()
    await cache.purge_stale(db)


async def create_tables() -> None:
    """등록된 모든 모델의 테이블을 생성합니다 (이미 있으면 건너뜀).

    Create missing tables for every model. Existing tables are left as they
    are; there is no schema evolution.
    """
    import blogapi.models  # noqa: F401 — register all models with metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
