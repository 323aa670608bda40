"""테스트 인프라 — SQLite 인메모리 DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
aiosqlite + StaticPool keeps every connection on the same in-memory
database. Tables are created before and dropped after each test. The read
cache is left disconnected so every request hits the database.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

import blogapi.models  # noqa: F401 — register all models with metadata
from blogapi.cache import cache
from blogapi.database import Base, get_db
from blogapi.main import app
from blogapi.models.category import Category
from blogapi.models.comment import Comment
from blogapi.models.post import Post
from blogapi.models.user import User
from blogapi.utils.jwt import create_access_token
from blogapi.utils.password import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def disable_cache():
    """Redis 캐시 비활성화 — 모든 조회가 DB를 거치도록."""
    cache._redis = None
    yield
    cache._redis = None


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성하고 종료 시 삭제합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def user(db: AsyncSession) -> User:
    """테스트 사용자를 생성합니다."""
    u = User(
        firstname="Jane",
        lastname="Doe",
        email="jane@example.com",
        password=hash_password("secret123!"),
    )
    db.add(u)
    await db.flush()
    await db.refresh(u)
    return u


@pytest_asyncio.fixture
async def category(db: AsyncSession) -> Category:
    """테스트 카테고리를 생성합니다."""
    c = Category(name="Tech")
    db.add(c)
    await db.flush()
    await db.refresh(c)
    return c


@pytest_asyncio.fixture
async def post(db: AsyncSession, user: User, category: Category) -> Post:
    """테스트 게시글을 생성합니다."""
    p = Post(
        title="Hello",
        body="First post",
        img="",
        category_id=category.id,
        user_id=user.id,
        user_name="Jane Doe",
    )
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


@pytest_asyncio.fixture
async def comment(db: AsyncSession, post: Post) -> Comment:
    """테스트 댓글을 생성합니다."""
    c = Comment(id_post_comment=post.id, user_name_comment="Bob", comment="Nice post")
    db.add(c)
    await db.flush()
    await db.refresh(c)
    return c


@pytest.fixture
def token(user: User) -> str:
    return create_access_token({"sub": str(user.id), "email": user.email})


@pytest.fixture
def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
