"""Redis 조회 캐시 모듈 — cache-aside 패턴.

Read cache backed by Redis (cache-aside).
Facades cache find/find_all envelopes under entity-prefixed keys. A write
only marks its prefixes stale on the session; they are purged after the
commit, so a read racing the write cannot re-cache the old row. Every
method degrades to a miss or a no-op when Redis is not configured or
unavailable; a cache failure never fails a request.
"""

import json
import logging
from typing import Any

import redis.asyncio as redis
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.config import settings

logger = logging.getLogger(__name__)

# 세션에 쌓이는 무효화 대상 접두사 키 — Session.info key holding stale prefixes
STALE_PREFIXES_KEY: str = "stale_cache_prefixes"


class CacheManager:
    """Redis 기반 캐시 관리자.

    Cache-aside manager. ``_redis`` stays None until ``connect`` is called
    with a configured ``REDIS_URL``; tests rely on that to run uncached.
    """

    def __init__(self) -> None:
        self._redis: redis.Redis | None = None

    async def connect(self) -> None:
        """연결 풀을 엽니다 (앱 시작 시 1회) — Open the pool at startup."""
        if not settings.REDIS_URL:
            logger.info("REDIS_URL not set — read cache disabled")
            return
        self._redis = redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
        )
        try:
            await self._redis.ping()
            logger.info("Redis connected: %s", settings.REDIS_URL)
        except (redis.RedisError, OSError) as exc:
            logger.warning("Redis ping failed — cache disabled: %s", exc)
            await self._redis.aclose()
            self._redis = None

    async def disconnect(self) -> None:
        """연결 풀을 닫습니다 (앱 종료 시 1회) — Close the pool at shutdown."""
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None

    @property
    def enabled(self) -> bool:
        return self._redis is not None

    async def get(self, key: str) -> Any | None:
        """키에 해당하는 값을 반환, 없거나 오류면 None — Cached value or None."""
        if self._redis is None:
            return None
        try:
            data = await self._redis.get(key)
        except (redis.RedisError, OSError) as exc:
            logger.debug("Cache GET error for key=%r: %s", key, exc)
            return None
        return json.loads(data) if data is not None else None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """값을 저장합니다, 실패는 기록만 함 — Store *value*; failures are only logged."""
        if self._redis is None:
            return
        try:
            await self._redis.set(key, json.dumps(value, default=str), ex=ttl or settings.CACHE_TTL_SECONDS)
        except (redis.RedisError, OSError) as exc:
            logger.debug("Cache SET error for key=%r: %s", key, exc)

    async def delete_pattern(self, pattern: str) -> None:
        """패턴에 맞는 키를 SCAN으로 삭제합니다 — Delete keys matching *pattern* via SCAN."""
        if self._redis is None:
            return
        try:
            keys: list[str] = [key async for key in self._redis.scan_iter(match=pattern)]
            if keys:
                await self._redis.delete(*keys)
                logger.debug("Cache invalidated %d key(s) matching %r", len(keys), pattern)
        except (redis.RedisError, OSError) as exc:
            logger.debug("Cache DELETE_PATTERN error for pattern=%r: %s", pattern, exc)

    async def invalidate(self, prefix: str) -> None:
        """엔티티 접두사의 모든 키를 무효화합니다 — Purge every key under *prefix*."""
        await self.delete_pattern(f"{prefix}:*")

    @staticmethod
    def mark_stale(db: AsyncSession, *prefixes: str) -> None:
        """쓰기 세션에 무효화할 접두사를 기록합니다 — Queue *prefixes* for purge after *db* commits."""
        db.info.setdefault(STALE_PREFIXES_KEY, set()).update(prefixes)

    @staticmethod
    def discard_stale(db: AsyncSession) -> None:
        """롤백된 쓰기의 대기 접두사를 버립니다 — Drop queued prefixes of a rolled-back write."""
        db.info.pop(STALE_PREFIXES_KEY, None)

    async def purge_stale(self, db: AsyncSession) -> None:
        """커밋 후 대기 중인 접두사를 모두 무효화합니다.

        Purge every prefix queued on *db*. Call only after the commit has
        succeeded.
        """
        prefixes: set[str] = db.info.pop(STALE_PREFIXES_KEY, set())
        for prefix in sorted(prefixes):
            await self.invalidate(prefix)


# 싱글턴 인스턴스 — Singleton instance
cache: CacheManager = CacheManager()
