"""Redis-backed lock store using SET NX PX and Lua scripts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from redis.asyncio import Redis

from redislock.core.locks import LockStore
from redislock.core.scripts import DEL_IF_EQUAL, PEXPIRE_IF_EQUAL
from redislock.utils.logging import get_logger

if TYPE_CHECKING:
    from redislock.core.settings import LockSettings


logger = get_logger("redislock.store")


class RedisLockStore(LockStore):
    """Shared store for any number of locks on one Redis connection pool."""

    def __init__(self, redis: Redis, *, owns_client: bool = False) -> None:
        self._redis = redis
        self._owns_client = owns_client
        # Scripts run via EVALSHA and are loaded on first NOSCRIPT.
        self._del_if_equal = redis.register_script(DEL_IF_EQUAL)
        self._pexpire_if_equal = redis.register_script(PEXPIRE_IF_EQUAL)

    @classmethod
    def from_url(cls, url: str) -> "RedisLockStore":
        logger.debug("Connecting lock store to %s", url)
        return cls(Redis.from_url(url), owns_client=True)

    @classmethod
    def from_settings(cls, settings: "LockSettings") -> "RedisLockStore":
        return cls.from_url(settings.redis_url)

    async def set_if_absent(self, key: str, value: str, ttl_ms: int) -> bool:
        return bool(await self._redis.set(key, value, px=ttl_ms, nx=True))

    async def delete_if_equal(self, key: str, expected: str) -> int:
        return int(await self._del_if_equal(keys=[key], args=[expected]))

    async def expire_if_equal(self, key: str, expected: str, ttl_ms: int) -> int:
        return int(await self._pexpire_if_equal(keys=[key], args=[expected, ttl_ms]))

    async def close(self) -> None:
        if self._owns_client:
            await self._redis.aclose()


def create_store(url: Optional[str] = None) -> RedisLockStore:
    """Build a store from ``url`` or from the environment settings."""
    if url is None:
        from redislock.core.settings import LockSettings

        return RedisLockStore.from_settings(LockSettings.from_env())
    return RedisLockStore.from_url(url)
