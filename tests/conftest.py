from __future__ import annotations

from typing import List

import fakeredis
import fakeredis.aioredis
import pytest

from redislock.core.locks_redis import RedisLockStore
from redislock.core.registry import LockContext


class CountingStore(RedisLockStore):
    """Records every acquisition attempt made against the store."""

    def __init__(self, redis) -> None:
        super().__init__(redis)
        self.attempts: List[str] = []

    async def set_if_absent(self, key: str, value: str, ttl_ms: int) -> bool:
        self.attempts.append(key)
        return await super().set_if_absent(key, value, ttl_ms)


@pytest.fixture
def redis():
    return fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer())


@pytest.fixture
def store(redis):
    return CountingStore(redis)


@pytest.fixture
def context():
    return LockContext()
