"""Abstract interfaces for the lock backing store."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class AsyncLock(Protocol):
    async def __aenter__(self) -> object: ...
    async def __aexit__(self, exc_type, exc, tb) -> None: ...


@runtime_checkable
class LockStore(Protocol):
    """Atomic primitives a lock needs from its store."""

    async def set_if_absent(self, key: str, value: str, ttl_ms: int) -> bool:
        """Set ``key`` to ``value`` with a ttl, only if ``key`` does not exist."""
        ...

    async def delete_if_equal(self, key: str, expected: str) -> int:
        """Delete ``key`` if it holds ``expected``. Returns 1 or 0."""
        ...

    async def expire_if_equal(self, key: str, expected: str, ttl_ms: int) -> int:
        """Reset the ttl of ``key`` if it holds ``expected``. Returns 1 or 0."""
        ...
