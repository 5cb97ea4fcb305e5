"""Lock state machine backed by a shared store."""

from __future__ import annotations

import uuid
from typing import Any, Mapping, Optional

from tenacity import AsyncRetrying, retry_if_result, stop_after_attempt, stop_never, wait_fixed

from redislock.core.errors import LockAcquisitionError, LockExtendError, LockReleaseError
from redislock.core.locks import AsyncLock, LockStore
from redislock.core.registry import LockContext, default_context
from redislock.utils.logging import get_logger


logger = get_logger("redislock.lock")


class Lock:
    """Client-side handle for one lock key.

    The instance writes its ``id`` as the key's value; only a holder of that
    token may release or extend the lock. An instance guards one critical
    section at a time and may be reused after a release.

    Calls on the same instance must not overlap. Separate instances may share
    a store and run concurrently.
    """

    def __init__(
        self,
        store: LockStore,
        options: Optional[Mapping[str, Any]] = None,
        *,
        context: Optional[LockContext] = None,
    ) -> None:
        self._id = str(uuid.uuid4())
        self._store = store
        self._context = context or default_context
        self._locked = False
        self._key: Optional[str] = None

        settings = self._context.defaults.apply(options)
        self.timeout: int = settings["timeout"]
        self.retries: int = settings["retries"]
        self.delay: int = settings["delay"]

    def __repr__(self) -> str:
        return f"<Lock id={self._id} key={self._key!r} locked={self._locked}>"

    @property
    def id(self) -> str:
        return self._id

    @property
    def key(self) -> Optional[str]:
        return self._key

    @property
    def locked(self) -> bool:
        return self._locked

    async def acquire(self, key: str) -> None:
        """Acquire ``key``, retrying up to ``retries`` times ``delay`` ms apart."""
        if self._locked:
            raise LockAcquisitionError("Lock already held")

        try:
            await self._attempt_lock(key)
        except LockAcquisitionError:
            raise
        except Exception as exc:
            raise LockAcquisitionError(str(exc)) from exc

        self._locked = True
        self._key = key
        self._context.registry.add(self)
        logger.debug("Acquired lock %s on %s", self._id, key)

    async def release(self) -> None:
        """Release the lock if this instance still owns the key.

        Local state is cleared whether or not the key still held our token.
        """
        if not self._locked:
            raise LockReleaseError("Lock has not been acquired")

        key = self._key
        try:
            released = await self._store.delete_if_equal(key, self._id)
        except Exception as exc:
            raise LockReleaseError(str(exc)) from exc

        self._reset()
        if not released:
            logger.warning("Lock %s on %s had expired before release", self._id, key)
            raise LockReleaseError(f'Lock on "{key}" had expired')
        logger.debug("Released lock %s on %s", self._id, key)

    async def extend(self, timeout: Optional[int] = None) -> None:
        """Reset the lease to ``timeout`` ms, defaulting to the lock's timeout."""
        time = self.timeout if timeout is None else timeout
        if isinstance(time, bool) or not isinstance(time, int) or time <= 0:
            raise LockExtendError("Int time is required to extend lock")

        if not self._locked:
            raise LockExtendError("Lock has not been acquired")

        key = self._key
        try:
            extended = await self._store.expire_if_equal(key, self._id, time)
        except Exception as exc:
            raise LockExtendError(str(exc)) from exc

        if not extended:
            self._reset()
            logger.warning("Lock %s on %s had expired before extend", self._id, key)
            raise LockExtendError(f'Lock on "{key}" had expired')
        logger.debug("Extended lock %s on %s by %d ms", self._id, key, time)

    def hold(self, key: str) -> AsyncLock:
        """Return an async context manager acquiring ``key`` for its body."""
        return _HeldLock(self, key)

    async def _attempt_lock(self, key: str) -> None:
        # Only a held key is retried; store errors propagate from the first attempt.
        retrying = AsyncRetrying(
            stop=stop_never if self.retries < 0 else stop_after_attempt(self.retries + 1),
            wait=wait_fixed(self.delay / 1000),
            retry=retry_if_result(lambda acquired: not acquired),
            retry_error_callback=lambda state: state.outcome.result(),
        )
        acquired = await retrying(self._store.set_if_absent, key, self._id, self.timeout)
        if not acquired:
            raise LockAcquisitionError(f'Could not acquire lock on "{key}"')

    def _reset(self) -> None:
        self._locked = False
        self._key = None
        self._context.registry.remove(self._id)


class _HeldLock:
    def __init__(self, lock: Lock, key: str) -> None:
        self._lock = lock
        self._key = key

    async def __aenter__(self) -> Lock:
        await self._lock.acquire(self._key)
        return self._lock

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            await self._lock.release()
        except LockReleaseError:
            if exc_type is None:
                raise
            # keep the body's exception
            logger.exception("Failed to release %s after error", self._key)
