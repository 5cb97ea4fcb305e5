"""Core lock primitives."""

from .errors import LockAcquisitionError, LockError, LockExtendError, LockReleaseError
from .lock import Lock
from .locks import AsyncLock, LockStore
from .locks_redis import RedisLockStore
from .registry import RETRY_FOREVER, LockContext, LockDefaults, LockRegistry

__all__ = [
    "AsyncLock",
    "Lock",
    "LockAcquisitionError",
    "LockContext",
    "LockDefaults",
    "LockError",
    "LockExtendError",
    "LockRegistry",
    "LockReleaseError",
    "LockStore",
    "RETRY_FOREVER",
    "RedisLockStore",
]
