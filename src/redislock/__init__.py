"""Distributed mutual-exclusion locks stored in Redis."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .core.errors import LockAcquisitionError, LockError, LockExtendError, LockReleaseError
from .core.lock import Lock
from .core.locks import LockStore
from .core.locks_redis import RedisLockStore, create_store
from .core.registry import RETRY_FOREVER, LockContext, default_context
from .core.settings import LockSettings

__version__ = "0.1.0"

__all__ = [
    "Lock",
    "LockAcquisitionError",
    "LockContext",
    "LockError",
    "LockExtendError",
    "LockReleaseError",
    "LockSettings",
    "LockStore",
    "RETRY_FOREVER",
    "RedisLockStore",
    "__version__",
    "create_lock",
    "create_store",
    "get_acquired_locks",
    "get_defaults",
    "set_defaults",
]


def create_lock(
    store: LockStore,
    options: Optional[Mapping[str, Any]] = None,
    *,
    context: Optional[LockContext] = None,
) -> Lock:
    """Return a new lock using ``store``; unset options come from the defaults."""
    return Lock(store, options, context=context)


def set_defaults(options: Optional[Mapping[str, Any]], *, context: Optional[LockContext] = None) -> None:
    """Update the defaults for locks created afterwards. Unknown keys are ignored."""
    (context or default_context).defaults.set(options)


def get_defaults(*, context: Optional[LockContext] = None) -> Dict[str, int]:
    return (context or default_context).defaults.get()


def get_acquired_locks(*, context: Optional[LockContext] = None) -> List[Lock]:
    """Return the locks currently acquired by this process."""
    return (context or default_context).registry.list()
