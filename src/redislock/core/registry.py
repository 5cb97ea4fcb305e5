"""Process-scoped lock registry and defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

if TYPE_CHECKING:
    from redislock.core.lock import Lock


# Any negative retry count means retry until the key is free.
RETRY_FOREVER = -1


class LockDefaults(BaseModel):
    """Options every new lock inherits unless overridden."""

    timeout: int = Field(default=10000, gt=0)
    retries: int = 0
    delay: int = Field(default=50, ge=0)

    def get(self) -> Dict[str, int]:
        return self.model_dump()

    def set(self, options: Optional[Mapping[str, Any]]) -> None:
        """Update recognized keys, coercing values to int.

        Unknown keys and ``None`` values are ignored so callers can pass a
        larger configuration mapping. Nothing changes if any value is invalid.
        """
        updates = {name: int(value) for name, value in self._recognized(options).items()}
        validated = self._validate(self.get() | updates)
        for name, value in validated.items():
            setattr(self, name, value)

    def apply(self, options: Optional[Mapping[str, Any]] = None) -> Dict[str, int]:
        """Merge the recognized keys of ``options`` over the current defaults."""
        return self._validate(self.get() | self._recognized(options))

    @classmethod
    def _recognized(cls, options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        options = options or {}
        return {
            name: options[name]
            for name in cls.model_fields
            if options.get(name) is not None
        }

    @classmethod
    def _validate(cls, values: Dict[str, Any]) -> Dict[str, int]:
        try:
            return cls.model_validate(values).model_dump()
        except ValidationError as exc:
            raise ValueError(f"Invalid lock options: {exc}") from exc


class LockRegistry:
    """Locks currently acquired by this process, keyed by lock id."""

    def __init__(self) -> None:
        self._locks: Dict[str, "Lock"] = {}

    def add(self, lock: "Lock") -> None:
        self._locks[lock.id] = lock

    def remove(self, lock_id: str) -> None:
        self._locks.pop(lock_id, None)

    def list(self) -> List["Lock"]:
        return list(self._locks.values())

    def __len__(self) -> int:
        return len(self._locks)

    def __contains__(self, lock_id: object) -> bool:
        return lock_id in self._locks


@dataclass
class LockContext:
    """Registry and defaults shared by the locks created against it."""

    registry: LockRegistry = field(default_factory=LockRegistry)
    defaults: LockDefaults = field(default_factory=LockDefaults)


default_context = LockContext()
