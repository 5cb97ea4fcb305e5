"""Lock settings loader."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from redislock.core.registry import LockContext, default_context
from redislock.utils.env import get_int_env, get_str_env


class LockSettings(BaseModel):
    redis_url: str = "redis://localhost:6379/0"
    timeout: int = Field(default=10000, gt=0)
    retries: int = 0  # negative retries forever
    delay: int = Field(default=50, ge=0)

    @classmethod
    def from_file(cls, path: Path) -> "LockSettings":
        data = yaml.safe_load(path.read_text()) or {}
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid lock settings: {exc}") from exc

    @classmethod
    def from_env(cls) -> "LockSettings":
        defaults = cls()
        try:
            return cls(
                redis_url=get_str_env("REDISLOCK_URL", default=defaults.redis_url),
                timeout=get_int_env("REDISLOCK_TIMEOUT", default=defaults.timeout),
                retries=get_int_env("REDISLOCK_RETRIES", default=defaults.retries),
                delay=get_int_env("REDISLOCK_DELAY", default=defaults.delay),
            )
        except ValidationError as exc:
            raise ValueError(f"Invalid lock settings: {exc}") from exc

    def apply_defaults(self, context: Optional[LockContext] = None) -> None:
        """Make these values the defaults for locks created in ``context``."""
        (context or default_context).defaults.set(self.model_dump(exclude={"redis_url"}))
