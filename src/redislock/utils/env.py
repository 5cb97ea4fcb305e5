"""Environment helper utilities."""

from __future__ import annotations

import os


def get_str_env(name: str, *, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_int_env(name: str, *, default: int) -> int:
    """Return an integer environment value, or ``default`` when unset."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
