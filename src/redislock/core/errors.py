"""Errors raised by lock operations."""

from __future__ import annotations


class LockError(Exception):
    """Base class for every lock failure."""


class LockAcquisitionError(LockError):
    """A lock could not be acquired."""


class LockReleaseError(LockError):
    """A lock could not be released."""


class LockExtendError(LockError):
    """A lock could not be extended."""
