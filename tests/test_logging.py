from __future__ import annotations

import logging

from rich.logging import RichHandler

from redislock.utils.logging import get_logger


def test_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("REDISLOCK_LOG_LEVEL", raising=False)

    logger = get_logger("redislock.tests.default_level")

    assert logger.level == logging.INFO
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.handlers[0].level == logging.INFO


def test_level_read_from_environment(monkeypatch):
    monkeypatch.setenv("REDISLOCK_LOG_LEVEL", "debug")

    logger = get_logger("redislock.tests.env_level")

    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG
    assert logger.isEnabledFor(logging.DEBUG)


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("REDISLOCK_LOG_LEVEL", "DEBUG")

    logger = get_logger("redislock.tests.explicit_level", logging.WARNING)

    assert logger.level == logging.WARNING


def test_logger_configured_once(monkeypatch):
    monkeypatch.delenv("REDISLOCK_LOG_LEVEL", raising=False)
    first = get_logger("redislock.tests.once")
    second = get_logger("redislock.tests.once", logging.DEBUG)

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO
