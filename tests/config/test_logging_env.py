# topmark:header:start
#
#   project      : RstExtract
#   file         : test_logging_env.py
#   file_relpath : tests/config/test_logging_env.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for environment-driven logging configuration."""

from __future__ import annotations

import logging

import pytest

from rstextract.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from rstextract.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" info ", logging.INFO),
        ("warn", logging.WARNING),
        ("20", 20),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """Names (any case) and numbers are accepted; unknown names are ignored."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)

    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable there is no override."""
    assert resolve_env_log_level() is None


def test_setup_logging_installs_single_handler() -> None:
    """Repeated setup does not stack handlers."""
    try:
        setup_logging(level=logging.INFO)
        setup_logging(level=logging.INFO)

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ChalkFormatter)
        assert root.level == logging.INFO
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_setup_logging_defaults_to_critical() -> None:
    """No level and no environment means only critical messages."""
    try:
        setup_logging()
        assert logging.getLogger().level == logging.CRITICAL
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_trace_method(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers expose a trace() method below DEBUG."""
    logger = get_logger("rstextract.tests")

    with caplog.at_level(TRACE_LEVEL):
        logger.trace("tracing %s", "works")

    assert [r.levelno for r in caplog.records] == [TRACE_LEVEL]
    assert caplog.records[0].getMessage() == "tracing works"
