# topmark:header:start
#
#   project      : NPrint
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TRACE level, level parsing and the colored formatter."""

from __future__ import annotations

import logging
from typing import Callable

import pytest
from yachalk import chalk

from nprint.config.logging import (
    LOG_LEVEL_ENV,
    TRACE_LEVEL,
    ChalkFormatter,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
)
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("WARN", logging.WARNING),
        ("20", 20),
        ("", None),
        ("loud", None),
    ],
)
def test_parse_log_level(value: str, expected: int | None) -> None:
    """Names are case-insensitive, digits are taken as-is, the rest is unknown."""
    assert parse_log_level(value) == expected


def test_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment variable is honored when set and ignored when absent."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV, "trace")
    assert resolve_env_log_level() == TRACE_LEVEL


def test_trace_records(caplog: pytest.LogCaptureFixture) -> None:
    """`trace` emits below DEBUG under the TRACE level name."""
    logger = get_logger("nprint.tests.trace")
    with caplog.at_level(TRACE_LEVEL, logger="nprint.tests.trace"):
        logger.trace("walked %d nodes", 3)
    [record] = caplog.records
    assert record.levelno == TRACE_LEVEL
    assert record.levelname == "TRACE"
    assert record.getMessage() == "walked 3 nodes"


@parametrize(
    "level, color",
    [
        (logging.ERROR, chalk.red),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    ],
)
def test_formatter_colors_by_level(level: int, color: Callable[..., str]) -> None:
    """Each record is wrapped in the color of its severity band."""
    record = logging.LogRecord("nprint", level, __file__, 1, "msg", None, None)
    assert ChalkFormatter("%(message)s").format(record) == color("msg")


def test_formatter_leaves_lower_levels_plain() -> None:
    """Records below TRACE are not colored."""
    record = logging.LogRecord("nprint", 1, __file__, 1, "msg", None, None)
    assert ChalkFormatter("%(message)s").format(record) == "msg"
