# topmark:header:start
#
#   project      : NPrint
#   file         : logging.py
#   file_relpath : src/nprint/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint logging: a TRACE level below DEBUG and level-colored records on stderr.

The markup pipeline only ever logs at TRACE level. It sits on the output path
of its callers and stays quiet unless ``NPRINT_LOG_LEVEL`` (or the CLI's
``-v`` flags) ask for more.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "NPRINT_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class NprintLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(NprintLogger)


# Highest threshold first; records below TRACE are left uncolored.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[..., str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with `yachalk`."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, colorize in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return colorize(message)
        return message


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_log_level(value: str) -> int | None:
    """Map a level name (``"trace"``, ``"DEBUG"``) or a number (``"10"``) to a level.

    Returns None for blank or unknown values.
    """
    text = value.strip().upper()
    if text.isdigit():
        return int(text)
    return _LEVEL_NAMES.get(text)


def resolve_env_log_level() -> int | None:
    """Return the level requested through ``NPRINT_LOG_LEVEL``, or None."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV, ""))


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Args:
        level (int | None): Root level; when None, ``NPRINT_LOG_LEVEL`` is
            consulted and CRITICAL is used if it is unset.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # stderr keeps log records out of rendered program output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> NprintLogger:
    """Return the `NprintLogger` registered under ``name``."""
    return cast("NprintLogger", logging.getLogger(name))
