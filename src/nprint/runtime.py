# topmark:header:start
#
#   project      : NPrint
#   file         : runtime.py
#   file_relpath : src/nprint/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime and terminal detection helpers.

This module answers the environment questions the renderers need, without
depending on Click or on any console instance:

- which runtime hosts the interpreter (a browser page with a templated
  ``console`` API, or a terminal-like process);
- whether ANSI color should be emitted (``ColorMode`` resolution);
- how wide the terminal is.
"""

from __future__ import annotations

import os
import platform
import shutil
import sys
from enum import Enum
from typing import Final

from nprint.config.logging import get_logger

logger = get_logger(__name__)

RUNTIME_ENV: Final[str] = "NPRINT_RUNTIME"


class Runtime(str, Enum):
    """Runtime identifiers.

    Attributes:
        BROWSER: CPython compiled to WebAssembly inside a browser page (Pyodide,
            PyScript); the host exposes ``console.log`` with ``%c`` templating.
        CPYTHON: Regular CPython process (terminal-like output).
        PYPY: PyPy process (terminal-like output).
        UNKNOWN: Anything else; treated as terminal-like.
    """

    BROWSER = "browser"
    CPYTHON = "cpython"
    PYPY = "pypy"
    UNKNOWN = "unknown"


def detect_runtime() -> Runtime:
    """Detect the hosting runtime.

    The ``NPRINT_RUNTIME`` environment variable, when set to one of the
    `Runtime` values, overrides detection.

    Returns:
        Runtime: The detected runtime.
    """
    override = os.environ.get(RUNTIME_ENV)
    if override:
        try:
            return Runtime(override.strip().lower())
        except ValueError:
            logger.warning("Ignoring invalid %s value: %r", RUNTIME_ENV, override)

    if sys.platform == "emscripten":
        return Runtime.BROWSER

    implementation = platform.python_implementation()
    if implementation == "CPython":
        return Runtime.CPYTHON
    if implementation == "PyPy":
        return Runtime.PYPY
    return Runtime.UNKNOWN


def is_console_capable(runtime: Runtime) -> bool:
    """Return True when ``runtime`` offers a templated (``%c``) console API."""
    return runtime is Runtime.BROWSER


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether ANSI color output should be enabled.

    Decision precedence:
        1. **Override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: return `stdout.isatty()`.

    Args:
        color_mode_override: Requested `ColorMode`; `None` means "not provided".
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def get_terminal_width(default_width: int = 80) -> int:
    """Return the terminal width in characters.

    Honors ``COLUMNS`` and falls back to ``default_width`` when the width cannot
    be determined (no terminal, browser runtime).

    Args:
        default_width (int): Fallback width.

    Returns:
        int: Width in characters (always positive).
    """
    if detect_runtime() is Runtime.BROWSER:
        return default_width
    columns = shutil.get_terminal_size(fallback=(default_width, 24)).columns
    return columns if columns > 0 else default_width
