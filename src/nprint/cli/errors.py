# topmark:header:start
#
#   project      : NPrint
#   file         : errors.py
#   file_relpath : src/nprint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the NPrint CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They prefer the project console when one is present
in the Click context and fall back to Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from nprint.cli.exit_codes import ExitCode


class NprintCliError(click.ClickException):
    """Base class for all NPrint CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class NprintUsageError(NprintCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class NprintConfigError(NprintCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class NprintFileNotFoundError(NprintCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class NprintEncodingError(NprintCliError):
    """Error when an input cannot be decoded as UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR
