# topmark:header:start
#
#   project      : NPrint
#   file         : io.py
#   file_relpath : src/nprint/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input helpers shared by the CLI commands.

Markup is taken from positional arguments, or from STDIN when no argument is
given or the single argument ``-`` is passed. Mixing ``-`` with literal markup
is a usage error.
"""

from __future__ import annotations

from pathlib import Path

import click

from nprint.cli.errors import NprintEncodingError, NprintFileNotFoundError, NprintUsageError
from nprint.config.logging import get_logger

logger = get_logger(__name__)

STDIN_MARKER = "-"


def read_stdin_text() -> str:
    """Read all of STDIN as text, without the trailing newline."""
    stream = click.get_text_stream("stdin")
    try:
        text = stream.read()
    except UnicodeDecodeError as exc:
        raise NprintEncodingError(f"STDIN is not valid UTF-8: {exc}") from exc
    return text[:-1] if text.endswith("\n") else text


def collect_markup(markup: tuple[str, ...]) -> list[str]:
    """Return the markup fragments to process.

    Args:
        markup (tuple[str, ...]): Positional CLI arguments.

    Returns:
        list[str]: Fragments, in order. STDIN contributes a single fragment.

    Raises:
        NprintUsageError: If ``-`` is mixed with other arguments.
    """
    if not markup or markup == (STDIN_MARKER,):
        logger.debug("Reading markup from STDIN")
        return [read_stdin_text()]
    if STDIN_MARKER in markup:
        raise NprintUsageError("'-' (read from STDIN) cannot be combined with other markup.")
    return list(markup)


def read_source_file(path: Path) -> str:
    """Read a UTF-8 source file (``-`` reads STDIN).

    Raises:
        NprintFileNotFoundError: If ``path`` does not exist or is a directory.
        NprintEncodingError: If the file is not valid UTF-8.
    """
    if str(path) == STDIN_MARKER:
        return read_stdin_text()
    try:
        return path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError) as exc:
        logger.error("%s: %s", exc, path)
        raise NprintFileNotFoundError(f"No such file: {path}") from exc
    except UnicodeDecodeError as exc:
        logger.error("Encoding error while reading %s: %s", path, exc)
        raise NprintEncodingError(f"{path} is not valid UTF-8") from exc
