# topmark:header:start
#
#   project      : NPrint
#   file         : console.py
#   file_relpath : src/nprint/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output consoles for rendered NPrint output.

A console receives the normalized render output (one styled string for the
terminal backend, or a format string followed by CSS declarations for the
console backend) and writes it somewhere. Program output goes through a
console; internal diagnostics go through `logging`.

- `ClickConsole` writes to text streams with `click.echo`.
- `BrowserConsole` forwards to the host page's ``console`` object when running
  in a browser runtime (Pyodide / PyScript).
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Protocol, TextIO

import click


class PrintLevel(str, Enum):
    """Console call used for a print."""

    LOG = "log"
    WARN = "warn"
    ERROR = "error"


class ConsoleLike(Protocol):
    """Minimal interface for a console used by NPrint and its CLI."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def emit(self, level: PrintLevel, args: list[str]) -> None:
        """Write normalized render output for ``level``."""
        ...


class ClickConsole:
    """Program-output console on top of `click.echo`.

    Args:
        enable_color (bool | None): True keeps ANSI codes, False strips them, None lets
            Click decide (codes are stripped when the stream is not a terminal).
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.
        sep (str): Separator used when emitting several render arguments.
    """

    enable_color: bool | None
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
        sep: str = " ",
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.sep = sep

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def emit(self, level: PrintLevel, args: list[str]) -> None:
        """Write render output; ``log`` goes to stdout, ``warn``/``error`` to stderr."""
        stream = self.out if level is PrintLevel.LOG else self.err
        click.echo(self.sep.join(args), file=stream, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style (plain text when color is disabled)."""
        if self.enable_color is False:
            return text
        return click.style(text, **style_kwargs)


class BrowserConsole:
    """Console forwarding to the host ``console`` object of a browser runtime.

    Only usable where the ``js`` foreign-function module exists (Pyodide).
    """

    def _call(self, level: PrintLevel, args: list[str]) -> None:
        import js  # provided by the browser runtime

        getattr(js.console, level.value)(*args)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Forward ``text`` to ``console.log``."""
        self._call(PrintLevel.LOG, [text])

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Forward ``text`` to ``console.warn``."""
        self._call(PrintLevel.WARN, [text])

    def error(self, text: str, *, nl: bool = True) -> None:
        """Forward ``text`` to ``console.error``."""
        self._call(PrintLevel.ERROR, [text])

    def emit(self, level: PrintLevel, args: list[str]) -> None:
        """Forward render arguments verbatim (format string first)."""
        self._call(level, args)
