# topmark:header:start
#
#   project      : NPrint
#   file         : write.py
#   file_relpath : src/nprint/write.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writing contexts: compose multi-part markup with a callback.

A write function receives a context, pushes entries into it, and the collected
entries are joined (``"\\n"`` by default) into one markup string:

    ```python
    text = write_sync(lambda w: (
        w.push(w.cols.bold("Title")),
        w.pretty.hr(width=20),
        w.push("a", "b", join=", "),
    ))
    ```

`write` / `write_core` accept either a plain or an ``async`` callback; for a
coroutine function they return an awaitable.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, Final

from nprint.code.highlight import highlight_code
from nprint.code.themes import CodeTheme
from nprint.colors import StyleChain, bg_hex, cols, hex
from nprint.config.model import Config
from nprint.layout.rule import hr

DEFAULT_JOIN: Final[str] = "\n"


class Pretty:
    """Formatting switches of a writing context."""

    def __init__(self, ctx: WriteContext) -> None:
        self._ctx = ctx

    def join_with(self, char: str) -> None:
        """Set the separator used between pushed entries."""
        self._ctx.join = char


class WriteContext:
    """Minimal writing context: `push` entries, join them at the end."""

    def __init__(self) -> None:
        self.join: str = DEFAULT_JOIN
        self.inputs: list[str] = []
        self.pretty = Pretty(self)

    def push(self, *parts: object, join: str = "") -> None:
        """Append one entry made of ``parts`` joined with ``join``."""
        self.inputs.append(join.join(str(part) for part in parts))

    def result(self) -> str:
        """Return every pushed entry joined with the configured separator."""
        return self.join.join(self.inputs)


class ExtendedPretty(Pretty):
    """Formatting switches of an `ExtendedWriteContext`."""

    _ctx: ExtendedWriteContext

    def set_code_theme(self, theme: str | CodeTheme) -> None:
        """Set the default theme used by ``ctx.code``."""
        self._ctx.theme = theme

    def hr(self, **kwargs: Any) -> None:
        """Push a horizontal rule (see `nprint.layout.hr`)."""
        self._ctx.push(hr(**kwargs))


class ExtendedWriteContext(WriteContext):
    """Writing context that also exposes the style builders and code highlighting."""

    cols: StyleChain = cols
    hex = staticmethod(hex)
    bg_hex = staticmethod(bg_hex)

    def __init__(self, config: Config | None = None) -> None:
        super().__init__()
        self.config = config if config is not None else Config.default()
        self.theme: str | CodeTheme | None = None
        self.pretty = ExtendedPretty(self)

    def code(self, lang: str, content: str, theme: str | CodeTheme | None = None) -> str:
        """Highlight ``content`` (theme falls back to the context theme, then the config)."""
        return highlight_code(lang, content, theme or self.theme, self.config)


WriteFn = Callable[[Any], None]
AsyncWriteFn = Callable[[Any], Awaitable[None]]


def write_core_sync(fn: Callable[[WriteContext], None]) -> str:
    """Run ``fn`` with a fresh `WriteContext` and return the joined result."""
    ctx = WriteContext()
    fn(ctx)
    return ctx.result()


async def write_core_async(fn: Callable[[WriteContext], Awaitable[None]]) -> str:
    """Await ``fn`` with a fresh `WriteContext` and return the joined result."""
    ctx = WriteContext()
    await fn(ctx)
    return ctx.result()


def write_core(fn: WriteFn | AsyncWriteFn) -> str | Awaitable[str]:
    """Dispatch to `write_core_async` for coroutine functions, else `write_core_sync`."""
    if inspect.iscoroutinefunction(fn):
        return write_core_async(fn)
    return write_core_sync(fn)


def write_sync(fn: Callable[[ExtendedWriteContext], None], config: Config | None = None) -> str:
    """Run ``fn`` with a fresh `ExtendedWriteContext` and return the joined result."""
    ctx = ExtendedWriteContext(config)
    fn(ctx)
    return ctx.result()


async def write_async(
    fn: Callable[[ExtendedWriteContext], Awaitable[None]],
    config: Config | None = None,
) -> str:
    """Await ``fn`` with a fresh `ExtendedWriteContext` and return the joined result."""
    ctx = ExtendedWriteContext(config)
    await fn(ctx)
    return ctx.result()


def write(fn: WriteFn | AsyncWriteFn, config: Config | None = None) -> str | Awaitable[str]:
    """Dispatch to `write_async` for coroutine functions, else `write_sync`."""
    if inspect.iscoroutinefunction(fn):
        return write_async(fn, config)
    return write_sync(fn, config)
