# topmark:header:start
#
#   project      : NPrint
#   file         : test_write.py
#   file_relpath : tests/test_write.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writing contexts (sync and async)."""

from __future__ import annotations

import asyncio

from nprint.markup.grammar import wrap_with_styles
from nprint.markup.tree import parse_markup, plain_text
from nprint.write import (
    ExtendedWriteContext,
    WriteContext,
    write,
    write_async,
    write_core,
    write_core_async,
    write_core_sync,
    write_sync,
)


def test_core_joins_entries_with_newlines() -> None:
    """Entries are joined with a newline by default."""

    def fn(w: WriteContext) -> None:
        w.push("a")
        w.push("b", "c", join="-")

    assert write_core_sync(fn) == "a\nb-c"
    assert write_core(fn) == "a\nb-c"


def test_join_with_changes_separator() -> None:
    """`pretty.join_with` sets the entry separator."""

    def fn(w: WriteContext) -> None:
        w.pretty.join_with(" | ")
        w.push("a")
        w.push("b")

    assert write_core_sync(fn) == "a | b"


def test_push_without_parts_adds_empty_entry() -> None:
    """An empty push still contributes an entry."""

    def fn(w: WriteContext) -> None:
        w.push("a")
        w.push()
        w.push("b")

    assert write_core_sync(fn) == "a\n\nb"


def test_core_async() -> None:
    """Coroutine callbacks are awaited."""

    async def fn(w: WriteContext) -> None:
        await asyncio.sleep(0)
        w.push("async")

    assert asyncio.run(write_core_async(fn)) == "async"
    assert asyncio.run(write_core(fn)) == "async"


def test_extended_context_builders() -> None:
    """The extended context exposes the style builders."""

    def fn(w: ExtendedWriteContext) -> None:
        w.push(w.cols.bold("T"))
        w.push(w.hex("#f80")("h"), w.bg_hex("#000")("b"), join=" ")

    assert write_sync(fn) == "\n".join(
        [
            wrap_with_styles(["bold"], "T"),
            wrap_with_styles(["hex#f80"], "h") + " " + wrap_with_styles(["bgHex#000"], "b"),
        ]
    )


def test_extended_context_rule_and_code() -> None:
    """`pretty.hr` pushes a rule; `code` highlights with the context theme."""

    def fn(w: ExtendedWriteContext) -> None:
        w.pretty.hr(width=4)
        w.pretty.set_code_theme("monokai")
        w.push(w.code("python", "def f(): pass"))

    result = write(fn)
    assert isinstance(result, str)
    assert plain_text(parse_markup(result)) == "____\ndef f(): pass"
    assert wrap_with_styles(["hex#f92672"], "def") in result


def test_extended_async() -> None:
    """`write` returns an awaitable for coroutine callbacks."""

    async def fn(w: ExtendedWriteContext) -> None:
        w.push(w.cols.red("x"))

    assert asyncio.run(write_async(fn)) == wrap_with_styles(["red"], "x")
    assert asyncio.run(write(fn)) == wrap_with_styles(["red"], "x")
