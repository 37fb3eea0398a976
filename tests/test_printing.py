# topmark:header:start
#
#   project      : NPrint
#   file         : test_printing.py
#   file_relpath : tests/test_printing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Print helpers: flattening, rendering and console routing."""

from __future__ import annotations

import pytest

from nprint.colors import cols
from nprint.console import PrintLevel
from nprint.printing import Printer, flatten, log, warn
from nprint.runtime import ColorMode, Runtime
from tests.conftest import CountingDetector, fixed_runtime, make_config


class RecordingConsole:
    """Console stub recording emitted calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[PrintLevel, list[str]]] = []

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self.calls.append((PrintLevel.LOG, [text]))

    def warn(self, text: str, *, nl: bool = True) -> None:
        self.calls.append((PrintLevel.WARN, [text]))

    def error(self, text: str, *, nl: bool = True) -> None:
        self.calls.append((PrintLevel.ERROR, [text]))

    def emit(self, level: PrintLevel, args: list[str]) -> None:
        self.calls.append((level, args))


def test_flatten_nested_params() -> None:
    """Nested lists and tuples are flattened; objects are stringified."""
    assert list(flatten(["a", ["b", ("c", 1)], None])) == ["a", "b", "c", "1", ""]


def test_terminal_print() -> None:
    """Terminal runtimes get one rendered string."""
    console = RecordingConsole()
    printer = Printer(
        make_config(color=ColorMode.NEVER),
        console=console,
        detector=fixed_runtime(Runtime.CPYTHON),
    )
    assert printer.log("Task:", [cols.green("done"), 3]) == ["Task: done 3"]
    assert console.calls == [(PrintLevel.LOG, ["Task: done 3"])]


def test_browser_print_uses_console_backend() -> None:
    """Browser runtimes get the format string plus declarations."""
    console = RecordingConsole()
    detector = CountingDetector(Runtime.BROWSER)
    printer = Printer(console=console, detector=detector)
    printer.warn("a", cols.red("b"))
    assert console.calls == [(PrintLevel.WARN, ["%ca %cb", "", "color: red;"])]
    assert detector.calls == 1


def test_error_level() -> None:
    """`error` emits at error level."""
    console = RecordingConsole()
    Printer(console=console, detector=fixed_runtime(Runtime.BROWSER)).error("boom")
    assert console.calls == [(PrintLevel.ERROR, ["%cboom", ""])]


def test_module_helpers_write_to_std_streams(capsys: pytest.CaptureFixture[str]) -> None:
    """`log` goes to stdout, `warn` to stderr (ANSI stripped off a TTY)."""
    log("hello", cols.red("world"))
    warn("careful")
    captured = capsys.readouterr()
    assert captured.out == "hello world\n"
    assert captured.err == "careful\n"
