# topmark:header:start
#
#   project      : NPrint
#   file         : printing.py
#   file_relpath : src/nprint/printing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Print helpers: render markup and write it in one call.

    ```python
    from nprint import cols, log, warn

    log("Task:", cols.green("completed"))
    warn("Deprecated:", cols.yellow("use init_new() instead"))
    ```

Arguments may be strings, nested lists/tuples of strings, or any object with a
useful ``str()``. They are flattened, rendered through the dispatcher, and the
normalized output is handed to a console: stdout for `log`, stderr for `warn`
and `error`, or the host ``console`` in a browser runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nprint.config.model import Config
from nprint.console import BrowserConsole, ClickConsole, PrintLevel
from nprint.markup.tree import parse_markup
from nprint.render.dispatch import Renderer, RuntimeDetector
from nprint.runtime import Runtime, detect_runtime

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from nprint.console import ConsoleLike


def flatten(params: Iterable[object]) -> Iterator[str]:
    """Flatten nested lists/tuples into strings (``None`` becomes an empty string)."""
    for param in params:
        if isinstance(param, (list, tuple)):
            yield from flatten(param)
        elif param is None:
            yield ""
        else:
            yield str(param)


class Printer:
    """Render-and-write helper bound to a config.

    Args:
        config (Config | None): Rendering configuration; `Config.default()` if None.
        console (ConsoleLike | None): Output console; chosen per call from the
            runtime when None.
        detector (RuntimeDetector): Runtime query, called once per print.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        console: ConsoleLike | None = None,
        detector: RuntimeDetector = detect_runtime,
    ) -> None:
        self.config = config if config is not None else Config.default()
        self.console = console
        self.detector = detector

    def print(self, level: PrintLevel, *params: object) -> list[str]:
        """Render ``params`` and emit them at ``level``; returns the emitted arguments."""
        runtime = self.detector()
        renderer = Renderer(config=self.config, detector=lambda: runtime)
        args = renderer.render_forest(
            parse_markup(self.config.sep.join(flatten(params))), renderer.select_mode()
        )
        console = self.console or (
            BrowserConsole() if runtime is Runtime.BROWSER else ClickConsole(sep=self.config.sep)
        )
        console.emit(level, args)
        return args

    def log(self, *params: object) -> list[str]:
        """Print at ``log`` level (stdout)."""
        return self.print(PrintLevel.LOG, *params)

    def warn(self, *params: object) -> list[str]:
        """Print at ``warn`` level (stderr)."""
        return self.print(PrintLevel.WARN, *params)

    def error(self, *params: object) -> list[str]:
        """Print at ``error`` level (stderr)."""
        return self.print(PrintLevel.ERROR, *params)


_printer = Printer()

log = _printer.log
warn = _printer.warn
error = _printer.error
