# topmark:header:start
#
#   project      : NPrint
#   file         : dispatch.py
#   file_relpath : src/nprint/render/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render dispatcher: markup fragments in, backend-normalized strings out.

A render call joins its fragments, tokenizes and builds the style tree once,
and renders it through exactly one backend:

- terminal backend → ``[styled_text]``;
- console backend → ``[format_string, css_1, ..., css_n]``.

Both shapes can be splatted into an output call (``print(*out)`` or
``console.log(*out)``). With ``join=True`` the sequence is joined into one string,
which is only meaningful for inspection on the console backend.

Example:
    ```python
    >>> to_browser = create_renderer(RenderMode.BROWSER)
    >>> to_browser("[mtxt-style[[red]]]hi[[/mtxt-style]]")
    ['%chi', 'color: red;']
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from nprint.config.logging import get_logger
from nprint.config.model import Config
from nprint.markup.tree import parse_markup
from nprint.render.console import ConsoleRenderer
from nprint.render.modes import RenderMode
from nprint.render.terminal import TerminalRenderer
from nprint.runtime import ColorMode, Runtime, detect_runtime, is_console_capable

if TYPE_CHECKING:
    from nprint.markup.tree import Forest

logger = get_logger(__name__)

RuntimeDetector = Callable[[], Runtime]


class Renderer:
    """Callable render dispatcher bound to a mode, a join flag and a config.

    Args:
        mode (RenderMode | None): Backend selector; defaults to ``config.mode``.
        join (bool | None): Join the normalized output; defaults to ``config.join``.
        sep (str | None): Fragment (and output) separator; defaults to ``config.sep``.
        config (Config | None): Style sheet and defaults; `Config.default()` if None.
        detector (RuntimeDetector): Runtime query used in ``AUTO`` mode.
    """

    def __init__(
        self,
        mode: RenderMode | None = None,
        join: bool | None = None,
        *,
        sep: str | None = None,
        config: Config | None = None,
        detector: RuntimeDetector = detect_runtime,
    ) -> None:
        self.config = config if config is not None else Config.default()
        self.mode = mode if mode is not None else self.config.mode
        self.join = join if join is not None else self.config.join
        self.sep = sep if sep is not None else self.config.sep
        self.detector = detector

    def select_mode(self) -> RenderMode:
        """Return the concrete backend for one call (queries the detector in AUTO mode)."""
        if self.mode is not RenderMode.AUTO:
            return self.mode
        runtime = self.detector()
        return RenderMode.BROWSER if is_console_capable(runtime) else RenderMode.TERMINAL

    def render_forest(self, forest: Forest, mode: RenderMode) -> list[str]:
        """Render a built forest with the backend for ``mode`` (TERMINAL or BROWSER)."""
        if mode is RenderMode.BROWSER:
            return ConsoleRenderer(self.config.styles).render(forest).as_args()
        renderer = TerminalRenderer(
            self.config.styles,
            enable_color=self.config.color is not ColorMode.NEVER,
        )
        return [renderer.render(forest)]

    def __call__(self, *fragments: str) -> list[str] | str:
        """Render markup fragments.

        Args:
            *fragments (str): Markup text fragments, joined with ``sep``.

        Returns:
            list[str] | str: The normalized sequence, or one string when ``join`` is set.
        """
        forest = parse_markup(self.sep.join(fragments))
        mode = self.select_mode()
        logger.trace("Rendering %d top-level node(s) with %s backend", len(forest), mode.value)
        result = self.render_forest(forest, mode)
        return self.sep.join(result) if self.join else result


def create_renderer(
    mode: RenderMode | None = None,
    join: bool | None = None,
    *,
    sep: str | None = None,
    config: Config | None = None,
    detector: RuntimeDetector = detect_runtime,
) -> Callable[..., list[str] | str]:
    """Create a render function (see `Renderer`)."""
    return Renderer(mode, join, sep=sep, config=config, detector=detector)


render = create_renderer(RenderMode.AUTO)
render_to_browser = create_renderer(RenderMode.BROWSER)
render_to_terminal = create_renderer(RenderMode.TERMINAL)
