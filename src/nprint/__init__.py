# topmark:header:start
#
#   project      : NPrint
#   file         : __init__.py
#   file_relpath : src/nprint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint package.

NPrint renders style-annotated text for two kinds of output: ANSI terminals and
browser-style consoles that take a ``%c`` format string plus CSS declarations.
Producers emit an intermediate markup (plain text with explicit style tags);
the markup is parsed into a style tree once and compiled for whichever backend
is active.

    ```python
    from nprint import cols, hex, render

    print(*render("Status:", cols.green.bold("ok"), hex("#f80")("!")))
    ```
"""

from __future__ import annotations

from nprint.code import code, highlight_code, register_lang
from nprint.colors import StyleChain, bg_hex, cols, hex
from nprint.config.model import Config, MutableConfig
from nprint.layout import box, hr, leftbar, pad, vbar
from nprint.markup import parse_markup, tokenize, wrap_with_styles
from nprint.printing import Printer, error, log, warn
from nprint.render.dispatch import (
    Renderer,
    create_renderer,
    render,
    render_to_browser,
    render_to_terminal,
)
from nprint.render.modes import RenderMode
from nprint.runtime import Runtime, detect_runtime, get_terminal_width
from nprint.write import (
    write,
    write_async,
    write_core,
    write_core_async,
    write_core_sync,
    write_sync,
)

__all__ = [
    "Config",
    "MutableConfig",
    "Printer",
    "RenderMode",
    "Renderer",
    "Runtime",
    "StyleChain",
    "bg_hex",
    "box",
    "code",
    "cols",
    "create_renderer",
    "detect_runtime",
    "error",
    "get_terminal_width",
    "hex",
    "highlight_code",
    "hr",
    "leftbar",
    "log",
    "pad",
    "parse_markup",
    "register_lang",
    "render",
    "render_to_browser",
    "render_to_terminal",
    "tokenize",
    "vbar",
    "warn",
    "wrap_with_styles",
    "write",
    "write_async",
    "write_core",
    "write_core_async",
    "write_core_sync",
    "write_sync",
]
