# topmark:header:start
#
#   project      : NPrint
#   file         : modes.py
#   file_relpath : src/nprint/render/modes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering backend selectors."""

from __future__ import annotations

from enum import Enum


class RenderMode(str, Enum):
    """Backend selector for the render dispatcher.

    Attributes:
        TERMINAL: Always use the terminal (ANSI) backend.
        BROWSER: Always use the templated console (``%c``) backend.
        AUTO: Pick the backend from the detected runtime, once per call.
    """

    TERMINAL = "nodelike"
    BROWSER = "browser"
    AUTO = "auto"
