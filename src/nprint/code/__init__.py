# topmark:header:start
#
#   project      : NPrint
#   file         : __init__.py
#   file_relpath : src/nprint/code/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Syntax highlighting to NPrint markup (Pygments-based)."""

from __future__ import annotations

from nprint.code.highlight import code, get_lexer, highlight_code, register_lang
from nprint.code.themes import THEMES, CodeTheme, get_theme

__all__ = [
    "THEMES",
    "CodeTheme",
    "code",
    "get_lexer",
    "get_theme",
    "highlight_code",
    "register_lang",
]
