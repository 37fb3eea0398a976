# topmark:header:start
#
#   project      : NPrint
#   file         : errors.py
#   file_relpath : src/nprint/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for NPrint.

The markup pipeline (tokenizer, tree builder, renderers) never raises. These
exceptions belong to the collaborators around it: configuration loading and
syntax highlighting. CLI-facing errors live in `nprint.cli.errors`.
"""

from __future__ import annotations


class NprintError(Exception):
    """Base class for all NPrint library errors."""


class ConfigError(NprintError):
    """Configuration is missing, unreadable or malformed."""


class UnknownLanguageError(NprintError, LookupError):
    """No syntax-highlighting lexer is available for a language identifier."""

    def __init__(self, lang: str) -> None:
        super().__init__(f"Unknown language: {lang!r} (register it with register_lang())")
        self.lang = lang


class UnknownThemeError(NprintError, LookupError):
    """No code theme is registered under the requested name."""

    def __init__(self, theme: str) -> None:
        super().__init__(f"Unknown code theme: {theme!r}")
        self.theme = theme
