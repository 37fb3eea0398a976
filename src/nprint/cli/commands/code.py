# topmark:header:start
#
#   project      : NPrint
#   file         : code.py
#   file_relpath : src/nprint/cli/commands/code.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint `code` command: syntax-highlight a source file and render it."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from nprint.cli.errors import NprintUsageError
from nprint.cli.io import read_source_file
from nprint.cli.options import render_mode_option
from nprint.cli.state import get_config, get_console
from nprint.code import highlight_code
from nprint.code.themes import THEMES
from nprint.console import PrintLevel
from nprint.errors import UnknownLanguageError, UnknownThemeError
from nprint.render.dispatch import Renderer

if TYPE_CHECKING:
    from nprint.console import ConsoleLike
    from nprint.render.modes import RenderMode


@click.command(
    name="code",
    help=f"Highlight PATH ('-' for STDIN). Themes: {', '.join(THEMES)}.",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--lang", "lang", required=True, help="Language (Pygments lexer name or alias).")
@click.option("--theme", "theme", default=None, help="Highlighting theme (default from config).")
@render_mode_option
def code_command(*, path: Path, lang: str, theme: str | None, mode: RenderMode | None) -> None:
    """Highlight a file and print the rendered result."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config = get_config(ctx)

    content = read_source_file(path)
    try:
        markup = highlight_code(lang, content, theme, config)
    except UnknownLanguageError as exc:
        raise NprintUsageError(f"Unknown language: {exc.lang}") from exc
    except UnknownThemeError as exc:
        raise NprintUsageError(f"Unknown theme: {exc.theme}") from exc

    renderer = Renderer(mode, False, config=config)
    console.emit(PrintLevel.LOG, renderer(markup))
