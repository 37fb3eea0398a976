# topmark:header:start
#
#   project      : NPrint
#   file         : styles.py
#   file_relpath : src/nprint/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint `styles` command: list the named style vocabulary."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from nprint.cli.options import OutputFormat, output_format_option
from nprint.cli.state import get_config, get_console
from nprint.markup import parse_markup, wrap_with_styles
from nprint.render.terminal import render_terminal

if TYPE_CHECKING:
    from nprint.console import ConsoleLike


@click.command(name="styles", help="List the named styles (built-in and configured).")
@output_format_option
def styles_command(*, output_format: OutputFormat | None) -> None:
    """Print every named style with its CSS declaration and a terminal sample."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config = get_config(ctx)

    if (output_format or OutputFormat.DEFAULT) is OutputFormat.JSON:
        payload = [
            {"name": style.name, "python_name": style.python_name, "css": style.css}
            for style in config.styles
        ]
        console.print(json.dumps(payload))
        return

    width = max((len(name) for name in config.styles.names()), default=0)
    for style in config.styles:
        sample = style.name.ljust(width)
        if ctx.obj.get("color_enabled"):
            markup = wrap_with_styles([style.name], sample)
            sample = render_terminal(parse_markup(markup), config.styles)
        console.print(f"{sample}  {style.css}")
