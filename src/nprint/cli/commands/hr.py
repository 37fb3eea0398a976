# topmark:header:start
#
#   project      : NPrint
#   file         : hr.py
#   file_relpath : src/nprint/cli/commands/hr.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint `hr` command: print a horizontal rule."""

from __future__ import annotations

import click

from nprint.cli.options import EnumChoiceParam, render_mode_option
from nprint.cli.state import get_config, get_console
from nprint.console import PrintLevel
from nprint.layout import Align, hr
from nprint.render.dispatch import Renderer
from nprint.render.modes import RenderMode


@click.command(name="hr", help="Print a horizontal rule with an optional title.")
@click.option("--title", "title", default=None, help="Title text.")
@click.option("--char", "char", default="_", show_default=True, help="Rule character.")
@click.option(
    "--align",
    "align",
    type=EnumChoiceParam(Align),
    default=Align.CENTER.value,
    show_default=True,
    help="Title placement.",
)
@click.option("--space", "space", type=click.IntRange(min=0), default=1, show_default=True)
@click.option(
    "--width",
    "width",
    type=click.IntRange(min=1),
    default=None,
    help="Rule width (default: terminal width).",
)
@render_mode_option
def hr_command(
    *,
    title: str | None,
    char: str,
    align: Align,
    space: int,
    width: int | None,
    mode: RenderMode | None,
) -> None:
    """Render a rule and print it."""
    ctx = click.get_current_context()
    markup = hr(char=char, align=align, space=space, title=title, width=width)
    renderer = Renderer(mode, False, config=get_config(ctx))
    get_console(ctx).emit(PrintLevel.LOG, renderer(markup))
