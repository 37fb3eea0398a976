# topmark:header:start
#
#   project      : NPrint
#   file         : render.py
#   file_relpath : src/nprint/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint `render` command.

Renders markup given on the command line (or STDIN) with the selected backend.
Terminal output is one styled line; console-backend output is the ``%c`` format
string followed by one CSS declaration per line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nprint.cli.io import collect_markup
from nprint.cli.options import render_mode_option
from nprint.cli.state import get_config, get_console
from nprint.console import PrintLevel
from nprint.markup import parse_markup
from nprint.render.dispatch import Renderer
from nprint.render.modes import RenderMode

if TYPE_CHECKING:
    from nprint.console import ConsoleLike


@click.command(
    name="render",
    help="Render MARKUP (or STDIN) for a terminal or a browser console.",
)
@click.argument("markup", nargs=-1)
@render_mode_option
@click.option(
    "--join", "join", is_flag=True, default=False, help="Join the output into one string."
)
@click.option("--sep", "sep", default=None, help="Fragment separator (default: a single space).")
def render_command(
    *,
    markup: tuple[str, ...],
    mode: RenderMode | None,
    join: bool,
    sep: str | None,
) -> None:
    """Render markup fragments and print the normalized output.

    Args:
        markup (tuple[str, ...]): Markup fragments; ``-`` or nothing reads STDIN.
        mode (RenderMode | None): Backend override.
        join (bool): Join the output (otherwise the configured join flag applies).
        sep (str | None): Separator override.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    renderer = Renderer(mode, join or None, sep=sep, config=get_config(ctx))

    fragments = collect_markup(markup)
    selected = renderer.select_mode()
    args = renderer.render_forest(parse_markup(renderer.sep.join(fragments)), selected)

    if renderer.join:
        console.print(renderer.sep.join(args))
    elif selected is RenderMode.BROWSER:
        for arg in args:
            console.print(arg)
    else:
        console.emit(PrintLevel.LOG, args)
