# topmark:header:start
#
#   project      : NPrint
#   file         : tree.py
#   file_relpath : src/nprint/cli/commands/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint `tree` command: show the style tree built from markup."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from nprint.cli.io import collect_markup
from nprint.cli.options import OutputFormat, output_format_option
from nprint.cli.state import get_config, get_console
from nprint.markup import Forest, TextNode, forest_to_dicts, parse_markup

if TYPE_CHECKING:
    from nprint.console import ConsoleLike


def format_forest(forest: Forest, indent: int = 0) -> list[str]:
    """Return an indented outline of ``forest``, one node per line."""
    lines: list[str] = []
    prefix = "  " * indent
    for node in forest:
        if isinstance(node, TextNode):
            lines.append(f"{prefix}{node.content!r}")
        else:
            lines.append(f"{prefix}[{node.style}]")
            lines.extend(format_forest(node.children, indent + 1))
    return lines


@click.command(
    name="tree",
    help="Show the style tree parsed from MARKUP (or STDIN).",
)
@click.argument("markup", nargs=-1)
@output_format_option
def tree_command(*, markup: tuple[str, ...], output_format: OutputFormat | None) -> None:
    """Print the style tree as an outline (or JSON)."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    forest = parse_markup(get_config(ctx).sep.join(collect_markup(markup)))

    if (output_format or OutputFormat.DEFAULT) is OutputFormat.JSON:
        console.print(json.dumps(forest_to_dicts(forest), ensure_ascii=False))
        return
    for line in format_forest(forest):
        console.print(line)
