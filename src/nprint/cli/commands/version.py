# topmark:header:start
#
#   project      : NPrint
#   file         : version.py
#   file_relpath : src/nprint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint `version` command.

Prints the current NPrint version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from nprint.cli.options import OutputFormat, output_format_option
from nprint.cli.state import get_console, get_effective_verbosity
from nprint.constants import NPRINT_VERSION

if TYPE_CHECKING:
    from nprint.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of NPrint.",
)
@output_format_option
def version_command(
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of NPrint.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt is OutputFormat.JSON:
        console.print(json.dumps({"version": NPRINT_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("NPrint version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(NPRINT_VERSION, bold=True)}")
    else:
        console.print(console.styled(NPRINT_VERSION, bold=True))
