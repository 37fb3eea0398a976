# topmark:header:start
#
#   project      : NPrint
#   file         : tokens.py
#   file_relpath : src/nprint/cli/commands/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint `tokens` command: show the tokenizer segments of markup."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from nprint.cli.io import collect_markup
from nprint.cli.options import OutputFormat, output_format_option
from nprint.cli.state import get_config, get_console
from nprint.markup import SegmentKind, tokenize

if TYPE_CHECKING:
    from nprint.console import ConsoleLike


@click.command(
    name="tokens",
    help="Show how MARKUP (or STDIN) is split into literal text and tags.",
)
@click.argument("markup", nargs=-1)
@output_format_option
def tokens_command(*, markup: tuple[str, ...], output_format: OutputFormat | None) -> None:
    """Print one line per segment (or a JSON array)."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    segments = tokenize(get_config(ctx).sep.join(collect_markup(markup)))

    if (output_format or OutputFormat.DEFAULT) is OutputFormat.JSON:
        payload = [
            {"kind": segment.kind.value, "text": segment.text, "style": segment.style}
            for segment in segments
        ]
        console.print(json.dumps(payload, ensure_ascii=False))
        return

    for segment in segments:
        label = f"{segment.kind.value:<7}"
        if segment.kind is SegmentKind.OPEN:
            console.print(f"{console.styled(label, fg='green')} {segment.style!r}")
        elif segment.kind is SegmentKind.CLOSE:
            console.print(console.styled(label, fg='yellow'))
        else:
            console.print(f"{label} {segment.text!r}")
