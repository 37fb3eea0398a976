# topmark:header:start
#
#   project      : NPrint
#   file         : test_cli_render.py
#   file_relpath : tests/cli/test_cli_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: `render`, `tokens` and `tree`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.cli_helpers import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

RED_B = "[mtxt-style[[red]]]b[[/mtxt-style]]"


@mark_cli
def test_render_terminal_plain() -> None:
    """Fragments are joined with a space; styling is dropped without color."""
    result = run_cli(["render", "--mode", "nodelike", "a", RED_B])
    assert_SUCCESS(result)
    assert result.output == "a b\n"


@mark_cli
def test_render_browser_lists_arguments() -> None:
    """The console backend prints the format string, then one declaration per line."""
    result = run_cli(["render", "--mode", "browser", "a", RED_B])
    assert_SUCCESS(result)
    assert result.output == "%ca %cb\n\ncolor: red;\n"


@mark_cli
def test_render_join_and_sep() -> None:
    """``--join`` prints one string joined with ``--sep``."""
    result = run_cli(["render", "--mode", "browser", "--join", "--sep", "|", "a", RED_B])
    assert_SUCCESS(result)
    assert result.output == "%ca|%cb||color: red;\n"


@mark_cli
def test_render_reads_stdin() -> None:
    """With no markup (or ``-``) STDIN is read."""
    for argv in (["render", "--mode", "nodelike"], ["render", "--mode", "nodelike", "-"]):
        result = run_cli(argv, input_text=f"x {RED_B}\n")
        assert_SUCCESS(result)
        assert result.output == "x b\n"


@mark_cli
def test_render_rejects_stdin_mixed_with_markup() -> None:
    """``-`` cannot be combined with literal markup."""
    assert_USAGE_ERROR(run_cli(["render", "-", "a"], input_text="x"))


@mark_cli
def test_render_invalid_mode() -> None:
    """Unknown modes are rejected by Click."""
    result = run_cli(["render", "--mode", "web", "a"])
    assert result.exit_code == 2
    assert "Invalid value" in result.output


@mark_cli
def test_render_uses_discovered_config(isolation: Path) -> None:
    """A config file in the working directory applies to the command."""
    (isolation / "nprint.toml").write_text('mode = "browser"\n', encoding="utf-8")
    result = run_cli(["render", "x"])
    assert_SUCCESS(result)
    assert result.output == "%cx\n\n"


@mark_cli
def test_tokens_json() -> None:
    """`tokens --format json` lists every segment."""
    result = run_cli(["tokens", "--format", "json", "a" + RED_B])
    assert_SUCCESS(result)
    assert json.loads(result.output) == [
        {"kind": "literal", "text": "a", "style": None},
        {"kind": "open", "text": "[mtxt-style[[red]]]", "style": "red"},
        {"kind": "literal", "text": "b", "style": None},
        {"kind": "close", "text": "[[/mtxt-style]]", "style": None},
    ]


@mark_cli
def test_tokens_default() -> None:
    """The default format prints one line per segment."""
    result = run_cli(["tokens", "a" + RED_B])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["literal 'a'", "open    'red'", "literal 'b'", "close  "]


@mark_cli
def test_tree_json() -> None:
    """`tree --format json` dumps the forest."""
    result = run_cli(["tree", "--format", "json", "a" + RED_B])
    assert_SUCCESS(result)
    assert json.loads(result.output) == [
        {"type": "text", "content": "a"},
        {"type": "styled", "style": "red", "children": [{"type": "text", "content": "b"}]},
    ]


@mark_cli
def test_tree_outline() -> None:
    """The default format prints an indented outline."""
    result = run_cli(["tree", "a" + RED_B])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["'a'", "[red]", "  'b'"]
