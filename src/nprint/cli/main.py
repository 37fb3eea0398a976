# topmark:header:start
#
#   project      : NPrint
#   file         : main.py
#   file_relpath : src/nprint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint command line entry point.

Group-level options (verbosity, color, config file) are resolved once and
stored in ``ctx.obj``; subcommands read the console and the effective config
from there.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from yachalk import chalk
from yachalk.types import ColorMode as ChalkColorMode

from nprint.cli.commands.code import code_command
from nprint.cli.commands.hr import hr_command
from nprint.cli.commands.render import render_command
from nprint.cli.commands.styles import styles_command
from nprint.cli.commands.tokens import tokens_command
from nprint.cli.commands.tree import tree_command
from nprint.cli.commands.version import version_command
from nprint.cli.errors import NprintConfigError
from nprint.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from nprint.config.io import load_config
from nprint.config.logging import get_logger, resolve_env_log_level, setup_logging
from nprint.console import ClickConsole
from nprint.errors import ConfigError
from nprint.runtime import ColorMode, resolve_color_mode

if TYPE_CHECKING:
    from nprint.config.model import Config
    from nprint.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, color, config) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit config file from ``--config``.

    Raises:
        NprintConfigError: If the configuration cannot be loaded.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    try:
        config: Config = load_config(config_path, search_from=None if config_path else Path.cwd())
    except ConfigError as exc:
        raise NprintConfigError(str(exc)) from exc

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or config.color)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    if not enable_color:
        effective_color_mode = ColorMode.NEVER
    elif effective_color_mode is ColorMode.ALWAYS:
        chalk.set_color_mode(ChalkColorMode.FullTrueColor)

    if effective_color_mode is not config.color:
        draft = config.thaw()
        draft.color = effective_color_mode
        config = draft.freeze()

    ctx.obj["config"] = config
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color, sep=config.sep)
    logger.debug("CLI state: color=%s mode=%s", effective_color_mode.value, config.mode.value)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="NPrint CLI: render style markup for terminals and browser consoles.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (nprint.toml or pyproject.toml). Discovered from the current "
    "directory when omitted.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the NPrint CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'nprint render MARKUP...' to render markup.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(tokens_command)

cli.add_command(tree_command)

cli.add_command(code_command)

cli.add_command(hr_command)

cli.add_command(styles_command)

if __name__ == "__main__":
    cli()
