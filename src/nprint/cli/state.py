# topmark:header:start
#
#   project      : NPrint
#   file         : state.py
#   file_relpath : src/nprint/cli/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Accessors for the shared state stored on the Click context by the `nprint` group."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from nprint.config.model import Config

if TYPE_CHECKING:
    from nprint.console import ConsoleLike


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console placed on the context by the group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> Config:
    """Return the effective config (defaults when the group did not set one)."""
    ctx.ensure_object(dict)
    config = ctx.obj.get("config")
    return config if config is not None else Config.default()


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return program-output verbosity: 0 by default, positive with -v, negative with -q."""
    ctx.ensure_object(dict)
    level = int(ctx.obj.get("verbosity_level", logging.WARNING))
    if level < logging.WARNING:
        return (logging.WARNING - level) // 10
    if level > logging.WARNING:
        return -1
    return 0
