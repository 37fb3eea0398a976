# topmark:header:start
#
#   project      : NPrint
#   file         : __init__.py
#   file_relpath : src/nprint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the `nprint` CLI (one module per command)."""
