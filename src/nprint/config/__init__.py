# topmark:header:start
#
#   project      : NPrint
#   file         : __init__.py
#   file_relpath : src/nprint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint configuration and logging.

Public modules:
    - nprint.config.model: `Config` / `MutableConfig`
    - nprint.config.io: TOML discovery and loading
    - nprint.config.logging: project logger and `setup_logging`

This package initializer stays import-free: the markup pipeline imports
`nprint.config.logging` and must not pull in the configuration model.
"""

from __future__ import annotations
