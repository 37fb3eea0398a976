# topmark:header:start
#
#   project      : NPrint
#   file         : constants.py
#   file_relpath : src/nprint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

NPRINT_VERSION: str = get_version("nprint")
