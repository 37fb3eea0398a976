# topmark:header:start
#
#   project      : NPrint
#   file         : __init__.py
#   file_relpath : src/nprint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command line interface for NPrint (`nprint`)."""
