# topmark:header:start
#
#   project      : NPrint
#   file         : __main__.py
#   file_relpath : src/nprint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m nprint``."""

from nprint.cli.main import cli

if __name__ == "__main__":
    cli()
