# topmark:header:start
#
#   project      : NPrint
#   file         : __init__.py
#   file_relpath : src/nprint/render/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering backends for NPrint markup.

Public modules:
    - nprint.render.styles: named style vocabulary and hex patterns
    - nprint.render.terminal: ANSI backend (`yachalk`)
    - nprint.render.console: ``%c`` templated console backend
    - nprint.render.dispatch: backend selection and output normalization
"""

from __future__ import annotations
