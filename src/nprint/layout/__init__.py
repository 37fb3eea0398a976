# topmark:header:start
#
#   project      : NPrint
#   file         : __init__.py
#   file_relpath : src/nprint/layout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout helpers producing NPrint markup (boxes, bars, padding, rules)."""

from __future__ import annotations

from nprint.layout.effects import box, leftbar, pad, vbar
from nprint.layout.rule import Align, hr

__all__ = ["Align", "box", "hr", "leftbar", "pad", "vbar"]
