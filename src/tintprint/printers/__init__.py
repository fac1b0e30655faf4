# tintprint:header:start
#
#   project      : TintPrint
#   file         : __init__.py
#   file_relpath : src/tintprint/printers/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Printer interfaces and implementations.

Public modules:
    - tintprint.printers.api
    - tintprint.printers.base
    - tintprint.printers.colored
    - tintprint.printers.terminal
"""

from __future__ import annotations
