# tintprint:header:start
#
#   project      : TintPrint
#   file         : __init__.py
#   file_relpath : src/tintprint/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Rendering helpers for TintPrint.

This package holds the style enumerations and the `Style` value type. Escape
sequences are produced by Click; nothing here writes to a stream.

Public modules:
    - tintprint.rendering.ansi
    - tintprint.rendering.style
"""

from __future__ import annotations
