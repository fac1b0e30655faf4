# tintprint:header:start
#
#   project      : TintPrint
#   file         : __init__.py
#   file_relpath : src/tintprint/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""TintPrint package.

TintPrint writes styled text (attribute, foreground and background colour) to
standard output and standard error, with an optional debug channel gated by a
numeric debug level. The stable surface lives in `tintprint.api`.
"""

from __future__ import annotations
