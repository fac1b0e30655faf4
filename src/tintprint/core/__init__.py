# tintprint:header:start
#
#   project      : TintPrint
#   file         : __init__.py
#   file_relpath : src/tintprint/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Core, UI-agnostic utilities for TintPrint."""

from __future__ import annotations
