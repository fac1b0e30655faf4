# tintprint:header:start
#
#   project      : TintPrint
#   file         : __init__.py
#   file_relpath : src/tintprint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Configuration for TintPrint: settings, colour enablement and logging.

Public modules:
    - tintprint.config.color
    - tintprint.config.logging
    - tintprint.config.settings
"""

from __future__ import annotations
