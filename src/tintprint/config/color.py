# tintprint:header:start
#
#   project      : TintPrint
#   file         : color.py
#   file_relpath : src/tintprint/config/color.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Colour enablement for TintPrint printers.

This module decides whether a printer should emit ANSI escape sequences:

- `ColorMode` enum expressing user intent.
- `resolve_color_mode` combining that intent with the environment and the
  target stream's TTY status.

Styles are always resolved; this decision only controls whether the resulting
escape sequences reach the stream or are stripped on the way out.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING

from tintprint.config.logging import get_logger

if TYPE_CHECKING:
    from typing import TextIO

    from tintprint.config.logging import TintprintLogger


logger: TintprintLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when the stream is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.

    Example:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None = None,
    stream: TextIO | None = None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: `stream.isatty()`.

    Args:
        color_mode_override (ColorMode | None): Explicit intent; `None` and `AUTO`
            both defer to the environment.
        stream (TextIO | None): Stream whose TTY status decides the `AUTO` case.
            Ignored when `stream_isatty` is given.
        stream_isatty (bool | None): Optional override for TTY detection.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stream_isatty is None:
        try:
            stream_isatty = stream is not None and stream.isatty()
        except (OSError, ValueError):
            # closed or detached stream
            stream_isatty = False
    logger.trace("color auto-detection: isatty=%s", stream_isatty)
    return bool(stream_isatty)
