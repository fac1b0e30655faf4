# tintprint:header:start
#
#   project      : TintPrint
#   file         : base.py
#   file_relpath : src/tintprint/printers/base.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Shared machinery for concrete printers.

`AbstractPrinter` owns what every printer has in common:

- the three sinks (stdout, stderr, debug; debug defaults to stdout),
- the debug threshold and the gating rule ``0 <= level <= threshold``,
- the optional timestamp prefix,
- message rendering (``None`` renders as empty text),
- writing through `click.echo` and turning sink failures into `PrinterIOError`.

Subclasses decide how a message is decorated by overriding `_render`.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TYPE_CHECKING, Final

import click

from tintprint.config.logging import get_logger
from tintprint.errors import InvalidArgumentError, PrinterIOError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

    from tintprint.config.logging import TintprintLogger
    from tintprint.rendering.style import Style

logger: TintprintLogger = get_logger(__name__)

DEFAULT_DATE_FORMAT: Final[str] = "%d/%m/%Y %H:%M:%S"


def check_threshold(level: object) -> int:
    """Validate a debug threshold and return it.

    Raises:
        InvalidArgumentError: If ``level`` is not a non-negative ``int``.
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidArgumentError(f"Debug level must be an int, got {type(level).__name__}")
    if level < 0:
        raise InvalidArgumentError(f"Debug level must be non-negative, got {level}")
    return level


def render_message(msg: object) -> str:
    """Return the text printed for ``msg``; ``None`` prints as nothing."""
    return "" if msg is None else str(msg)


class AbstractPrinter:
    """Base class for printers.

    Args:
        level (int): Debug threshold. Gated debug calls print when their level is
            between 0 and this value, inclusive.
        timestamping (bool): If True, prefix each message with the current time.
        date_format (str): `strftime` format of the timestamp prefix.
        out (TextIO | None): Standard output stream. Defaults to `sys.stdout`.
        err (TextIO | None): Error output stream. Defaults to `sys.stderr`.
        debug (TextIO | None): Debug output stream. Defaults to ``out``.
        clock (Callable[[], datetime] | None): Source of the current time.

    Raises:
        InvalidArgumentError: If ``level`` is not a non-negative integer.
    """

    out: TextIO
    err: TextIO
    debug: TextIO

    def __init__(
        self,
        *,
        level: int = 0,
        timestamping: bool = False,
        date_format: str = DEFAULT_DATE_FORMAT,
        out: TextIO | None = None,
        err: TextIO | None = None,
        debug: TextIO | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._level: int = check_threshold(level)
        self._timestamping: bool = timestamping
        self.date_format: str = date_format
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.debug = debug or self.out
        self._clock: Callable[[], datetime] = clock or datetime.now

    # ------------------------------ configuration ------------------------------

    @property
    def level(self) -> int:
        """Debug threshold."""
        return self._level

    def set_level(self, level: int) -> None:
        """Configure the debug threshold.

        Raises:
            InvalidArgumentError: If ``level`` is not a non-negative integer.
        """
        self._level = check_threshold(level)
        logger.debug("%s: debug level set to %d", type(self).__name__, self._level)

    @property
    def timestamping(self) -> bool:
        """Whether messages are prefixed with the current date and time."""
        return self._timestamping

    def set_timestamping(self, enabled: bool) -> None:
        """Enable or disable the timestamp prefix."""
        self._timestamping = enabled

    def can_print(self, level: int) -> bool:
        """Return True if a debug message at ``level`` would be emitted.

        Negative levels are never printed.

        Raises:
            InvalidArgumentError: If ``level`` is not an ``int``.
        """
        if isinstance(level, bool) or not isinstance(level, int):
            raise InvalidArgumentError(f"Debug level must be an int, got {type(level).__name__}")
        return 0 <= level <= self._level

    def timestamp(self) -> str:
        """Return the current time formatted with `date_format`."""
        return self._clock().strftime(self.date_format)

    # -------------------------------- internals --------------------------------

    def _debug_allowed(self, level: int | None) -> bool:
        if level is None:
            return True
        if self.can_print(level):
            return True
        logger.trace("debug message at level %d suppressed (threshold %d)", level, self._level)
        return False

    def _format(self, msg: object) -> str:
        text: str = render_message(msg)
        if self._timestamping:
            return f"{self.timestamp()} {text}"
        return text

    def _render(self, text: str, style: Style | None) -> str:
        """Decorate ``text``; the base printer writes it unchanged."""
        return text

    def _color_enabled(self) -> bool:
        return False

    def _output(self, stream: TextIO, msg: object, *, nl: bool, style: Style | None) -> None:
        text: str = self._render(self._format(msg), style)
        try:
            click.echo(text, file=stream, nl=nl, color=self._color_enabled())
        except (OSError, ValueError) as exc:
            # ValueError is what a closed stream raises on write
            target: object = getattr(stream, "name", stream)
            raise PrinterIOError(f"Cannot write to {target!r}: {exc}") from exc

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(level={self._level}, "
            f"timestamping={self._timestamping}, date_format={self.date_format!r})"
        )
