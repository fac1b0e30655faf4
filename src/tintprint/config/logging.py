# tintprint:header:start
#
#   project      : TintPrint
#   file         : logging.py
#   file_relpath : src/tintprint/config/logging.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end


"""TintPrint diagnostics logging with a TRACE level.

TintPrint is a library, so it never changes the process-wide logger class.
`get_logger` wraps whatever `logging.getLogger` returns for a name in a
`TintprintLogger` adapter, which adds `trace`. This holds even when the host
application created (or configured with `logging.config.dictConfig`) the
logger before TintPrint was imported.

Logging is for diagnostics only. User-facing output always goes through a printer
(see `tintprint.printers`), never through a logger.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Final

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import TextIO

    _LoggerAdapter = logging.LoggerAdapter[logging.Logger]
else:
    _LoggerAdapter = logging.LoggerAdapter

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "TINTPRINT_LOG_LEVEL"

if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")


class TintprintLogger(_LoggerAdapter):
    """Adapter over a standard `logging.Logger` adding a TRACE level below DEBUG.

    Attributes:
        logger (logging.Logger): The wrapped logger; any `logging.Logger` works.
    """

    def __init__(self, logger: logging.Logger) -> None:
        super().__init__(logger, None)

    def trace(self, msg: object, *args: object, **kwargs: Any) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            **kwargs (Any): Keyword arguments accepted by `logging.Logger.log`.
        """
        kwargs.setdefault("stacklevel", 2)
        self.log(TRACE_LEVEL, msg, *args, **kwargs)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] [%(funcName)s] %(message)s"

# Lowest level first; a record takes the painter of the highest floor it reaches.
_PAINTERS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colours each record with yachalk according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and colour the result.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colourised message. Levels below TRACE are dimmed.
        """
        message: str = super().format(record)
        painter: Callable[[str], str] = chalk.dim
        for floor, candidate in _PAINTERS:
            if record.levelno >= floor:
                painter = candidate
        return painter(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level(environ: Mapping[str, str] | None = None) -> int | None:
    """Return the level named by ``TINTPRINT_LOG_LEVEL``, or None.

    Accepts level names (``"trace"``, ``"DEBUG"``, ...) and non-negative
    numbers. An unset, empty or unknown value yields None.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    token: str = env.get(LOG_LEVEL_ENV, "").strip().upper()
    if not token:
        return None
    if token.isascii() and token.isdigit():
        return int(token)
    return _LEVEL_NAMES.get(token)


def setup_logging(level: int | None = None, stream: TextIO | None = None) -> None:
    """Send TintPrint diagnostics to a chalk-formatted handler on the root logger.

    Args:
        level (int | None): Root level. When None, `resolve_env_log_level` is
            consulted and CRITICAL is the fallback.
        stream (TextIO | None): Destination; defaults to ``sys.stderr`` so
            diagnostics never interleave with what a printer writes to stdout.

    Only a handler installed by an earlier call is replaced. Handlers added by
    the host application are left alone.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, ChalkFormatter):
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> TintprintLogger:
    """Return a `TintprintLogger` wrapping the standard logger called ``name``."""
    return TintprintLogger(logging.getLogger(name))
