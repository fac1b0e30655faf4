# tintprint:header:start
#
#   project      : TintPrint
#   file         : api.py
#   file_relpath : src/tintprint/api.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Public API for TintPrint.

This module gathers the stable, typed surface of the package: the printer
interfaces and implementations, the style types and the settings builder,
plus `create_printer`, which builds a printer from `PrinterSettings`.

Examples:
    ```python
    from tintprint.api import Attribute, FColor, create_printer

    printer = create_printer()  # settings from TINTPRINT_* environment variables
    printer.set_foreground(FColor.CYAN)
    printer.println("hello")
    printer.println("world", attribute=Attribute.UNDERLINE)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tintprint.config.color import ColorMode, resolve_color_mode
from tintprint.config.logging import get_logger
from tintprint.config.settings import MutablePrinterSettings, PrinterSettings
from tintprint.errors import (
    InvalidArgumentError,
    InvalidStyleError,
    PrinterIOError,
    SettingsError,
    TintprintError,
)
from tintprint.printers.api import PrinterLike, StyledPrinterLike
from tintprint.printers.colored import ColoredPrinter
from tintprint.printers.terminal import TerminalPrinter
from tintprint.rendering.ansi import Attribute, BColor, FColor
from tintprint.rendering.style import Style

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime
    from typing import TextIO

    from tintprint.config.logging import TintprintLogger

logger: TintprintLogger = get_logger(__name__)

__all__ = [
    "Attribute",
    "BColor",
    "ColorMode",
    "ColoredPrinter",
    "FColor",
    "InvalidArgumentError",
    "InvalidStyleError",
    "MutablePrinterSettings",
    "PrinterIOError",
    "PrinterLike",
    "PrinterSettings",
    "SettingsError",
    "Style",
    "StyledPrinterLike",
    "TerminalPrinter",
    "TintprintError",
    "create_printer",
    "resolve_color_mode",
]


def create_printer(
    settings: PrinterSettings | None = None,
    *,
    colored: bool = True,
    out: TextIO | None = None,
    err: TextIO | None = None,
    debug: TextIO | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ColoredPrinter | TerminalPrinter:
    """Build a printer from settings.

    Args:
        settings (PrinterSettings | None): Settings to apply. When None, defaults
            overridden by the ``TINTPRINT_*`` environment variables are used.
        colored (bool): If True, return a `ColoredPrinter`; otherwise a
            `TerminalPrinter` (style settings are then ignored).
        out (TextIO | None): Standard output stream.
        err (TextIO | None): Error output stream.
        debug (TextIO | None): Debug output stream (defaults to ``out``).
        clock (Callable[[], datetime] | None): Time source for timestamps.

    Returns:
        ColoredPrinter | TerminalPrinter: The configured printer.

    Raises:
        SettingsError: If the environment holds malformed settings.
    """
    if settings is None:
        settings = MutablePrinterSettings.from_env().freeze()

    if not colored:
        printer: ColoredPrinter | TerminalPrinter = TerminalPrinter(
            level=settings.level,
            timestamping=settings.timestamping,
            date_format=settings.date_format,
            out=out,
            err=err,
            debug=debug,
            clock=clock,
        )
    else:
        printer = ColoredPrinter(
            attribute=settings.style.attribute,
            foreground=settings.style.foreground,
            background=settings.style.background,
            color_mode=settings.color_mode,
            level=settings.level,
            timestamping=settings.timestamping,
            date_format=settings.date_format,
            out=out,
            err=err,
            debug=debug,
            clock=clock,
        )
    logger.debug("created %r", printer)
    return printer
