# tintprint:header:start
#
#   project      : TintPrint
#   file         : api.py
#   file_relpath : src/tintprint/printers/api.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Printer interfaces.

`PrinterLike` is the plain surface: standard, error and debug output, each with
and without a trailing newline, plus the debug threshold. `StyledPrinterLike`
extends it with a persistent `Style` and call-scoped overrides.

Debug calls:
    ``debug_print(msg)`` always prints. ``debug_print(msg, level)`` prints only
    when ``0 <= level <= printer.level``; otherwise it is a silent no-op.

Overrides:
    Styled print calls take keyword-only ``attribute``, ``foreground`` and
    ``background``. Each supplied value replaces the persistent value for that
    call only; omitted (``None``) values fall back to the persistent Style.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tintprint.rendering.ansi import Attribute, BColor, FColor
    from tintprint.rendering.style import Style


class PrinterLike(Protocol):
    """Minimal interface for a printer writing to stdout, stderr and a debug channel."""

    @property
    def level(self) -> int:
        """Debug threshold: the highest debug level this printer emits."""
        ...

    @property
    def timestamping(self) -> bool:
        """Whether every message is prefixed with the current date and time."""
        ...

    def set_level(self, level: int) -> None:
        """Configure the debug threshold."""
        ...

    def can_print(self, level: int) -> bool:
        """Return True if a debug message at ``level`` would be emitted."""
        ...

    def print(self, msg: object) -> None:
        """Write a message to stdout."""
        ...

    def println(self, msg: object = "") -> None:
        """Write a message and a newline to stdout."""
        ...

    def error_print(self, msg: object) -> None:
        """Write a message to stderr."""
        ...

    def error_println(self, msg: object = "") -> None:
        """Write a message and a newline to stderr."""
        ...

    def debug_print(self, msg: object, level: int | None = None) -> None:
        """Write a message to the debug channel, gated by ``level`` when given."""
        ...

    def debug_println(self, msg: object = "", level: int | None = None) -> None:
        """Write a message and a newline to the debug channel, gated by ``level`` when given."""
        ...


class StyledPrinterLike(PrinterLike, Protocol):
    """Printer carrying a persistent Style that single calls may override."""

    @property
    def style(self) -> Style:
        """The persistent Style."""
        ...

    def set_attribute(self, attribute: Attribute) -> None:
        """Replace the persistent attribute."""
        ...

    def set_foreground(self, foreground: FColor) -> None:
        """Replace the persistent foreground colour."""
        ...

    def set_background(self, background: BColor) -> None:
        """Replace the persistent background colour."""
        ...

    def set_style(self, style: Style) -> None:
        """Replace the persistent Style wholesale."""
        ...

    def clear(self) -> None:
        """Reset the persistent Style to all-unset."""
        ...

    def print(
        self,
        msg: object,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a message to stdout with the effective style."""
        ...

    def println(
        self,
        msg: object = "",
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a message and a newline to stdout with the effective style."""
        ...

    def error_print(
        self,
        msg: object,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a message to stderr with the effective style."""
        ...

    def error_println(
        self,
        msg: object = "",
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a message and a newline to stderr with the effective style."""
        ...

    def debug_print(
        self,
        msg: object,
        level: int | None = None,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a debug message with the effective style, gated by ``level`` when given."""
        ...

    def debug_println(
        self,
        msg: object = "",
        level: int | None = None,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a debug message and a newline with the effective style, gated by ``level``."""
        ...
