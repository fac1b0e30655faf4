# tintprint:header:start
#
#   project      : TintPrint
#   file         : terminal.py
#   file_relpath : src/tintprint/printers/terminal.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Monochrome printer (no styles)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tintprint.printers.base import AbstractPrinter
from tintprint.rendering.style import check_attribute, check_background, check_foreground

if TYPE_CHECKING:
    from tintprint.rendering.ansi import Attribute, BColor, FColor


class TerminalPrinter(AbstractPrinter):
    """Plain printer writing unstyled text.

    Style overrides are validated and then ignored, so a `TerminalPrinter` can
    replace a styled printer when colour is not wanted.

    Args:
        **kwargs: Forwarded to `AbstractPrinter`.
    """

    @staticmethod
    def _check_overrides(
        attribute: Attribute | None, foreground: FColor | None, background: BColor | None
    ) -> None:
        check_attribute(attribute)
        check_foreground(foreground)
        check_background(background)

    def print(
        self,
        msg: object,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a message to stdout."""
        self._check_overrides(attribute, foreground, background)
        self._output(self.out, msg, nl=False, style=None)

    def println(
        self,
        msg: object = "",
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a message and a newline to stdout."""
        self._check_overrides(attribute, foreground, background)
        self._output(self.out, msg, nl=True, style=None)

    def error_print(
        self,
        msg: object,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a message to stderr."""
        self._check_overrides(attribute, foreground, background)
        self._output(self.err, msg, nl=False, style=None)

    def error_println(
        self,
        msg: object = "",
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a message and a newline to stderr."""
        self._check_overrides(attribute, foreground, background)
        self._output(self.err, msg, nl=True, style=None)

    def debug_print(
        self,
        msg: object,
        level: int | None = None,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a debug message, gated by ``level`` when given."""
        self._check_overrides(attribute, foreground, background)
        if self._debug_allowed(level):
            self._output(self.debug, msg, nl=False, style=None)

    def debug_println(
        self,
        msg: object = "",
        level: int | None = None,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Write a debug message and a newline, gated by ``level`` when given."""
        self._check_overrides(attribute, foreground, background)
        if self._debug_allowed(level):
            self._output(self.debug, msg, nl=True, style=None)
