# tintprint:header:start
#
#   project      : TintPrint
#   file         : colored.py
#   file_relpath : src/tintprint/printers/colored.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Styled printer.

`ColoredPrinter` keeps a persistent `Style` and renders every message with the
*effective* style: the persistent Style overlaid, field by field, with the
overrides supplied to that call. Overrides never touch the persistent Style.

Example:
    ```python
    printer = ColoredPrinter(level=1, foreground=FColor.GREEN)
    printer.println("ready")                                   # green
    printer.println("careful", attribute=Attribute.BOLD)       # bold green
    printer.error_println("failed", foreground=FColor.RED)     # red, on stderr
    printer.debug_println("details", 2)                        # suppressed (2 > 1)
    ```

Thread safety:
    None. Setters and print calls read and replace shared state; callers that
    share a printer across threads must serialise access themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tintprint.config.color import resolve_color_mode
from tintprint.config.logging import get_logger
from tintprint.errors import InvalidStyleError
from tintprint.printers.base import AbstractPrinter
from tintprint.rendering.style import (
    Style,
    check_attribute,
    check_background,
    check_foreground,
)

if TYPE_CHECKING:
    from typing import Any

    from tintprint.config.color import ColorMode
    from tintprint.config.logging import TintprintLogger
    from tintprint.rendering.ansi import Attribute, BColor, FColor

logger: TintprintLogger = get_logger(__name__)


class ColoredPrinter(AbstractPrinter):
    """Printer with a persistent, overridable Style.

    Args:
        attribute (Attribute | None): Initial persistent attribute.
        foreground (FColor | None): Initial persistent foreground colour.
        background (BColor | None): Initial persistent background colour.
        enable_color (bool | None): Whether escape sequences reach the streams.
            When None, decided by `resolve_color_mode` for ``color_mode`` and the
            stdout stream.
        color_mode (ColorMode | None): Colour intent used when ``enable_color`` is None.
        **kwargs (Any): Forwarded to `AbstractPrinter` (level, timestamping,
            date_format, out, err, debug, clock).

    Attributes:
        enable_color (bool): Whether ANSI sequences are emitted.

    Raises:
        InvalidStyleError: If an initial style value is outside its enumeration.
    """

    enable_color: bool

    def __init__(
        self,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
        enable_color: bool | None = None,
        color_mode: ColorMode | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._style: Style = Style(
            attribute=attribute, foreground=foreground, background=background
        )
        if enable_color is None:
            enable_color = resolve_color_mode(color_mode_override=color_mode, stream=self.out)
        self.enable_color = enable_color

    # ------------------------------ persistent style ------------------------------

    @property
    def style(self) -> Style:
        """The persistent Style."""
        return self._style

    def set_attribute(self, attribute: Attribute) -> None:
        """Replace the persistent attribute.

        Raises:
            InvalidStyleError: If ``attribute`` is not an `Attribute`.
        """
        check_attribute(attribute)
        self._style = self._style.with_attribute(attribute)
        logger.debug("persistent style is now %s", self._style.describe())

    def set_foreground(self, foreground: FColor) -> None:
        """Replace the persistent foreground colour.

        Raises:
            InvalidStyleError: If ``foreground`` is not an `FColor`.
        """
        check_foreground(foreground)
        self._style = self._style.with_foreground(foreground)
        logger.debug("persistent style is now %s", self._style.describe())

    def set_background(self, background: BColor) -> None:
        """Replace the persistent background colour.

        Raises:
            InvalidStyleError: If ``background`` is not a `BColor`.
        """
        check_background(background)
        self._style = self._style.with_background(background)
        logger.debug("persistent style is now %s", self._style.describe())

    def set_style(self, style: Style) -> None:
        """Replace the persistent Style wholesale."""
        if not isinstance(style, Style):
            raise InvalidStyleError(f"Expected a Style, got {type(style).__name__}")
        self._style = style
        logger.debug("persistent style is now %s", self._style.describe())

    def clear(self) -> None:
        """Reset the persistent Style to all-unset."""
        self._style = Style()
        logger.debug("persistent style cleared")

    def effective_style(
        self,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> Style:
        """Return the style a print call with these overrides would use.

        Raises:
            InvalidStyleError: If an override is outside its enumeration.
        """
        override = Style(attribute=attribute, foreground=foreground, background=background)
        return self._style.overlay(override)

    # -------------------------------- output --------------------------------

    def print(
        self,
        msg: object,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Usual ``print`` to stdout with the effective style."""
        style = self.effective_style(
            attribute=attribute, foreground=foreground, background=background
        )
        self._output(self.out, msg, nl=False, style=style)

    def println(
        self,
        msg: object = "",
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Usual ``print`` plus newline to stdout with the effective style."""
        style = self.effective_style(
            attribute=attribute, foreground=foreground, background=background
        )
        self._output(self.out, msg, nl=True, style=style)

    def error_print(
        self,
        msg: object,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Usual ``print`` to stderr with the effective style."""
        style = self.effective_style(
            attribute=attribute, foreground=foreground, background=background
        )
        self._output(self.err, msg, nl=False, style=style)

    def error_println(
        self,
        msg: object = "",
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Usual ``print`` plus newline to stderr with the effective style."""
        style = self.effective_style(
            attribute=attribute, foreground=foreground, background=background
        )
        self._output(self.err, msg, nl=True, style=style)

    def debug_print(
        self,
        msg: object,
        level: int | None = None,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Print a debug message with the effective style.

        Args:
            msg (object): Debug message to print.
            level (int | None): Level needed to print ``msg``; ``None`` prints
                unconditionally.
            attribute (Attribute | None): Overriding attribute.
            foreground (FColor | None): Overriding foreground colour.
            background (BColor | None): Overriding background colour.
        """
        style = self.effective_style(
            attribute=attribute, foreground=foreground, background=background
        )
        if self._debug_allowed(level):
            self._output(self.debug, msg, nl=False, style=style)

    def debug_println(
        self,
        msg: object = "",
        level: int | None = None,
        *,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        """Print a debug message and a newline with the effective style.

        See `debug_print` for the arguments.
        """
        style = self.effective_style(
            attribute=attribute, foreground=foreground, background=background
        )
        if self._debug_allowed(level):
            self._output(self.debug, msg, nl=True, style=style)

    # -------------------------------- internals --------------------------------

    def _render(self, text: str, style: Style | None) -> str:
        if style is None:
            return text
        return style.render(text)

    def _color_enabled(self) -> bool:
        return self.enable_color

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(level={self.level}, timestamping={self.timestamping}, "
            f"enable_color={self.enable_color}, style={self._style})"
        )
