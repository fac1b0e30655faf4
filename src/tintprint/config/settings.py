# tintprint:header:start
#
#   project      : TintPrint
#   file         : settings.py
#   file_relpath : src/tintprint/config/settings.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Printer settings and their builder.

This module defines:
    - `PrinterSettings`: an immutable snapshot used to construct printers.
    - `MutablePrinterSettings`: a mutable builder (fluent ``with_*`` methods and
      environment loading) that can be frozen into `PrinterSettings` and thawed
      back for edits.

Environment:
    `MutablePrinterSettings.from_env` honours these variables, all optional:

    - ``TINTPRINT_DEBUG_LEVEL``: non-negative integer debug threshold.
    - ``TINTPRINT_TIMESTAMPS``: ``1/true/yes/on`` or ``0/false/no/off``.
    - ``TINTPRINT_DATE_FORMAT``: `strftime` format of the timestamp prefix.
    - ``TINTPRINT_COLOR``: ``auto``, ``always`` or ``never``.
    - ``TINTPRINT_ATTRIBUTE``, ``TINTPRINT_FOREGROUND``, ``TINTPRINT_BACKGROUND``:
      member names of the style enumerations (e.g. ``bold``, ``bright-red``).

Immutability:
    `PrinterSettings` is ``frozen=True``. Use `PrinterSettings.thaw` → edit →
    `MutablePrinterSettings.freeze` for safe updates.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from tintprint.config.color import ColorMode
from tintprint.config.logging import get_logger
from tintprint.errors import InvalidArgumentError, InvalidStyleError, SettingsError
from tintprint.printers.base import DEFAULT_DATE_FORMAT, check_threshold
from tintprint.rendering.style import Style

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tintprint.config.logging import TintprintLogger
    from tintprint.rendering.ansi import Attribute, BColor, FColor

logger: TintprintLogger = get_logger(__name__)

ENV_DEBUG_LEVEL: Final[str] = "TINTPRINT_DEBUG_LEVEL"
ENV_TIMESTAMPS: Final[str] = "TINTPRINT_TIMESTAMPS"
ENV_DATE_FORMAT: Final[str] = "TINTPRINT_DATE_FORMAT"
ENV_COLOR: Final[str] = "TINTPRINT_COLOR"
ENV_ATTRIBUTE: Final[str] = "TINTPRINT_ATTRIBUTE"
ENV_FOREGROUND: Final[str] = "TINTPRINT_FOREGROUND"
ENV_BACKGROUND: Final[str] = "TINTPRINT_BACKGROUND"

_TRUE_TOKENS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, raw: str) -> bool:
    token: str = raw.strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise SettingsError(f"{name}: expected a boolean, got {raw!r}")


def _parse_level(name: str, raw: str) -> int:
    token: str = raw.strip()
    if not (token.isascii() and token.isdigit()):
        raise SettingsError(f"{name}: expected a non-negative integer, got {raw!r}")
    return int(token)


# ------------------ Immutable runtime settings ------------------


@dataclass(frozen=True, slots=True)
class PrinterSettings:
    """Immutable printer settings.

    Attributes:
        level (int): Debug threshold.
        timestamping (bool): Whether messages are prefixed with a timestamp.
        date_format (str): `strftime` format of the timestamp.
        style (Style): Initial persistent Style of styled printers.
        color_mode (ColorMode): Colour intent resolved when the printer is built.
    """

    level: int = 0
    timestamping: bool = False
    date_format: str = DEFAULT_DATE_FORMAT
    style: Style = field(default_factory=Style)
    color_mode: ColorMode = ColorMode.AUTO

    def thaw(self) -> MutablePrinterSettings:
        """Return a mutable copy of these settings."""
        return MutablePrinterSettings(
            level=self.level,
            timestamping=self.timestamping,
            date_format=self.date_format,
            style=self.style,
            color_mode=self.color_mode,
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutablePrinterSettings:
    """Mutable builder for `PrinterSettings`.

    Every ``with_*`` method returns ``self`` so calls can be chained:

    ```python
    settings = (
        MutablePrinterSettings()
        .with_level(2)
        .with_timestamping(True)
        .with_foreground(FColor.CYAN)
        .freeze()
    )
    ```

    Attributes:
        level (int): Debug threshold; validated by `freeze`.
        timestamping (bool): Whether messages are prefixed with a timestamp.
        date_format (str): `strftime` format of the timestamp; must not be empty.
        style (Style): Initial persistent Style.
        color_mode (ColorMode): Colour intent.
    """

    level: int = 0
    timestamping: bool = False
    date_format: str = DEFAULT_DATE_FORMAT
    style: Style = field(default_factory=Style)
    color_mode: ColorMode = ColorMode.AUTO

    # ---------------------------- Fluent setters ----------------------------
    def with_level(self, level: int) -> MutablePrinterSettings:
        """Set the debug threshold."""
        self.level = level
        return self

    def with_timestamping(self, enabled: bool) -> MutablePrinterSettings:
        """Enable or disable the timestamp prefix."""
        self.timestamping = enabled
        return self

    def with_date_format(self, date_format: str) -> MutablePrinterSettings:
        """Set the `strftime` format of the timestamp prefix."""
        self.date_format = date_format
        return self

    def with_attribute(self, attribute: Attribute | None) -> MutablePrinterSettings:
        """Set the initial persistent attribute."""
        self.style = self.style.with_attribute(attribute)
        return self

    def with_foreground(self, foreground: FColor | None) -> MutablePrinterSettings:
        """Set the initial persistent foreground colour."""
        self.style = self.style.with_foreground(foreground)
        return self

    def with_background(self, background: BColor | None) -> MutablePrinterSettings:
        """Set the initial persistent background colour."""
        self.style = self.style.with_background(background)
        return self

    def with_color_mode(self, color_mode: ColorMode) -> MutablePrinterSettings:
        """Set the colour intent."""
        self.color_mode = color_mode
        return self

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> PrinterSettings:
        """Validate this builder and return an immutable `PrinterSettings`.

        Raises:
            SettingsError: If a field holds an invalid value.
        """
        try:
            level: int = check_threshold(self.level)
        except InvalidArgumentError as exc:
            raise SettingsError(str(exc)) from exc
        if not isinstance(self.timestamping, bool):
            raise SettingsError(
                f"timestamping must be a bool, got {type(self.timestamping).__name__}"
            )
        if not isinstance(self.date_format, str) or not self.date_format:
            raise SettingsError("date_format must be a non-empty string")
        if not isinstance(self.color_mode, ColorMode):
            raise SettingsError(f"color_mode must be a ColorMode, got {self.color_mode!r}")
        if not isinstance(self.style, Style):
            raise SettingsError(f"style must be a Style, got {type(self.style).__name__}")
        return PrinterSettings(
            level=level,
            timestamping=self.timestamping,
            date_format=self.date_format,
            style=self.style,
            color_mode=self.color_mode,
        )

    # --------------------------- Loaders/parsers --------------------------
    def merge_env(self, environ: Mapping[str, str] | None = None) -> MutablePrinterSettings:
        """Override fields from ``TINTPRINT_*`` environment variables.

        Args:
            environ (Mapping[str, str] | None): Environment to read; defaults to
                `os.environ`.

        Returns:
            MutablePrinterSettings: ``self``, for chaining.

        Raises:
            SettingsError: If a variable is set to a malformed value.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ

        raw: str | None = env.get(ENV_DEBUG_LEVEL)
        if raw:
            self.level = _parse_level(ENV_DEBUG_LEVEL, raw)

        raw = env.get(ENV_TIMESTAMPS)
        if raw:
            self.timestamping = _parse_bool(ENV_TIMESTAMPS, raw)

        raw = env.get(ENV_DATE_FORMAT)
        if raw:
            self.date_format = raw

        raw = env.get(ENV_COLOR)
        if raw:
            try:
                self.color_mode = ColorMode(raw.strip().lower())
            except ValueError as exc:
                raise SettingsError(
                    f"{ENV_COLOR}: expected auto, always or never, got {raw!r}"
                ) from exc

        try:
            parsed: Style = Style.parse(
                attribute=env.get(ENV_ATTRIBUTE) or None,
                foreground=env.get(ENV_FOREGROUND) or None,
                background=env.get(ENV_BACKGROUND) or None,
            )
        except InvalidStyleError as exc:
            raise SettingsError(f"Invalid style in environment: {exc}") from exc
        self.style = self.style.overlay(parsed)

        logger.debug("settings after environment merge: %r", self)
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MutablePrinterSettings:
        """Return a builder initialised with defaults overridden by the environment."""
        return cls().merge_env(environ)
