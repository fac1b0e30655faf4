# tintprint:header:start
#
#   project      : TintPrint
#   file         : style.py
#   file_relpath : src/tintprint/rendering/style.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Immutable style triple and the overlay rule used by styled printers.

A `Style` is ``(attribute, foreground, background)``. Each field is either a
member of its enumeration or ``None``, meaning *unset*: "do not override".

Overlay:
    ``base.overlay(override)`` takes, field by field, the override's value when
    the override sets it and the base value otherwise. The base is never
    modified; a printer's persistent Style is therefore untouched by a call that
    supplies an override.

Rendering:
    `Style.render` hands the Style to `click.style`. Each line of the message is
    styled on its own and closed with a reset, so neither a background colour
    nor an attribute leaks past a line break or into later output.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

import click

from tintprint.errors import InvalidStyleError
from tintprint.rendering.ansi import (
    Attribute,
    BColor,
    FColor,
    parse_attribute,
    parse_background,
    parse_foreground,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def _check_field(value: object, expected: type[Any], field_name: str) -> None:
    """Raise `InvalidStyleError` unless ``value`` is ``None`` or an ``expected`` member."""
    if value is not None and not isinstance(value, expected):
        raise InvalidStyleError(
            f"Invalid {field_name}: expected {expected.__name__} or None, "
            f"got {type(value).__name__} {value!r}"
        )


def check_attribute(value: object) -> None:
    """Validate an attribute argument (``None`` allowed)."""
    _check_field(value, Attribute, "attribute")


def check_foreground(value: object) -> None:
    """Validate a foreground argument (``None`` allowed)."""
    _check_field(value, FColor, "foreground")


def check_background(value: object) -> None:
    """Validate a background argument (``None`` allowed)."""
    _check_field(value, BColor, "background")


@dataclass(frozen=True, slots=True)
class Style:
    """Attribute, foreground and background of printed text.

    Attributes:
        attribute (Attribute | None): Text attribute, or ``None`` when unset.
        foreground (FColor | None): Font colour, or ``None`` when unset.
        background (BColor | None): Background colour, or ``None`` when unset.

    Raises:
        InvalidStyleError: If a field holds a value outside its enumeration.
    """

    attribute: Attribute | None = None
    foreground: FColor | None = None
    background: BColor | None = None

    def __post_init__(self) -> None:
        check_attribute(self.attribute)
        check_foreground(self.foreground)
        check_background(self.background)

    @classmethod
    def parse(
        cls,
        *,
        attribute: str | None = None,
        foreground: str | None = None,
        background: str | None = None,
    ) -> Style:
        """Build a Style from member names (case-insensitive, aliases allowed).

        Args:
            attribute (str | None): Attribute name, e.g. ``"bold"``.
            foreground (str | None): Foreground colour name, e.g. ``"bright-red"``.
            background (str | None): Background colour name.

        Returns:
            Style: The parsed style; omitted names stay unset.

        Raises:
            InvalidStyleError: If a name does not match any member.
        """
        return cls(
            attribute=parse_attribute(attribute) if attribute is not None else None,
            foreground=parse_foreground(foreground) if foreground is not None else None,
            background=parse_background(background) if background is not None else None,
        )

    @property
    def is_unset(self) -> bool:
        """Whether no field is set at all."""
        return self.attribute is None and self.foreground is None and self.background is None

    @property
    def is_plain(self) -> bool:
        """Whether rendering with this Style adds no formatting."""
        return not self.style_kwargs()

    def with_attribute(self, attribute: Attribute | None) -> Style:
        """Return a copy with ``attribute`` replaced."""
        return replace(self, attribute=attribute)

    def with_foreground(self, foreground: FColor | None) -> Style:
        """Return a copy with ``foreground`` replaced."""
        return replace(self, foreground=foreground)

    def with_background(self, background: BColor | None) -> Style:
        """Return a copy with ``background`` replaced."""
        return replace(self, background=background)

    def overlay(self, override: Style) -> Style:
        """Return the effective style of ``override`` laid over this one.

        Args:
            override (Style): Call-scoped style; its unset fields fall back to ours.

        Returns:
            Style: A new Style. ``self`` is unchanged.
        """
        return Style(
            attribute=self.attribute if override.attribute is None else override.attribute,
            foreground=self.foreground if override.foreground is None else override.foreground,
            background=self.background if override.background is None else override.background,
        )

    def style_kwargs(self) -> Mapping[str, Any]:
        """Return the keyword arguments for `click.style` matching this Style.

        Unset fields and `NONE` members contribute nothing.
        """
        kwargs: dict[str, Any] = {}
        if self.foreground is not None and not self.foreground.is_none:
            kwargs["fg"] = self.foreground.key
        if self.background is not None and not self.background.is_none:
            kwargs["bg"] = self.background.key
        if self.attribute is not None and not self.attribute.is_none:
            kwargs[self.attribute.key] = True
        return kwargs

    def render(self, text: str) -> str:
        """Return ``text`` wrapped in the escape sequences of this Style.

        Empty lines are left untouched; every other line is styled and reset
        individually.
        """
        kwargs: Mapping[str, Any] = self.style_kwargs()
        if not kwargs:
            return text
        return "\n".join(
            click.style(line, reset=True, **kwargs) if line else line
            for line in text.split("\n")
        )

    def describe(self) -> str:
        """Return a human-readable summary built from the member labels.

        Unset fields are omitted; an all-unset Style reads ``"Terminal default"``.

        Example:
            ``Style(Attribute.BOLD, FColor.RED, BColor.BLACK).describe()`` returns
            ``"Bold, Red on Black"``.
        """
        head: list[str] = [m.label for m in (self.attribute, self.foreground) if m is not None]
        text: str = ", ".join(head)
        if self.background is not None:
            text = f"{text} on {self.background.label}" if text else f"On {self.background.label}"
        return text or "Terminal default"

    def __str__(self) -> str:
        parts: list[str] = [
            f"{name}={value.key if value is not None else 'unset'}"
            for name, value in (
                ("attribute", self.attribute),
                ("foreground", self.foreground),
                ("background", self.background),
            )
        ]
        return f"Style({', '.join(parts)})"
