# tintprint:header:start
#
#   project      : TintPrint
#   file         : ansi.py
#   file_relpath : src/tintprint/rendering/ansi.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Attribute and colour enumerations understood by TintPrint printers.

Each member's key is the name Click uses for it, so translating a member to an
ANSI escape sequence is delegated to `click.style` (see
`tintprint.rendering.style.Style.style_kwargs`). No escape-code table lives in
this package.

Key types:
    - `Attribute`: text look (bold, underline, ...), independent of colour.
    - `FColor`: foreground (font) colour.
    - `BColor`: background colour.

`FColor` and `BColor` are deliberately separate enum classes: a foreground
colour is never accepted where a background colour is expected.

Every enumeration has a `NONE` member, the explicit "terminal default" value.
It is a real value (it overrides a persistent field when passed at call time)
that contributes no formatting.
"""

from __future__ import annotations

from tintprint.core.enum_mixins import KeyedStrEnum
from tintprint.errors import InvalidStyleError


class Attribute(KeyedStrEnum):
    """Text attribute applied on top of the colours."""

    NONE = ("none", "No attribute", ("clear", "reset", "plain", "normal"))
    BOLD = ("bold", "Bold")
    DIM = ("dim", "Dim", ("faint", "light"))
    ITALIC = ("italic", "Italic")
    UNDERLINE = ("underline", "Underline")
    OVERLINE = ("overline", "Overline")
    BLINK = ("blink", "Blink", ("slow_blink",))
    REVERSE = ("reverse", "Reverse video", ("inverse", "invert"))
    STRIKETHROUGH = ("strikethrough", "Strikethrough", ("crossed_out", "strike"))

    @property
    def is_none(self) -> bool:
        """Whether this member contributes no formatting."""
        return self is Attribute.NONE


class FColor(KeyedStrEnum):
    """Foreground colour."""

    NONE = ("none", "Default foreground", ("default", "reset"))
    BLACK = ("black", "Black")
    RED = ("red", "Red")
    GREEN = ("green", "Green")
    YELLOW = ("yellow", "Yellow")
    BLUE = ("blue", "Blue")
    MAGENTA = ("magenta", "Magenta", ("purple",))
    CYAN = ("cyan", "Cyan")
    WHITE = ("white", "White")
    BRIGHT_BLACK = ("bright_black", "Bright black", ("gray", "grey"))
    BRIGHT_RED = ("bright_red", "Bright red")
    BRIGHT_GREEN = ("bright_green", "Bright green")
    BRIGHT_YELLOW = ("bright_yellow", "Bright yellow")
    BRIGHT_BLUE = ("bright_blue", "Bright blue")
    BRIGHT_MAGENTA = ("bright_magenta", "Bright magenta")
    BRIGHT_CYAN = ("bright_cyan", "Bright cyan")
    BRIGHT_WHITE = ("bright_white", "Bright white")

    @property
    def is_none(self) -> bool:
        """Whether this member leaves the terminal default in place."""
        return self is FColor.NONE


class BColor(KeyedStrEnum):
    """Background colour."""

    NONE = ("none", "Default background", ("default", "reset"))
    BLACK = ("black", "Black")
    RED = ("red", "Red")
    GREEN = ("green", "Green")
    YELLOW = ("yellow", "Yellow")
    BLUE = ("blue", "Blue")
    MAGENTA = ("magenta", "Magenta", ("purple",))
    CYAN = ("cyan", "Cyan")
    WHITE = ("white", "White")
    BRIGHT_BLACK = ("bright_black", "Bright black", ("gray", "grey"))
    BRIGHT_RED = ("bright_red", "Bright red")
    BRIGHT_GREEN = ("bright_green", "Bright green")
    BRIGHT_YELLOW = ("bright_yellow", "Bright yellow")
    BRIGHT_BLUE = ("bright_blue", "Bright blue")
    BRIGHT_MAGENTA = ("bright_magenta", "Bright magenta")
    BRIGHT_CYAN = ("bright_cyan", "Bright cyan")
    BRIGHT_WHITE = ("bright_white", "Bright white")

    @property
    def is_none(self) -> bool:
        """Whether this member leaves the terminal default in place."""
        return self is BColor.NONE


def parse_attribute(name: str) -> Attribute:
    """Return the `Attribute` named ``name`` (case-insensitive, aliases allowed).

    Raises:
        InvalidStyleError: If no attribute matches.
    """
    member: Attribute | None = Attribute.parse(name)
    if member is None:
        raise InvalidStyleError(f"Unknown attribute: {name!r}")
    return member


def parse_foreground(name: str) -> FColor:
    """Return the `FColor` named ``name`` (case-insensitive, aliases allowed).

    Raises:
        InvalidStyleError: If no foreground colour matches.
    """
    member: FColor | None = FColor.parse(name)
    if member is None:
        raise InvalidStyleError(f"Unknown foreground color: {name!r}")
    return member


def parse_background(name: str) -> BColor:
    """Return the `BColor` named ``name`` (case-insensitive, aliases allowed).

    Raises:
        InvalidStyleError: If no background colour matches.
    """
    member: BColor | None = BColor.parse(name)
    if member is None:
        raise InvalidStyleError(f"Unknown background color: {name!r}")
    return member
