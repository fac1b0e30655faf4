# tintprint:header:start
#
#   project      : TintPrint
#   file         : test_public_imports.py
#   file_relpath : tests/api/test_public_imports.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Smoke tests for public imports and __all__."""

from __future__ import annotations

import inspect


def test_api_all_contains_expected_symbols() -> None:
    """__all__ exposes the expected stable symbols (at least this subset)."""
    from tintprint import api

    expected: set[str] = {
        "Attribute",
        "BColor",
        "ColoredPrinter",
        "FColor",
        "Style",
        "TerminalPrinter",
        "create_printer",
    }
    exported: set[str] = set(api.__all__)
    missing: set[str] = expected - exported
    assert not missing, f"Missing from api.__all__: {sorted(missing)}; have: {sorted(exported)}"


def test_api_symbols_are_callable_or_types() -> None:
    """Every exported symbol is either callable or a type/class."""
    from tintprint import api

    for name in api.__all__:
        obj = getattr(api, name)
        assert callable(obj) or inspect.isclass(obj)


def test_printers_satisfy_protocols() -> None:
    """Both printers expose every operation of the printer interfaces."""
    from tintprint.printers.api import PrinterLike, StyledPrinterLike
    from tintprint.printers.colored import ColoredPrinter
    from tintprint.printers.terminal import TerminalPrinter

    def members(proto: type) -> set[str]:
        return {n for n in vars(proto) if not n.startswith("_")}

    plain: set[str] = members(PrinterLike)
    styled: set[str] = plain | members(StyledPrinterLike)
    assert plain <= set(dir(TerminalPrinter))
    assert styled <= set(dir(ColoredPrinter))
