# tintprint:header:start
#
#   project      : TintPrint
#   file         : test_debug_gating.py
#   file_relpath : tests/printers/test_debug_gating.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Debug threshold: leveled debug calls print iff ``0 <= level <= threshold``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from tests.conftest import parametrize
from tintprint.config.logging import TRACE_LEVEL
from tintprint.errors import InvalidArgumentError
from tintprint.rendering.ansi import FColor

if TYPE_CHECKING:
    from collections.abc import Callable

    from tests.conftest import Sinks
    from tintprint.printers.base import AbstractPrinter


@pytest.fixture(params=["colored", "terminal"])
def make_printer(
    request: pytest.FixtureRequest,
    make_colored: Callable[..., AbstractPrinter],
    make_terminal: Callable[..., AbstractPrinter],
) -> Callable[..., AbstractPrinter]:
    """Run each gating test against both printer flavours."""
    if request.param == "colored":
        return lambda **kw: make_colored(enable_color=False, **kw)
    return make_terminal


@parametrize("level, emitted", [(0, True), (1, True), (2, True), (3, False), (10, False)])
def test_threshold_boundary(
    make_printer: Callable[..., AbstractPrinter], sinks: Sinks, level: int, emitted: bool
) -> None:
    """With threshold 2, levels 0..2 print and level 3 is suppressed."""
    printer = make_printer(level=2)
    printer.debug_println("dbg", level)  # type: ignore[attr-defined]
    assert (sinks.debug.getvalue() == "dbg\n") is emitted
    if not emitted:
        assert sinks.debug.getvalue() == ""


def test_unleveled_debug_always_prints(
    make_printer: Callable[..., AbstractPrinter], sinks: Sinks
) -> None:
    """Debug calls without a level ignore the threshold."""
    printer = make_printer(level=0)
    printer.debug_print("a")  # type: ignore[attr-defined]
    printer.debug_println("b")  # type: ignore[attr-defined]
    assert sinks.debug.getvalue() == "ab\n"


def test_zero_threshold_still_prints_level_zero(
    make_printer: Callable[..., AbstractPrinter], sinks: Sinks
) -> None:
    """Level 0 is always within a valid threshold."""
    printer = make_printer()
    printer.debug_print("zero", 0)  # type: ignore[attr-defined]
    printer.debug_print("one", 1)  # type: ignore[attr-defined]
    assert sinks.debug.getvalue() == "zero"


def test_negative_levels_never_print(
    make_printer: Callable[..., AbstractPrinter], sinks: Sinks
) -> None:
    """A negative call level is treated as unprintable."""
    printer = make_printer(level=5)
    assert not printer.can_print(-1)
    printer.debug_println("neg", -1)  # type: ignore[attr-defined]
    assert sinks.debug.getvalue() == ""


@parametrize("bad", [-1, "2", 1.5, True])
def test_threshold_must_be_non_negative_int(
    make_printer: Callable[..., AbstractPrinter], bad: object
) -> None:
    """Thresholds are validated at construction and on `set_level`."""
    with pytest.raises(InvalidArgumentError):
        make_printer(level=bad)
    printer = make_printer(level=1)
    with pytest.raises(InvalidArgumentError):
        printer.set_level(bad)  # type: ignore[arg-type]
    assert printer.level == 1


def test_call_level_must_be_int(make_printer: Callable[..., AbstractPrinter]) -> None:
    """A non-integer call level is an invalid argument, not a silent no-op."""
    printer = make_printer(level=1)
    with pytest.raises(InvalidArgumentError):
        printer.debug_print("x", "1")  # type: ignore[attr-defined]


def test_set_level_changes_gate(make_printer: Callable[..., AbstractPrinter], sinks: Sinks) -> None:
    """Raising the threshold lets higher levels through; prints never change it."""
    printer = make_printer(level=0)
    printer.debug_print("hidden", 2)  # type: ignore[attr-defined]
    printer.set_level(2)
    printer.debug_print("shown", 2)  # type: ignore[attr-defined]
    assert sinks.debug.getvalue() == "shown"
    assert printer.level == 2


def test_gated_debug_uses_overrides(
    make_colored: Callable[..., AbstractPrinter], sinks: Sinks
) -> None:
    """Leveled debug calls honour style overrides when they print."""
    printer = make_colored(level=1)
    printer.debug_print("hi", 1, foreground=FColor.RED)  # type: ignore[attr-defined]
    assert sinks.debug.getvalue() == "\x1b[31mhi\x1b[0m"


def test_suppressed_message_is_traced(
    make_terminal: Callable[..., AbstractPrinter], caplog: pytest.LogCaptureFixture
) -> None:
    """Suppression is logged at TRACE, never as a warning or error."""
    printer = make_terminal(level=1)
    with caplog.at_level(TRACE_LEVEL, logger="tintprint.printers.base"):
        printer.debug_print("x", 4)  # type: ignore[attr-defined]
    records = [r for r in caplog.records if r.name == "tintprint.printers.base"]
    assert records
    assert all(r.levelno == TRACE_LEVEL for r in records)
    assert not any(r.levelno >= logging.WARNING for r in caplog.records)


def test_suppression_is_silent_with_a_plain_host_logger(
    make_printer: Callable[..., AbstractPrinter],
    sinks: Sinks,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """The module logger is a plain `logging.Logger`; a gated-out call still just traces."""
    assert type(logging.getLogger("tintprint.printers.base")) is logging.Logger
    printer = make_printer(level=0)
    with caplog.at_level(TRACE_LEVEL, logger="tintprint.printers.base"):
        printer.debug_print("x", 3)  # type: ignore[attr-defined]
        printer.debug_println("y", 3)  # type: ignore[attr-defined]
    assert sinks.debug.getvalue() == ""
    assert [r.levelname for r in caplog.records if r.name == "tintprint.printers.base"] == [
        "TRACE",
        "TRACE",
    ]
