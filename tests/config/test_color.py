# tintprint:header:start
#
#   project      : TintPrint
#   file         : test_color.py
#   file_relpath : tests/config/test_color.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Colour enablement precedence."""

from __future__ import annotations

import io
import logging

import pytest

from tintprint.config.color import ColorMode, resolve_color_mode
from tintprint.config.logging import TRACE_LEVEL
from tintprint.printers.colored import ColoredPrinter


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_explicit_mode_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """ALWAYS and NEVER ignore the environment and the stream."""
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(color_mode_override=ColorMode.ALWAYS)
    monkeypatch.delenv("NO_COLOR")
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert not resolve_color_mode(color_mode_override=ColorMode.NEVER, stream=_Tty())


def test_force_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR enables colour unless it is "0"."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(stream=io.StringIO())
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert not resolve_color_mode(stream=io.StringIO())


def test_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """NO_COLOR disables colour even on a TTY."""
    monkeypatch.setenv("NO_COLOR", "")
    assert not resolve_color_mode(color_mode_override=ColorMode.AUTO, stream=_Tty())


def test_auto_follows_tty() -> None:
    """Without overrides, colour follows the stream's TTY status."""
    assert resolve_color_mode(stream=_Tty())
    assert not resolve_color_mode(stream=io.StringIO())
    assert resolve_color_mode(stream_isatty=True)
    assert not resolve_color_mode()


def test_auto_detection_is_traced(caplog: pytest.LogCaptureFixture) -> None:
    """The TTY probe is reported at TRACE through a plain stdlib logger."""
    assert type(logging.getLogger("tintprint.config.color")) is logging.Logger
    with caplog.at_level(TRACE_LEVEL, logger="tintprint.config.color"):
        assert not resolve_color_mode(stream=io.StringIO())
    assert [r.levelname for r in caplog.records if r.name == "tintprint.config.color"] == ["TRACE"]


def test_closed_stream_counts_as_not_a_tty() -> None:
    """A stream that cannot answer `isatty` disables colour."""
    stream = io.StringIO()
    stream.close()
    assert not resolve_color_mode(stream=stream)


def test_printer_resolves_color_from_stdout_stream() -> None:
    """ColoredPrinter consults the mode and its stdout stream when not told explicitly."""
    assert ColoredPrinter(out=_Tty()).enable_color
    assert not ColoredPrinter(out=io.StringIO()).enable_color
    assert ColoredPrinter(out=io.StringIO(), color_mode=ColorMode.ALWAYS).enable_color
