# tintprint:header:start
#
#   project      : TintPrint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Pytest configuration for the TintPrint test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    Printers under test write to `io.StringIO` sinks (see the `sinks` fixture) so
    stdout, stderr and the debug channel can be inspected independently.
    Colour is forced on (`enable_color=True`) unless a test is about colour
    resolution itself.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TypeVar, cast

import pytest

from tintprint.config import logging
from tintprint.printers.colored import ColoredPrinter
from tintprint.printers.terminal import TerminalPrinter

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

FIXED_NOW: datetime = datetime(2024, 3, 9, 14, 5, 7)

_ENV_VARS: tuple[str, ...] = (
    "TINTPRINT_LOG_LEVEL",
    "TINTPRINT_DEBUG_LEVEL",
    "TINTPRINT_TIMESTAMPS",
    "TINTPRINT_DATE_FORMAT",
    "TINTPRINT_COLOR",
    "TINTPRINT_ATTRIBUTE",
    "TINTPRINT_FOREGROUND",
    "TINTPRINT_BACKGROUND",
    "NO_COLOR",
    "FORCE_COLOR",
)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@dataclass
class Sinks:
    """In-memory output streams for a printer under test."""

    out: io.StringIO = field(default_factory=io.StringIO)
    err: io.StringIO = field(default_factory=io.StringIO)
    debug: io.StringIO = field(default_factory=io.StringIO)

    def kwargs(self) -> dict[str, Any]:
        """Return the stream keyword arguments accepted by printers."""
        return {"out": self.out, "err": self.err, "debug": self.debug}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure no developer shell variable changes printer or colour behaviour.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging at TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def sinks() -> Sinks:
    """Fresh stdout/stderr/debug sinks."""
    return Sinks()


@pytest.fixture
def make_colored(sinks: Sinks) -> Callable[..., ColoredPrinter]:
    """Factory for colour-enabled `ColoredPrinter` instances bound to `sinks`."""

    def _make(**kwargs: Any) -> ColoredPrinter:
        kwargs.setdefault("enable_color", True)
        kwargs.setdefault("clock", lambda: FIXED_NOW)
        return ColoredPrinter(**sinks.kwargs(), **kwargs)

    return _make


@pytest.fixture
def make_terminal(sinks: Sinks) -> Callable[..., TerminalPrinter]:
    """Factory for `TerminalPrinter` instances bound to `sinks`."""

    def _make(**kwargs: Any) -> TerminalPrinter:
        kwargs.setdefault("clock", lambda: FIXED_NOW)
        return TerminalPrinter(**sinks.kwargs(), **kwargs)

    return _make
