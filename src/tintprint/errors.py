# tintprint:header:start
#
#   project      : TintPrint
#   file         : errors.py
#   file_relpath : src/tintprint/errors.py
#   license      : MIT
#   copyright    : (c) 2026 TintPrint contributors
#
# tintprint:header:end

"""Exceptions for TintPrint.

Usage:
    Raise these exceptions at call boundaries (setters, print overrides,
    settings builders) and when writing to a sink fails.

Hierarchy:
    - `TintprintError`: base class for everything raised by this package.
    - `InvalidArgumentError`: a call received a value it cannot accept.
      Also a `ValueError`, so generic callers can catch it the usual way.
    - `InvalidStyleError`: an attribute or colour value is invalid.
    - `SettingsError`: a configuration value (explicit or from the
      environment) is malformed.
    - `PrinterIOError`: the underlying output stream could not be written.
      Also an `OSError`.

Debug-level gating is not an error and never raises.
"""

from __future__ import annotations


class TintprintError(Exception):
    """Base class for all TintPrint errors."""


class InvalidArgumentError(TintprintError, ValueError):
    """Error for invalid arguments supplied to a printer or builder."""


class InvalidStyleError(InvalidArgumentError):
    """Error for an attribute or colour that does not belong to its enumeration."""


class SettingsError(InvalidArgumentError):
    """Error for invalid or malformed printer settings."""


class PrinterIOError(TintprintError, OSError):
    """Error for failures while writing to an output stream."""
