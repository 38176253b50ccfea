"""Exceptions raised by mc_legacy_formatting.

Parsing itself never raises: malformed codes are treated as literal text.
These cover misuse of the iterator API and bad configuration.
"""

from __future__ import annotations


class FormattingError(Exception):
    """Base exception for mc_legacy_formatting errors."""


class MarkerLockedError(FormattingError):
    """Raised when the start character is changed after iteration has begun."""


class ConfigError(FormattingError):
    """Raised when the configuration file cannot be parsed or is invalid."""
