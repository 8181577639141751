"""Exceptions raised by the log shipping core."""

from __future__ import annotations


class LogstalkerError(Exception):
    """Base class for logstalker errors."""


class ConfigurationError(LogstalkerError, ValueError):
    """Invalid or missing startup configuration. Fatal."""


class ParseError(LogstalkerError, ValueError):
    """A log line could not be decoded. The line is dropped."""
