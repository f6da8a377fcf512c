"""
Error types raised by TextStats.

Every failure the CLI reports on exits with status 1; the type only
decides the prefix of the logged message.
"""

from __future__ import annotations

import logging
from typing import Tuple


def format_details(*labelled: Tuple[str, str]) -> str:
    """Join ``(label, value)`` pairs as ``label: value``, skipping empty values."""
    return ", ".join(f"{label}: {value}" for label, value in labelled if value)


class TextStatsError(Exception):
    """
    Base class of all TextStats errors.

    ``str()`` renders as ``message (details)``, or just the message when
    there are no details.
    """

    def __init__(self, message: str = "", details: str = "") -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ValidationError(TextStatsError):
    """
    Bad command line input.

    Raised for a folder path that is not a directory, an unknown sort
    method, an empty search word or an unusable output location. Nothing
    has been read or written when it is raised.
    """

    def __init__(self, message: str = "Validation failed", field: str = "", value: str = "") -> None:
        super().__init__(message, format_details(("field", field), ("value", value)))
        self.field = field
        self.value = value


class ProcessingError(TextStatsError):
    """A text file could not be read or decoded, or an artifact could not be written."""

    def __init__(self, message: str = "Processing failed", operation: str = "",
                 original_error: str = "") -> None:
        super().__init__(message, format_details(("operation", operation), ("error", original_error)))
        self.operation = operation
        self.original_error = original_error


class ConfigurationError(TextStatsError):
    """
    The configuration file holds a section or setting TextStats cannot use.

    Args:
        message: What is wrong
        config_key: Dotted name of the offending section or setting
        config_value: ``repr`` of the offending value
    """

    def __init__(self, message: str = "Configuration error", config_key: str = "",
                 config_value: str = "") -> None:
        super().__init__(message, format_details(("key", config_key), ("value", config_value)))
        self.config_key = config_key
        self.config_value = config_value


def get_error_context(exception: Exception) -> str:
    """Describe ``exception`` for a log line; foreign exceptions carry their type name."""
    if isinstance(exception, TextStatsError):
        return str(exception)
    return f"{type(exception).__name__}: {exception}"


def log_exception(logger: logging.Logger, exception: Exception, context: str = "") -> None:
    """
    Log ``exception`` prefixed with ``context``.

    TextStats errors are expected failures and log at ERROR; anything
    else is a bug and logs at CRITICAL.
    """
    message = get_error_context(exception)
    if context:
        message = f"{context} - {message}"

    if isinstance(exception, TextStatsError):
        logger.error(message)
    else:
        logger.critical(message)
