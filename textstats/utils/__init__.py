"""
Utility functions and helpers for the TextStats application.

This package provides configuration management, input validation
and exception handling.
"""

from .config import Config, Settings
from .validators import InputValidator
from .exceptions import TextStatsError, ValidationError, ProcessingError, ConfigurationError

__all__ = [
    "Config",
    "Settings",
    "InputValidator",
    "TextStatsError",
    "ValidationError",
    "ProcessingError",
    "ConfigurationError",
]
