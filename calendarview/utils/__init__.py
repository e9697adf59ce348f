"""Utility modules for calendarview."""

from .exceptions import (
    CalendarViewError,
    ConfigurationError,
    ItemNotFoundError,
    ItemSourceError,
    NavigationError,
)
from .logging import VERBOSE, get_log_level, get_logger, setup_logging

__all__ = [
    "VERBOSE",
    "CalendarViewError",
    "ConfigurationError",
    "ItemNotFoundError",
    "ItemSourceError",
    "NavigationError",
    "get_log_level",
    "get_logger",
    "setup_logging",
]
