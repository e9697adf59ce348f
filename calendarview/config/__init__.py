"""Configuration for calendarview."""

from .settings import (
    CalendarViewSettings,
    LoggingSettings,
    get_settings,
    load_settings,
    parse_weekday,
    reset_settings,
)

__all__ = [
    "CalendarViewSettings",
    "LoggingSettings",
    "get_settings",
    "load_settings",
    "parse_weekday",
    "reset_settings",
]
