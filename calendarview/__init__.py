"""calendarview - month and week calendar grids for items with due dates.

Computes the days to display for a month or week view, places each dated item
on its day with overdue/completed/today flags, and keeps the navigation state
that selects the displayed period.
"""

__version__ = "1.0.0"
__author__ = "calendarview contributors"
__description__ = "Month/week calendar grid and navigation for items with due dates"

from .grid import (
    CalendarViewModel,
    ClassifiedItem,
    DayCell,
    Item,
    ViewMode,
    assemble,
    build_view_model,
    classify,
    compute_days,
    group_by_day,
)
from .ui.navigation import NavigationCommand, NavigationController, NavigationState

__all__ = [
    "CalendarViewModel",
    "ClassifiedItem",
    "DayCell",
    "Item",
    "NavigationCommand",
    "NavigationController",
    "NavigationState",
    "ViewMode",
    "__author__",
    "__description__",
    "__version__",
    "assemble",
    "build_view_model",
    "classify",
    "compute_days",
    "group_by_day",
]
