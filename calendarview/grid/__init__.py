"""Calendar grid computation: day ranges, item grouping and view assembly."""

from .aggregator import day_key, group_by_day, items_for_day
from .assembler import assemble, build_view_model, period_title, weekday_labels
from .classifier import classify, is_overdue
from .date_range import (
    DEFAULT_WEEK_START,
    compute_days,
    end_of_month,
    end_of_week,
    period_bounds,
    start_of_month,
    start_of_week,
)
from .models import CalendarViewModel, ClassifiedItem, DayCell, Item, ViewMode, parse_due_date

__all__ = [
    "DEFAULT_WEEK_START",
    "CalendarViewModel",
    "ClassifiedItem",
    "DayCell",
    "Item",
    "ViewMode",
    "assemble",
    "build_view_model",
    "classify",
    "compute_days",
    "day_key",
    "end_of_month",
    "end_of_week",
    "group_by_day",
    "is_overdue",
    "items_for_day",
    "parse_due_date",
    "period_bounds",
    "period_title",
    "start_of_month",
    "start_of_week",
    "weekday_labels",
]
