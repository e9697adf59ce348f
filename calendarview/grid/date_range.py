"""Day ranges for month and week views.

All functions are pure. Week starts are expressed with Python's ``calendar``
weekday numbers (``calendar.MONDAY`` == 0 ... ``calendar.SUNDAY`` == 6).
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Union

from dateutil.relativedelta import relativedelta

from .models import ViewMode

DEFAULT_WEEK_START = calendar.SUNDAY

DateLike = Union[date, datetime]


def as_date(value: DateLike) -> date:
    """Reduce a datetime to its calendar day; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _check_week_start(week_starts_on: int) -> None:
    if not 0 <= week_starts_on <= 6:
        raise ValueError(f"week_starts_on must be a weekday number 0-6, got {week_starts_on!r}")


def start_of_week(value: DateLike, week_starts_on: int = DEFAULT_WEEK_START) -> date:
    """First day of the week containing ``value``."""
    _check_week_start(week_starts_on)
    day = as_date(value)
    return day - timedelta(days=(day.weekday() - week_starts_on) % 7)


def end_of_week(value: DateLike, week_starts_on: int = DEFAULT_WEEK_START) -> date:
    """Last day of the week containing ``value``."""
    return start_of_week(value, week_starts_on) + timedelta(days=6)


def start_of_month(value: DateLike) -> date:
    return as_date(value).replace(day=1)


def end_of_month(value: DateLike) -> date:
    # relativedelta clamps day=31 to the month's real length
    return as_date(value) + relativedelta(day=31)


def period_bounds(
    anchor_date: DateLike, view_mode: ViewMode, week_starts_on: int = DEFAULT_WEEK_START
) -> tuple[date, date]:
    """First and last day of the period being viewed (not the padded grid)."""
    if ViewMode(view_mode) is ViewMode.WEEK:
        first = start_of_week(anchor_date, week_starts_on)
        return first, first + timedelta(days=6)
    return start_of_month(anchor_date), end_of_month(anchor_date)


def compute_days(
    anchor_date: DateLike, view_mode: ViewMode, week_starts_on: int = DEFAULT_WEEK_START
) -> list[date]:
    """Days to render for ``anchor_date`` under ``view_mode``, ascending.

    Month view spans whole weeks from the week containing the first of the
    month through the week containing its last day, so the length is always
    a multiple of seven (28, 35 or 42). Week view is the seven days starting
    at the week start containing the anchor.

    Example:
        >>> days = compute_days(date(2024, 3, 15), ViewMode.MONTH)
        >>> days[0], days[-1], len(days)
        (datetime.date(2024, 2, 25), datetime.date(2024, 4, 6), 42)
    """
    if ViewMode(view_mode) is ViewMode.WEEK:
        week_start = start_of_week(anchor_date, week_starts_on)
        return [week_start + timedelta(days=offset) for offset in range(7)]

    grid_start = start_of_week(start_of_month(anchor_date), week_starts_on)
    grid_end = end_of_week(end_of_month(anchor_date), week_starts_on)
    span = (grid_end - grid_start).days + 1
    return [grid_start + timedelta(days=offset) for offset in range(span)]
