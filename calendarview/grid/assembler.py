"""Assembly of the render model from navigation state and items."""

import calendar
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Optional, Union

from .aggregator import day_key, group_by_day
from .date_range import DEFAULT_WEEK_START, compute_days, period_bounds
from .models import CalendarViewModel, DayCell, Item, ViewMode, as_moment
from ..utils.logging import get_logger

if TYPE_CHECKING:
    from ..ui.navigation import NavigationState

logger = get_logger(__name__)

ItemInput = Iterable[Union[Item, Mapping[str, Any]]]


def assemble(
    nav_state: "NavigationState", items: ItemInput, now: Union[date, datetime]
) -> list[DayCell]:
    """Build the ordered day cells for the period ``nav_state`` points at.

    Cells follow the ascending day order of the computed range; each carries
    the items due that day in input order. Items outside the range are left
    out of the model.
    """
    now = as_moment(now)
    today = now.date()
    days = compute_days(nav_state.anchor_date, nav_state.view_mode, nav_state.week_starts_on)
    grouping = group_by_day(items, now)

    in_week_view = nav_state.view_mode is ViewMode.WEEK
    anchor = nav_state.anchor_date

    cells = [
        DayCell(
            date=day,
            is_in_current_period=in_week_view
            or (day.year == anchor.year and day.month == anchor.month),
            is_today=day == today,
            items=tuple(grouping.get(day_key(day), ())),
        )
        for day in days
    ]

    visible = sum(len(cell.items) for cell in cells)
    logger.verbose(  # type: ignore[attr-defined]
        f"Assembled {len(cells)} cells for {nav_state}, {visible} items visible"
    )
    return cells


def weekday_labels(week_starts_on: int = DEFAULT_WEEK_START) -> tuple[str, ...]:
    """Abbreviated weekday names in column order, e.g. ``("Sun", "Mon", ...)``."""
    return tuple(calendar.day_abbr[(week_starts_on + offset) % 7] for offset in range(7))


def period_title(nav_state: "NavigationState") -> str:
    """Header text: ``"March 2024"`` or ``"Mar 10 - Mar 16, 2024"``."""
    if nav_state.view_mode is ViewMode.MONTH:
        anchor = nav_state.anchor_date
        return f"{calendar.month_name[anchor.month]} {anchor.year}"

    first, last = period_bounds(nav_state.anchor_date, ViewMode.WEEK, nav_state.week_starts_on)
    return (
        f"{calendar.month_abbr[first.month]} {first.day} - "
        f"{calendar.month_abbr[last.month]} {last.day}, {last.year}"
    )


def build_view_model(
    nav_state: "NavigationState",
    items: ItemInput,
    now: Optional[Union[date, datetime]] = None,
) -> CalendarViewModel:
    """Assemble cells plus header data for one render pass.

    ``now`` is sampled once here so the today and overdue flags agree across
    the whole model.
    """
    if now is None:
        now = datetime.now()

    cells = assemble(nav_state, items, now)
    return CalendarViewModel(
        anchor_date=nav_state.anchor_date,
        view_mode=nav_state.view_mode,
        week_starts_on=nav_state.week_starts_on,
        title=period_title(nav_state),
        weekday_labels=weekday_labels(nav_state.week_starts_on),
        cells=tuple(cells),
    )

