"""Grouping of items by the calendar day they are due on."""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any, Union

from .classifier import classify
from .date_range import as_date
from .models import ClassifiedItem, Item, as_moment

logger = logging.getLogger(__name__)

DayGrouping = dict[date, list[ClassifiedItem]]


def day_key(value: Union[date, datetime]) -> date:
    """Calendar day (local time) a date or datetime falls on."""
    if isinstance(value, datetime):
        return as_moment(value).date()
    return as_date(value)


def _as_item(raw: Union[Item, Mapping[str, Any]]) -> Item:
    if isinstance(raw, Item):
        return raw
    return Item.model_validate(raw)


def group_by_day(
    items: Iterable[Union[Item, Mapping[str, Any]]], now: Union[date, datetime]
) -> DayGrouping:
    """Classify dated items and bucket them by due day.

    Items without a due date are skipped. Within a day the input order is
    kept; days without items get no entry.
    """
    grouped: DayGrouping = defaultdict(list)
    skipped = 0

    for raw in items:
        item = _as_item(raw)
        if item.due_date is None:
            skipped += 1
            continue
        grouped[day_key(item.due_date)].append(classify(item, now))

    if skipped:
        logger.debug(f"Skipped {skipped} items without a due date")

    # plain dict so lookups of empty days don't insert keys
    return dict(grouped)


def items_for_day(grouping: DayGrouping, day: Union[date, datetime]) -> list[ClassifiedItem]:
    """Items grouped under ``day``; empty when the day has none."""
    return grouping.get(day_key(day), [])
