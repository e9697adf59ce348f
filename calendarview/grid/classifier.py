"""Derived status flags for a single item."""

from datetime import date, datetime
from typing import Union

from .models import ClassifiedItem, Item, as_moment


def is_overdue(item: Item, now: Union[date, datetime]) -> bool:
    """True when the item has a due date, is not completed and is due before ``now``."""
    if item.due_date is None or item.is_due_completed:
        return False
    return item.due_date < as_moment(now)


def classify(item: Item, now: Union[date, datetime]) -> ClassifiedItem:
    """Attach the overdue flag for the moment ``now``.

    ``now`` is the moment of evaluation and is never cached, so the same item
    can become overdue between two renders. Callers filter out items without a
    due date beforehand.
    """
    return ClassifiedItem(item=item, is_overdue=is_overdue(item, now))
