"""Data models for the calendar grid."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Optional, Union

from dateutil.parser import isoparse
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    """Viewing period of the calendar."""

    MONTH = "month"
    WEEK = "week"

    @property
    def toggled(self) -> "ViewMode":
        """The other view mode."""
        return ViewMode.WEEK if self is ViewMode.MONTH else ViewMode.MONTH


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive host-local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def as_moment(value: Union[date, datetime]) -> datetime:
    """Normalize an evaluation moment; a bare date means local midnight."""
    if isinstance(value, datetime):
        return to_local_naive(value)
    return datetime.combine(value, time.min)


def parse_due_date(value: Any) -> Optional[datetime]:
    """Coerce a raw due date into a naive local datetime.

    Accepts datetimes, dates (local midnight) and ISO-8601 strings. Anything
    absent or unparseable yields ``None``; such items are simply not placed
    on the calendar.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return to_local_naive(isoparse(text))
        except (ValueError, OverflowError):
            logger.debug(f"Ignoring unparseable due date {value!r}")
            return None

    logger.debug(f"Ignoring due date of unsupported type {type(value).__name__}")
    return None


class Item(BaseModel):
    """A date-bearing item (a card, a task) supplied by an external store."""

    id: Any = Field(..., description="Opaque identifier")
    due_date: Optional[datetime] = Field(
        default=None, alias="dueDate", description="Due moment in local time"
    )
    is_due_completed: bool = Field(default=False, alias="isDueCompleted")
    name: str = Field(default="", description="Display name")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("due_date", mode="before")
    @classmethod
    def _coerce_due_date(cls, value: Any) -> Optional[datetime]:
        return parse_due_date(value)

    @field_serializer("due_date")
    def _serialize_due_date(self, value: Optional[datetime]) -> Optional[str]:
        return value.isoformat() if value is not None else None

    @property
    def has_due_date(self) -> bool:
        return self.due_date is not None


@dataclass(frozen=True)
class ClassifiedItem:
    """An item together with the status flags derived for one evaluation moment."""

    item: Item
    is_overdue: bool

    @property
    def id(self) -> Any:
        return self.item.id

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def due_date(self) -> Optional[datetime]:
        return self.item.due_date

    @property
    def is_due_completed(self) -> bool:
        return self.item.is_due_completed

    @property
    def is_completed(self) -> bool:
        return self.item.is_due_completed

    def to_dict(self) -> dict[str, Any]:
        data = self.item.model_dump()
        data["is_overdue"] = self.is_overdue
        return data


@dataclass(frozen=True)
class DayCell:
    """One day slot of the rendered grid."""

    date: date
    is_in_current_period: bool
    is_today: bool
    items: tuple[ClassifiedItem, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "is_in_current_period": self.is_in_current_period,
            "is_today": self.is_today,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class CalendarViewModel:
    """Everything the presentational layer needs to draw one period.

    ``cells`` is ordered left-to-right, top-to-bottom.
    """

    anchor_date: date
    view_mode: ViewMode
    week_starts_on: int
    title: str
    weekday_labels: tuple[str, ...]
    cells: tuple[DayCell, ...] = field(default_factory=tuple)

    def weeks(self) -> list[tuple[DayCell, ...]]:
        """Split cells into rows of seven."""
        return [self.cells[i : i + 7] for i in range(0, len(self.cells), 7)]

    def is_view_mode_active(self, mode: ViewMode) -> bool:
        """Whether the toggle button for ``mode`` should be shown active/disabled."""
        return self.view_mode is ViewMode(mode)

    @property
    def item_count(self) -> int:
        return sum(len(cell.items) for cell in self.cells)

    def to_dict(self) -> dict[str, Any]:
        return {
            "anchor_date": self.anchor_date.isoformat(),
            "view_mode": self.view_mode.value,
            "week_starts_on": self.week_starts_on,
            "title": self.title,
            "weekday_labels": list(self.weekday_labels),
            "cells": [cell.to_dict() for cell in self.cells],
        }
