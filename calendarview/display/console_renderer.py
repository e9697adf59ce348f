"""Plain-text renderer for the calendar view model."""

import json
import logging
from typing import Any, Optional

from ..grid.models import CalendarViewModel, ClassifiedItem, DayCell

logger = logging.getLogger(__name__)

CELL_WIDTH = 6


class ConsoleRenderer:
    """Renders a :class:`CalendarViewModel` as a text grid followed by an agenda.

    Day markers: ``[d]`` today, ``(d)`` outside the viewed month.
    Item markers: ``!`` overdue, ``x`` completed, ``-`` open.
    """

    def __init__(self, settings: Optional[Any] = None, show_agenda: bool = True) -> None:
        """Initialize console renderer.

        Args:
            settings: Application settings (unused by the plain renderer, kept
                for parity with other renderers)
            show_agenda: Whether to list items below the grid
        """
        self.settings = settings
        self.show_agenda = show_agenda
        self.width = CELL_WIDTH * 7

        logger.debug("Console renderer initialized")

    def render(self, view: CalendarViewModel) -> str:
        """Render the grid and agenda for ``view``."""
        lines = ["=" * self.width, view.title.center(self.width), "=" * self.width]

        lines.append("".join(label.rjust(CELL_WIDTH) for label in view.weekday_labels))
        for week in view.weeks():
            lines.append("".join(self._format_day(cell) for cell in week))

        if self.show_agenda:
            lines.append("-" * self.width)
            lines.extend(self._render_agenda(view))

        lines.append("=" * self.width)
        return "\n".join(lines)

    def render_json(self, view: CalendarViewModel) -> str:
        return json.dumps(view.to_dict(), indent=2, default=str)

    def _format_day(self, cell: DayCell) -> str:
        day = str(cell.date.day)
        if cell.is_today:
            label = f"[{day}]"
        elif not cell.is_in_current_period:
            label = f"({day})"
        else:
            label = day
        if cell.items:
            label += "*"
        return label.rjust(CELL_WIDTH)

    def _render_agenda(self, view: CalendarViewModel) -> list[str]:
        lines: list[str] = []
        for cell in view.cells:
            if not cell.items:
                continue
            heading = cell.date.strftime("%a %b %d")
            if cell.is_today:
                heading += " (today)"
            lines.append(heading)
            lines.extend(self._format_item(item) for item in cell.items)

        if not lines:
            lines.append("No items due in this period.")
        return lines

    def _format_item(self, item: ClassifiedItem) -> str:
        if item.is_overdue:
            marker, status = "!", " [overdue]"
        elif item.is_completed:
            marker, status = "x", " [done]"
        else:
            marker, status = "-", ""
        name = item.name or str(item.id)
        return f"  {marker} {name}{status}"
