"""Unit tests for the console renderer."""

import json
from datetime import date, datetime

import pytest

from calendarview.display.console_renderer import CELL_WIDTH, ConsoleRenderer
from calendarview.grid.assembler import build_view_model
from calendarview.grid.models import Item, ViewMode
from calendarview.ui.navigation import NavigationState


@pytest.fixture
def june_view(sample_items, fixed_now):
    return build_view_model(NavigationState(anchor_date=date(2024, 6, 15)), sample_items, fixed_now)


class TestConsoleRenderer:
    """Test text rendering of the grid and agenda."""

    def test_initialization(self):
        renderer = ConsoleRenderer()

        assert renderer.show_agenda is True
        assert renderer.width == CELL_WIDTH * 7

    def test_render_header_and_grid(self, june_view):
        lines = ConsoleRenderer().render(june_view).splitlines()

        assert lines[1].strip() == "June 2024"
        assert lines[3].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        # first week row: padding days from May, then June 1
        assert lines[4].split() == ["(26)", "(27)", "(28)", "(29)", "(30)", "(31)", "1"]

    def test_day_markers(self, june_view):
        output = ConsoleRenderer().render(june_view)

        assert "[15]*" in output
        assert "10*" in output
        assert "(6)" in output

    def test_agenda_lists_items_with_status(self, june_view):
        output = ConsoleRenderer().render(june_view)

        assert "Mon Jun 10" in output
        assert "  ! Write report [overdue]" in output
        assert "  x Ship release [done]" in output
        assert "Sat Jun 15 (today)" in output
        assert "  - Lunch" in output
        assert "Next quarter" not in output

    def test_agenda_falls_back_to_id(self, fixed_now):
        view = build_view_model(
            NavigationState(anchor_date=date(2024, 6, 15), view_mode=ViewMode.WEEK),
            [Item(id=42, due_date=datetime(2024, 6, 14))],
            fixed_now,
        )

        assert "  ! 42 [overdue]" in ConsoleRenderer().render(view)

    def test_empty_agenda_message(self, fixed_now):
        view = build_view_model(NavigationState(anchor_date=date(2024, 6, 15)), [], fixed_now)

        assert "No items due in this period." in ConsoleRenderer().render(view)

    def test_agenda_can_be_hidden(self, june_view):
        output = ConsoleRenderer(show_agenda=False).render(june_view)

        assert "Write report" not in output
        assert "No items due" not in output

    def test_week_view_renders_single_row(self, sample_items, fixed_now):
        view = build_view_model(
            NavigationState(anchor_date=date(2024, 6, 15), view_mode=ViewMode.WEEK),
            sample_items,
            fixed_now,
        )
        lines = ConsoleRenderer(show_agenda=False).render(view).splitlines()

        assert lines[1].strip() == "Jun 9 - Jun 15, 2024"
        assert lines[4].split() == ["9", "10*", "11", "12", "13", "14", "[15]*"]
        assert len(lines) == 6

    def test_render_json(self, june_view):
        data = json.loads(ConsoleRenderer().render_json(june_view))

        assert data["title"] == "June 2024"
        assert data["view_mode"] == "month"
        assert len(data["cells"]) == 42
        june_10 = next(cell for cell in data["cells"] if cell["date"] == "2024-06-10")
        assert [item["id"] for item in june_10["items"]] == ["a", "b"]
        assert june_10["items"][0]["is_overdue"] is True
