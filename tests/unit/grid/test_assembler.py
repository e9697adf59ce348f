"""Unit tests for assembling day cells and the view model."""

import calendar
from collections import Counter
from datetime import date, datetime

import pytest

from calendarview.grid.assembler import assemble, build_view_model, period_title, weekday_labels
from calendarview.grid.date_range import compute_days
from calendarview.grid.models import CalendarViewModel, Item, ViewMode
from calendarview.ui.navigation import NavigationState
from calendarview.utils.logging import VERBOSE


@pytest.fixture
def june_month() -> NavigationState:
    return NavigationState(anchor_date=date(2024, 6, 15), view_mode=ViewMode.MONTH)


@pytest.fixture
def june_week() -> NavigationState:
    return NavigationState(anchor_date=date(2024, 6, 15), view_mode=ViewMode.WEEK)


class TestAssemble:
    """Test assemble()."""

    def test_cells_follow_computed_days(self, june_month, sample_items, fixed_now):
        cells = assemble(june_month, sample_items, fixed_now)

        assert [cell.date for cell in cells] == compute_days(date(2024, 6, 15), ViewMode.MONTH)
        assert len(cells) == 42

    def test_visible_items_appear_in_exactly_one_cell(self, june_month, sample_items, fixed_now):
        cells = assemble(june_month, sample_items, fixed_now)
        placed = Counter(item.id for cell in cells for item in cell.items)

        assert placed == {"a": 1, "b": 1, "c": 1, "g": 1}

    def test_items_land_on_their_due_day(self, june_month, sample_items, fixed_now):
        cells = {cell.date: cell for cell in assemble(june_month, sample_items, fixed_now)}

        assert [item.id for item in cells[date(2024, 6, 10)].items] == ["a", "b"]
        assert [item.id for item in cells[date(2024, 6, 20)].items] == ["c"]
        assert cells[date(2024, 6, 11)].items == ()

    def test_month_view_marks_padding_days(self, june_month, fixed_now):
        cells = assemble(june_month, [], fixed_now)
        outside = [cell.date for cell in cells if not cell.is_in_current_period]

        assert all(day.month != 6 for day in outside)
        assert date(2024, 5, 26) in outside
        assert date(2024, 7, 6) in outside
        assert sum(cell.is_in_current_period for cell in cells) == 30

    def test_week_view_marks_every_day_in_period(self, june_week, fixed_now):
        cells = assemble(june_week, [], fixed_now)

        assert len(cells) == 7
        assert all(cell.is_in_current_period for cell in cells)

    def test_week_view_crossing_months_keeps_all_days_in_period(self, fixed_now):
        state = NavigationState(anchor_date=date(2024, 7, 1), view_mode=ViewMode.WEEK)
        cells = assemble(state, [], fixed_now)

        assert cells[0].date == date(2024, 6, 30)
        assert all(cell.is_in_current_period for cell in cells)

    def test_exactly_one_today_cell_when_visible(self, june_month, fixed_now):
        cells = assemble(june_month, [], fixed_now)
        today_cells = [cell.date for cell in cells if cell.is_today]

        assert today_cells == [date(2024, 6, 15)]

    def test_no_today_cell_when_today_is_outside_the_grid(self, fixed_now):
        state = NavigationState(anchor_date=date(2024, 1, 10))
        cells = assemble(state, [], fixed_now)

        assert not any(cell.is_today for cell in cells)

    def test_overdue_flags_use_given_now(self, june_month, sample_items):
        early = assemble(june_month, sample_items, datetime(2024, 6, 1))
        late = assemble(june_month, sample_items, datetime(2024, 6, 30))

        def flags(cells):
            return {item.id: item.is_overdue for cell in cells for item in cell.items}

        assert flags(early) == {"a": False, "b": False, "c": False, "g": False}
        assert flags(late) == {"a": True, "b": False, "c": True, "g": True}

    def test_items_outside_range_are_omitted(self, june_week, sample_items, fixed_now):
        cells = assemble(june_week, sample_items, fixed_now)
        placed = {item.id for cell in cells for item in cell.items}

        assert placed == {"a", "b", "g"}

    def test_is_idempotent(self, june_month, sample_items, fixed_now):
        assert assemble(june_month, sample_items, fixed_now) == assemble(
            june_month, sample_items, fixed_now
        )

    def test_accepts_raw_mappings(self, june_month, fixed_now):
        cells = assemble(
            june_month, [{"id": 1, "dueDate": "2024-06-03T08:00:00", "isDueCompleted": False}], fixed_now
        )
        day = next(cell for cell in cells if cell.date == date(2024, 6, 3))

        assert day.items[0].id == 1
        assert day.items[0].is_overdue is True


class TestHeaders:
    """Test weekday labels and period titles."""

    def test_weekday_labels_sunday_start(self):
        assert weekday_labels(calendar.SUNDAY) == ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

    def test_weekday_labels_monday_start(self):
        assert weekday_labels(calendar.MONDAY)[0] == "Mon"
        assert weekday_labels(calendar.MONDAY)[-1] == "Sun"

    def test_month_title(self):
        assert period_title(NavigationState(anchor_date=date(2024, 3, 15))) == "March 2024"

    def test_week_title(self):
        state = NavigationState(anchor_date=date(2024, 3, 15), view_mode=ViewMode.WEEK)
        assert period_title(state) == "Mar 10 - Mar 16, 2024"

    def test_week_title_across_years_uses_last_day_year(self):
        state = NavigationState(anchor_date=date(2025, 1, 1), view_mode=ViewMode.WEEK)
        assert period_title(state) == "Dec 29 - Jan 4, 2025"


class TestBuildViewModel:
    """Test build_view_model()."""

    def test_builds_complete_model(self, june_month, sample_items, fixed_now):
        view = build_view_model(june_month, sample_items, fixed_now)

        assert isinstance(view, CalendarViewModel)
        assert view.anchor_date == date(2024, 6, 15)
        assert view.view_mode is ViewMode.MONTH
        assert view.title == "June 2024"
        assert view.weekday_labels[0] == "Sun"
        assert len(view.weeks()) == 6
        assert view.item_count == 4

    def test_view_model_is_comparable_by_value(self, june_week, sample_items, fixed_now):
        assert build_view_model(june_week, sample_items, fixed_now) == build_view_model(
            june_week, sample_items, fixed_now
        )

    def test_defaults_now_to_current_time(self):
        state = NavigationState.initial()
        view = build_view_model(state, [Item(id=1, due_date=datetime(2000, 1, 1))])

        assert any(cell.is_today for cell in view.cells)
        assert view.item_count == 0

    def test_respects_week_start(self, fixed_now):
        state = NavigationState(
            anchor_date=date(2024, 6, 15), view_mode=ViewMode.WEEK, week_starts_on=calendar.MONDAY
        )
        view = build_view_model(state, [], fixed_now)

        assert view.cells[0].date == date(2024, 6, 10)
        assert view.weekday_labels[0] == "Mon"
        assert view.title == "Jun 10 - Jun 16, 2024"

    def test_logs_summary_at_verbose_level(self, june_month, sample_items, fixed_now, caplog):
        with caplog.at_level(VERBOSE, logger="calendarview.grid.assembler"):
            build_view_model(june_month, sample_items, fixed_now)

        records = [r for r in caplog.records if r.name == "calendarview.grid.assembler"]
        assert [r.levelno for r in records] == [VERBOSE]
        assert "Assembled 42 cells" in records[0].getMessage()
        assert "4 items visible" in records[0].getMessage()
