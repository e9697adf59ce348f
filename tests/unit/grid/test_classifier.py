"""Unit tests for overdue/completed classification."""

from datetime import date, datetime, timedelta, timezone

from calendarview.grid.classifier import classify, is_overdue
from calendarview.grid.models import ClassifiedItem, Item

NOW = datetime(2024, 6, 15)


class TestIsOverdue:
    """Test the overdue rule."""

    def test_past_due_open_item_is_overdue(self):
        item = Item(id=1, due_date="2024-06-10", is_due_completed=False)
        assert is_overdue(item, NOW) is True

    def test_past_due_completed_item_is_not_overdue(self):
        item = Item(id=1, due_date="2024-06-10", is_due_completed=True)
        assert is_overdue(item, NOW) is False

    def test_future_item_is_not_overdue(self):
        item = Item(id=1, due_date="2024-06-20")
        assert is_overdue(item, NOW) is False

    def test_comparison_uses_time_of_day(self):
        """An item due this morning is overdue by the afternoon of the same day."""
        item = Item(id=1, due_date=datetime(2024, 6, 15, 9, 0))

        assert is_overdue(item, datetime(2024, 6, 15, 8, 0)) is False
        assert is_overdue(item, datetime(2024, 6, 15, 10, 0)) is True

    def test_due_exactly_now_is_not_overdue(self):
        item = Item(id=1, due_date=datetime(2024, 6, 15, 9, 0))
        assert is_overdue(item, datetime(2024, 6, 15, 9, 0)) is False

    def test_item_without_due_date_is_never_overdue(self):
        assert is_overdue(Item(id=1), NOW) is False

    def test_accepts_plain_date_as_now(self):
        item = Item(id=1, due_date=datetime(2024, 6, 14, 23, 0))
        assert is_overdue(item, date(2024, 6, 15)) is True

    def test_accepts_aware_now(self):
        item = Item(id=1, due_date=datetime.now() - timedelta(hours=1))
        assert is_overdue(item, datetime.now(timezone.utc)) is True


class TestClassify:
    """Test classify()."""

    def test_returns_classified_item_wrapping_the_item(self):
        item = Item(id="x", name="Task", due_date="2024-06-10")
        classified = classify(item, NOW)

        assert isinstance(classified, ClassifiedItem)
        assert classified.item is item
        assert classified.id == "x"
        assert classified.name == "Task"
        assert classified.is_overdue is True
        assert classified.is_completed is False

    def test_flag_is_recomputed_for_each_moment(self):
        """The same item flips to overdue as time moves on; nothing is cached."""
        item = Item(id=1, due_date="2024-06-20")

        assert classify(item, NOW).is_overdue is False
        assert classify(item, datetime(2024, 6, 21)).is_overdue is True
        assert item.due_date == datetime(2024, 6, 20)

    def test_completed_flag_passes_through(self):
        classified = classify(Item(id=1, due_date="2024-06-10", isDueCompleted=True), NOW)

        assert classified.is_completed is True
        assert classified.is_due_completed is True
        assert classified.is_overdue is False
