"""Exceptions raised by calendarview components.

The grid computations themselves are total over valid dates and never raise
these; they are used at the edges (item loading, command dispatch, settings).
"""

from typing import Any, Optional


class CalendarViewError(Exception):
    """Base exception for all calendarview errors.

    Args:
        message: Human-readable error description
        details: Optional dictionary containing additional error context

    Example:
        >>> raise CalendarViewError("Item file unreadable", {"path": "items.yaml"})
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ItemSourceError(CalendarViewError):
    """Raised when an item source cannot be read or has an unexpected shape."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        original_error: Optional[Exception] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.file_path = file_path
        self.original_error = original_error

        error_details = details or {}
        if file_path:
            error_details["file_path"] = file_path
        if original_error:
            error_details["original_error"] = str(original_error)

        super().__init__(message, error_details)


class ItemNotFoundError(CalendarViewError, KeyError):
    """Raised when an item id cannot be resolved by the item store."""

    def __init__(self, item_id: Any) -> None:
        self.item_id = item_id
        super().__init__(f"Unknown item id {item_id!r}", {"item_id": str(item_id)})

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class NavigationError(CalendarViewError):
    """Raised when a navigation command is not recognized."""

    def __init__(self, command: Any) -> None:
        self.command = command
        super().__init__(f"Unknown navigation command: {command!r}")


class ConfigurationError(CalendarViewError):
    """Raised when settings contain invalid values."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
    ) -> None:
        self.field_name = field_name
        self.field_value = field_value

        error_details: dict[str, Any] = {}
        if field_name:
            error_details["field_name"] = field_name
        if field_value is not None:
            error_details["field_value"] = str(field_value)

        super().__init__(message, error_details)
