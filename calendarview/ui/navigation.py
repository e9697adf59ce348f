"""Navigation state for browsing the calendar by month or week."""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Callable, Optional, Union

from dateutil.relativedelta import relativedelta

from ..grid.date_range import DEFAULT_WEEK_START, as_date, period_bounds
from ..grid.models import ViewMode, as_moment
from ..utils.exceptions import NavigationError

logger = logging.getLogger(__name__)


class NavigationDirection(Enum):
    """Direction for navigation."""

    FORWARD = 1
    BACKWARD = -1


class NavigationCommand(str, Enum):
    """User commands, one per state transition."""

    PREVIOUS = "previous"
    NEXT = "next"
    TODAY = "today"
    TOGGLE = "toggle"

    @classmethod
    def parse(cls, value: Union[str, "NavigationCommand"]) -> "NavigationCommand":
        """Resolve a command name or shorthand.

        Raises:
            NavigationError: If the value names no command
        """
        if isinstance(value, NavigationCommand):
            return value
        key = str(value).strip().lower()
        command = _COMMAND_ALIASES.get(key)
        if command is None:
            raise NavigationError(value)
        return command


_COMMAND_ALIASES = {
    "previous": NavigationCommand.PREVIOUS,
    "prev": NavigationCommand.PREVIOUS,
    "p": NavigationCommand.PREVIOUS,
    "next": NavigationCommand.NEXT,
    "n": NavigationCommand.NEXT,
    "today": NavigationCommand.TODAY,
    "t": NavigationCommand.TODAY,
    "toggle": NavigationCommand.TOGGLE,
    "toggle-view": NavigationCommand.TOGGLE,
    "v": NavigationCommand.TOGGLE,
}


@dataclass(frozen=True)
class NavigationState:
    """Anchor date and view mode of the calendar.

    Instances are immutable; every transition returns a new state, so an
    observer holding a reference never sees a half-updated value.
    """

    anchor_date: date
    view_mode: ViewMode = ViewMode.MONTH
    week_starts_on: int = DEFAULT_WEEK_START

    def __post_init__(self) -> None:
        object.__setattr__(self, "anchor_date", as_date(self.anchor_date))
        object.__setattr__(self, "view_mode", ViewMode(self.view_mode))

    @classmethod
    def initial(
        cls,
        now: Optional[datetime] = None,
        view_mode: ViewMode = ViewMode.MONTH,
        week_starts_on: int = DEFAULT_WEEK_START,
    ) -> "NavigationState":
        """State anchored on the current day."""
        return cls(
            anchor_date=as_moment(now or datetime.now()).date(),
            view_mode=view_mode,
            week_starts_on=week_starts_on,
        )

    def _step(self, direction: NavigationDirection) -> "NavigationState":
        if self.view_mode is ViewMode.MONTH:
            # relativedelta keeps the day of month, clamped at month end
            new_anchor = self.anchor_date + relativedelta(months=direction.value)
        else:
            new_anchor = self.anchor_date + timedelta(weeks=direction.value)

        logger.debug(
            f"Navigated {direction.name.lower()} in {self.view_mode.value} view: "
            f"{self.anchor_date} -> {new_anchor}"
        )
        return replace(self, anchor_date=new_anchor)

    def previous(self) -> "NavigationState":
        """One month back in month view, seven days back in week view."""
        return self._step(NavigationDirection.BACKWARD)

    def next(self) -> "NavigationState":
        """One month forward in month view, seven days forward in week view."""
        return self._step(NavigationDirection.FORWARD)

    def today(self, now: Optional[datetime] = None) -> "NavigationState":
        """Anchor on the current local day, sampled at call time."""
        new_anchor = as_moment(now or datetime.now()).date()
        logger.debug(f"Jumped to today: {self.anchor_date} -> {new_anchor}")
        return replace(self, anchor_date=new_anchor)

    def toggle_view(self) -> "NavigationState":
        """Switch between month and week view around the same anchor."""
        new_mode = self.view_mode.toggled
        logger.debug(f"Toggled view: {self.view_mode.value} -> {new_mode.value}")
        return replace(self, view_mode=new_mode)

    def with_view_mode(self, view_mode: ViewMode) -> "NavigationState":
        """Select a view mode explicitly; a no-op when it is already active."""
        if self.is_view_mode_active(view_mode):
            return self
        return self.toggle_view()

    def is_view_mode_active(self, view_mode: ViewMode) -> bool:
        return self.view_mode is ViewMode(view_mode)

    @property
    def period(self) -> tuple[date, date]:
        """First and last day of the viewed month or week."""
        return period_bounds(self.anchor_date, self.view_mode, self.week_starts_on)

    def __str__(self) -> str:
        return f"NavigationState({self.view_mode.value} @ {self.anchor_date.isoformat()})"


def apply_command(
    state: NavigationState,
    command: Union[str, NavigationCommand],
    now: Optional[datetime] = None,
) -> NavigationState:
    """Apply one user command to ``state`` and return the resulting state.

    Raises:
        NavigationError: If ``command`` is not a known command
    """
    command = NavigationCommand.parse(command)

    if command is NavigationCommand.PREVIOUS:
        return state.previous()
    if command is NavigationCommand.NEXT:
        return state.next()
    if command is NavigationCommand.TODAY:
        return state.today(now)
    return state.toggle_view()


class NavigationController:
    """Owns the current navigation state for one calendar view."""

    def __init__(self, state: Optional[NavigationState] = None) -> None:
        """Initialize the controller.

        Args:
            state: Starting state, defaults to the month containing today
        """
        self._state = state or NavigationState.initial()
        self._change_callbacks: list[Callable[[NavigationState], None]] = []

        logger.debug(f"Navigation controller initialized with {self._state}")

    @property
    def state(self) -> NavigationState:
        return self._state

    def dispatch(
        self, command: Union[str, NavigationCommand], now: Optional[datetime] = None
    ) -> NavigationState:
        """Apply a command, publish the new state and return it.

        Raises:
            NavigationError: If ``command`` is not a known command
        """
        new_state = apply_command(self._state, command, now)
        if new_state != self._state:
            self._state = new_state
            self._notify_change()
        return self._state

    def handle_action(self, action: str, now: Optional[datetime] = None) -> bool:
        """Apply a command coming from a UI; unknown actions are logged and refused.

        Returns:
            True if the action was recognized and applied
        """
        try:
            self.dispatch(action, now)
        except NavigationError:
            logger.warning(f"Unknown navigation action: {action}")
            return False
        return True

    def add_change_callback(self, callback: Callable[[NavigationState], None]) -> None:
        self._change_callbacks.append(callback)
        logger.debug("Added navigation change callback")

    def remove_change_callback(self, callback: Callable[[NavigationState], None]) -> None:
        if callback in self._change_callbacks:
            self._change_callbacks.remove(callback)
            logger.debug("Removed navigation change callback")

    def _notify_change(self) -> None:
        for callback in self._change_callbacks:
            try:
                callback(self._state)
            except Exception:
                logger.exception("Error in navigation change callback")
