"""Navigation and interactive front end."""

from .navigation import (
    NavigationCommand,
    NavigationController,
    NavigationDirection,
    NavigationState,
    apply_command,
)

__all__ = [
    "NavigationCommand",
    "NavigationController",
    "NavigationDirection",
    "NavigationState",
    "apply_command",
]
