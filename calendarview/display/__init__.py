"""Presentational collaborators for the calendar view model."""

from .console_renderer import ConsoleRenderer

__all__ = ["ConsoleRenderer"]
