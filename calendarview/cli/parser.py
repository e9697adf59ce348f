"""Command-line argument parsing for calendarview."""

import argparse
from datetime import date
from typing import Optional

from dateutil.parser import isoparse

from ..config.settings import parse_weekday
from ..grid.models import ViewMode
from ..ui.navigation import NavigationCommand
from ..utils.exceptions import NavigationError
from ..utils.logging import LOG_LEVEL_NAMES


def parse_date_arg(value: str) -> date:
    """argparse type for ``YYYY-MM-DD`` (or any ISO-8601) dates."""
    try:
        return isoparse(value).date()
    except (ValueError, OverflowError) as e:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}: expected YYYY-MM-DD") from e


def parse_weekday_arg(value: str) -> int:
    """argparse type for a weekday name or number."""
    try:
        return parse_weekday(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_command_arg(value: str) -> NavigationCommand:
    """argparse type for a navigation command."""
    try:
        return NavigationCommand.parse(value)
    except NavigationError as e:
        raise argparse.ArgumentTypeError(
            f"{e.message} (choose from previous, next, today, toggle)"
        ) from e


def create_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Create the argument parser for the ``calendarview`` command."""
    parser = argparse.ArgumentParser(
        prog=prog or "calendarview",
        description="Show items with due dates on a month or week calendar grid.",
        epilog="Example: calendarview --items cards.yaml --date 2024-03-15 --view week",
    )

    calendar_group = parser.add_argument_group("calendar")
    calendar_group.add_argument(
        "--items",
        metavar="FILE",
        help="YAML or JSON file with items (overrides items_file setting)",
    )
    calendar_group.add_argument(
        "--ids",
        nargs="+",
        metavar="ID",
        help="Only show these item ids, in this order",
    )
    calendar_group.add_argument(
        "--date",
        type=parse_date_arg,
        metavar="YYYY-MM-DD",
        help="Anchor date of the displayed period (default: today)",
    )
    calendar_group.add_argument(
        "--view",
        type=ViewMode,
        choices=list(ViewMode),
        metavar="{month,week}",
        help="View mode (default: setting default_view_mode)",
    )
    calendar_group.add_argument(
        "--week-start",
        type=parse_weekday_arg,
        metavar="DAY",
        help="First day of the week, e.g. sunday or monday",
    )
    calendar_group.add_argument(
        "--navigate",
        nargs="+",
        type=parse_command_arg,
        default=[],
        metavar="CMD",
        help="Navigation commands applied before rendering: previous, next, today, toggle",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--json", action="store_true", help="Print the view model as JSON instead of a grid"
    )
    output_group.add_argument(
        "--no-agenda", action="store_true", help="Do not list items below the grid"
    )
    output_group.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Browse interactively, reading commands from stdin",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=LOG_LEVEL_NAMES,
        type=str.upper,
        help="Console and file log level",
    )
    logging_group.add_argument("--log-dir", help="Write log files to this directory")
    verbosity = logging_group.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    logging_group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored log output"
    )

    return parser
