"""Command-line front end for calendarview."""

import logging
import sys
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.settings import CalendarViewSettings, load_settings
from ..display.console_renderer import ConsoleRenderer
from ..grid.assembler import build_view_model
from ..grid.models import Item
from ..sources.store import ItemStore
from ..ui.interactive import InteractiveController
from ..ui.navigation import NavigationController, NavigationState
from ..utils.exceptions import CalendarViewError, ConfigurationError
from ..utils.logging import apply_command_line_overrides, setup_logging
from .parser import create_parser

logger = logging.getLogger(__name__)


def _load_items(args: object, settings: CalendarViewSettings) -> list[Item]:
    items_path = getattr(args, "items", None) or settings.items_file
    ids = getattr(args, "ids", None)
    if not items_path:
        if ids:
            raise ConfigurationError(
                "--ids needs an item file (--items or the items_file setting)", field_name="ids"
            )
        logger.info("No item file configured, showing an empty calendar")
        return []

    store = ItemStore.from_file(Path(items_path))
    if not ids:
        return store.resolve(store.ids)

    # command-line ids are strings; match them against numeric ids too
    by_text = {str(item_id): item_id for item_id in store.ids}
    return store.resolve(by_text.get(raw, raw) for raw in ids)


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, render the calendar and return a process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except CalendarViewError as e:
        print(f"calendarview: {e}", file=sys.stderr)
        return 1

    apply_command_line_overrides(settings, args)
    setup_logging(settings)

    now = datetime.now()
    week_starts_on = args.week_start if args.week_start is not None else settings.week_starts_on
    state = NavigationState(
        anchor_date=args.date or now.date(),
        view_mode=args.view or settings.default_view_mode,
        week_starts_on=week_starts_on,
    )

    try:
        items = _load_items(args, settings)

        navigation = NavigationController(state)
        for command in args.navigate:
            navigation.dispatch(command, now)

        renderer = ConsoleRenderer(settings, show_agenda=not args.no_agenda)

        if args.interactive:
            InteractiveController(items, navigation=navigation, renderer=renderer).run()
            return 0

        view = build_view_model(navigation.state, items, now)
        if args.json:
            print(renderer.render_json(view))
        else:
            print(renderer.render(view))

    except CalendarViewError as e:
        logger.error(str(e))
        print(f"calendarview: {e}", file=sys.stderr)
        return 1

    return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


__all__ = ["create_parser", "main", "run"]
