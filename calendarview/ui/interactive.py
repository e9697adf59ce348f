"""Line-based interactive browsing of the calendar."""

import logging
import sys
from collections.abc import Sequence
from datetime import datetime
from typing import Callable, Optional, TextIO

from ..display.console_renderer import ConsoleRenderer
from ..grid.assembler import build_view_model
from ..grid.models import Item
from .navigation import NavigationController, NavigationState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"q", "quit", "exit"})

HELP_TEXT = "p: previous | n: next | t: today | v: toggle month/week | q: quit"


class InteractiveController:
    """Reads navigation commands line by line and re-renders after each one."""

    def __init__(
        self,
        items: Sequence[Item],
        navigation: Optional[NavigationController] = None,
        renderer: Optional[ConsoleRenderer] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize interactive controller.

        Args:
            items: Item snapshot to place on the calendar
            navigation: Navigation controller, defaults to one anchored today
            renderer: Renderer used after every command
            input_func: Prompt function returning one line per call
            output: Stream receiving rendered views, defaults to stdout
            clock: Source of "now", sampled once per render
        """
        self.items = list(items)
        self.navigation = navigation or NavigationController()
        self.renderer = renderer or ConsoleRenderer()
        self.input_func = input_func or input
        self.output = output or sys.stdout
        self.clock = clock

        self._dirty = True
        self.navigation.add_change_callback(self._on_state_changed)

        logger.debug("Interactive controller initialized")

    def _on_state_changed(self, state: NavigationState) -> None:
        logger.debug(f"Navigation changed to {state}")
        self._dirty = True

    def _write(self, text: str) -> None:
        self.output.write(text + "\n")
        self.output.flush()

    def render_current(self) -> str:
        view = build_view_model(self.navigation.state, self.items, self.clock())
        return self.renderer.render(view)

    def run(self) -> int:
        """Run until the user quits or input ends.

        Returns:
            Number of commands applied
        """
        applied = 0
        self._write(HELP_TEXT)

        while True:
            if self._dirty:
                self._write(self.render_current())
                self._dirty = False

            try:
                line = self.input_func("> ")
            except EOFError:
                break

            command = line.strip().lower()
            if not command:
                continue
            if command in EXIT_COMMANDS:
                logger.info("User requested exit from interactive mode")
                break
            if command in ("?", "h", "help"):
                self._write(HELP_TEXT)
                continue

            if self.navigation.handle_action(command, self.clock()):
                applied += 1
            else:
                self._write(f"Unknown command {command!r}. {HELP_TEXT}")

        self.navigation.remove_change_callback(self._on_state_changed)
        return applied
