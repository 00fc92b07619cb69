"""
Console application loop.

Renders the screen of the current route, reads one line, hands it to the
screen and repeats until the user quits or input ends.
"""
from datetime import tzinfo
from typing import Callable, Optional

from loguru import logger

from config import Settings, get_settings
from error_handling.exceptions import BookingSystemError
from error_handling.logging_config import log_error_with_context
from ui.add_screen import AddScreen
from ui.home_screen import HomeScreen
from ui.navigation import NavController, Route
from ui.screen import Screen
from ui.terminal import Terminal
from viewmodel.shared_view_model import SharedViewModel


class ConsoleApp:
    """
    Drives the home and add screens from line-oriented input.

    Args:
        shared_view_model: View model shared by all screens
        settings: Configuration (global settings if None)
        terminal: Output (stdout, colored per settings, if None)
        input_func: Reads one line given a prompt (input() if None); raises EOFError at end
        zone: Zone used for date conversion (system local zone if None)
    """

    def __init__(
        self,
        shared_view_model: SharedViewModel,
        settings: Optional[Settings] = None,
        terminal: Optional[Terminal] = None,
        input_func: Optional[Callable[[str], str]] = None,
        zone: Optional[tzinfo] = None
    ):
        self.settings = settings or get_settings()
        self.shared_view_model = shared_view_model
        self.terminal = terminal or Terminal(colorize=self.settings.colorize_output)
        self.input_func = input_func or input
        self.zone = zone
        self.nav_controller = NavController(self.terminal)
        self._screen: Optional[Screen] = None
        self._screen_route: Optional[Route] = None

    @property
    def current_screen(self) -> Screen:
        """Screen for the current route, created when the route changes."""
        route = self.nav_controller.current_route
        if self._screen is None or self._screen_route != route:
            if self._screen is not None:
                self._screen.close()
            self._screen = self._create_screen(route)
            self._screen_route = route
            logger.debug(f"Showing screen {self._screen.title!r}")
        return self._screen

    def _create_screen(self, route: Route) -> Screen:
        if route == Route.ADD:
            return AddScreen(
                self.nav_controller,
                self.shared_view_model,
                self.terminal,
                date_format=self.settings.date_input_format,
                require_ordered_dates=self.settings.require_ordered_dates,
                zone=self.zone,
            )
        return HomeScreen(self.nav_controller, self.shared_view_model, self.terminal)

    def run(self) -> int:
        """
        Run until the user quits or input is exhausted.

        Returns:
            Exit code (0)
        """
        logger.info("Console application started")

        while True:
            screen = self.current_screen
            screen.render()

            try:
                line = self.input_func(self.terminal.prompt())
            except EOFError:
                logger.info("Input closed")
                break

            if not self.dispatch(screen, line):
                break

        if self._screen is not None:
            self._screen.close()

        logger.info(f"Console application stopped with {len(self.shared_view_model.booking_entries)} entries")
        return 0

    def dispatch(self, screen: Screen, line: str) -> bool:
        """
        Hand one line to a screen, reporting recoverable errors to the user.

        Returns:
            False if the screen asked to quit
        """
        try:
            return screen.handle(line)
        except BookingSystemError as e:
            log_error_with_context(e, {"screen": screen.title, **e.context})
            self.terminal.error(e.user_message)
            return True
