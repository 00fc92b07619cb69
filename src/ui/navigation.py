"""
Navigation between the console screens.
"""
from enum import Enum
from typing import List

from loguru import logger

from error_handling.exceptions import NavigationError
from ui.terminal import Terminal


class Route(str, Enum):
    """Destinations of the application."""

    HOME = "home"
    """List of booking entries; the start destination."""

    ADD = "add"
    """Form for a new booking entry."""

    def __str__(self) -> str:
        return self.value


class NavController:
    """
    Back stack of routes plus the notification channel screens use.

    The start destination always stays at the bottom of the stack.
    """

    def __init__(self, terminal: Terminal, start_destination: Route = Route.HOME):
        self.terminal = terminal
        self.back_stack: List[Route] = [Route(start_destination)]

    @property
    def current_route(self) -> Route:
        return self.back_stack[-1]

    def navigate(self, route: str) -> None:
        """
        Push a route onto the back stack.

        Raises:
            NavigationError: If no screen exists for the route
        """
        try:
            destination = Route(route)
        except ValueError:
            raise NavigationError(str(route))

        self.back_stack.append(destination)
        logger.debug(f"Navigated to {destination} (stack={[str(r) for r in self.back_stack]})")

    def pop_back_stack(self) -> bool:
        """
        Leave the current screen.

        Returns:
            False if already at the start destination, True otherwise
        """
        if len(self.back_stack) <= 1:
            return False

        left = self.back_stack.pop()
        logger.debug(f"Popped {left}, now at {self.current_route}")
        return True

    def show_toast(self, message: str) -> None:
        """Show a short notification to the user."""
        self.terminal.toast(message)
