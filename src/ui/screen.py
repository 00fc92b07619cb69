"""
Base class for console screens.
"""
from typing import Tuple

from error_handling.exceptions import InvalidCommandError
from ui.terminal import Terminal


def split_command(line: str) -> Tuple[str, str]:
    """
    Split an input line into a lower-cased command word and its argument.

    The argument keeps its inner spaces; only the separator is dropped.
    """
    command, _, argument = line.strip().partition(" ")
    return command.lower(), argument.strip()


class Screen:
    """
    A screen renders itself and reacts to one input line at a time.

    Subclasses set `title` and `usage` and implement render() and handle().
    """

    title: str = ""
    usage: str = ""

    def __init__(self, terminal: Terminal):
        self.terminal = terminal

    def render(self) -> None:
        raise NotImplementedError

    def handle(self, line: str) -> bool:
        """
        Process one line of input.

        Returns:
            False if the application should quit, True otherwise
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release subscriptions held by the screen."""

    def unknown_command(self, command: str) -> InvalidCommandError:
        return InvalidCommandError(command, screen=self.title, usage=self.usage)
