"""
Terminal output helpers for the console front-end.
"""
import sys
from typing import Optional, TextIO


class Colors:
    """ANSI color codes for terminal output."""
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    CYAN = '\033[96m'
    MAGENTA = '\033[95m'
    BOLD = '\033[1m'
    END = '\033[0m'


class Terminal:
    """
    Writes screens, prompts and notifications to a text stream.

    Attributes:
        output: Stream written to (stdout by default)
        colorize: Whether ANSI color codes are emitted
    """

    def __init__(self, output: Optional[TextIO] = None, colorize: bool = True):
        self.output = output if output is not None else sys.stdout
        self.colorize = colorize

    def _paint(self, text: str, *codes: str) -> str:
        if not self.colorize:
            return text
        return f"{''.join(codes)}{text}{Colors.END}"

    def line(self, text: str = "") -> None:
        """Print a plain line."""
        print(text, file=self.output)

    def header(self, text: str) -> None:
        """Print a screen title bar."""
        bar = "=" * 60
        self.line()
        self.line(self._paint(bar, Colors.BOLD, Colors.BLUE))
        self.line(self._paint(text.center(60), Colors.BOLD, Colors.BLUE))
        self.line(self._paint(bar, Colors.BOLD, Colors.BLUE))

    def hint(self, text: str) -> None:
        """Print the available commands of a screen."""
        self.line(self._paint(text, Colors.MAGENTA))

    def toast(self, text: str) -> None:
        """Print a transient notification."""
        self.line(self._paint(f"ℹ️  {text}", Colors.YELLOW))

    def success(self, text: str) -> None:
        """Print success message."""
        self.line(self._paint(f"✓ {text}", Colors.GREEN))

    def error(self, text: str) -> None:
        """Print error message."""
        self.line(self._paint(f"✗ {text}", Colors.RED))

    def prompt(self, text: str = "> ") -> str:
        """Text shown in front of the user's input."""
        return self._paint(text, Colors.CYAN)
