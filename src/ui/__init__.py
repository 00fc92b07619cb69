"""
Console front-end package.

This package provides:
- ConsoleApp: loop that renders the current screen and dispatches input
- HomeScreen / AddScreen / DateRangePickerModal: the screens
- NavController / Route: back stack navigation and notifications
"""

from .terminal import Terminal
from .navigation import NavController, Route
from .home_screen import HomeScreen
from .add_screen import AddScreen
from .date_range_picker import DateRangePickerModal
from .console import ConsoleApp

__all__ = [
    "Terminal",
    "NavController",
    "Route",
    "HomeScreen",
    "AddScreen",
    "DateRangePickerModal",
    "ConsoleApp",
]
