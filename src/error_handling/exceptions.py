"""
Custom Exception Classes for the booking entries application.

This module defines exception classes for the faults of the console
front-end:
- Input Errors (unparseable or unselectable dates, unknown commands)
- Navigation Errors (unknown routes)

Rejected booking entries are not exceptions: validation returns a boolean
and the add screen shows a notification instead.

Each exception includes context for logging and a user-facing message.
"""

from typing import Optional, Any, Dict
from datetime import date


class BookingSystemError(Exception):
    """Base exception for all booking entries errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = True
    ):
        """
        Initialize booking system error.

        Args:
            message: Technical error message for logging
            user_message: User-friendly message for the console
            context: Additional context for logging
            recoverable: Whether the application can continue
        """
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.context = context or {}
        self.recoverable = recoverable


# ============================================================================
# Input Errors
# ============================================================================

class UserInputError(BookingSystemError):
    """
    Raised when a line typed by the user cannot be used.

    Examples:
    - A date that does not match the configured input format
    - A date before today in the date range picker
    - An unknown screen command
    """

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs
    ):
        """
        Initialize user input error.

        Args:
            message: Technical error message
            user_message: User-friendly message
            field: Input that failed (command, start, end)
            value: Offending raw value
            **kwargs: Additional context
        """
        context = {
            "field": field,
            "value": value,
            **kwargs
        }
        super().__init__(message, user_message, context, recoverable=True)
        self.field = field
        self.value = value


class InvalidDateInputError(UserInputError):
    """Raised when typed text is not a date in the expected format."""

    def __init__(self, text: str, date_format: str, field: Optional[str] = None, **kwargs):
        super().__init__(
            message=f"Cannot parse {text!r} with format {date_format!r}",
            user_message=f"'{text}' is not a valid date",
            field=field,
            value=text,
            date_format=date_format,
            **kwargs
        )


class UnselectableDateError(UserInputError):
    """Raised when a picked date fails the picker's validity predicate."""

    def __init__(self, day: date, field: Optional[str] = None, **kwargs):
        super().__init__(
            message=f"Date {day.isoformat()} is not selectable",
            user_message="Dates before today cannot be selected",
            field=field,
            value=day,
            **kwargs
        )


class InvalidCommandError(UserInputError):
    """Raised when a screen receives a command it does not understand."""

    def __init__(self, command: str, screen: str, usage: Optional[str] = None, **kwargs):
        user_message = f"Unknown command: {command!r}"
        if usage:
            user_message += f". {usage}"
        super().__init__(
            message=f"Screen {screen!r} cannot handle command {command!r}",
            user_message=user_message,
            field="command",
            value=command,
            screen=screen,
            **kwargs
        )


# ============================================================================
# Navigation Errors
# ============================================================================

class NavigationError(BookingSystemError):
    """Raised when navigating to a route that has no screen."""

    def __init__(self, route: str, **kwargs):
        super().__init__(
            message=f"Unknown route: {route}",
            user_message="That screen does not exist",
            context={"route": route, **kwargs},
            recoverable=True
        )
        self.route = route
