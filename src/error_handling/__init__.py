"""
Error handling module for the booking entries application.

Main Components:
    - exceptions: Custom exception classes for console input and navigation
    - logging_config: loguru setup and audit/error logging helpers
"""

from .exceptions import (
    BookingSystemError,
    UserInputError,
    InvalidDateInputError,
    UnselectableDateError,
    InvalidCommandError,
    NavigationError,
)

from .logging_config import (
    configure_logging,
    init_logging,
    log_booking_event,
    log_error_with_context,
)

__all__ = [
    # Exceptions
    "BookingSystemError",
    "UserInputError",
    "InvalidDateInputError",
    "UnselectableDateError",
    "InvalidCommandError",
    "NavigationError",

    # Logging
    "configure_logging",
    "init_logging",
    "log_booking_event",
    "log_error_with_context",
]
