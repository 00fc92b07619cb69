"""
Centralized logging configuration for the booking entries application.

This module configures loguru with different levels and formats for
development, production and test runs, plus a separate audit sink for
booking events.
"""
import sys
from pathlib import Path
from typing import Any, Dict, Optional
from loguru import logger


def configure_logging(
    log_level: str = "INFO",
    log_to_file: bool = True,
    log_dir: str = "logs",
    rotation: str = "10 MB",
    retention: str = "30 days",
    format_type: str = "detailed"
) -> None:
    """
    Configure loguru logging for the application.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to log to files in addition to stderr
        log_dir: Directory for log files
        rotation: When to rotate log files (e.g., "10 MB", "1 day")
        retention: How long to keep old log files
        format_type: Format style ("simple" or "detailed")
    """
    # Remove default logger
    logger.remove()

    if format_type == "simple":
        format_string = "<level>{level: <8}</level> | <level>{message}</level>"
    else:  # detailed
        format_string = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )

    logger.add(
        sys.stderr,
        format=format_string,
        level=log_level,
        colorize=True,
        backtrace=True,
        diagnose=False
    )

    if log_to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path / "booking_entries_{time:YYYY-MM-DD}.log",
            format=format_string,
            level=log_level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=False
        )

        # Audit trail of created/deleted entries
        logger.add(
            log_path / "bookings_{time:YYYY-MM-DD}.log",
            format=format_string,
            level="INFO",
            rotation="1 day",
            retention="1 year",
            compression="zip",
            filter=lambda record: record["extra"].get("category") == "BOOKING"
        )

    logger.info(
        f"Logging configured: level={log_level}, "
        f"file_logging={log_to_file}, "
        f"format={format_type}"
    )


def log_booking_event(
    event_type: str,
    name: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log a booking-related event for the audit trail.

    Args:
        event_type: Type of event ("CREATED", "DELETED", "REJECTED")
        name: Name on the booking entry
        details: Additional event details (dates, list size)
    """
    details = details or {}

    logger.bind(category="BOOKING").info(
        f"BOOKING {event_type} | "
        f"name={name!r} | "
        f"details={details}"
    )


def log_error_with_context(
    error: Exception,
    context: Dict[str, Any],
    severity: str = "WARNING"
) -> None:
    """
    Log an error with its context.

    Args:
        error: Exception that occurred
        context: Context dictionary with relevant information
        severity: Log severity (WARNING, ERROR, CRITICAL)
    """
    logger.bind(category="ERROR", **context).log(
        severity,
        f"Error occurred: {type(error).__name__}: {error}"
    )

    # Stack trace only for real failures
    if severity in ["ERROR", "CRITICAL"]:
        logger.exception(error)


def init_logging(environment: str = "development", log_level: Optional[str] = None,
                 log_to_file: Optional[bool] = None, log_dir: str = "logs") -> None:
    """
    Initialize logging with environment-specific settings.

    Args:
        environment: Environment name ("development", "production", "test")
        log_level: Overrides the preset level when given
        log_to_file: Overrides the preset file logging when given
        log_dir: Directory for log files
    """
    if environment == "production":
        preset = dict(log_level="INFO", log_to_file=True, format_type="detailed",
                      rotation="10 MB", retention="90 days")
    elif environment == "test":
        preset = dict(log_level="WARNING", log_to_file=False, format_type="simple")
    else:  # development, shares stderr with the console screens
        preset = dict(log_level="WARNING", log_to_file=False, format_type="simple",
                      rotation="5 MB", retention="7 days")

    if log_level is not None:
        preset["log_level"] = log_level.upper()
    if log_to_file is not None:
        preset["log_to_file"] = log_to_file

    configure_logging(log_dir=log_dir, **preset)

    logger.info(f"Logging initialized for {environment} environment")
