"""
Main entry point for the booking entries console application.

Starts with an empty list of booking entries; everything entered is lost
when the application exits.
"""
import sys

from loguru import logger

from config import get_settings
from error_handling.logging_config import init_logging
from ui.console import ConsoleApp
from viewmodel.shared_view_model import SharedViewModel


def main():
    """
    Main entry point for the booking entries application.
    """
    settings = get_settings()
    init_logging(
        settings.environment,
        log_level=settings.log_level,
        log_to_file=settings.log_to_file,
        log_dir=settings.log_dir,
    )

    logger.info("=" * 60)
    logger.info("Booking Entries")
    logger.info("=" * 60)

    try:
        app = ConsoleApp(SharedViewModel(), settings=settings)
        return app.run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        return 130

    finally:
        logger.info("Application shutting down...")


if __name__ == "__main__":
    sys.exit(main())
