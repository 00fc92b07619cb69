"""
Configuration module for the booking entries application.

Loads environment variables (and an optional .env file) and provides
settings for logging, date input and validation behaviour.
"""
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        environment: Deployment environment used to pick logging presets
        log_level: Optional log level overriding the environment preset
        log_to_file: Whether loguru also writes to files (preset if None)
        log_dir: Directory for log files
        date_input_format: strptime/strftime pattern for typed dates
        require_ordered_dates: Reject departures earlier than arrivals
        colorize_output: Use ANSI colors in the console front-end
    """

    # Logging configuration
    environment: str = Field(
        default="development",
        alias="ENVIRONMENT",
        description="Environment name (development, production, test)"
    )

    log_level: Optional[str] = Field(
        default=None,
        alias="LOG_LEVEL",
        description="Log level override (DEBUG, INFO, WARNING, ERROR)"
    )

    log_to_file: Optional[bool] = Field(
        default=None,
        alias="LOG_TO_FILE",
        description="Write log files in addition to stderr (environment preset if unset)"
    )

    log_dir: str = Field(
        default="logs",
        alias="LOG_DIR",
        description="Directory for log files"
    )

    # Booking entry configuration
    date_input_format: str = Field(
        default="%d.%m.%Y",
        alias="DATE_INPUT_FORMAT",
        description="Format used to type and display dates on the add screen"
    )

    require_ordered_dates: bool = Field(
        default=False,
        alias="REQUIRE_ORDERED_DATES",
        description="Reject entries whose departure precedes the arrival"
    )

    # Console configuration
    colorize_output: bool = Field(
        default=True,
        alias="COLORIZE_OUTPUT",
        description="Use ANSI colors in console output"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get or create the global settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
