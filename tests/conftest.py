"""
Pytest configuration and shared fixtures.
"""
import io
import sys
from pathlib import Path
from datetime import date, timezone
from typing import Iterable, List
import pytest
from loguru import logger

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from config import Settings, reset_settings
from error_handling.logging_config import init_logging
from models.schemas import BookingEntry
from services.booking_store import BookingStore
from ui.navigation import NavController
from ui.terminal import Terminal
from viewmodel.shared_view_model import SharedViewModel


class ScriptedInput:
    """
    Stand-in for input() that returns prepared lines, then raises EOFError.
    """

    def __init__(self, lines: Iterable[str]):
        self.lines: List[str] = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """
    Configure loguru with the test preset once per session.
    """
    init_logging("test")


@pytest.fixture(scope="function")
def entry_a() -> BookingEntry:
    return BookingEntry(name="Alice", arrival_date=date(2099, 12, 23), departure_date=date(2099, 12, 27))


@pytest.fixture(scope="function")
def entry_b() -> BookingEntry:
    return BookingEntry(name="Bob", arrival_date=date(2099, 7, 1), departure_date=date(2099, 7, 14))


@pytest.fixture(scope="function")
def entry_c() -> BookingEntry:
    return BookingEntry(name="Carol", arrival_date=date(2099, 3, 10), departure_date=date(2099, 3, 12))


@pytest.fixture(scope="function")
def booking_store() -> BookingStore:
    """
    Create an empty BookingStore.
    """
    return BookingStore()


@pytest.fixture(scope="function")
def shared_view_model(booking_store: BookingStore) -> SharedViewModel:
    """
    Create a SharedViewModel around the test store.
    """
    return SharedViewModel(booking_store)


@pytest.fixture(scope="function")
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture(scope="function")
def terminal(output: io.StringIO) -> Terminal:
    """
    Terminal writing uncolored text into a buffer.
    """
    return Terminal(output=output, colorize=False)


@pytest.fixture(scope="function")
def nav_controller(terminal: Terminal) -> NavController:
    return NavController(terminal)


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """
    Settings independent of the environment running the tests.
    """
    return Settings(
        ENVIRONMENT="test",
        LOG_TO_FILE=False,
        DATE_INPUT_FORMAT="%d.%m.%Y",
        REQUIRE_ORDERED_DATES=False,
        COLORIZE_OUTPUT=False,
    )


@pytest.fixture(scope="function")
def clean_settings(monkeypatch, tmp_path):
    """
    Run with no .env file in reach, no settings variables and a fresh cache.
    """
    monkeypatch.chdir(tmp_path)
    for name in [
        "ENVIRONMENT", "LOG_LEVEL", "LOG_TO_FILE", "LOG_DIR",
        "DATE_INPUT_FORMAT", "REQUIRE_ORDERED_DATES", "COLORIZE_OUTPUT",
    ]:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="function")
def utc():
    """
    Pin date conversion to UTC so picked dates map to themselves.
    """
    return timezone.utc


@pytest.fixture(scope="function")
def berlin():
    """
    Europe/Berlin zone for daylight saving tests.
    """
    zoneinfo = pytest.importorskip("zoneinfo")
    try:
        return zoneinfo.ZoneInfo("Europe/Berlin")
    except zoneinfo.ZoneInfoNotFoundError:
        pytest.skip("tz database not available")


@pytest.fixture(scope="function")
def booking_events() -> List[str]:
    """
    Collect messages logged with the BOOKING category.
    """
    messages: List[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="INFO",
        filter=lambda record: record["extra"].get("category") == "BOOKING",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture(scope="function")
def scripted_input():
    """
    Factory for ScriptedInput objects.
    """
    return ScriptedInput
