"""
Tests for the application entry point.

Tests:
- Exit codes on quit, end of input and interrupt
- Settings reaching the logging presets
"""
import pytest

import error_handling.logging_config
import main


@pytest.fixture
def logging_calls(monkeypatch):
    """
    Record configure_logging() arguments instead of reconfiguring loguru.
    """
    calls = []
    monkeypatch.setattr(
        error_handling.logging_config,
        "configure_logging",
        lambda **kwargs: calls.append(kwargs),
    )
    return calls


@pytest.fixture
def run_main(clean_settings, logging_calls, monkeypatch, scripted_input):
    """
    Run main() with the given lines typed at the prompt.
    """
    monkeypatch.setenv("COLORIZE_OUTPUT", "false")

    def runner(*lines: str) -> int:
        monkeypatch.setattr("builtins.input", scripted_input(lines))
        return main.main()
    return runner


def interrupted(prompt: str = "") -> str:
    raise KeyboardInterrupt


class TestExitCodes:
    """Test main() return values."""

    def test_quit_returns_zero(self, run_main, capsys):
        """Test that `q` ends the application normally."""
        assert run_main("q") == 0
        assert "Booking Entries" in capsys.readouterr().out

    def test_end_of_input_returns_zero(self, run_main):
        """Test that closed input ends the application normally."""
        assert run_main() == 0

    def test_interrupt_returns_130(self, clean_settings, logging_calls, monkeypatch):
        """Test that Ctrl+C at the prompt exits with 130."""
        monkeypatch.setenv("COLORIZE_OUTPUT", "false")
        monkeypatch.setattr("builtins.input", interrupted)

        assert main.main() == 130


class TestLoggingSetup:
    """Test that settings select the logging preset."""

    def test_production_logs_to_file(self, run_main, logging_calls, monkeypatch):
        """Test that production without LOG_TO_FILE keeps the preset's file logging."""
        monkeypatch.setenv("ENVIRONMENT", "production")

        run_main("q")

        assert len(logging_calls) == 1
        assert logging_calls[0]["log_to_file"] is True
        assert logging_calls[0]["log_level"] == "INFO"

    def test_log_to_file_override(self, run_main, logging_calls, monkeypatch):
        """Test that LOG_TO_FILE=false wins over the production preset."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_TO_FILE", "false")

        run_main("q")

        assert logging_calls[0]["log_to_file"] is False

    def test_development_preset_is_quiet(self, run_main, logging_calls):
        """Test that the default preset keeps debug lines off the console."""
        run_main("q")

        assert logging_calls[0]["log_level"] == "WARNING"
        assert logging_calls[0]["format_type"] == "simple"
        assert logging_calls[0]["log_to_file"] is False

    def test_log_level_override(self, run_main, logging_calls, monkeypatch):
        """Test that LOG_LEVEL restores verbose output."""
        monkeypatch.setenv("LOG_LEVEL", "debug")

        run_main("q")

        assert logging_calls[0]["log_level"] == "DEBUG"
        assert logging_calls[0]["log_dir"] == "logs"
