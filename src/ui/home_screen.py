"""
Home screen: the list of booking entries.
"""
from typing import List

from error_handling.exceptions import InvalidCommandError
from models.schemas import BookingEntry
from services.date_conversion import format_date_range
from ui.navigation import NavController, Route
from ui.screen import Screen, split_command
from ui.terminal import Terminal
from viewmodel.shared_view_model import SharedViewModel


class HomeScreen(Screen):
    """
    Shows every booking entry as a numbered card with a delete command.

    The screen observes the view model's store for as long as it is open,
    so `entries` always mirrors the store.
    """

    title = "Booking Entries"
    usage = "Commands: a = add booking, d <number> = delete booking, q = quit"
    EMPTY_MESSAGE = "No booking Entries available"

    def __init__(self, nav_controller: NavController, shared_view_model: SharedViewModel,
                 terminal: Terminal):
        super().__init__(terminal)
        self.nav_controller = nav_controller
        self.shared_view_model = shared_view_model
        self.entries: List[BookingEntry] = []
        self._unsubscribe = shared_view_model.booking_entries.observe(self._on_entries_changed)

    def _on_entries_changed(self, entries: List[BookingEntry]) -> None:
        self.entries = entries

    def render(self) -> None:
        self.terminal.header(self.title)

        if self.entries:
            for number, entry in enumerate(self.entries, start=1):
                self.render_entry(number, entry)
        else:
            self.terminal.line(self.EMPTY_MESSAGE)

        self.terminal.line()
        self.terminal.hint(self.usage)

    def render_entry(self, number: int, entry: BookingEntry) -> None:
        """Print one card: name on the first line, date range below."""
        self.terminal.line(f"[{number}] {entry.name}")
        self.terminal.line(f"    {format_date_range(entry.arrival_date, entry.departure_date)}")

    def handle(self, line: str) -> bool:
        command, argument = split_command(line)

        if command == "a":
            self.nav_controller.navigate(Route.ADD)
        elif command == "d":
            self.shared_view_model.delete_booking_entry(self._entry_at(argument))
        elif command == "q":
            return False
        elif command:
            raise self.unknown_command(command)

        return True

    def _entry_at(self, argument: str) -> BookingEntry:
        """Resolve the 1-based number typed after `d`."""
        try:
            number = int(argument)
        except ValueError:
            number = 0

        if not 1 <= number <= len(self.entries):
            raise InvalidCommandError(
                f"d {argument}".strip(),
                screen=self.title,
                usage=f"Choose a booking number between 1 and {len(self.entries)}"
                if self.entries else "There are no bookings to delete",
            )
        return self.entries[number - 1]

    def close(self) -> None:
        self._unsubscribe()
