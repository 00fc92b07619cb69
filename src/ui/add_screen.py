"""
Add screen: form for a new booking entry.
"""
from datetime import datetime, tzinfo
from typing import Optional

from error_handling.logging_config import log_booking_event
from models.schemas import BookingDraft
from services.date_conversion import is_selectable_timestamp, to_calendar_date
from services.validation import validate_booking_entry
from ui.date_range_picker import DateRange, DateRangePickerModal
from ui.navigation import NavController
from ui.screen import Screen, split_command
from ui.terminal import Terminal
from viewmodel.shared_view_model import SharedViewModel


class AddScreen(Screen):
    """
    Collects a name and a date range, then saves them as a booking entry.

    While the date range picker is open, input goes to the picker.

    Attributes:
        draft: Form state typed so far
        date_range_picker: Open picker dialog, None while closed
    """

    title = "Add Booking Entry"
    usage = "Commands: n <name> = set name, r = select date range, s = save, b = back"
    INVALID_ENTRY_MESSAGE = "Invalid Booking Entry"
    SAVED_MESSAGE = "Booking entry saved"

    def __init__(
        self,
        nav_controller: NavController,
        shared_view_model: SharedViewModel,
        terminal: Terminal,
        date_format: str = "%d.%m.%Y",
        require_ordered_dates: bool = False,
        zone: Optional[tzinfo] = None
    ):
        super().__init__(terminal)
        self.nav_controller = nav_controller
        self.shared_view_model = shared_view_model
        self.date_format = date_format
        self.require_ordered_dates = require_ordered_dates
        self.zone = zone
        self.draft = BookingDraft()
        self.date_range_picker: Optional[DateRangePickerModal] = None

    def render(self) -> None:
        if self.date_range_picker is not None:
            self.date_range_picker.render()
            return

        self.terminal.header(self.title)
        self.terminal.line(f"Name:              {self.draft.name}")
        self.terminal.line(f"Select Date Range: {self.draft.date_range_label(self.date_format)}")
        self.terminal.line()
        self.terminal.hint(self.usage)

    def handle(self, line: str) -> bool:
        if self.date_range_picker is not None:
            return self.date_range_picker.handle(line)

        command, argument = split_command(line)

        if command == "n":
            self.draft.name = argument
        elif command == "r":
            self.show_date_range_picker()
        elif command == "s":
            self.save()
        elif command == "b":
            self.nav_controller.pop_back_stack()
        elif command:
            raise self.unknown_command(command)

        return True

    def show_date_range_picker(self) -> None:
        self.date_range_picker = DateRangePickerModal(
            on_range_selected=self._on_range_selected,
            on_dismiss=self._dismiss_date_range_picker,
            valid_date=self._is_valid_date,
            terminal=self.terminal,
            date_format=self.date_format,
        )

    def _is_valid_date(self, epoch_millis: int) -> bool:
        # "today" must come from the same zone the timestamp is converted in
        today = datetime.now(self.zone).date() if self.zone is not None else None
        return is_selectable_timestamp(epoch_millis, zone=self.zone, today=today)

    def _on_range_selected(self, date_range: DateRange) -> None:
        start, end = date_range
        self.draft.arrival_date = to_calendar_date(start, zone=self.zone) if start is not None else None
        self.draft.departure_date = to_calendar_date(end, zone=self.zone) if end is not None else None
        self._dismiss_date_range_picker()

    def _dismiss_date_range_picker(self) -> None:
        self.date_range_picker = None

    def save(self) -> bool:
        """
        Validate the draft and add it to the list.

        On success the screen navigates back; otherwise a notification is
        shown and nothing changes.

        Returns:
            True if the entry was added
        """
        draft = self.draft
        if not validate_booking_entry(
            draft.name,
            draft.arrival_date,
            draft.departure_date,
            require_ordered_dates=self.require_ordered_dates
        ):
            log_booking_event(
                "REJECTED",
                name=draft.name,
                details={
                    "arrival_date": draft.arrival_date.isoformat() if draft.arrival_date else None,
                    "departure_date": draft.departure_date.isoformat() if draft.departure_date else None,
                }
            )
            self.nav_controller.show_toast(self.INVALID_ENTRY_MESSAGE)
            return False

        self.shared_view_model.add_booking_entry(draft.name, draft.arrival_date, draft.departure_date)
        self.terminal.success(self.SAVED_MESSAGE)
        self.nav_controller.pop_back_stack()
        return True
