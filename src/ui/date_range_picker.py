"""
Date range picker dialog shown on top of the add screen.

Selection follows a calendar range picker: the first date picked becomes the
start, the next later-or-equal date becomes the end, and picking again after
a complete range starts a new one. Selected dates are kept as epoch
milliseconds at UTC midnight.
"""
from datetime import datetime, timezone
from typing import Callable, Optional, Tuple

from loguru import logger

from error_handling.exceptions import InvalidDateInputError, UnselectableDateError
from services.date_conversion import date_to_epoch_millis
from ui.screen import Screen, split_command
from ui.terminal import Terminal


DateRange = Tuple[Optional[int], Optional[int]]


class DateRangePickerModal(Screen):
    """
    Collects an optional start and end date.

    Args:
        on_range_selected: Called with (start_millis, end_millis) on confirm
        on_dismiss: Called when the dialog is cancelled
        valid_date: Predicate deciding whether a timestamp may be picked
        terminal: Output for rendering
        date_format: Format of typed dates
    """

    title = "Select Date Range"

    def __init__(
        self,
        on_range_selected: Callable[[DateRange], None],
        on_dismiss: Callable[[], None],
        valid_date: Callable[[int], bool],
        terminal: Terminal,
        date_format: str = "%d.%m.%Y"
    ):
        super().__init__(terminal)
        self.on_range_selected = on_range_selected
        self.on_dismiss = on_dismiss
        self.valid_date = valid_date
        self.date_format = date_format
        self.selected_start_date_millis: Optional[int] = None
        self.selected_end_date_millis: Optional[int] = None
        self.usage = (
            f"Type a date ({datetime(2026, 12, 31).strftime(date_format)}) to pick it, "
            "ok = confirm, c = cancel"
        )

    def render(self) -> None:
        self.terminal.header(self.title)
        self.terminal.line(f"Start: {self._describe(self.selected_start_date_millis)}")
        self.terminal.line(f"End:   {self._describe(self.selected_end_date_millis)}")
        self.terminal.line()
        self.terminal.hint(self.usage)

    def _describe(self, millis: Optional[int]) -> str:
        if millis is None:
            return "-"
        return datetime.fromtimestamp(millis // 1000, tz=timezone.utc).strftime(self.date_format)

    def handle(self, line: str) -> bool:
        command, _ = split_command(line)

        if command == "ok":
            self.on_range_selected((self.selected_start_date_millis, self.selected_end_date_millis))
        elif command == "c":
            self.on_dismiss()
        elif command:
            self.select(line.strip())

        return True

    def select(self, text: str) -> None:
        """
        Pick the date typed as `text`.

        Raises:
            InvalidDateInputError: If the text is not a date in date_format
            UnselectableDateError: If valid_date rejects the date
        """
        field = self._next_field()

        try:
            day = datetime.strptime(text, self.date_format).date()
        except ValueError:
            raise InvalidDateInputError(text, self.date_format, field=field)

        millis = date_to_epoch_millis(day)
        if not self.valid_date(millis):
            raise UnselectableDateError(day, field=field)

        if field == "end" and millis < self.selected_start_date_millis:
            field = "start"

        if field == "start":
            self.selected_start_date_millis = millis
            self.selected_end_date_millis = None
        else:
            self.selected_end_date_millis = millis

        logger.debug(f"Picked {field} date {day.isoformat()}")

    def _next_field(self) -> str:
        if self.selected_start_date_millis is None or self.selected_end_date_millis is not None:
            return "start"
        return "end"
