"""
SharedViewModel - state shared by the home and add screens.

One instance lives as long as the application's screens do and is handed to
each screen explicitly. It owns the BookingStore and turns form fields into
booking entries.
"""
from datetime import date
from typing import Optional

from loguru import logger

from error_handling.logging_config import log_booking_event
from models.schemas import BookingEntry
from services.booking_store import BookingStore


class SharedViewModel:
    """
    Holds the observable list of booking entries for all screens.

    Attributes:
        booking_entries: Store with the current entries; screens observe it
    """

    def __init__(self, store: Optional[BookingStore] = None):
        """
        Initialize the view model.

        Args:
            store: Store to use (a new empty store if None)
        """
        self.booking_entries = store if store is not None else BookingStore()
        logger.info(f"SharedViewModel initialized with {len(self.booking_entries)} entries")

    def add_booking_entry(self, name: str, arrival_date: date, departure_date: date) -> BookingEntry:
        """
        Create a booking entry and append it to the list.

        Args:
            name: Name of the person making the booking
            arrival_date: Arrival date
            departure_date: Departure date

        Returns:
            The entry that was added
        """
        entry = BookingEntry(name=name, arrival_date=arrival_date, departure_date=departure_date)
        self.booking_entries.add(entry)

        log_booking_event(
            "CREATED",
            name=entry.name,
            details={
                "arrival_date": entry.arrival_date.isoformat(),
                "departure_date": entry.departure_date.isoformat(),
                "total": len(self.booking_entries),
            }
        )
        return entry

    def delete_booking_entry(self, entry: BookingEntry) -> None:
        """
        Remove a booking entry from the list.

        Args:
            entry: Entry to remove, matched by value
        """
        before = len(self.booking_entries)
        self.booking_entries.delete(entry)

        if len(self.booking_entries) < before:
            log_booking_event(
                "DELETED",
                name=entry.name,
                details={"total": len(self.booking_entries)}
            )
