"""
Services package - Booking store, validation gate and date helpers.
"""
from .booking_store import BookingStore
from .validation import validate_booking_entry
from .date_conversion import (
    to_calendar_date,
    is_not_before_today,
    is_selectable_timestamp,
    date_to_epoch_millis,
    format_date_medium,
    format_date_range,
)

__all__ = [
    "BookingStore",
    "validate_booking_entry",
    "to_calendar_date",
    "is_not_before_today",
    "is_selectable_timestamp",
    "date_to_epoch_millis",
    "format_date_medium",
    "format_date_range",
]
