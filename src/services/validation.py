"""
Validation gate run before a booking entry is admitted to the store.
"""
from datetime import date
from typing import Optional


def validate_booking_entry(
    name: Optional[str],
    arrival_date: Optional[date],
    departure_date: Optional[date],
    require_ordered_dates: bool = False
) -> bool:
    """
    Check that all fields of a booking entry are filled in.

    Args:
        name: Name of the person making the booking
        arrival_date: Arrival date, None if not selected
        departure_date: Departure date, None if not selected
        require_ordered_dates: Also reject a departure before the arrival

    Returns:
        True if the name is non-empty and both dates are present
    """
    if not name or arrival_date is None or departure_date is None:
        return False

    if require_ordered_dates and departure_date < arrival_date:
        return False

    return True
