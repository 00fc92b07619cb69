"""
Date helpers shared by the add screen and the date range picker.

The picker works with epoch-millisecond timestamps at UTC midnight; booking
entries store plain calendar dates. to_calendar_date() bridges the two using
the local zone's offset as it is *now*, not as it was at the timestamp, so a
timestamp on the far side of a DST change is shifted by the current offset.
"""
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional

_EPOCH = datetime(1970, 1, 1)


def _current_offset(zone: Optional[tzinfo] = None, now: Optional[datetime] = None) -> timedelta:
    """UTC offset of `zone` (system local zone by default) at the moment `now`."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.astimezone()

    if zone is None:
        return now.astimezone().utcoffset()
    return now.astimezone(zone).utcoffset()


def to_calendar_date(
    epoch_millis: int,
    zone: Optional[tzinfo] = None,
    now: Optional[datetime] = None
) -> date:
    """
    Convert an epoch-millisecond timestamp to a calendar date.

    Milliseconds are truncated toward zero to whole seconds, then the
    zone's offset evaluated at `now` is applied.

    Args:
        epoch_millis: Milliseconds since the Unix epoch
        zone: Zone whose offset is used (system local zone if None)
        now: Moment at which the offset is evaluated (current time if None)

    Returns:
        The calendar date of the shifted timestamp
    """
    seconds = abs(epoch_millis) // 1000
    if epoch_millis < 0:
        seconds = -seconds

    local = _EPOCH + timedelta(seconds=seconds) + _current_offset(zone, now)
    return local.date()


def is_not_before_today(day: date, today: Optional[date] = None) -> bool:
    """
    Check whether a date is today or later.

    Args:
        day: Date to check
        today: Reference date (current local date if None)

    Returns:
        True unless `day` lies before today
    """
    if today is None:
        today = date.today()
    return not day < today


def is_selectable_timestamp(
    epoch_millis: int,
    zone: Optional[tzinfo] = None,
    now: Optional[datetime] = None,
    today: Optional[date] = None
) -> bool:
    """Validity predicate for the date range picker: only today or later."""
    return is_not_before_today(to_calendar_date(epoch_millis, zone=zone, now=now), today=today)


def date_to_epoch_millis(day: date) -> int:
    """Epoch milliseconds of UTC midnight on `day`, as the picker reports dates."""
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return int(midnight.timestamp()) * 1000


def format_date_medium(day: date) -> str:
    """Medium date style used in the booking list, e.g. "Oct 19, 2026"."""
    return f"{day.strftime('%b')} {day.day}, {day.year}"


def format_date_range(arrival_date: date, departure_date: date) -> str:
    """Render an entry's stay as "<arrival> - <departure>" in medium style."""
    return f"{format_date_medium(arrival_date)} - {format_date_medium(departure_date)}"
