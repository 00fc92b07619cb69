"""
Models package - Pydantic schemas for booking entries.
"""
from .schemas import (
    BookingEntry,
    BookingDraft,
)

__all__ = [
    "BookingEntry",
    "BookingDraft",
]
