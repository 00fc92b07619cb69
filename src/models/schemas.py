"""
Pydantic models for booking entries and the add screen's form state.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class BookingEntry(BaseModel):
    """
    One reservation: who booked and for which date range.

    Entries are immutable values. Two entries are equal when all three
    fields are equal, which is what deletion matches on.
    """
    name: str = Field(..., description="Name of the person making the booking")
    arrival_date: date = Field(..., description="Arrival date")
    departure_date: date = Field(..., description="Departure date")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "arrival_date": "2026-12-23",
                "departure_date": "2026-12-27"
            }
        }
    )


class BookingDraft(BaseModel):
    """
    Form state of the add screen while the user is filling it in.

    Every field may still be missing; the validator decides whether the
    draft can become a BookingEntry.
    """
    name: str = Field(default="", description="Name typed so far")
    arrival_date: Optional[date] = Field(default=None, description="Selected arrival date")
    departure_date: Optional[date] = Field(default=None, description="Selected departure date")

    model_config = ConfigDict(validate_assignment=True)

    def date_range_label(self, date_format: str = "%d.%m.%Y") -> str:
        """
        Render the selected range the way the add screen's range field shows it.

        Args:
            date_format: strftime pattern for each date

        Returns:
            "<arrival> - <departure>" when both dates are set, "" otherwise
        """
        if self.arrival_date is None or self.departure_date is None:
            return ""
        return (
            f"{self.arrival_date.strftime(date_format)} - "
            f"{self.departure_date.strftime(date_format)}"
        )
