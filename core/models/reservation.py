# =============================================================================
# core/models/reservation.py - Reservation Schemas
# =============================================================================
# These models carry a reservation from transcript extraction to Airtable:
# - GuestInfo: party composition pulled from the caller's words
# - Reservation: every field extracted from a call
# - ReservationRecord / ReservationList: rows read back from Airtable
#
# Airtable column names live in AIRTABLE_FIELDS so the mapping is defined
# in exactly one place.
# =============================================================================

import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TIME = "22:00"
DEFAULT_SPECIAL_REQUESTS = "No special requests"
DINNER_ONLY_REQUEST = "Dinner only (no show)"

# Reservation attribute -> Airtable column
AIRTABLE_FIELDS = {
    "reservation_id": "Reservation ID",
    "first_name": "First Name",
    "last_name": "Last Name",
    "phone": "Phone Number",
    "date": "Reservation Date",
    "arrival_time": "Arrival Time",
    "guests": "Total People",
    "adults": "Dinner Count",
    "show_only": "Show-Only Count",
    "children": "Kids Count",
    "special_requests": "Special Requests",
    "status": "Reservation Status",
    "type": "Reservation Type",
    "newsletter": "Newsletter Opt-In",
}


class GuestInfo(BaseModel):
    """Party composition."""

    total_guests: int = Field(default=2, ge=0)
    adults: int = Field(default=2, ge=0)
    children: int = Field(default=0, ge=0)


class Reservation(BaseModel):
    """
    A reservation extracted from a call transcript.

    Every field has a usable default so a reservation can always be saved,
    even from an empty or unintelligible transcript.
    """

    first_name: str = ""
    last_name: str = ""
    date: str = Field(..., description="Reservation date as YYYY-MM-DD")
    time: str = Field(default=DEFAULT_TIME, description="Arrival time as HH:MM")
    guests: int = Field(default=2, ge=0)
    adults: int = Field(default=2, ge=0)
    children: int = Field(default=0, ge=0)
    phone: str = ""
    special_requests: str = DEFAULT_SPECIAL_REQUESTS

    @classmethod
    def default(cls, today: datetime.date) -> "Reservation":
        """Reservation used when there is nothing to extract from."""
        return cls(date=(today + datetime.timedelta(days=1)).isoformat())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class ReservationRecord(BaseModel):
    """
    A reservation row read from Airtable.

    Airtable fields are flattened next to the record id, e.g.
    {"id": "rec123", "First Name": "Marco", "Total People": 4}
    """

    model_config = ConfigDict(extra="allow")

    id: str

    @classmethod
    def from_airtable(cls, record: dict[str, Any]) -> "ReservationRecord":
        return cls.model_validate({"id": record["id"], **record.get("fields", {})})


class ReservationList(BaseModel):
    """Response for GET /api/reservations."""

    success: bool = True
    count: int
    reservations: list[ReservationRecord]
