# =============================================================================
# core/services/reservation_service.py - Reservation Business Logic
# =============================================================================
# Turns Retell webhooks into Airtable reservation records and reads them back.
# Separates HTTP concerns from extraction and Airtable calls; the Airtable
# client is always passed in, never looked up globally.
# =============================================================================

import logging
from datetime import date, datetime, tzinfo
from typing import Any

from core.models.reservation import AIRTABLE_FIELDS, Reservation, ReservationRecord
from core.models.webhook import RetellWebhook
from extraction import extract_reservation
from lib.airtable_client import AirtableClient
from lib.utils import format_arrival_time, generate_reservation_id

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Pending"
DEFAULT_TYPE = "Dinner + Show"

FALLBACK_RESPONSE = "Thank you for your call! We've received your reservation request."


class ReservationService:
    """
    Service for reservation operations.

    Provides a clean interface between API routes, transcript extraction
    and Airtable.
    """

    @staticmethod
    def build_airtable_fields(
        reservation: Reservation,
        reservation_id: str,
        tz: tzinfo,
    ) -> dict[str, Any]:
        """
        Map a Reservation onto Airtable column values.

        New reservations are always Pending "Dinner + Show" bookings without
        show-only guests or newsletter opt-in.
        """
        values = {
            "reservation_id": reservation_id,
            "first_name": reservation.first_name,
            "last_name": reservation.last_name or "",
            "phone": reservation.phone or "",
            "date": reservation.date,
            "arrival_time": format_arrival_time(reservation.time, reservation.date, tz),
            "guests": int(reservation.guests),
            "adults": int(reservation.adults),
            "show_only": 0,
            "children": int(reservation.children),
            "special_requests": reservation.special_requests or "",
            "status": DEFAULT_STATUS,
            "type": DEFAULT_TYPE,
            "newsletter": False,
        }
        return {AIRTABLE_FIELDS[key]: value for key, value in values.items()}

    @staticmethod
    def confirmation_message(reservation: Reservation, reservation_id: str) -> str:
        """Sentence the voice agent reads back to the caller."""
        return (
            f"Perfect! I've reserved {reservation.guests} people "
            f"({reservation.adults} adults + {reservation.children} children) "
            f"for {reservation.date} at {reservation.time}. "
            f"Your confirmation is {reservation_id}."
        )

    @staticmethod
    def create_from_webhook(
        webhook: RetellWebhook,
        client: AirtableClient,
        tz: tzinfo,
        country_code: str,
        today: date | None = None,
    ) -> dict[str, Any]:
        """
        Extract a reservation from an analyzed call and save it.

        Args:
            webhook: Parsed Retell webhook with event "call_analyzed"
            client: Airtable client bound to the reservations base
            tz: Restaurant timezone
            country_code: Prefix for extracted phone numbers
            today: Override for the current date in ``tz``

        Returns:
            Dict with reservation_id, reservation, record_id and the
            confirmation message

        Raises:
            AirtableClientError: If the record cannot be created
        """
        if today is None:
            today = datetime.now(tz).date()

        reservation_id = generate_reservation_id()
        logger.info(f"Generated reservation ID: {reservation_id}")

        transcript = webhook.transcript
        if transcript:
            logger.info(f"Using transcript_object with {len(transcript)} messages")

        reservation = extract_reservation(transcript, today=today, country_code=country_code)
        fields = ReservationService.build_airtable_fields(reservation, reservation_id, tz)

        logger.info("Saving reservation to Airtable")
        record = client.create_reservation(fields)

        logger.info(
            f"Reservation saved: {reservation_id} | {reservation.full_name or 'unknown'} | "
            f"{reservation.date} {reservation.time} | {reservation.guests} guests "
            f"({reservation.adults} adults + {reservation.children} children) | "
            f"phone {reservation.phone or 'not provided'} | record {record.get('id')}"
        )

        return {
            "reservation_id": reservation_id,
            "reservation": reservation,
            "record_id": record.get("id"),
            "message": ReservationService.confirmation_message(reservation, reservation_id),
        }

    @staticmethod
    def list_reservations(client: AirtableClient) -> list[ReservationRecord]:
        """
        Read the first page of reservations.

        Raises:
            AirtableClientError: If Airtable cannot be read
        """
        records = client.list_reservations()
        return [ReservationRecord.from_airtable(record) for record in records]
