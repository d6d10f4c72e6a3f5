# =============================================================================
# extraction/extractor.py - Transcript -> Reservation
# =============================================================================
# Entry point of the extraction package. Detects the call language once and
# runs every field extractor over the transcript.
#
# Usage:
#   from extraction import extract_reservation
#   reservation = extract_reservation(call.transcript_object, today=date.today())
# =============================================================================

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from core.models.reservation import Reservation
from core.models.webhook import TranscriptMessage
from extraction.fields import (
    DEFAULT_COUNTRY_CODE,
    extract_date_time,
    extract_guest_info,
    extract_names,
    extract_phone_number,
    extract_special_requests,
)
from extraction.language import detect_language, normalize_transcript

logger = logging.getLogger(__name__)


def extract_reservation(
    conversation: Iterable[TranscriptMessage | dict] | None,
    today: date,
    country_code: str = DEFAULT_COUNTRY_CODE,
) -> Reservation:
    """
    Build a Reservation from a call transcript.

    Args:
        conversation: Transcript entries ({role, content}) in call order
        today: Current date in the restaurant's timezone
        country_code: Prefix for the extracted phone number

    Returns:
        The extracted Reservation. An empty transcript yields the default
        reservation (tomorrow, 22:00, two adults).
    """
    messages = normalize_transcript(conversation)
    if not messages:
        logger.info("No conversation data available, using default reservation")
        return Reservation.default(today)

    language = detect_language(messages)
    logger.info(f"Extracting reservation from {len(messages)} messages ({language.value})")

    first_name, last_name = extract_names(messages, language)
    guests = extract_guest_info(messages, language)
    reservation_date, reservation_time = extract_date_time(messages, language, today)

    reservation = Reservation(
        first_name=first_name,
        last_name=last_name,
        date=reservation_date,
        time=reservation_time,
        guests=guests.total_guests,
        adults=guests.adults,
        children=guests.children,
        phone=extract_phone_number(messages, language, country_code=country_code),
        special_requests=extract_special_requests(messages, language),
    )

    logger.debug(f"Extraction result: {reservation.model_dump()}")
    return reservation
