# =============================================================================
# app/routers/reservations.py - Reservation Endpoints
# =============================================================================
# GET  /api/reservations  - first page of stored reservations
# POST /api/reservations  - Retell webhook; saves a reservation once a call
#                           has been analyzed
#
# Handlers are plain `def` because pyairtable is blocking; FastAPI runs them
# in its threadpool.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Body
from pydantic import BaseModel, Field

from app.dependencies import AirtableDep, OptionalAirtableDep, SettingsDep
from app.exceptions import AirtableNotConfiguredError, ReservationsUnavailableError
from core.models.reservation import ReservationList
from core.models.webhook import RetellWebhook
from core.services.reservation_service import FALLBACK_RESPONSE, ReservationService
from lib.airtable_client import AirtableClientError

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class WebhookAck(BaseModel):
    """Acknowledgement for events the service doesn't act on."""
    status: str = Field(default="received")
    event: str | None = None


class AgentResponse(BaseModel):
    """Text the voice agent should say to the caller."""
    response: str = Field(..., examples=[FALLBACK_RESPONSE])


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=ReservationList)
def list_reservations(client: AirtableDep):
    """
    List reservations.

    Returns the first page of the reservations table, each record flattened
    to {"id": ..., <Airtable fields>}.
    """
    try:
        reservations = ReservationService.list_reservations(client)
    except AirtableClientError as e:
        logger.error(f"Failed to list reservations: {e}")
        raise ReservationsUnavailableError(e.message)

    return ReservationList(
        success=True,
        count=len(reservations),
        reservations=reservations,
    )


@router.post("")
def receive_webhook(
    settings: SettingsDep,
    client: OptionalAirtableDep,
    webhook: Annotated[RetellWebhook | None, Body()] = None,
):
    """
    Retell webhook.

    Every event is acknowledged. For "call_analyzed" the transcript is
    turned into a reservation, saved to Airtable, and a confirmation is
    returned for the agent to read back. Failures after that point never
    surface to Retell: the caller gets a generic thank-you instead.
    """
    if webhook is None:
        webhook = RetellWebhook()

    logger.info(f"Retell webhook received: event={webhook.event}")

    if not webhook.is_call_analyzed:
        return WebhookAck(event=webhook.event)

    try:
        if client is None:
            raise AirtableNotConfiguredError()

        result = ReservationService.create_from_webhook(
            webhook,
            client,
            tz=settings.timezone,
            country_code=settings.PHONE_COUNTRY_CODE,
        )
    except Exception as e:
        logger.exception(f"Failed to save reservation: {e}")
        return AgentResponse(response=FALLBACK_RESPONSE)

    return AgentResponse(response=result["message"])
