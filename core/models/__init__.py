# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - webhook.py: Retell webhook body (event, call, transcript)
# - reservation.py: Extracted reservations and Airtable rows
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Webhook Models - Retell call events
# -----------------------------------------------------------------------------
from .webhook import (
    MessageRole,
    RetellCall,
    RetellWebhook,
    TranscriptMessage,
    WebhookEvent,
)

# -----------------------------------------------------------------------------
# Reservation Models
# -----------------------------------------------------------------------------
from .reservation import (
    AIRTABLE_FIELDS,
    GuestInfo,
    Reservation,
    ReservationList,
    ReservationRecord,
)

__all__ = [
    # Webhook
    "MessageRole",
    "RetellCall",
    "RetellWebhook",
    "TranscriptMessage",
    "WebhookEvent",
    # Reservation
    "AIRTABLE_FIELDS",
    "GuestInfo",
    "Reservation",
    "ReservationList",
    "ReservationRecord",
]
