# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .reservation_service import FALLBACK_RESPONSE, ReservationService

__all__ = [
    "FALLBACK_RESPONSE",
    "ReservationService",
]
