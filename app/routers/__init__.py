# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - reservations.py: Reservation listing and the Retell webhook
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import reservations

__all__ = [
    "health",
    "reservations",
]
