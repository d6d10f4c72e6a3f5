# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - airtable_client.py: Airtable wrapper bound to one base
# - utils.py: Shared utilities (error base class, reservation IDs, time formatting)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.airtable_client import AirtableClient, AirtableClientError
from lib.utils import (
    ApplicationError,
    format_arrival_time,
    generate_reservation_id,
    utc_now_iso,
)

__all__ = [
    # Airtable
    "AirtableClient",
    "AirtableClientError",
    # Utils
    "ApplicationError",
    "format_arrival_time",
    "generate_reservation_id",
    "utc_now_iso",
]
