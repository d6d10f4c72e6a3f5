# =============================================================================
# lib/airtable_client.py - Airtable Client Wrapper
# =============================================================================
# This module provides a typed wrapper around pyairtable, bound to a single
# Airtable base. One instance is built during application startup and shared
# (read-only) by every request handler through FastAPI dependency injection.
#
# Usage:
#   from lib.airtable_client import AirtableClient
#   client = AirtableClient.from_settings(settings)
#   records = client.list_reservations()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

import requests
from pyairtable import Api, Table

from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)


class AirtableClientError(ApplicationError):
    """
    Error during Airtable operations.

    Raised for missing configuration and for failed API calls.
    """

    def __init__(
        self,
        message: str,
        code: str = "AIRTABLE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


class AirtableClient:
    """
    Airtable client handle scoped to one base.

    Wraps pyairtable's Api/Base/Table objects and exposes only the
    operations the reservation endpoints need.

    Example:
        client = AirtableClient(token="pat...", base_id="app...")
        record = client.create_reservation({"Reservation ID": "JAZ-..."})
        print(record["id"])
    """

    def __init__(
        self,
        token: str | None,
        base_id: str | None,
        reservations_table: str = "Reservations",
        timeout: float | None = None,
    ):
        if not token or not base_id:
            missing = [
                name
                for name, value in (("AIRTABLE_TOKEN", token), ("AIRTABLE_BASE_ID", base_id))
                if not value
            ]
            raise AirtableClientError(
                message=f"Missing Airtable configuration: {', '.join(missing)}",
                code="MISSING_CONFIG",
                suggestion="Set AIRTABLE_TOKEN and AIRTABLE_BASE_ID in the environment or .env file",
                details={"missing": missing},
            )

        self.base_id = base_id
        self.reservations_table_name = reservations_table

        api_timeout = (timeout, timeout) if timeout else None
        self._api = Api(token, timeout=api_timeout)
        self._base = self._api.base(base_id)
        logger.info(f"Airtable client initialized for base {base_id}")

    @classmethod
    def from_settings(cls, settings: Any) -> AirtableClient:
        """
        Build a client from application settings.

        Raises:
            AirtableClientError: If the token or base ID is missing
        """
        return cls(
            token=settings.AIRTABLE_TOKEN,
            base_id=settings.AIRTABLE_BASE_ID,
            reservations_table=settings.AIRTABLE_RESERVATIONS_TABLE,
            timeout=settings.AIRTABLE_TIMEOUT_SECONDS,
        )

    def table(self, name: str) -> Table:
        """Return a table handle within the bound base."""
        return self._base.table(name)

    @property
    def reservations(self) -> Table:
        return self.table(self.reservations_table_name)

    # -------------------------------------------------------------------------
    # Reservations
    # -------------------------------------------------------------------------

    def list_reservations(self, page_size: int = 100) -> list[dict[str, Any]]:
        """
        Fetch the first page of reservation records.

        Returns:
            List of record dicts with keys "id", "createdTime" and "fields"

        Raises:
            AirtableClientError: If the request fails
        """
        try:
            pages = self.reservations.iterate(page_size=page_size)
            records = next(iter(pages), [])
        except requests.RequestException as e:
            raise AirtableClientError(
                message=f"Failed to list reservations: {e}",
                code="REQUEST_FAILED",
                suggestion="Check that the token has read access to the reservations table",
                details={"table": self.reservations_table_name},
            ) from e

        logger.debug(f"Fetched {len(records)} reservation records")
        return records

    def create_reservation(self, fields: dict[str, Any]) -> dict[str, Any]:
        """
        Create a single reservation record.

        Args:
            fields: Airtable field name -> value

        Returns:
            The created record dict (includes the Airtable record "id")

        Raises:
            AirtableClientError: If the request fails
        """
        try:
            record = self.reservations.create(fields)
        except requests.RequestException as e:
            raise AirtableClientError(
                message=f"Failed to create reservation: {e}",
                code="REQUEST_FAILED",
                suggestion="Check that the table's field names and types match the reservation fields",
                details={"table": self.reservations_table_name},
            ) from e

        logger.debug(f"Created Airtable record {record.get('id')}")
        return record

    def ping(self) -> None:
        """
        Make the cheapest possible read to verify connectivity.

        Raises:
            AirtableClientError: If the request fails
        """
        try:
            next(iter(self.reservations.iterate(page_size=1, max_records=1)), None)
        except requests.RequestException as e:
            raise AirtableClientError(
                message=f"Airtable is unreachable: {e}",
                code="REQUEST_FAILED",
                suggestion="Check network access and the Airtable token",
            ) from e
