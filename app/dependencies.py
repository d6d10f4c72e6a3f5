# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.exceptions import AirtableNotConfiguredError
from lib.airtable_client import AirtableClient


def get_optional_airtable_client(request: Request) -> AirtableClient | None:
    """
    Get the Airtable client built at startup, if any.

    The lifespan handler stores it on app.state; it is None when the token
    or base ID was missing.
    """
    return getattr(request.app.state, "airtable", None)


def get_airtable_client(
    client: Annotated[AirtableClient | None, Depends(get_optional_airtable_client)],
) -> AirtableClient:
    """
    Get the Airtable client, failing with 503 when it isn't configured.

    Tests replace this dependency with a fake via app.dependency_overrides.
    """
    if client is None:
        raise AirtableNotConfiguredError()
    return client


# Type aliases for dependency injection
AirtableDep = Annotated[AirtableClient, Depends(get_airtable_client)]
OptionalAirtableDep = Annotated[AirtableClient | None, Depends(get_optional_airtable_client)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
