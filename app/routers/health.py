# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import OptionalAirtableDep
from lib.airtable_client import AirtableClientError
from lib.utils import utc_now_iso

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str


class ChecksResponse(BaseModel):
    """Individual dependency checks."""
    airtable: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=utc_now_iso(),
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(client: OptionalAirtableDep):
    """
    Readiness check endpoint.

    Makes one minimal read against Airtable. Reports "degraded" when the
    client is missing or Airtable can't be reached.
    """
    if client is None:
        airtable = "not_configured"
    else:
        try:
            client.ping()
            airtable = "healthy"
        except AirtableClientError as e:
            airtable = f"unhealthy: {e.message[:50]}"

    return ReadinessResponse(
        status="ready" if airtable == "healthy" else "degraded",
        checks=ChecksResponse(airtable=airtable),
        timestamp=utc_now_iso(),
    )
