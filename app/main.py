# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Jazzamore reservations API.
# It configures the FastAPI application with middleware, routers, and handlers,
# and builds the Airtable client once at startup.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main            (binds API_HOST:PORT, default port 3000)
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    JazzamoreException,
    jazzamore_exception_handler,
    validation_exception_handler,
)
from app.routers import health, reservations
from lib.airtable_client import AirtableClient, AirtableClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_airtable_client() -> AirtableClient | None:
    """
    Build the Airtable client from settings.

    Returns None (and logs a warning) when the token or base ID is missing,
    so the server still starts and reports itself as degraded.
    """
    try:
        return AirtableClient.from_settings(settings)
    except AirtableClientError as e:
        logger.warning(f"Airtable disabled: {e}")
        return None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: build the shared Airtable client and store it on app.state
    - Shutdown: drop the client
    """
    logger.info(f"Starting Jazzamore API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    app.state.airtable = build_airtable_client()

    yield

    logger.info("Shutting down Jazzamore API")
    app.state.airtable = None


# Create FastAPI application
app = FastAPI(
    title="Jazzamore API",
    description="""
## Jazzamore Reservations API

Receives Retell voice-agent webhooks, extracts reservation details from the
call transcript (English or Italian), and stores them in Airtable.

### Endpoints

| Endpoint | Purpose |
|----------|---------|
| `POST /api/reservations` | Retell webhook (`call_analyzed` creates a reservation) |
| `GET /api/reservations` | First page of stored reservations |
| `GET /health` | Liveness |
| `GET /health/ready` | Airtable connectivity |
""",
    version="1.0.0",
    # Interactive docs are hidden in production
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None if settings.is_production else "/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Reservations",
            "description": "Retell webhook and reservation listing",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    # Browsers reject credentials with a wildcard origin
    allow_credentials=not settings.allows_all_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(JazzamoreException)
async def handle_jazzamore_exception(request: Request, exc: JazzamoreException):
    """Handle custom Jazzamore exceptions."""
    return await jazzamore_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)

# Reservation endpoints
app.include_router(
    reservations.router,
    prefix="/api/reservations",
    tags=["Reservations"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - confirms the server is up.
    """
    return {
        "message": "🎵 Jazzamore Server is running!",
        "status": "Ready for reservations",
    }


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    logger.info(f"🎵 Jazzamore server running on port {settings.PORT}")
    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    run()
