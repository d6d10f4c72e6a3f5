# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response says what failed and, where possible, how to fix it.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class JazzamoreException(Exception):
    """
    Base exception for the Jazzamore API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "JAZZAMORE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Airtable Exceptions
# =============================================================================

class AirtableNotConfiguredError(JazzamoreException):
    """Raised when a route needs Airtable but no client was built at startup."""

    def __init__(self):
        super().__init__(
            message="Airtable client is not configured",
            code="AIRTABLE_NOT_CONFIGURED",
            status_code=503,
            suggestion="Set AIRTABLE_TOKEN and AIRTABLE_BASE_ID and restart the server",
        )


class ReservationsUnavailableError(JazzamoreException):
    """Raised when reservations cannot be read from Airtable."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to load reservations: {error}",
            code="RESERVATIONS_UNAVAILABLE",
            status_code=500,
            suggestion="Check that the Airtable token can read the reservations table",
        )
        self.error = error

    def to_dict(self) -> dict[str, Any]:
        # Dashboard clients read the bare "error" key
        result = super().to_dict()
        result["error"] = self.error
        return result


# =============================================================================
# Exception Handlers
# =============================================================================

async def jazzamore_exception_handler(
    request: Request,
    exc: JazzamoreException
) -> JSONResponse:
    """
    Convert JazzamoreException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body validation errors.

    Converts pydantic errors to a flat, user-friendly list.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )
