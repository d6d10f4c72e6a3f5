# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import logging
import secrets
import time
from datetime import date, datetime, timezone, tzinfo
from typing import Any

logger = logging.getLogger(__name__)

_BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

# Arrival time used when the extracted time can't be parsed
FALLBACK_ARRIVAL = (19, 30)


# =============================================================================
# Reservation Identifiers
# =============================================================================

def to_base36(value: int) -> str:
    """Encode a non-negative integer in lowercase base 36."""
    if value < 0:
        raise ValueError("to_base36 only accepts non-negative integers")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def generate_reservation_id(now_ms: int | None = None) -> str:
    """
    Generate a human-readable reservation confirmation code.

    Format: JAZ-<epoch millis in base36>-<5 random base36 chars>, uppercased.

    Args:
        now_ms: Override for the current epoch time in milliseconds

    Returns:
        Code such as "JAZ-LX2K9Q1A-4F7ZP"
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    random_part = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(5))
    return f"JAZ-{to_base36(now_ms)}-{random_part}".upper()


# =============================================================================
# Date/Time Formatting
# =============================================================================

def _to_utc_iso(moment: datetime) -> str:
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def format_arrival_time(time_string: str, date_string: str, tz: tzinfo) -> str:
    """
    Combine a reservation date and time into an Airtable datetime value.

    The time is interpreted as wall-clock time in ``tz`` and returned as
    UTC ISO-8601 with millisecond precision (e.g. "2024-05-03T18:30:00.000Z").
    An unparseable time falls back to 19:30 on the same date.

    Args:
        time_string: Time as "HH:MM"
        date_string: Date as "YYYY-MM-DD"
        tz: Restaurant timezone

    Raises:
        ValueError: If date_string is not a valid ISO date
    """
    day = date.fromisoformat(date_string)

    try:
        hours, minutes = time_string.split(":")
        moment = datetime(day.year, day.month, day.day, int(hours), int(minutes), tzinfo=tz)
    except (ValueError, AttributeError):
        logger.warning(f"Unparseable arrival time {time_string!r}, using 19:30")
        hours, minutes = FALLBACK_ARRIVAL
        moment = datetime(day.year, day.month, day.day, hours, minutes, tzinfo=tz)

    return _to_utc_iso(moment)


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with a Z suffix."""
    return _to_utc_iso(datetime.now(timezone.utc))


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class MyServiceError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="MY_SERVICE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }
