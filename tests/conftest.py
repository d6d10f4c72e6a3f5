# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a fake Airtable client and an API test client
# - Provides sample Retell transcripts
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("AIRTABLE_TOKEN", "patTEST.test-token")
os.environ.setdefault("AIRTABLE_BASE_ID", "appTEST123456789")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("RESTAURANT_TIMEZONE", "Europe/Rome")

from datetime import date
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_optional_airtable_client
from app.main import app
from lib.airtable_client import AirtableClient


# Wednesday; keeps relative dates deterministic
TODAY = date(2024, 5, 1)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def today():
    """Fixed 'today' for extraction tests."""
    return TODAY


@pytest.fixture
def fake_airtable():
    """Fake Airtable client with canned responses."""
    client = MagicMock(spec=AirtableClient)
    client.create_reservation.return_value = {
        "id": "recNEW123",
        "createdTime": "2024-05-01T10:00:00.000Z",
        "fields": {},
    }
    client.list_reservations.return_value = [
        {
            "id": "rec001",
            "createdTime": "2024-04-30T18:00:00.000Z",
            "fields": {"Reservation ID": "JAZ-ABC-12345", "First Name": "Anna", "Total People": 2},
        },
        {
            "id": "rec002",
            "createdTime": "2024-04-30T19:00:00.000Z",
            "fields": {"Reservation ID": "JAZ-DEF-67890", "First Name": "Marco", "Total People": 4},
        },
    ]
    return client


@pytest.fixture
def api_client(fake_airtable):
    """TestClient with the Airtable dependency replaced by the fake."""
    app.dependency_overrides[get_optional_airtable_client] = lambda: fake_airtable
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_api_client():
    """TestClient running without an Airtable client."""
    app.dependency_overrides[get_optional_airtable_client] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def english_transcript():
    """A complete English booking call."""
    return [
        {"role": "agent", "content": "Hello, thank you for calling Jazzamore! May I have your name?"},
        {"role": "user", "content": "Hi, my name is John Smith"},
        {"role": "agent", "content": "Thank you John. For how many people?"},
        {"role": "user", "content": "2 adults and 2 kids"},
        {"role": "agent", "content": "What day and time would you like?"},
        {"role": "user", "content": "Friday at 7:30, just dinner please"},
        {"role": "agent", "content": "And a phone number?"},
        {"role": "user", "content": "It's 347 555 0199"},
    ]


@pytest.fixture
def italian_transcript():
    """A complete Italian booking call."""
    return [
        {"role": "agent", "content": "Buonasera, Jazzamore. Come posso aiutarla?"},
        {"role": "user", "content": "Buonasera, vorrei prenotare per domani alle otto e mezzo"},
        {"role": "agent", "content": "Perfetto. Per quante persone?"},
        {"role": "user", "content": "Siamo tre adulti e due bambini"},
        {"role": "agent", "content": "Mi dice il suo nome e cognome?"},
        {"role": "user", "content": "Mi chiamo Giulia Bianchi"},
        {"role": "agent", "content": "E il numero di telefono?"},
        {"role": "user", "content": "il mio numero è 333 123 4567"},
        {"role": "agent", "content": "Grazie mille"},
    ]
