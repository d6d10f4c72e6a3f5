# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Jazzamore API:
# - test_extraction.py: Transcript parsing (names, guests, dates, phone)
# - test_utils.py: Reservation IDs and arrival time conversion
# - test_airtable_client.py: pyairtable wrapper with mocked tables
# - test_reservation_service.py: Webhook -> Airtable field mapping
# - test_config.py: Settings defaults and environment overrides
# - test_api.py: HTTP endpoints through FastAPI's TestClient
#
# Run tests with: pytest
# =============================================================================
