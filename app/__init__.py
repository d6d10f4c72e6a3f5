# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the Jazzamore web application:
# - main.py: App entry point, middleware, error handlers, Airtable startup
# - config.py: Environment variable loading and settings
# - dependencies.py: Shared Airtable client and settings injection
# - routers/: Health checks and the reservations endpoints
#
# The app layer is thin - it handles HTTP concerns and delegates
# extraction and storage to core/, extraction/ and lib/.
# =============================================================================
