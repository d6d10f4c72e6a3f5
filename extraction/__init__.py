# =============================================================================
# extraction/ - Call Transcript Extraction
# =============================================================================
# Rule-based extraction of reservation details from voice-agent transcripts:
# - patterns.py: English and Italian regex/word tables
# - language.py: Language detection and spoken-number handling
# - fields.py: One extractor per reservation field
# - extractor.py: extract_reservation() - runs everything
#
# Pure functions only: no I/O, no FastAPI, no Airtable.
# =============================================================================

from extraction.extractor import extract_reservation
from extraction.fields import (
    extract_date_time,
    extract_guest_info,
    extract_names,
    extract_phone_number,
    extract_special_requests,
    next_weekday,
)
from extraction.language import detect_language, words_to_digits
from extraction.patterns import Language

__all__ = [
    "Language",
    "detect_language",
    "extract_date_time",
    "extract_guest_info",
    "extract_names",
    "extract_phone_number",
    "extract_reservation",
    "extract_special_requests",
    "next_weekday",
    "words_to_digits",
]
