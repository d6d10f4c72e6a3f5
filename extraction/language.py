# =============================================================================
# extraction/language.py - Language Detection & Spoken Numbers
# =============================================================================

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from core.models.webhook import TranscriptMessage
from extraction.patterns import ENGLISH, ITALIAN, Language, get_patterns

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")


def normalize_transcript(
    conversation: Iterable[TranscriptMessage | dict] | None,
) -> list[TranscriptMessage]:
    """Accept transcript entries as models or raw dicts."""
    if not conversation:
        return []
    return [
        msg if isinstance(msg, TranscriptMessage) else TranscriptMessage.model_validate(msg)
        for msg in conversation
    ]


def user_text(conversation: Sequence[TranscriptMessage]) -> str:
    """Everything the caller said, joined with single spaces."""
    return " ".join(msg.content for msg in conversation if msg.is_user)


def detect_language(conversation: Sequence[TranscriptMessage]) -> Language:
    """
    Guess the language of a call.

    Counts how many Italian and English indicator phrases appear anywhere in
    the transcript (both speakers). Italian wins only with a strictly higher
    count, so ties and empty transcripts are English.
    """
    all_text = " ".join(msg.content for msg in conversation).lower()

    italian_count = sum(1 for phrase in ITALIAN.indicators if phrase in all_text)
    english_count = sum(1 for phrase in ENGLISH.indicators if phrase in all_text)

    logger.debug(f"Language detection - Italian: {italian_count}, English: {english_count}")
    return Language.ITALIAN if italian_count > english_count else Language.ENGLISH


def replace_number_words(text: str, language: Language | str) -> str:
    """
    Replace spoken number words with digits.

    Replacement is plain substring substitution in table order, so it also
    rewrites words that merely contain a number ("someone" -> "s1").
    """
    processed = text.lower()
    for word, digit in get_patterns(language).number_words.items():
        processed = processed.replace(word, digit)
    return processed


def words_to_digits(text: str, language: Language | str) -> str:
    """Convert spoken and written numbers to a bare digit string."""
    return _NON_DIGITS.sub("", replace_number_words(text, language))
