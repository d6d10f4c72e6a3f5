# =============================================================================
# extraction/fields.py - Reservation Field Extractors
# =============================================================================
# One function per reservation field. Each takes the normalized transcript
# and an already-detected language, and returns a value with a safe default
# when the caller never said anything useful.
#
# Usage:
#   from extraction.fields import extract_names
#   first, last = extract_names(conversation, Language.ENGLISH)
# =============================================================================

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, timedelta

from core.models.reservation import (
    DEFAULT_SPECIAL_REQUESTS,
    DEFAULT_TIME,
    DINNER_ONLY_REQUEST,
    GuestInfo,
)
from core.models.webhook import TranscriptMessage
from extraction.language import replace_number_words, user_text, words_to_digits
from extraction.patterns import (
    CAPITALIZED_WORD,
    FIRST_CAPITALIZED,
    NAME_PUNCTUATION,
    WEEKDAY_NUMBERS,
    Language,
    get_patterns,
)

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY_CODE = "+39"
MIN_PHONE_DIGITS = 10

# How many messages after a name request are checked for the answer
NAME_ANSWER_WINDOW = 2


# =============================================================================
# Names
# =============================================================================

def _name_candidates(text: str, language: Language) -> list[str]:
    patterns = get_patterns(language)
    cleaned = " ".join(NAME_PUNCTUATION.sub(" ", text).split())
    logger.debug(f"Name extraction text: {cleaned!r}")

    candidates: list[str] = []
    for pattern in patterns.name_patterns:
        match = pattern.search(cleaned)
        if not match:
            continue
        candidates.extend(group for group in match.groups() if group)

    candidates.extend(CAPITALIZED_WORD.findall(cleaned))

    unique: list[str] = []
    for candidate in candidates:
        name = candidate.strip()
        if name in unique:
            continue
        if len(name) < 2 or name.lower() in patterns.common_words or name.isdigit():
            continue
        unique.append(name)

    logger.debug(f"Filtered name candidates: {unique}")
    return unique


def _names_from_context(
    conversation: Sequence[TranscriptMessage],
    language: Language,
    first_name: str,
    last_name: str,
) -> tuple[str, str]:
    """Read names from the caller's replies to the agent's name questions."""
    name_requests = get_patterns(language).name_requests

    for i, msg in enumerate(conversation):
        if not msg.is_agent or not msg.content:
            continue
        asked = msg.content.lower()
        if not any(phrase in asked for phrase in name_requests):
            continue

        for reply in conversation[i + 1:i + 1 + NAME_ANSWER_WINDOW]:
            if not reply.is_user or not reply.content:
                continue
            match = FIRST_CAPITALIZED.search(reply.content)
            if not match:
                continue
            name = match.group(1)
            if not first_name:
                first_name = name
                logger.debug(f"First name from context: {first_name}")
            elif not last_name and name != first_name:
                last_name = name
                logger.debug(f"Last name from context: {last_name}")

    return first_name, last_name


def extract_names(
    conversation: Sequence[TranscriptMessage],
    language: Language,
) -> tuple[str, str]:
    """
    Extract the caller's first and last name.

    Candidates come from explicit phrases ("my name is ...") followed by
    every capitalized word the caller said. The first candidate is the first
    name and the next different one the last name. Anything still missing is
    taken from the caller's answer to the agent asking for a name.

    Returns:
        (first_name, last_name); either may be ""
    """
    first_name = ""
    last_name = ""

    candidates = _name_candidates(user_text(conversation), language)
    if candidates:
        first_name = candidates[0]
    for candidate in candidates[1:]:
        if candidate != first_name:
            last_name = candidate
            break

    if not first_name or not last_name:
        first_name, last_name = _names_from_context(conversation, language, first_name, last_name)

    logger.debug(f"Final names ({language.value}): {first_name!r} {last_name!r}")
    return first_name, last_name


# =============================================================================
# Guests
# =============================================================================

def extract_guest_info(
    conversation: Sequence[TranscriptMessage],
    language: Language,
) -> GuestInfo:
    """
    Work out the party size.

    Rules are applied in a fixed order and later matches override earlier
    ones; solo and couple phrases are checked last and win outright. The
    result always has at least two adults when children are present, and a
    total no smaller than adults + children.
    """
    patterns = get_patterns(language).guest
    text = replace_number_words(user_text(conversation).lower(), language)

    total_guests = 2
    adults = 2
    children = 0

    match = patterns.family.search(text)
    if match:
        adults = 2
        children = int(match.group(1))
        total_guests = adults + children
        logger.debug(f"Family pattern: {adults} adults + {children} children")

    match = patterns.couple_with_kids.search(text)
    if match:
        adults = 2
        children = int(match.group(1))
        total_guests = adults + children
        logger.debug(f"Couple with kids: {adults} adults + {children} children")

    match = patterns.adults_children.search(text)
    if match:
        adults = int(match.group(1))
        children = int(match.group(2))
        total_guests = adults + children
        logger.debug(f"Direct count: {adults} adults + {children} children")

    match = patterns.children_only.search(text)
    if match:
        children = int(match.group(1))
        logger.debug(f"Children detected: {children}")

    match = patterns.total_people.search(text)
    if match:
        total_guests = int(match.group(1))
        adults = total_guests - children
        logger.debug(f"Total people: {total_guests}")

    if patterns.solo.search(text):
        total_guests, adults, children = 1, 1, 0
        logger.debug("Solo guest")

    if patterns.couple.search(text):
        total_guests, adults, children = 2, 2, 0
        logger.debug("Couple")

    if children > 0 and adults < 2:
        adults = 2
        total_guests = adults + children

    if total_guests < adults + children:
        total_guests = adults + children

    logger.debug(f"Guests ({language.value}): {total_guests} total ({adults} adults + {children} children)")
    return GuestInfo(total_guests=total_guests, adults=adults, children=children)


# =============================================================================
# Phone
# =============================================================================

def extract_phone_number(
    conversation: Sequence[TranscriptMessage],
    language: Language,
    country_code: str = DEFAULT_COUNTRY_CODE,
) -> str:
    """
    Pull a phone number out of everything the caller said.

    All digits (including spoken ones) are concatenated and the last ten are
    kept, so a caller reading their number last is handled correctly.

    Returns:
        "<country_code><10 digits>", or "" if fewer than 10 digits were said
    """
    digits = words_to_digits(user_text(conversation), language)

    if len(digits) >= MIN_PHONE_DIGITS:
        phone = country_code + digits[-MIN_PHONE_DIGITS:]
        logger.debug(f"Phone number: {phone}")
        return phone

    logger.debug("No valid phone number found")
    return ""


# =============================================================================
# Date & Time
# =============================================================================

def next_weekday(day_name: str, today: date) -> date:
    """
    Next occurrence of a weekday strictly after ``today``.

    Asking for today's weekday gives the same day next week.
    """
    target = WEEKDAY_NUMBERS[day_name.lower()]
    # date.weekday() is Monday=0; the table is Sunday=0
    current = (today.weekday() + 1) % 7
    days_ahead = (target - current + 7) % 7 or 7
    return today + timedelta(days=days_ahead)


def extract_date_time(
    conversation: Sequence[TranscriptMessage],
    language: Language,
    today: date,
) -> tuple[str, str]:
    """
    Extract the reservation date and arrival time.

    Defaults to tomorrow at 22:00.

    Returns:
        (date as YYYY-MM-DD, time as HH:MM)
    """
    patterns = get_patterns(language)
    text = user_text(conversation).lower()

    day = today + timedelta(days=1)
    time = DEFAULT_TIME

    if patterns.today.search(text):
        day = today
    elif patterns.tomorrow.search(text):
        day = today + timedelta(days=1)
    else:
        for day_name, pattern in patterns.weekdays:
            if pattern.search(text):
                day = next_weekday(day_name, today)
                logger.debug(f"Date: {day_name} -> {day}")
                break

    for pattern, slot in patterns.times:
        if pattern.search(text):
            time = slot
            logger.debug(f"Time: {time}")
            break

    return day.isoformat(), time


# =============================================================================
# Special Requests
# =============================================================================

def extract_special_requests(
    conversation: Sequence[TranscriptMessage],
    language: Language,
) -> str:
    """Detect a dinner-only booking (no show)."""
    patterns = get_patterns(language)
    text = user_text(conversation).lower()

    if patterns.dinner_only.search(text) or patterns.no_show.search(text):
        logger.debug("Special request: dinner only")
        return DINNER_ONLY_REQUEST

    return DEFAULT_SPECIAL_REQUESTS
