# =============================================================================
# extraction/patterns.py - Per-Language Extraction Patterns
# =============================================================================
# Regular expressions and word lists used to pull reservation details out of
# English and Italian call transcripts. Everything here is data; the
# extraction logic lives in extraction/fields.py.
#
# All patterns are compiled case-insensitive. Weekday and time tables are
# ordered: the first matching entry wins.
# =============================================================================

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class Language(str, Enum):
    """Languages the extractor understands."""
    ENGLISH = "english"
    ITALIAN = "italian"


# One word of a name: Latin (incl. accented) or Cyrillic letters, apostrophes
# and hyphens, 2-21 characters. Whitespace ends the word.
_NAME = r"([a-zA-Z\u00C0-\u024F\u0400-\u04FF'][a-zA-Z\u00C0-\u024F\u0400-\u04FF'-]{1,20})"

# Capitalized word of 3+ letters (case-sensitive on purpose)
CAPITALIZED_WORD = re.compile(r"\b([A-Z][a-z]{2,})\b")
FIRST_CAPITALIZED = re.compile(r"([A-Z][a-z]{2,})")

# Punctuation stripped before name matching
NAME_PUNCTUATION = re.compile(r"[?!.,;:]")

WEEKDAY_NUMBERS = {
    "sunday": 0,
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
}


def _i(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


@dataclass(frozen=True)
class GuestPatterns:
    adults_children: re.Pattern[str]
    total_people: re.Pattern[str]
    children_only: re.Pattern[str]
    solo: re.Pattern[str]
    family: re.Pattern[str]
    couple_with_kids: re.Pattern[str]
    couple: re.Pattern[str]


@dataclass(frozen=True)
class LanguagePatterns:
    """Everything the extractor needs for one language."""

    language: Language
    # Substrings that, if used by the agent, mean it just asked for a name
    name_requests: tuple[str, ...]
    name_patterns: tuple[re.Pattern[str], ...]
    guest: GuestPatterns
    today: re.Pattern[str]
    tomorrow: re.Pattern[str]
    # (weekday name, pattern), Sunday first
    weekdays: tuple[tuple[str, re.Pattern[str]], ...]
    # (pattern, "HH:MM"), most specific first
    times: tuple[tuple[re.Pattern[str], str], ...]
    dinner_only: re.Pattern[str]
    no_show: re.Pattern[str]
    # Spoken number word -> digit, applied in order
    number_words: dict[str, str] = field(default_factory=dict)
    # Lowercase words never taken as names
    common_words: frozenset[str] = frozenset()
    # Substrings that vote for this language during detection
    indicators: tuple[str, ...] = ()


ENGLISH = LanguagePatterns(
    language=Language.ENGLISH,
    name_requests=(
        "first name", "last name", "your name", "may i have your name",
        "what is your name", "could i get your name", "please tell me your name",
    ),
    name_patterns=(
        _i(rf"\b(?:my first name is|first name is)\s+{_NAME}"),
        _i(rf"\b(?:my last name is|last name is)\s+{_NAME}"),
        _i(rf"\b(?:my name is|name is|i am|it is)\s+{_NAME}\s+{_NAME}"),
    ),
    guest=GuestPatterns(
        adults_children=_i(r"(\d+)\s+(?:adults?)\s+(?:and|,)\s+(\d+)\s+(?:children|kids)"),
        total_people=_i(r"(\d+)\s+(?:people|persons|guests)\s+(?:in my|in the|in our)\s+(?:party|group|priority)"),
        children_only=_i(r"(\d+)\s+(?:children|kids)"),
        solo=_i(r"(?:just me|only me|solo|by myself)"),
        family=_i(r"(?:me,? my (?:wife|husband)(?:,? and)? my (\d+) (?:children|kids))"),
        couple_with_kids=_i(r"(?:me and my (?:wife|husband)(?: and)? (\d+) (?:children|kids))"),
        couple=_i(r"(?:me and my (?:wife|husband)|my (?:wife|husband) and I)"),
    ),
    today=_i(r"\b(?:today|tonight)\b"),
    tomorrow=_i(r"\b(?:tomorrow)\b"),
    weekdays=(
        ("sunday", _i(r"\b(?:sunday|sun)\b")),
        ("monday", _i(r"\b(?:monday|mon)\b")),
        ("tuesday", _i(r"\b(?:tuesday|tue)\b")),
        ("wednesday", _i(r"\b(?:wednesday|wed)\b")),
        ("thursday", _i(r"\b(?:thursday|thu)\b")),
        ("friday", _i(r"\b(?:friday|fri)\b")),
        ("saturday", _i(r"\b(?:saturday|sat)\b")),
    ),
    times=(
        (_i(r"\b(?:seven thirty|7:30|7.30|half past seven)\b"), "19:30"),
        (_i(r"\b(?:seven|7(?:\s*[ap]m?)?)\b"), "19:00"),
        (_i(r"\b(?:eight thirty|8:30|8.30|half past eight)\b"), "20:30"),
        (_i(r"\b(?:eight|8(?:\s*[ap]m?)?)\b"), "20:00"),
        (_i(r"\b(?:nine|9(?:\s*[ap]m?)?)\b"), "21:00"),
        (_i(r"\b(?:ten|10(?:\s*[ap]m?)?)\b"), "22:00"),
    ),
    dinner_only=_i(r"\b(?:dinner only|only dinner|just dinner)\b"),
    no_show=_i(r"\b(?:no show|not for show|just dinner)\b"),
    number_words={
        "zero": "0", "one": "1", "two": "2", "three": "3", "four": "4",
        "five": "5", "six": "6", "seven": "7", "eight": "8", "nine": "9",
        "ten": "10",
    },
    common_words=frozenset({
        "hello", "yes", "no", "ok", "thank", "please", "reservation",
        "today", "tomorrow", "monday", "tuesday", "wednesday", "thursday",
        "friday", "saturday", "sunday",
    }),
    indicators=(
        "thank you", "thanks", "please", "hello", "hi", "hey",
        "my name is", "first name", "last name", "reservation",
        "for tonight", "perfect", "okay", "alright",
    ),
)


ITALIAN = LanguagePatterns(
    language=Language.ITALIAN,
    name_requests=(
        "nome", "cognome", "il tuo nome", "puoi dirmi il tuo nome",
        "qual è il tuo nome", "mi dici il tuo nome", "nome e cognome",
    ),
    name_patterns=(
        _i(rf"\b(?:il mio nome è|mi chiamo|sono|nome è)\s+{_NAME}"),
        _i(rf"\b(?:il mio cognome è|cognome è)\s+{_NAME}"),
        _i(rf"\b(?:mi chiamo|sono)\s+{_NAME}\s+{_NAME}"),
    ),
    guest=GuestPatterns(
        adults_children=_i(r"(\d+)\s+(?:adulti?)\s+(?:e|,)\s+(\d+)\s+(?:bambini|ragazzi)"),
        total_people=_i(r"(\d+)\s+(?:persone|ospiti)\s+(?:nel mio|nella mia|nel nostro)\s+(?:gruppo|partito)"),
        children_only=_i(r"(\d+)\s+(?:bambini|ragazzi)"),
        solo=_i(r"(?:solo io|soltanto io|da solo|da sola)"),
        family=_i(r"(?:io,? mia (?:moglie|marito)(?:,? e)? mia (\d+) (?:bambini|figli))"),
        couple_with_kids=_i(r"(?:io e mia (?:moglie|marito)(?: e)? (\d+) (?:bambini|figli))"),
        couple=_i(r"(?:io e (?:mia moglie|mio marito)|siamo in (?:due|2)\b)"),
    ),
    today=_i(r"\b(?:oggi|stasera|questa sera)\b"),
    tomorrow=_i(r"\b(?:domani|domani sera)\b"),
    weekdays=(
        ("sunday", _i(r"\b(?:domenica)\b")),
        ("monday", _i(r"\b(?:lunedì|lunedi)\b")),
        ("tuesday", _i(r"\b(?:martedì|martedi)\b")),
        ("wednesday", _i(r"\b(?:mercoledì|mercoledi)\b")),
        ("thursday", _i(r"\b(?:giovedì|giovedi)\b")),
        ("friday", _i(r"\b(?:venerdì|venerdi)\b")),
        ("saturday", _i(r"\b(?:sabato)\b")),
    ),
    times=(
        (_i(r"\b(?:sette e mezzo|7:30|7.30|19:30|19.30)\b"), "19:30"),
        (_i(r"\b(?:sette|19(?:\s*[.:]?\s*00)?)\b"), "19:00"),
        (_i(r"\b(?:otto e mezzo|8:30|8.30|20:30|20.30)\b"), "20:30"),
        (_i(r"\b(?:otto|20(?:\s*[.:]?\s*00)?)\b"), "20:00"),
        (_i(r"\b(?:nove|21(?:\s*[.:]?\s*00)?)\b"), "21:00"),
        (_i(r"\b(?:dieci|22(?:\s*[.:]?\s*00)?)\b"), "22:00"),
    ),
    dinner_only=_i(r"\b(?:solo cena|soltanto cena|cena solamente)\b"),
    no_show=_i(r"\b(?:niente spettacolo|senza spettacolo|solo per cena)\b"),
    number_words={
        "zero": "0", "uno": "1", "due": "2", "tre": "3", "quattro": "4",
        "cinque": "5", "sei": "6", "sette": "7", "otto": "8", "nove": "9",
        "dieci": "10",
    },
    common_words=frozenset({
        "ciao", "si", "no", "grazie", "per favore", "prenotazione", "oggi",
        "domani", "lunedì", "martedì", "mercoledì", "giovedì", "venerdì",
        "sabato", "domenica",
    }),
    indicators=(
        "grazie", "prego", "per favore", "buongiorno", "buonasera", "ciao",
        "mi chiamo", "cognome", "vorrei", "prenotazione", "per stasera",
        "grazie mille", "perfetto", "va bene", "daccordo",
    ),
)


PATTERNS: dict[Language, LanguagePatterns] = {
    Language.ENGLISH: ENGLISH,
    Language.ITALIAN: ITALIAN,
}


def get_patterns(language: Language | str) -> LanguagePatterns:
    """Look up a language's patterns, falling back to English."""
    try:
        return PATTERNS[Language(language)]
    except ValueError:
        return ENGLISH
