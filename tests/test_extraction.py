# =============================================================================
# tests/test_extraction.py - Transcript Extraction Tests
# =============================================================================
# Tests for:
# - Language detection and spoken-number conversion
# - Each field extractor (names, guests, phone, date/time, special requests)
# - extract_reservation end-to-end on English and Italian calls
#
# All tests use a fixed "today" (Wednesday 2024-05-01).
# =============================================================================

from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from core.models.reservation import DEFAULT_SPECIAL_REQUESTS, DINNER_ONLY_REQUEST
from core.models.webhook import TranscriptMessage
from extraction import (
    Language,
    detect_language,
    extract_date_time,
    extract_guest_info,
    extract_names,
    extract_phone_number,
    extract_reservation,
    extract_special_requests,
    next_weekday,
    words_to_digits,
)
from extraction.language import normalize_transcript
from extraction.patterns import ENGLISH, ITALIAN


def user(content: str) -> TranscriptMessage:
    return TranscriptMessage(role="user", content=content)


def agent(content: str) -> TranscriptMessage:
    return TranscriptMessage(role="agent", content=content)


# =============================================================================
# Language Detection
# =============================================================================

class TestDetectLanguage:
    """Test detect_language()."""

    def test_italian_call(self):
        """Italian indicators outnumber English ones."""
        conversation = [user("Ciao, vorrei una prenotazione per stasera, grazie")]
        assert detect_language(conversation) == Language.ITALIAN

    def test_english_call(self):
        conversation = [user("Hello, I'd like to make a reservation please")]
        assert detect_language(conversation) == Language.ENGLISH

    def test_empty_is_english(self):
        assert detect_language([]) == Language.ENGLISH

    def test_tie_is_english(self):
        """One indicator each: English wins ties."""
        conversation = [user("grazie, okay")]
        assert detect_language(conversation) == Language.ENGLISH

    def test_agent_messages_count(self):
        """Detection looks at both speakers."""
        conversation = [
            agent("Buonasera, grazie per aver chiamato"),
            user("si, perfetto, va bene"),
        ]
        assert detect_language(conversation) == Language.ITALIAN


class TestWordsToDigits:
    """Test words_to_digits()."""

    def test_spoken_english_numbers(self):
        assert words_to_digits("one two three", Language.ENGLISH) == "123"

    def test_spoken_italian_numbers(self):
        assert words_to_digits("tre due uno", Language.ITALIAN) == "321"

    def test_mixed_digits_and_words(self):
        assert words_to_digits("333 four 5", Language.ENGLISH) == "33345"

    def test_substring_replacement(self):
        """Number words inside other words are replaced too."""
        assert words_to_digits("phone", Language.ENGLISH) == "1"

    def test_no_digits(self):
        assert words_to_digits("hello there", Language.ENGLISH) == ""


class TestNormalizeTranscript:
    """Test normalize_transcript()."""

    def test_accepts_dicts(self):
        messages = normalize_transcript([{"role": "user", "content": "hi", "words": []}])
        assert messages == [TranscriptMessage(role="user", content="hi")]

    def test_none_content_becomes_empty(self):
        messages = normalize_transcript([{"role": "agent", "content": None}])
        assert messages[0].content == ""

    def test_empty(self):
        assert normalize_transcript(None) == []
        assert normalize_transcript([]) == []


# =============================================================================
# Names
# =============================================================================

class TestExtractNames:
    """Test extract_names()."""

    def test_capitalized_words(self):
        """First two capitalized words become first and last name."""
        conversation = [user("Sarah Connor here")]
        assert extract_names(conversation, Language.ENGLISH) == ("Sarah", "Connor")

    def test_my_name_is_pattern(self):
        conversation = [user("Hi, my name is John Smith")]
        assert extract_names(conversation, Language.ENGLISH) == ("John", "Smith")

    def test_first_name_only(self):
        conversation = [user("My first name is Giulia")]
        assert extract_names(conversation, Language.ENGLISH) == ("Giulia", "")

    def test_italian_mi_chiamo(self):
        conversation = [user("Mi chiamo Giulia Bianchi")]
        assert extract_names(conversation, Language.ITALIAN) == ("Giulia", "Bianchi")

    def test_common_words_skipped(self):
        """Greetings and weekdays are never names."""
        conversation = [user("Hello, Friday works. Anna Verdi")]
        assert extract_names(conversation, Language.ENGLISH) == ("Anna", "Verdi")

    def test_agent_text_ignored(self):
        conversation = [agent("Welcome to Jazzamore"), user("yes")]
        assert extract_names(conversation, Language.ENGLISH) == ("", "")

    def test_last_name_from_context(self):
        """The reply to the agent's name question fills a missing last name."""
        conversation = [
            user("Anna"),
            agent("And your last name?"),
            user("McDonald"),
        ]
        assert extract_names(conversation, Language.ENGLISH) == ("Anna", "Donald")

    def test_context_does_not_duplicate_first_name(self):
        conversation = [
            agent("May I have your name?"),
            user("Luca"),
        ]
        assert extract_names(conversation, Language.ENGLISH) == ("Luca", "")


# =============================================================================
# Guests
# =============================================================================

class TestExtractGuestInfo:
    """Test extract_guest_info()."""

    def test_default_is_two_adults(self):
        guests = extract_guest_info([user("hello")], Language.ENGLISH)
        assert (guests.total_guests, guests.adults, guests.children) == (2, 2, 0)

    def test_adults_and_children(self):
        guests = extract_guest_info([user("We are 3 adults and 2 children")], Language.ENGLISH)
        assert (guests.total_guests, guests.adults, guests.children) == (5, 3, 2)

    def test_solo(self):
        guests = extract_guest_info([user("just me tonight")], Language.ENGLISH)
        assert (guests.total_guests, guests.adults, guests.children) == (1, 1, 0)

    def test_total_people_with_children(self):
        """Adults are the total minus the children mentioned."""
        conversation = [user("there will be 4 people in our party, 2 kids")]
        guests = extract_guest_info(conversation, Language.ENGLISH)
        assert (guests.total_guests, guests.adults, guests.children) == (4, 2, 2)

    def test_children_need_two_adults(self):
        guests = extract_guest_info([user("1 adult and 3 kids")], Language.ENGLISH)
        assert (guests.total_guests, guests.adults, guests.children) == (5, 2, 3)

    def test_spoken_italian_numbers(self):
        guests = extract_guest_info([user("Siamo tre adulti e due bambini")], Language.ITALIAN)
        assert (guests.total_guests, guests.adults, guests.children) == (5, 3, 2)

    def test_italian_solo(self):
        guests = extract_guest_info([user("Vengo da sola")], Language.ITALIAN)
        assert (guests.total_guests, guests.adults, guests.children) == (1, 1, 0)

    def test_family(self):
        guests = extract_guest_info([user("It's me, my wife and my two kids")], Language.ENGLISH)
        assert (guests.total_guests, guests.adults, guests.children) == (4, 2, 2)

    def test_italian_family(self):
        guests = extract_guest_info([user("io, mia moglie e mia due figli")], Language.ITALIAN)
        assert (guests.total_guests, guests.adults, guests.children) == (4, 2, 2)

    def test_couple_with_kids_pattern(self):
        """The couple-with-kids rule reads the number of children."""
        assert ENGLISH.guest.couple_with_kids.search("me and my husband and 3 kids").group(1) == "3"
        assert ITALIAN.guest.couple_with_kids.search("io e mia moglie e 2 bambini").group(1) == "2"

    def test_couple_with_kids_overridden_by_couple(self):
        """The couple phrase inside 'me and my wife and 2 kids' wins."""
        guests = extract_guest_info([user("me and my wife and 2 kids")], Language.ENGLISH)
        assert (guests.total_guests, guests.adults, guests.children) == (2, 2, 0)

    def test_italian_couple_with_kids_overridden_by_couple(self):
        guests = extract_guest_info([user("io e mia moglie e 2 bambini")], Language.ITALIAN)
        assert (guests.total_guests, guests.adults, guests.children) == (2, 2, 0)

    def test_couple_overrides_counts(self):
        conversation = [user("3 adults and 2 children"), user("sorry, my wife and I only")]
        guests = extract_guest_info(conversation, Language.ENGLISH)
        assert (guests.total_guests, guests.adults, guests.children) == (2, 2, 0)

    def test_italian_couple_overrides_counts(self):
        conversation = [user("3 adulti e 2 bambini"), user("anzi, siamo in due")]
        guests = extract_guest_info(conversation, Language.ITALIAN)
        assert (guests.total_guests, guests.adults, guests.children) == (2, 2, 0)

    def test_italian_couple_not_a_larger_group(self):
        guests = extract_guest_info([user("siamo in 20 persone nel nostro gruppo")], Language.ITALIAN)
        assert guests.total_guests == 20

    def test_one_pattern_per_guest_rule(self):
        names = {f.name for f in dataclasses.fields(ENGLISH.guest)}
        assert names == {
            "family", "couple_with_kids", "adults_children", "children_only",
            "total_people", "solo", "couple",
        }
        assert "phone_context" not in {f.name for f in dataclasses.fields(ITALIAN)}


# =============================================================================
# Phone
# =============================================================================

class TestExtractPhoneNumber:
    """Test extract_phone_number()."""

    def test_digits(self):
        conversation = [user("my number is 333 123 4567")]
        assert extract_phone_number(conversation, Language.ENGLISH) == "+393331234567"

    def test_spoken_digits(self):
        conversation = [user("three three three one two three four five six seven")]
        assert extract_phone_number(conversation, Language.ENGLISH) == "+393331234567"

    def test_keeps_last_ten_digits(self):
        conversation = [user("2 people"), user("0039 333 123 4567")]
        assert extract_phone_number(conversation, Language.ENGLISH) == "+393331234567"

    def test_too_short(self):
        assert extract_phone_number([user("call me at 12345")], Language.ENGLISH) == ""

    def test_custom_country_code(self):
        conversation = [user("555 123 4567")]
        assert extract_phone_number(conversation, Language.ENGLISH, country_code="+1") == "+15551234567"


# =============================================================================
# Date & Time
# =============================================================================

class TestNextWeekday:
    """Test next_weekday()."""

    def test_later_this_week(self, today):
        assert next_weekday("friday", today) == date(2024, 5, 3)

    def test_same_weekday_is_next_week(self, today):
        assert next_weekday("wednesday", today) == date(2024, 5, 8)

    def test_earlier_weekday_wraps(self, today):
        assert next_weekday("Monday", today) == date(2024, 5, 6)

    def test_sunday(self, today):
        assert next_weekday("sunday", today) == date(2024, 5, 5)


class TestExtractDateTime:
    """Test extract_date_time()."""

    def test_default_is_tomorrow_at_ten(self, today):
        assert extract_date_time([user("hello")], Language.ENGLISH, today) == ("2024-05-02", "22:00")

    def test_tonight_half_past_eight(self, today):
        conversation = [user("a table for tonight at 8:30")]
        assert extract_date_time(conversation, Language.ENGLISH, today) == ("2024-05-01", "20:30")

    def test_tomorrow_at_nine(self, today):
        conversation = [user("tomorrow at nine")]
        assert extract_date_time(conversation, Language.ENGLISH, today) == ("2024-05-02", "21:00")

    def test_weekday(self, today):
        conversation = [user("Friday please")]
        assert extract_date_time(conversation, Language.ENGLISH, today) == ("2024-05-03", "22:00")

    def test_today_wins_over_weekday(self, today):
        conversation = [user("tonight, not saturday")]
        assert extract_date_time(conversation, Language.ENGLISH, today)[0] == "2024-05-01"

    def test_italian(self, today):
        conversation = [user("domani alle otto")]
        assert extract_date_time(conversation, Language.ITALIAN, today) == ("2024-05-02", "20:00")

    def test_italian_weekday_with_accent(self, today):
        conversation = [user("venerdì sera")]
        assert extract_date_time(conversation, Language.ITALIAN, today)[0] == "2024-05-03"


# =============================================================================
# Special Requests
# =============================================================================

class TestExtractSpecialRequests:
    """Test extract_special_requests()."""

    def test_dinner_only(self):
        assert extract_special_requests([user("just dinner please")], Language.ENGLISH) == DINNER_ONLY_REQUEST

    def test_no_show(self):
        assert extract_special_requests([user("no show for us")], Language.ENGLISH) == DINNER_ONLY_REQUEST

    def test_italian_dinner_only(self):
        assert extract_special_requests([user("solo cena")], Language.ITALIAN) == DINNER_ONLY_REQUEST

    def test_none(self):
        conversation = [user("we'd love to see the show")]
        assert extract_special_requests(conversation, Language.ENGLISH) == DEFAULT_SPECIAL_REQUESTS


# =============================================================================
# Full Extraction
# =============================================================================

class TestExtractReservation:
    """Test extract_reservation()."""

    def test_empty_conversation_gives_default(self, today):
        reservation = extract_reservation([], today=today)

        assert reservation.first_name == ""
        assert reservation.last_name == ""
        assert reservation.date == "2024-05-02"
        assert reservation.time == "22:00"
        assert (reservation.guests, reservation.adults, reservation.children) == (2, 2, 0)
        assert reservation.phone == ""
        assert reservation.special_requests == DEFAULT_SPECIAL_REQUESTS

    def test_none_conversation_gives_default(self, today):
        assert extract_reservation(None, today=today).date == "2024-05-02"

    def test_english_call(self, english_transcript, today):
        reservation = extract_reservation(english_transcript, today=today)

        assert reservation.first_name == "John"
        assert reservation.last_name == "Smith"
        assert reservation.date == "2024-05-03"
        assert reservation.time == "19:30"
        assert (reservation.guests, reservation.adults, reservation.children) == (4, 2, 2)
        assert reservation.phone == "+393475550199"
        assert reservation.special_requests == DINNER_ONLY_REQUEST

    def test_italian_call(self, italian_transcript, today):
        reservation = extract_reservation(italian_transcript, today=today)

        assert reservation.first_name == "Giulia"
        assert reservation.last_name == "Bianchi"
        assert reservation.date == "2024-05-02"
        assert reservation.time == "20:30"
        assert (reservation.guests, reservation.adults, reservation.children) == (5, 3, 2)
        assert reservation.phone == "+393331234567"
        assert reservation.special_requests == DEFAULT_SPECIAL_REQUESTS

    @pytest.mark.parametrize("role", ["agent", "assistant"])
    def test_only_agent_speech(self, role, today):
        """Nothing the agent says is attributed to the caller."""
        conversation = [{"role": role, "content": "Marco Rossi, 333 123 4567, tonight"}]
        reservation = extract_reservation(conversation, today=today)

        assert reservation.first_name == ""
        assert reservation.phone == ""
        assert reservation.date == "2024-05-02"
