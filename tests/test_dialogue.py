"""Tests for the step-by-step reservation dialogue"""

import re

import pytest

from reservation_bot.dialogue import (
    generate_bot_response,
    make_booking_reference,
    normalize_seating,
    parse_guest_count,
)
from reservation_bot.models import ReservationData, Step


def test_greeting_always_moves_to_date(availability, empty_data):
    reply = generate_bot_response(Step.GREETING, "", empty_data, availability)
    assert reply.next_step == Step.DATE
    assert "YYYY-MM-DD" in reply.response or "2025-02-15" in reply.response
    assert reply.data == empty_data


def test_valid_date_advances_and_lists_slots(availability, empty_data):
    reply = generate_bot_response(Step.DATE, "2025-02-15", empty_data, availability)
    assert reply.next_step == Step.TIME
    assert reply.data.date == "2025-02-15"
    assert "11:00, 12:00, 13:00" in reply.response
    assert "2/15/2025" in reply.response


@pytest.mark.parametrize("text", ["2030-01-01", "2025-02-16"])
def test_unknown_or_empty_date_is_fully_booked(availability, empty_data, text):
    reply = generate_bot_response(Step.DATE, text, empty_data, availability)
    assert reply.next_step == Step.DATE
    assert reply.data.date is None
    assert "fully booked" in reply.response


@pytest.mark.parametrize("text", ["tomorrow", "15/02/2025", "2025-2-15", " 2025-02-15", "2025-02-15x", "\uff12\uff10\uff12\uff15-\uff10\uff12-\uff11\uff15"])
def test_badly_formatted_date_gets_hint(availability, empty_data, text):
    reply = generate_bot_response(Step.DATE, text, empty_data, availability)
    assert reply.next_step == Step.DATE
    assert reply.data.date is None
    assert "YYYY-MM-DD" in reply.response
    assert "fully booked" not in reply.response


def test_engine_does_not_mutate_input(availability, empty_data):
    generate_bot_response(Step.DATE, "2025-02-15", empty_data, availability)
    assert empty_data == ReservationData()


def test_available_time_advances(availability):
    data = ReservationData(date="2025-02-15")
    reply = generate_bot_response(Step.TIME, "11:00", data, availability)
    assert reply.next_step == Step.GUESTS
    assert reply.data.time == "11:00"


def test_unavailable_time_suggests_nearest(availability):
    data = ReservationData(date="2025-02-15")
    reply = generate_bot_response(Step.TIME, "18:30", data, availability)
    assert reply.next_step == Step.TIME
    assert reply.data.time is None
    assert "19:00" in reply.response
    assert "unavailable" in reply.response


@pytest.mark.parametrize("text", ["7pm", "7:00", "19.00", "noon", "\uff11\uff19:00"])
def test_badly_formatted_time_gets_hint(availability, text):
    data = ReservationData(date="2025-02-15")
    reply = generate_bot_response(Step.TIME, text, data, availability)
    assert reply.next_step == Step.TIME
    assert "HH:MM" in reply.response


def test_time_without_any_slot_falls_back_to_hint(availability):
    data = ReservationData(date="2025-02-16")
    reply = generate_bot_response(Step.TIME, "12:00", data, availability)
    assert reply.next_step == Step.TIME
    assert "HH:MM" in reply.response


@pytest.mark.parametrize("text, expected", [("1", 1), ("4", 4), ("12", 12)])
def test_guest_count_accepted(availability, text, expected):
    data = ReservationData(date="2025-02-15", time="11:00")
    reply = generate_bot_response(Step.GUESTS, text, data, availability)
    assert reply.next_step == Step.SEATING
    assert reply.data.guests == expected


@pytest.mark.parametrize("text", ["0", "13", "-3", "four", "4.5", "", "100", "9" * 5000, "\u0664", "\uff14"])
def test_guest_count_rejected(availability, text):
    data = ReservationData(date="2025-02-15", time="11:00")
    reply = generate_bot_response(Step.GUESTS, text, data, availability)
    assert reply.next_step == Step.GUESTS
    assert reply.data.guests is None
    assert "1-12" in reply.response


def test_parse_guest_count():
    assert parse_guest_count("12") == 12
    assert parse_guest_count("13") is None
    assert parse_guest_count("abc") is None


@pytest.mark.parametrize("text", ["no preference", "No Preference", "NO PREFERENCE"])
def test_no_preference_becomes_standard(text):
    assert normalize_seating(text) == "Standard"


def test_other_seating_kept_verbatim():
    assert normalize_seating("Window, please") == "Window, please"


def test_seating_always_advances_with_recap(availability):
    data = ReservationData(date="2025-02-15", time="11:00", guests=4)
    reply = generate_bot_response(Step.SEATING, "quiet corner", data, availability)
    assert reply.next_step == Step.CONFIRMATION
    assert reply.data.seating == "quiet corner"
    for part in ("2025-02-15", "11:00", "4", "quiet corner"):
        assert part in reply.response


@pytest.mark.parametrize("text", ["yes", "YES", "Confirm", "confirm"])
def test_confirmation_resets_and_returns_reference(availability, filled_data, text):
    reply = generate_bot_response(Step.CONFIRMATION, text, filled_data, availability)
    assert reply.next_step == Step.GREETING
    assert reply.data == ReservationData()
    assert "Booking Reference:" in reply.response
    assert re.search(r"Booking Reference: RES-\d{6}", reply.response)
    assert reply.booking is not None
    assert reply.booking.reference in reply.response
    assert reply.booking.date == "2025-02-15"
    assert reply.booking.guests == 4


@pytest.mark.parametrize("text", ["no", "yes please", "maybe", "y"])
def test_other_confirmation_input_keeps_data(availability, filled_data, text):
    reply = generate_bot_response(Step.CONFIRMATION, text, filled_data, availability)
    assert reply.next_step == Step.CONFIRMATION
    assert reply.data == filled_data
    assert reply.booking is None
    assert "Booking Reference:" not in reply.response


def test_booking_reference_format():
    assert make_booking_reference(1739612345678) == "RES-345678"
    assert re.fullmatch(r"RES-\d{6}", make_booking_reference())


def test_full_reservation_flow(availability, empty_data):
    data = empty_data
    step = Step.DATE
    replies = []
    for text in ("2025-02-15", "11:00", "4", "no preference"):
        reply = generate_bot_response(step, text, data, availability)
        replies.append(reply)
        step, data = reply.next_step, reply.data

    assert data == ReservationData(date="2025-02-15", time="11:00", guests=4, seating="Standard")

    final = generate_bot_response(step, "yes", data, availability)
    assert "Booking Reference:" in final.response
    assert final.booking.date == "2025-02-15"
    assert final.booking.time == "11:00"
    assert final.booking.guests == 4
    assert final.booking.seating == "Standard"
    assert [r.next_step for r in replies] == [Step.TIME, Step.GUESTS, Step.SEATING, Step.CONFIRMATION]
