"""
Step-by-step reservation dialogue.
Each step validates the raw reply and either advances with one more field
filled in or stays put with a corrective prompt.
"""

import datetime
import logging
import re
import time
from dataclasses import replace
from typing import Optional

from .availability import check_availability, find_nearest_available_time
from .config import (
    BOOKING_MARKER,
    CONFIRM_WORDS,
    DEFAULT_SEATING,
    MAX_GUESTS,
    MIN_GUESTS,
    NO_PREFERENCE,
    REFERENCE_PREFIX,
    TIME_CHECK_GUESTS,
)
from .models import AvailabilityTable, BotReply, ConfirmedBooking, ReservationData, Step


logger = logging.getLogger("reservation_bot.dialogue")

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"\d{2}:\d{2}", re.ASCII)
# Two digits at most, anything longer is out of range anyway
GUESTS_PATTERN = re.compile(r"\d{1,2}", re.ASCII)

GREETING_PROMPT = (
    "Welcome to our restaurant! 🍽️ I'd be delighted to help you reserve a table. "
    "When would you like to dine with us? (Please provide a date, e.g., 2025-02-15)"
)
DATE_FORMAT_HINT = "Please provide a date in YYYY-MM-DD format (e.g., 2025-02-15)"
DATE_FULLY_BOOKED = "Unfortunately, that date is fully booked. Could you choose another date? (Format: YYYY-MM-DD)"
TIME_FORMAT_HINT = "Please provide a time in HH:MM format (e.g., 19:30)"
GUESTS_PROMPT = "Perfect! How many guests will be dining with us?"
GUESTS_RANGE_HINT = f"Please provide a valid number of guests ({MIN_GUESTS}-{MAX_GUESTS})"
SEATING_PROMPT = (
    "Would you have any seating preferences? (e.g., window, quiet corner, bar) "
    "Or just say \"no preference\""
)
CONFIRMATION_RETRY = "No problem. Would you like to modify anything or start over?"


def make_booking_reference(now_ms: Optional[int] = None) -> str:
    """RES- plus the last six digits of a millisecond timestamp."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"{REFERENCE_PREFIX}{str(now_ms)[-6:]}"


def format_display_date(iso_date: str) -> str:
    day = datetime.date.fromisoformat(iso_date)
    return f"{day.month}/{day.day}/{day.year}"


def parse_guest_count(text: str) -> Optional[int]:
    """Whole number in the allowed range, else None."""
    if not GUESTS_PATTERN.fullmatch(text):
        return None
    count = int(text)
    if MIN_GUESTS <= count <= MAX_GUESTS:
        return count
    return None


def normalize_seating(text: str) -> str:
    if text.lower() == NO_PREFERENCE:
        return DEFAULT_SEATING
    return text


# --- Step handlers ---

def handle_greeting(user_input: str, data: ReservationData, availability: AvailabilityTable) -> BotReply:
    return BotReply(GREETING_PROMPT, Step.DATE, data)


def handle_date(user_input: str, data: ReservationData, availability: AvailabilityTable) -> BotReply:
    if not DATE_PATTERN.fullmatch(user_input):
        logger.debug("Rejected date format: %r", user_input)
        return BotReply(DATE_FORMAT_HINT, Step.DATE, data)

    slots = availability.get(user_input)
    if not slots:
        logger.info("No availability on %s", user_input)
        return BotReply(DATE_FULLY_BOOKED, Step.DATE, data)

    return BotReply(
        f"Great! I found availability on {format_display_date(user_input)}. "
        f"What time would you prefer? Available times: {', '.join(slots)}",
        Step.TIME,
        replace(data, date=user_input)
    )


def handle_time(user_input: str, data: ReservationData, availability: AvailabilityTable) -> BotReply:
    if TIME_PATTERN.fullmatch(user_input) and data.date:
        if check_availability(data.date, user_input, TIME_CHECK_GUESTS, availability):
            return BotReply(GUESTS_PROMPT, Step.GUESTS, replace(data, time=user_input))

        nearest = find_nearest_available_time(data.date, user_input, availability)
        if nearest:
            logger.info("Slot %s %s taken, suggesting %s", data.date, user_input, nearest)
            return BotReply(
                f"That time slot is unavailable. We have availability at {nearest}. Would that work for you?",
                Step.TIME,
                data
            )

    logger.debug("Rejected time: %r", user_input)
    return BotReply(TIME_FORMAT_HINT, Step.TIME, data)


def handle_guests(user_input: str, data: ReservationData, availability: AvailabilityTable) -> BotReply:
    guests = parse_guest_count(user_input)
    if guests is None:
        logger.debug("Rejected guest count: %r", user_input)
        return BotReply(GUESTS_RANGE_HINT, Step.GUESTS, data)
    return BotReply(SEATING_PROMPT, Step.SEATING, replace(data, guests=guests))


def handle_seating(user_input: str, data: ReservationData, availability: AvailabilityTable) -> BotReply:
    updated = replace(data, seating=normalize_seating(user_input))
    return BotReply(
        "Let me confirm your reservation:\n"
        f"📅 Date: {updated.date}\n"
        f"🕐 Time: {updated.time}\n"
        f"👥 Guests: {updated.guests}\n"
        f"💺 Seating: {updated.seating}\n\n"
        "Shall I proceed with this booking?",
        Step.CONFIRMATION,
        updated
    )


def handle_confirmation(user_input: str, data: ReservationData, availability: AvailabilityTable) -> BotReply:
    if user_input.lower() not in CONFIRM_WORDS:
        return BotReply(CONFIRMATION_RETRY, Step.CONFIRMATION, data)

    reference = make_booking_reference()
    booking = ConfirmedBooking(
        reference=reference,
        date=data.date,
        time=data.time,
        guests=data.guests or MIN_GUESTS,
        seating=data.seating or DEFAULT_SEATING
    )
    logger.info("Reservation %s confirmed for %s at %s", reference, data.date, data.time)
    return BotReply(
        "✅ Excellent! Your reservation is confirmed!\n\n"
        f"{BOOKING_MARKER} {reference}\n"
        "We look forward to welcoming you!",
        Step.GREETING,
        ReservationData(),
        booking
    )


STEP_HANDLERS = {
    Step.GREETING: handle_greeting,
    Step.DATE: handle_date,
    Step.TIME: handle_time,
    Step.GUESTS: handle_guests,
    Step.SEATING: handle_seating,
    Step.CONFIRMATION: handle_confirmation,
}


def generate_bot_response(
    step: Step,
    user_input: str,
    data: ReservationData,
    availability: AvailabilityTable
) -> BotReply:
    """Run one turn of the reservation flow for the given step."""
    reply = STEP_HANDLERS[Step(step)](user_input, data, availability)
    if reply.next_step != step:
        logger.debug("Step %s -> %s", Step(step).value, reply.next_step.value)
    return reply
