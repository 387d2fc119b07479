"""
App settings - booking window, slot hours, guest limits, UI timing.
"""

RESTAURANT_NAME = "Restaurant Reserve"

BOOKING_WINDOW_DAYS = 14
FIRST_SLOT_HOUR = 11
LAST_SLOT_HOUR = 22
SLOT_AVAILABILITY_PROBABILITY = 0.7

MIN_GUESTS = 1
MAX_GUESTS = 12
# Guest count used when checking a time slot, before the real count is known
TIME_CHECK_GUESTS = 2

DEFAULT_SEATING = "Standard"
NO_PREFERENCE = "no preference"
CONFIRM_WORDS = ("yes", "confirm")

BOOKING_MARKER = "Booking Reference:"
REFERENCE_PREFIX = "RES-"

RESPONSE_DELAY_SECONDS = 0.8
LOG_LEVEL = "INFO"
ARRIVAL_NOTE = (
    "We look forward to welcoming you! Please arrive 10-15 minutes before your "
    "reservation time. If you need to cancel or modify your booking, please "
    "contact us at least 24 hours in advance."
)
