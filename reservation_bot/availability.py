"""
Mock availability table and slot lookups.
"""

import datetime
import random
from typing import Optional

from .config import (
    BOOKING_WINDOW_DAYS,
    FIRST_SLOT_HOUR,
    LAST_SLOT_HOUR,
    SLOT_AVAILABILITY_PROBABILITY,
)
from .models import AvailabilityTable


def generate_availability(
    today: Optional[datetime.date] = None,
    rng=None
) -> AvailabilityTable:
    """Build two weeks of open hourly slots, each kept with 70% probability."""
    today = today or datetime.date.today()
    rng = rng or random

    availability: AvailabilityTable = {}
    for offset in range(BOOKING_WINDOW_DAYS):
        day = today + datetime.timedelta(days=offset)
        slots = []
        for hour in range(FIRST_SLOT_HOUR, LAST_SLOT_HOUR + 1):
            if rng.random() < SLOT_AVAILABILITY_PROBABILITY:
                slots.append(f"{hour:02d}:00")
        availability[day.isoformat()] = slots
    return availability


def to_minutes(value: str) -> int:
    """'HH:MM' -> minutes since midnight."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def check_availability(
    date: str,
    time: str,
    guests: int,
    availability: AvailabilityTable
) -> bool:
    """Is this exact slot open?

    ``guests`` does not affect the answer yet; slots have no capacity.
    """
    return time in availability.get(date, [])


def find_nearest_available_time(
    date: str,
    time: str,
    availability: AvailabilityTable
) -> Optional[str]:
    """Closest open slot to the requested time, or None if the day is full."""
    slots = availability.get(date) or []
    if not slots:
        return None

    target = to_minutes(time)
    # min() keeps the first slot on ties
    return min(slots, key=lambda slot: abs(to_minutes(slot) - target))
