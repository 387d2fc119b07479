"""Test configuration and fixtures"""

import pytest

from reservation_bot.agent import Conversation
from reservation_bot.models import ReservationData


@pytest.fixture
def availability():
    """Small fixed availability table"""
    return {
        "2025-02-15": ["11:00", "12:00", "13:00", "15:00", "19:00", "22:00"],
        "2025-02-16": [],
        "2025-02-17": ["18:00", "20:00"],
    }


@pytest.fixture
def empty_data():
    return ReservationData()


@pytest.fixture
def filled_data():
    """Reservation waiting for confirmation"""
    return ReservationData(date="2025-02-15", time="11:00", guests=4, seating="Standard")


@pytest.fixture
def conversation(availability):
    """Conversation already greeted and waiting for a date"""
    convo = Conversation(availability)
    convo.start()
    return convo
