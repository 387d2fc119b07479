"""
Dataclasses for the reservation flow, chat messages and menu catalog.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
import uuid


AvailabilityTable = dict[str, list[str]]


class Step(str, Enum):
    GREETING = "greeting"
    DATE = "date"
    TIME = "time"
    GUESTS = "guests"
    SEATING = "seating"
    CONFIRMATION = "confirmation"


@dataclass
class ReservationData:
    date: Optional[str] = None
    time: Optional[str] = None
    guests: Optional[int] = None
    seating: Optional[str] = None


@dataclass(frozen=True)
class ConfirmedBooking:
    reference: str
    date: str
    time: str
    guests: int
    seating: str

    @property
    def display_date(self) -> str:
        """e.g. Saturday, February 15, 2025"""
        day = datetime.strptime(self.date, "%Y-%m-%d")
        return f"{day.strftime('%A, %B')} {day.day}, {day.year}"

    @property
    def guests_label(self) -> str:
        return f"{self.guests} {'person' if self.guests == 1 else 'people'}"


@dataclass
class BotReply:
    response: str
    next_step: Step
    data: ReservationData
    booking: Optional[ConfirmedBooking] = None  # set only on the confirming turn


@dataclass(frozen=True)
class Message:
    sender: str  # 'user' or 'bot'
    text: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def time_label(self) -> str:
        return self.timestamp.strftime("%H:%M")


@dataclass(frozen=True)
class MenuCategory:
    dishes: tuple[str, ...]
    price_range: str
