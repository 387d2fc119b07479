"""
Conversation session - keeps history and flow state, runs one turn at a time.
"""

import logging
from typing import Optional

from .availability import generate_availability
from .config import BOOKING_MARKER
from .dialogue import generate_bot_response
from .menu import MENU_FOLLOW_UP, get_menu_info, is_menu_question
from .models import AvailabilityTable, ConfirmedBooking, Message, ReservationData, Step


logger = logging.getLogger("reservation_bot.agent")

ERROR_REPLY = "Sorry, something went wrong on my side. Please try that again."


class Conversation:
    """One user's chat: availability, current step, reservation so far."""

    def __init__(self, availability: Optional[AvailabilityTable] = None):
        self.availability = availability if availability is not None else generate_availability()
        self.step = Step.GREETING
        self.data = ReservationData()
        self.messages: list[Message] = []
        self.last_booking: Optional[ConfirmedBooking] = None

    def start(self) -> Message:
        """Greet the user and move to the date step."""
        reply = generate_bot_response(Step.GREETING, "", self.data, self.availability)
        self.step = reply.next_step
        self.data = reply.data
        return self._bot_says(reply.response)

    def reset(self) -> Message:
        self.messages = []
        self.step = Step.GREETING
        self.data = ReservationData()
        self.last_booking = None
        return self.start()

    def run_turn(self, text: str) -> Optional[Message]:
        """Handle one user message and return the bot's reply."""
        text = text.strip()
        if not text:
            return None

        self.messages.append(Message(sender="user", text=text))

        if is_menu_question(text):
            logger.debug("Menu question at step %s", self.step.value)
            return self._bot_says(f"{get_menu_info(text)}\n\n{MENU_FOLLOW_UP}")

        try:
            reply = generate_bot_response(self.step, text, self.data, self.availability)
        except Exception:
            logger.exception("Turn failed at step %s", self.step.value)
            return self._bot_says(ERROR_REPLY)

        if self.step == Step.GREETING and reply.next_step != Step.GREETING:
            # a new reservation is starting, drop the previous summary
            self.last_booking = None
        self.step = reply.next_step
        self.data = reply.data
        if reply.booking is not None and BOOKING_MARKER in reply.response:
            self.last_booking = reply.booking
        return self._bot_says(reply.response)

    def _bot_says(self, text: str) -> Message:
        message = Message(sender="bot", text=text)
        self.messages.append(message)
        return message
