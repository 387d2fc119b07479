"""
Streamlit chat interface.
"""

import logging
import time

import streamlit as st

from .agent import Conversation
from .config import ARRIVAL_NOTE, LOG_LEVEL, RESPONSE_DELAY_SECONDS, RESTAURANT_NAME
from .menu import MENU_DATA
from .models import ConfirmedBooking


def render_booking_summary(booking: ConfirmedBooking) -> None:
    st.markdown(f"""
        <div class="booking-card">
            <h3 style="margin: 0 0 0.5rem 0;">✅ Booking Confirmed</h3>
            <p style="margin: 0; color: #888;">Reference <code>{booking.reference}</code></p>
        </div>
    """, unsafe_allow_html=True)

    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"**📅 Date**  \n{booking.display_date}")
        st.markdown(f"**👥 Guests**  \n{booking.guests_label}")
    with col2:
        st.markdown(f"**🕐 Time**  \n{booking.time}")
        st.markdown(f"**💺 Seating**  \n{booking.seating}")

    st.info(ARRIVAL_NOTE)


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    st.set_page_config(
        page_title=RESTAURANT_NAME,
        page_icon="🍽️",
        layout="centered",
        menu_items={
            'Get Help': None,
            'Report a bug': None,
            'About': None
        }
    )

    # Custom styling
    st.markdown("""
        <style>
        #MainMenu, footer, .stDeployButton {display: none !important; visibility: hidden !important;}

        /* Assistant messages */
        [data-testid="stChatMessage"]:has([data-testid="chatAvatarIcon-assistant"]) {
            border-radius: 20px 20px 20px 4px;
            border-left: 3px solid #FF8B7B;
            margin: 0.8rem 0;
            padding: 1rem;
        }

        /* User messages */
        [data-testid="stChatMessage"]:has([data-testid="chatAvatarIcon-user"]) {
            border-radius: 20px 20px 4px 20px;
            border-right: 3px solid #6C9BC4;
            margin: 0.8rem 0;
            padding: 1rem;
        }

        .booking-card {
            border: 2px solid #2D5A3D;
            border-radius: 16px;
            padding: 1rem 1.2rem;
            margin: 1.5rem 0 0.5rem 0;
        }

        @keyframes pulse {
            0%, 100% { opacity: 1; }
            50% { opacity: 0.5; }
        }

        .typing-indicator {
            animation: pulse 1.5s infinite;
        }
        </style>
    """, unsafe_allow_html=True)

    st.markdown(f"""
        <div style="text-align: center; padding: 1rem 0 0.5rem 0;">
            <h1 style="font-size: 2.2rem; margin: 0.3rem 0; font-weight: 600;">{RESTAURANT_NAME}</h1>
            <p style="color: #888; font-size: 1.1rem; margin: 0; font-weight: 300;">
                Book your table in seconds
            </p>
        </div>
    """, unsafe_allow_html=True)

    if "conversation" not in st.session_state:
        conversation = Conversation()
        conversation.start()
        st.session_state.conversation = conversation
    conversation = st.session_state.conversation

    chat_container = st.container()

    with chat_container:
        for message in conversation.messages:
            role = "assistant" if message.sender == "bot" else "user"
            avatar = "🍽️" if role == "assistant" else "😊"
            with st.chat_message(role, avatar=avatar):
                st.markdown(message.text.replace("\n", "  \n"))
                st.caption(message.time_label)

        if conversation.last_booking is not None:
            render_booking_summary(conversation.last_booking)

    if prompt := st.chat_input("Type your message..."):
        with st.spinner(""):
            thinking_placeholder = st.empty()
            thinking_placeholder.markdown("""
                <div style="text-align: center; padding: 1rem; color: #888;">
                    <span class="typing-indicator">🍽️ Checking the reservation book...</span>
                </div>
            """, unsafe_allow_html=True)
            time.sleep(RESPONSE_DELAY_SECONDS)
            conversation.run_turn(prompt)
            thinking_placeholder.empty()

        st.rerun()

    with st.sidebar:
        if st.button("🔄 New Chat", use_container_width=True):
            conversation.reset()
            st.rerun()

        st.divider()
        st.markdown("### Our Menu")
        for title, key in (
            ("Vegetarian", "vegetarian"),
            ("Non-Vegetarian", "non_vegetarian"),
            ("Chef's Specialties", "specialties"),
        ):
            category = MENU_DATA[key]
            with st.expander(f"{title} · {category.price_range}", expanded=False):
                for dish in category.dishes:
                    st.markdown(f"- {dish}")


if __name__ == "__main__":
    main()
