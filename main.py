"""
Restaurant Reserve - scripted reservation chat
==============================================
Walks a guest through date, time, party size and seating, answers menu
questions along the way, and confirms with a booking reference.

Run with:  streamlit run main.py
"""

from reservation_bot.ui_streamlit import main


main()
