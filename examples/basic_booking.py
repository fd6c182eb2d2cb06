"""
Basic Booking Example - Log in, find a room, book it, set a reminder.

Set BOARDROOM_API_URL, BOARDROOM_EMAIL and BOARDROOM_PASSWORD first.
"""

import asyncio
import logging
import os
from datetime import datetime, timedelta, timezone

from boardroom_client import BoardroomClient, ApiError
from boardroom_client.domain.booking import CreateBookingData, build_recurrence_rule, validate_booking_window
from boardroom_client.domain.room import RoomFilters
from boardroom_client.utils import format_booking_date, format_booking_time, format_date_for_api


def show_login_screen():
    print("\nSession expired - please log in again")


async def main():
    logging.basicConfig(level=logging.INFO)

    async with BoardroomClient(on_session_expired=show_login_screen) as client:
        client.restore()

        # Login (stores the token pair)
        if not client.is_authenticated:
            result = await client.login(os.environ["BOARDROOM_EMAIL"], os.environ["BOARDROOM_PASSWORD"])
            if not result.success:
                print(f"Login failed: {result.message}")
                return

        print(f"Signed in as {client.user.full_name} ({client.user.role.value})")

        # Find a room for 6 with a projector
        rooms = await client.rooms.list(RoomFilters(capacity=6, amenities=["projector"]))
        if not rooms.data:
            print("No matching rooms")
            return

        room = rooms.data[0]
        print(f"\nBooking {room.name} ({room.location})")

        # Tomorrow 10:00-11:00 UTC, every week
        start = (datetime.now(timezone.utc) + timedelta(days=1)).replace(hour=10, minute=0, second=0, microsecond=0)
        end = start + timedelta(hours=1)
        validate_booking_window(start, end)

        try:
            booking = await client.bookings.create(CreateBookingData(
                room_id=room.id,
                title="Team sync",
                start_time=format_date_for_api(start),
                end_time=format_date_for_api(end),
                recurrence_rule=build_recurrence_rule("weekly"),
            ))
        except ApiError as e:
            print(f"Booking refused: {e.message}")
            return

        created = booking.data
        print(f"Booked: {format_booking_date(created.start_time)}, "
              f"{format_booking_time(created.start_time, created.end_time)}")

        # Reminder 15 minutes before
        reminder = client.reminders.schedule_booking_reminder(created.id, created.title, room.name, start)
        print(f"Reminder scheduled: {reminder}")

        # Logout
        await client.logout()
        print("\nLogged out successfully")


if __name__ == "__main__":
    asyncio.run(main())
