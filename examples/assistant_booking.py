"""
Assistant Booking Example - Turn a chat message into a booking request.

Requires ANTHROPIC_API_KEY, plus a signed-in session for the room list.
"""

import asyncio
import os

from boardroom_client import BoardroomClient
from boardroom_client.services import BookingAssistant


async def main():
    async with BoardroomClient() as client:
        client.restore()
        rooms = await client.rooms.list() if client.is_authenticated else None
        available = [
            {"name": r.name, "capacity": r.capacity, "floor": r.floor}
            for r in (rooms.data if rooms else [])
        ]

    assistant = BookingAssistant(api_key=os.environ["ANTHROPIC_API_KEY"], config=client.config)
    try:
        reply = await assistant.process_booking(
            "I need a room with a projector for 6 people tomorrow at 2pm for an hour",
            available_rooms=available,
        )
    finally:
        await assistant.aclose()

    print(f"Assistant: {reply.message}")
    if reply.parsed:
        parsed = reply.parsed
        print(f"Action: {parsed.action}")
        print(f"When: {parsed.date} {parsed.start_time}-{parsed.end_time}")
        print(f"People: {parsed.number_of_people}, amenities: {parsed.amenities}")


if __name__ == "__main__":
    asyncio.run(main())
