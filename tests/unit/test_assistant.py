"""
Unit tests for the BookingAssistant.
"""

import json

import httpx
import pytest

from boardroom_client.config import ClientConfig
from boardroom_client.services.assistant import (
    ANTHROPIC_VERSION,
    BOOKING_SYSTEM_PROMPT,
    GENERIC_FAILURE,
    HISTORY_WINDOW,
    BookingAssistant,
    ChatMessage,
    build_context,
    parse_reply,
)

BOOK_REPLY = (
    '{"action":"book","date":"2024-02-20","startTime":"14:00","endTime":"15:00",'
    '"duration":60,"numberOfPeople":5,"amenities":["projector"]}'
)


def completion(text: str) -> httpx.Response:
    return httpx.Response(200, json={"content": [{"type": "text", "text": text}]})


class RecordingEndpoint:
    """Completion endpoint double that records request bodies."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append({"headers": dict(request.headers), "body": json.loads(request.content)})
        return self.responses.pop(0)


def make_assistant(endpoint) -> BookingAssistant:
    config = ClientConfig(assistant_url="https://llm.test/v1/messages")
    return BookingAssistant(api_key="test-key", config=config, transport=httpx.MockTransport(endpoint))


def test_parse_reply():
    parsed = parse_reply(BOOK_REPLY)

    assert parsed.action == "book"
    assert parsed.number_of_people == 5
    assert parsed.amenities == ["projector"]


def test_parse_reply_plain_text():
    """Clarifying questions are not structured."""
    assert parse_reply("How many people will attend?") is None
    assert parse_reply('{"action": "dance"}') is None
    assert parse_reply("[1, 2]") is None


def test_build_context():
    context = build_context(
        available_rooms=[{"id": "r1", "name": "Everest", "capacity": 8, "floor": "3"}],
        existing_bookings=[{"roomName": "Everest", "date": "2024-02-20", "startTime": "14:00", "endTime": "15:00"}],
    )

    assert 'Available rooms: [{"name": "Everest", "capacity": 8, "floor": "3"}]' in context
    assert "Existing bookings:" in context
    assert build_context() == ""


def test_system_prompt_lists_amenities():
    assert "video-conferencing" in BOOKING_SYSTEM_PROMPT
    assert '{"action":"book"' in BOOKING_SYSTEM_PROMPT


@pytest.mark.asyncio
async def test_send_message_request_shape():
    """Test headers, model and message list."""
    endpoint = RecordingEndpoint(completion("How many people?"))
    assistant = make_assistant(endpoint)

    response = await assistant.send_message("Book a room tomorrow", available_rooms=[{"name": "K2"}])

    assert response.success
    assert response.message == "How many people?"
    assert response.parsed is None

    sent = endpoint.requests[0]
    assert sent["headers"]["x-api-key"] == "test-key"
    assert sent["headers"]["anthropic-version"] == ANTHROPIC_VERSION
    assert sent["body"]["system"] == BOOKING_SYSTEM_PROMPT
    assert sent["body"]["max_tokens"] == 1024
    assert sent["body"]["messages"] == [
        {"role": "user", "content": 'Book a room tomorrow\n\nContext: \n\nAvailable rooms: [{"name": "K2", "capacity": null, "floor": null}]'},
    ]

    # History keeps the message as typed
    assert [m.content for m in assistant.history] == ["Book a room tomorrow", "How many people?"]


@pytest.mark.asyncio
async def test_history_window():
    endpoint = RecordingEndpoint(*[completion(f"reply {i}") for i in range(7)])
    assistant = make_assistant(endpoint)

    for i in range(7):
        await assistant.send_message(f"message {i}")

    last = endpoint.requests[-1]["body"]["messages"]
    assert len(last) == HISTORY_WINDOW + 1
    assert last[-1] == {"role": "user", "content": "message 6"}
    assert last[0] == {"role": "user", "content": "message 1"}


@pytest.mark.asyncio
async def test_process_booking_ready():
    assistant = make_assistant(RecordingEndpoint(completion(BOOK_REPLY)))

    response = await assistant.process_booking("Room for 5 tomorrow at 2pm")

    assert response.success
    assert response.message == "Booking details parsed. Ready to book."
    assert response.parsed.date == "2024-02-20"


@pytest.mark.asyncio
async def test_process_booking_other_action():
    reply = '{"action":"check_availability","date":"2024-02-20","timeOfDay":"afternoon"}'
    assistant = make_assistant(RecordingEndpoint(completion(reply)))

    response = await assistant.process_booking("What's free tomorrow afternoon?")

    assert response.message == reply
    assert response.parsed.time_of_day == "afternoon"


@pytest.mark.asyncio
async def test_endpoint_error_message():
    """Test that the endpoint's error message is surfaced."""
    error = httpx.Response(401, json={"error": {"type": "authentication_error", "message": "invalid x-api-key"}})
    assistant = make_assistant(RecordingEndpoint(error))

    response = await assistant.send_message("hello")

    assert not response.success
    assert response.message == "invalid x-api-key"
    assert [m.role for m in assistant.history] == ["user"]


@pytest.mark.asyncio
async def test_network_error():
    def endpoint(request):
        raise httpx.ConnectError("offline")

    assistant = make_assistant(endpoint)

    response = await assistant.send_message("hello")

    assert not response.success
    assert response.message == GENERIC_FAILURE


@pytest.mark.asyncio
async def test_unexpected_body():
    assistant = make_assistant(RecordingEndpoint(httpx.Response(200, json={"content": []})))

    response = await assistant.send_message("hello")

    assert response.message == GENERIC_FAILURE


def test_clear_history():
    assistant = make_assistant(RecordingEndpoint())
    assistant._history.append(ChatMessage(role="user", content="hello"))

    assistant.clear_history()

    assert assistant.history == []
