"""
Booking Assistant - Natural-language booking requests via a hosted LLM.

Talks directly to the completion endpoint (not through the gateway: it
has its own API key and no booking session). The model is instructed to
answer with a JSON description of the requested action, which is parsed
into ParsedBooking when possible.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from boardroom_client.config import AMENITIES, ClientConfig

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"
HISTORY_WINDOW = 10
GENERIC_FAILURE = "Failed to get response from AI. Please try again."

BOOKING_SYSTEM_PROMPT = f"""You are a helpful boardroom booking assistant for a company. Your job is to help users book meeting rooms.

When a user wants to book a room, you MUST extract and return the following information in JSON format:
- action: "book" | "check_availability" | "cancel" | "list" | "help"
- date: The booking date in YYYY-MM-DD format (e.g., "2024-02-20")
- startTime: The start time in HH:MM format (e.g., "14:00")
- endTime: The end time in HH:MM format (e.g., "15:00")
- duration: Duration in minutes (e.g., 60)
- numberOfPeople: Number of people attending (e.g., 5)
- floor: Preferred floor (e.g., "3rd floor", "floor 3")
- amenities: Array of required amenities (e.g., ["projector", "whiteboard"])
- roomName: Specific room name if mentioned

Available amenities: {", ".join(AMENITIES)}

IMPORTANT:
1. If the user asks to book a room, extract ALL the booking details and respond with the JSON
2. If any required info is missing, ask the user for clarification
3. If the user wants to check availability, list bookings, or cancel, respond with appropriate action
4. Always be friendly and helpful

Respond ONLY with valid JSON, no other text. Example responses:

User: "Book a room for 5 people tomorrow at 2pm for 1 hour"
Response: {{"action":"book","date":"2024-02-20","startTime":"14:00","endTime":"15:00","duration":60,"numberOfPeople":5,"amenities":[]}}

User: "I need a room with projector for 10 people on Friday"
Response: {{"action":"book","date":"2024-02-23","numberOfPeople":10,"amenities":["projector"],"duration":60,"startTime":"09:00","endTime":"10:00"}}

User: "What's available tomorrow afternoon?"
Response: {{"action":"check_availability","date":"2024-02-20","timeOfDay":"afternoon"}}"""

ACTIONS = ("book", "check_availability", "cancel", "list", "help")


@dataclass
class ChatMessage:
    role: str  # "user" | "assistant"
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class ParsedBooking:
    """Structured request extracted by the model."""
    action: str
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    duration: Optional[int] = None
    number_of_people: Optional[int] = None
    floor: Optional[str] = None
    amenities: List[str] = field(default_factory=list)
    room_name: Optional[str] = None
    time_of_day: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParsedBooking":
        """
        Raises:
            ValueError: If action is missing or unknown
        """
        action = data.get("action")
        if action not in ACTIONS:
            raise ValueError(f"Unknown assistant action: {action!r}")
        return cls(
            action=action,
            date=data.get("date"),
            start_time=data.get("startTime"),
            end_time=data.get("endTime"),
            duration=data.get("duration"),
            number_of_people=data.get("numberOfPeople"),
            floor=data.get("floor"),
            amenities=list(data.get("amenities") or []),
            room_name=data.get("roomName"),
            time_of_day=data.get("timeOfDay"),
        )


@dataclass
class AssistantResponse:
    success: bool
    message: str
    parsed: Optional[ParsedBooking] = None


def parse_reply(text: str) -> Optional[ParsedBooking]:
    """Parse a model reply; plain-text replies (clarifying questions) give None."""
    try:
        data = json.loads(text)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    try:
        return ParsedBooking.from_dict(data)
    except ValueError:
        return None


def build_context(
    available_rooms: Optional[List[Dict[str, Any]]] = None,
    existing_bookings: Optional[List[Dict[str, Any]]] = None,
) -> str:
    """Summarize rooms and bookings for the prompt."""
    context = ""
    if available_rooms:
        rooms = [
            {"name": r.get("name"), "capacity": r.get("capacity"), "floor": r.get("floor")}
            for r in available_rooms
        ]
        context = f"\n\nAvailable rooms: {json.dumps(rooms)}"
    if existing_bookings:
        bookings = [
            {
                "room": b.get("roomName"),
                "date": b.get("date"),
                "startTime": b.get("startTime"),
                "endTime": b.get("endTime"),
            }
            for b in existing_bookings
        ]
        context += f"\n\nExisting bookings: {json.dumps(bookings)}"
    return context


class BookingAssistant:
    """
    Conversational front end for booking requests.

    Keeps the conversation history in memory; only the last ten turns are
    sent with each message.

    Example:
        assistant = BookingAssistant(api_key="sk-...")
        reply = await assistant.process_booking("Room for 5 tomorrow at 2pm")
        if reply.parsed and reply.parsed.action == "book":
            ...
    """

    def __init__(
        self,
        api_key: str,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        max_tokens: int = 1024,
    ):
        self._api_key = api_key
        self._config = config or ClientConfig()
        self._max_tokens = max_tokens
        self._history: List[ChatMessage] = []

        kwargs: Dict[str, Any] = {}
        if self._config.timeout is not None:
            kwargs["timeout"] = self._config.timeout
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    @property
    def history(self) -> List[ChatMessage]:
        return list(self._history)

    def clear_history(self):
        self._history = []

    async def send_message(
        self,
        message: str,
        available_rooms: Optional[List[Dict[str, Any]]] = None,
        existing_bookings: Optional[List[Dict[str, Any]]] = None,
    ) -> AssistantResponse:
        """
        Send one user message.

        Failures never raise: they come back as success=False with the
        endpoint's error message when it sent one.
        """
        context = build_context(available_rooms, existing_bookings)
        enhanced = f"{message}\n\nContext: {context}" if context else message

        messages = [m.to_dict() for m in self._history[-HISTORY_WINDOW:]]
        messages.append({"role": "user", "content": enhanced})
        self._history.append(ChatMessage(role="user", content=message))

        try:
            response = await self._client.post(
                self._config.assistant_url,
                json={
                    "model": self._config.assistant_model,
                    "max_tokens": self._max_tokens,
                    "system": BOOKING_SYSTEM_PROMPT,
                    "messages": messages,
                },
                headers={
                    "Content-Type": "application/json",
                    "x-api-key": self._api_key,
                    "anthropic-version": ANTHROPIC_VERSION,
                },
            )
            response.raise_for_status()
            text = response.json()["content"][0]["text"]
        except httpx.HTTPStatusError as e:
            logger.error(f"Assistant request failed with HTTP {e.response.status_code}")
            return AssistantResponse(success=False, message=self._error_message(e.response))
        except httpx.TransportError as e:
            logger.error(f"Assistant request failed: {e}")
            return AssistantResponse(success=False, message=GENERIC_FAILURE)
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Assistant returned an unexpected body: {e}")
            return AssistantResponse(success=False, message=GENERIC_FAILURE)

        self._history.append(ChatMessage(role="assistant", content=text))
        return AssistantResponse(success=True, message=text, parsed=parse_reply(text))

    async def process_booking(
        self,
        message: str,
        available_rooms: Optional[List[Dict[str, Any]]] = None,
        existing_bookings: Optional[List[Dict[str, Any]]] = None,
    ) -> AssistantResponse:
        """Like send_message, but flags a complete booking request as ready."""
        response = await self.send_message(message, available_rooms, existing_bookings)

        parsed = response.parsed
        if parsed is not None and parsed.action == "book" and parsed.date:
            return AssistantResponse(
                success=True,
                message="Booking details parsed. Ready to book.",
                parsed=parsed,
            )
        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            error = response.json().get("error") or {}
            return error.get("message") or GENERIC_FAILURE
        except (ValueError, AttributeError):
            return GENERIC_FAILURE

    async def aclose(self):
        await self._client.aclose()
