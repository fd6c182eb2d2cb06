"""
Booking Domain Model - Room reservations and the form rules around them.

Availability, conflicts and recurrence expansion are computed by the
backend. Only the checks the app performs before submitting live here.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
from datetime import datetime, timezone
from enum import Enum

from boardroom_client.errors import ValidationError


class BookingStatus(Enum):
    """Booking lifecycle states (owned by the backend)."""
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    PENDING = "PENDING"


RECURRENCE_RULES = {
    "none": None,
    "daily": "FREQ=DAILY",
    "weekly": "FREQ=WEEKLY",
    "biweekly": "FREQ=WEEKLY;INTERVAL=2",
    "monthly": "FREQ=MONTHLY",
}


def build_recurrence_rule(kind: str) -> Optional[str]:
    """
    Map a repeat option to the RRULE fragment the backend expects.

    Args:
        kind: One of none, daily, weekly, biweekly, monthly

    Returns:
        RRULE string, or None for a one-off booking

    Raises:
        ValidationError: If kind is not a known repeat option
    """
    key = (kind or "none").lower()
    if key not in RECURRENCE_RULES:
        raise ValidationError(f"Unknown recurrence option: {kind}", field="recurrence")
    return RECURRENCE_RULES[key]


def validate_booking_window(
    start: datetime,
    end: datetime,
    now: Optional[datetime] = None,
    allow_past: bool = False,
) -> None:
    """
    Reject windows the backend would refuse anyway.

    Edits pass allow_past=True: an ongoing booking may be moved.
    """
    if end <= start:
        raise ValidationError("End time must be after start time.", field="endTime")

    if not allow_past:
        current = now or datetime.now(timezone.utc if start.tzinfo else None)
        if start < current:
            raise ValidationError("Cannot book in the past.", field="startTime")


@dataclass
class Attendee:
    id: str
    email: str
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Attendee":
        return cls(id=data["id"], email=data.get("email", ""), name=data.get("name"))


@dataclass
class BookingRoom:
    """Room summary embedded in a booking."""
    id: str
    name: str
    capacity: int = 0
    floor: Optional[str] = None
    building: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BookingRoom":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            capacity=int(data.get("capacity", 0)),
            floor=data.get("floor"),
            building=data.get("building"),
        )


@dataclass
class BookingUser:
    """Organizer summary embedded in a booking."""
    id: str
    first_name: str
    last_name: str
    email: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BookingUser":
        return cls(
            id=data["id"],
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            email=data.get("email"),
        )


@dataclass
class Booking:
    """Booking entity."""
    id: str
    user_id: str
    room_id: str
    title: str
    start_time: str
    end_time: str
    status: BookingStatus = BookingStatus.CONFIRMED
    description: Optional[str] = None
    recurrence_rule: Optional[str] = None
    room: Optional[BookingRoom] = None
    user: Optional[BookingUser] = None
    attendees: List[Attendee] = field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED

    @property
    def is_recurring(self) -> bool:
        return bool(self.recurrence_rule)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Booking":
        return cls(
            id=data["id"],
            user_id=data.get("userId", ""),
            room_id=data.get("roomId", ""),
            title=data.get("title", ""),
            start_time=data["startTime"],
            end_time=data["endTime"],
            status=BookingStatus(data.get("status", "CONFIRMED")),
            description=data.get("description"),
            recurrence_rule=data.get("recurrenceRule"),
            room=BookingRoom.from_dict(data["room"]) if data.get("room") else None,
            user=BookingUser.from_dict(data["user"]) if data.get("user") else None,
            attendees=[Attendee.from_dict(a) for a in data.get("attendees") or []],
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


@dataclass
class BookingFilters:
    """Filters accepted by GET /bookings and GET /bookings/my."""
    room_id: Optional[str] = None
    user_id: Optional[str] = None
    status: Optional[BookingStatus] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None

    def to_params(self) -> Dict[str, Any]:
        params = {
            "roomId": self.room_id,
            "userId": self.user_id,
            "status": self.status.value if self.status else None,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "page": self.page,
            "limit": self.limit,
        }
        return {k: v for k, v in params.items() if v is not None}


@dataclass
class CreateBookingData:
    """Body of POST /bookings."""
    room_id: str
    title: str
    start_time: str
    end_time: str
    description: Optional[str] = None
    recurrence_rule: Optional[str] = None
    attendees: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "roomId": self.room_id,
            "title": self.title,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }
        if self.description:
            data["description"] = self.description
        if self.recurrence_rule:
            data["recurrenceRule"] = self.recurrence_rule
        if self.attendees:
            data["attendees"] = list(self.attendees)
        return data


@dataclass
class UpdateBookingData:
    """Body of PATCH /bookings/{id}; unset fields are left alone."""
    title: Optional[str] = None
    description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "title": self.title,
            "description": self.description,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }
        return {k: v for k, v in data.items() if v is not None}
