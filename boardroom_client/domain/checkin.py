"""
Check-in Domain Model - Attendance records for bookings.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from boardroom_client.domain.booking import BookingUser


@dataclass
class CheckIn:
    id: str
    checked_in_at: str
    user: Optional[BookingUser] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CheckIn":
        return cls(
            id=data["id"],
            checked_in_at=data.get("checkedInAt", ""),
            user=BookingUser.from_dict(data["user"]) if data.get("user") else None,
        )


@dataclass
class CheckInStatus:
    """Who has checked in to a booking so far."""
    booking_id: str
    total_expected: int = 0
    total_checked_in: int = 0
    check_ins: List[CheckIn] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.total_expected > 0 and self.total_checked_in >= self.total_expected

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CheckInStatus":
        return cls(
            booking_id=data.get("bookingId", ""),
            total_expected=data.get("totalExpected", 0),
            total_checked_in=data.get("totalCheckedIn", 0),
            check_ins=[CheckIn.from_dict(c) for c in data.get("checkIns") or []],
        )


@dataclass
class MyCheckIn:
    """A check-in of the current user, with the booking it belongs to."""
    id: str
    checked_in_at: str
    booking_id: str
    title: str
    room_name: str
    start_time: str
    end_time: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MyCheckIn":
        booking = data.get("booking") or {}
        return cls(
            id=data["id"],
            checked_in_at=data.get("checkedInAt", ""),
            booking_id=booking.get("id", ""),
            title=booking.get("title", ""),
            room_name=booking.get("roomName", ""),
            start_time=booking.get("startTime", ""),
            end_time=booking.get("endTime", ""),
        )
