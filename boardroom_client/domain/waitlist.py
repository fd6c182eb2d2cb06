"""
Waitlist Domain Model - Queue entries for an occupied room slot.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from enum import Enum

from boardroom_client.domain.booking import BookingRoom


class WaitlistStatus(Enum):
    """Waitlist entry states. Promotion is decided by the backend."""
    WAITING = "WAITING"
    NOTIFIED = "NOTIFIED"
    BOOKED = "BOOKED"
    EXPIRED = "EXPIRED"


@dataclass
class WaitlistEntry:
    id: str
    room_id: str
    user_id: str
    start_time: str
    end_time: str
    status: WaitlistStatus = WaitlistStatus.WAITING
    created_at: Optional[str] = None
    room: Optional[BookingRoom] = None

    @property
    def is_active(self) -> bool:
        return self.status in (WaitlistStatus.WAITING, WaitlistStatus.NOTIFIED)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WaitlistEntry":
        return cls(
            id=data["id"],
            room_id=data.get("roomId", ""),
            user_id=data.get("userId", ""),
            start_time=data["startTime"],
            end_time=data["endTime"],
            status=WaitlistStatus(data.get("status", "WAITING")),
            created_at=data.get("createdAt"),
            room=BookingRoom.from_dict(data["room"]) if data.get("room") else None,
        )
