"""
Analytics Domain Model - Admin dashboard counters.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List

from boardroom_client.domain.booking import Booking


@dataclass
class AnalyticsData:
    total_bookings: int = 0
    total_users: int = 0
    total_rooms: int = 0
    recent_bookings: List[Booking] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyticsData":
        return cls(
            total_bookings=data.get("totalBookings", 0),
            total_users=data.get("totalUsers", 0),
            total_rooms=data.get("totalRooms", 0),
            recent_bookings=[Booking.from_dict(b) for b in data.get("recentBookings") or []],
        )
