"""
Admin Service - User approval, room management and analytics.

Requires an administrative role. For a SUPER_ADMIN the campus selected in
the CampusStore scopes every call through the X-Campus-Id header.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from boardroom_client.domain.analytics import AnalyticsData
from boardroom_client.domain.response import ApiResponse
from boardroom_client.domain.room import Room
from boardroom_client.domain.user import User
from boardroom_client.services.base import BaseService


@dataclass
class CreateRoomData:
    name: str
    capacity: int
    floor: str
    building: str
    campus_id: str
    amenities: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "capacity": self.capacity,
            "floor": self.floor,
            "building": self.building,
            "amenities": list(self.amenities),
            "campusId": self.campus_id,
        }


@dataclass
class UpdateRoomData:
    """Partial room update; unset fields are not sent."""
    name: Optional[str] = None
    capacity: Optional[int] = None
    floor: Optional[str] = None
    building: Optional[str] = None
    campus_id: Optional[str] = None
    amenities: Optional[List[str]] = None
    is_active: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "capacity": self.capacity,
            "floor": self.floor,
            "building": self.building,
            "campusId": self.campus_id,
            "amenities": self.amenities,
            "isActive": self.is_active,
        }
        return {k: v for k, v in data.items() if v is not None}


def _user_from_envelope(data: Dict[str, Any]) -> User:
    # approve/reject answer {"user": {...}}
    return User.from_dict(data["user"] if "user" in data else data)


class AdminService(BaseService):

    async def analytics(self) -> ApiResponse[AnalyticsData]:
        return await self._call("GET", "/admin/analytics", AnalyticsData.from_dict)

    async def users(self) -> ApiResponse[List[User]]:
        return await self._call("GET", "/admin/users", User.from_dict, many=True)

    async def pending_users(self) -> ApiResponse[List[User]]:
        return await self._call("GET", "/admin/users/pending", User.from_dict, many=True)

    async def approve_user(self, user_id: str) -> ApiResponse[User]:
        return await self._call("POST", f"/admin/users/{user_id}/approve", _user_from_envelope)

    async def reject_user(self, user_id: str) -> ApiResponse[User]:
        return await self._call("POST", f"/admin/users/{user_id}/reject", _user_from_envelope)

    async def rooms(self) -> ApiResponse[List[Room]]:
        """All rooms, including inactive ones the admin may re-enable."""
        return await self._call("GET", "/rooms", Room.from_dict, many=True)

    async def create_room(self, data: CreateRoomData) -> ApiResponse[Room]:
        return await self._call("POST", "/admin/rooms", Room.from_dict, json=data.to_dict())

    async def update_room(self, room_id: str, data: UpdateRoomData) -> ApiResponse[Room]:
        return await self._call("PATCH", f"/admin/rooms/{room_id}", Room.from_dict, json=data.to_dict())
