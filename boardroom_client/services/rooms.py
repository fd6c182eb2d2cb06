"""
Rooms Service - Room listing, details and availability.
"""

from typing import Any, Dict, List, Optional

from boardroom_client.domain.response import ApiResponse
from boardroom_client.domain.room import Room, RoomFilters
from boardroom_client.services.base import BaseService


class RoomsService(BaseService):

    async def list(self, filters: Optional[RoomFilters] = None) -> ApiResponse[List[Room]]:
        params = filters.to_params() if filters else None
        return await self._call("GET", "/rooms", Room.from_dict, many=True, params=params)

    async def get(self, room_id: str) -> ApiResponse[Room]:
        return await self._call("GET", f"/rooms/{room_id}", Room.from_dict)

    async def availability(self, room_id: str, date: str) -> ApiResponse[Dict[str, Any]]:
        """
        Free/busy slots of a room on one day.

        Args:
            room_id: Room ID
            date: Day in YYYY-MM-DD form

        Returns:
            ApiResponse whose data is the backend's availability payload, unparsed
        """
        return await self._call("GET", f"/rooms/{room_id}/availability", params={"date": date})
