"""
Waitlist Service - Queue for slots that are already booked.
"""

from typing import List

from boardroom_client.domain.response import ApiResponse
from boardroom_client.domain.waitlist import WaitlistEntry
from boardroom_client.services.base import BaseService


class WaitlistService(BaseService):

    async def add(self, room_id: str, start_time: str, end_time: str) -> ApiResponse[WaitlistEntry]:
        body = {"roomId": room_id, "startTime": start_time, "endTime": end_time}
        return await self._call("POST", "/waitlist", WaitlistEntry.from_dict, json=body)

    async def my(self) -> ApiResponse[List[WaitlistEntry]]:
        return await self._call("GET", "/waitlist/my", WaitlistEntry.from_dict, many=True)

    async def remove(self, entry_id: str) -> ApiResponse[None]:
        return await self._call("DELETE", f"/waitlist/{entry_id}")

    async def is_on_waitlist(self, room_id: str, start_time: str, end_time: str) -> bool:
        """Whether the current user already waits for this slot."""
        params = {"roomId": room_id, "startTime": start_time, "endTime": end_time}
        response = await self._call("GET", "/waitlist/check", params=params)
        return bool((response.data or {}).get("isOnWaitlist", False))
