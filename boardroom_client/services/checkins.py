"""
Check-ins Service - Attendance for bookings.
"""

from typing import List

from boardroom_client.domain.checkin import CheckIn, CheckInStatus, MyCheckIn
from boardroom_client.domain.response import ApiResponse
from boardroom_client.services.base import BaseService


class CheckInsService(BaseService):

    async def check_in(self, booking_id: str) -> ApiResponse[CheckIn]:
        return await self._call("POST", "/checkins", CheckIn.from_dict, json={"bookingId": booking_id})

    async def status(self, booking_id: str) -> ApiResponse[CheckInStatus]:
        return await self._call("GET", f"/checkins/booking/{booking_id}", CheckInStatus.from_dict)

    async def is_checked_in(self, booking_id: str) -> bool:
        response = await self._call("GET", f"/checkins/booking/{booking_id}/me")
        return bool((response.data or {}).get("isCheckedIn", False))

    async def my_today(self) -> ApiResponse[List[MyCheckIn]]:
        return await self._call("GET", "/checkins/my/today", MyCheckIn.from_dict, many=True)
