"""
Bookings Service - Create, edit, cancel and list bookings.
"""

from typing import List, Optional

from boardroom_client.domain.booking import (
    Booking,
    BookingFilters,
    CreateBookingData,
    UpdateBookingData,
)
from boardroom_client.domain.response import ApiResponse
from boardroom_client.services.base import BaseService


class BookingsService(BaseService):
    """
    Booking endpoints.

    Conflict detection, approval and recurrence expansion happen on the
    backend; a refused booking surfaces as ApiError (typically 409 or 422)
    with the backend's message.
    """

    async def my(self, filters: Optional[BookingFilters] = None) -> ApiResponse[List[Booking]]:
        params = filters.to_params() if filters else None
        return await self._call("GET", "/bookings/my", Booking.from_dict, many=True, params=params)

    async def list(self, filters: Optional[BookingFilters] = None) -> ApiResponse[List[Booking]]:
        params = filters.to_params() if filters else None
        return await self._call("GET", "/bookings", Booking.from_dict, many=True, params=params)

    async def get(self, booking_id: str) -> ApiResponse[Booking]:
        return await self._call("GET", f"/bookings/{booking_id}", Booking.from_dict)

    async def create(self, data: CreateBookingData) -> ApiResponse[Booking]:
        return await self._call("POST", "/bookings", Booking.from_dict, json=data.to_dict())

    async def update(self, booking_id: str, data: UpdateBookingData) -> ApiResponse[Booking]:
        return await self._call("PATCH", f"/bookings/{booking_id}", Booking.from_dict, json=data.to_dict())

    async def cancel(self, booking_id: str) -> ApiResponse[Booking]:
        return await self._call("POST", f"/bookings/{booking_id}/cancel", Booking.from_dict)
