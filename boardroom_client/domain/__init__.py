"""
Domain Models - Local projections of backend entities.

The backend is authoritative. The only state owned here is AuthSession.
"""

from boardroom_client.domain.user import User, UserRole, ApprovalStatus, CampusRef
from boardroom_client.domain.campus import Campus, CampusStats
from boardroom_client.domain.room import Room, FavoriteRoom, RoomFilters
from boardroom_client.domain.booking import (
    Booking,
    BookingStatus,
    BookingFilters,
    CreateBookingData,
    UpdateBookingData,
    Attendee,
    build_recurrence_rule,
    validate_booking_window,
)
from boardroom_client.domain.waitlist import WaitlistEntry, WaitlistStatus
from boardroom_client.domain.checkin import CheckIn, CheckInStatus, MyCheckIn
from boardroom_client.domain.calendar import CalendarConnection, CalendarProvider
from boardroom_client.domain.analytics import AnalyticsData
from boardroom_client.domain.response import ApiResponse, Pagination
from boardroom_client.domain.session import AuthSession, AuthTokens

__all__ = [
    "User",
    "UserRole",
    "ApprovalStatus",
    "CampusRef",
    "Campus",
    "CampusStats",
    "Room",
    "FavoriteRoom",
    "RoomFilters",
    "Booking",
    "BookingStatus",
    "BookingFilters",
    "CreateBookingData",
    "UpdateBookingData",
    "Attendee",
    "build_recurrence_rule",
    "validate_booking_window",
    "WaitlistEntry",
    "WaitlistStatus",
    "CheckIn",
    "CheckInStatus",
    "MyCheckIn",
    "CalendarConnection",
    "CalendarProvider",
    "AnalyticsData",
    "ApiResponse",
    "Pagination",
    "AuthSession",
    "AuthTokens",
]
