"""
Services - Thin wrappers over the booking backend's REST resources.

Every service sends through the GatewayClient and returns local
projections (domain dataclasses), usually inside an ApiResponse.
"""

from boardroom_client.services.auth import AuthService, LoginResponse, RegisterData, validate_registration
from boardroom_client.services.rooms import RoomsService
from boardroom_client.services.bookings import BookingsService
from boardroom_client.services.waitlist import WaitlistService
from boardroom_client.services.checkins import CheckInsService
from boardroom_client.services.favorites import FavoritesService
from boardroom_client.services.campuses import CampusesService
from boardroom_client.services.admin import AdminService, CreateRoomData, UpdateRoomData
from boardroom_client.services.calendar import CalendarService
from boardroom_client.services.assistant import BookingAssistant, AssistantResponse, ParsedBooking

__all__ = [
    "AuthService",
    "LoginResponse",
    "RegisterData",
    "validate_registration",
    "RoomsService",
    "BookingsService",
    "WaitlistService",
    "CheckInsService",
    "FavoritesService",
    "CampusesService",
    "AdminService",
    "CreateRoomData",
    "UpdateRoomData",
    "CalendarService",
    "BookingAssistant",
    "AssistantResponse",
    "ParsedBooking",
]
