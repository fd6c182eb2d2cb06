"""
Boardroom Client - SDK for the boardroom booking backend

Authenticated gateway (bearer token, campus header, one-shot token
refresh), a persisted session store, and typed services for rooms,
bookings, waitlist, check-ins, favorites, campuses, admin and calendar.

Usage:
    from boardroom_client import BoardroomClient
    from boardroom_client.adapters import VaultStorageAdapter

    client = BoardroomClient(storage=VaultStorageAdapter(token="..."))
    client.restore()

    # Authenticate
    await client.login("alice@example.com", "Secret123")

    # Browse and book
    rooms = await client.rooms.list()
"""

__version__ = "0.1.0"

from boardroom_client.config import ClientConfig
from boardroom_client.errors import ApiError, BoardroomError, ValidationError
from boardroom_client.sdk.client import BoardroomClient, LoginResult
from boardroom_client.sdk.context import SessionContext
from boardroom_client.sdk.gateway import GatewayClient
from boardroom_client.sdk.auth_store import AuthStore
from boardroom_client.sdk.campus_store import CampusStore
from boardroom_client.domain.user import User, UserRole
from boardroom_client.domain.session import AuthSession, AuthTokens

__all__ = [
    "BoardroomClient",
    "LoginResult",
    "ClientConfig",
    "GatewayClient",
    "SessionContext",
    "AuthStore",
    "CampusStore",
    "User",
    "UserRole",
    "AuthSession",
    "AuthTokens",
    "ApiError",
    "BoardroomError",
    "ValidationError",
]
