"""
Boardroom Client - Composition root for the booking client.

Wires configuration, storage, session stores, the gateway and the
resource services together, and covers the common session workflows.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from boardroom_client.adapters.memory_notifications import MemoryNotificationAdapter
from boardroom_client.adapters.memory_storage import MemoryStorageAdapter
from boardroom_client.config import ClientConfig
from boardroom_client.domain.campus import Campus
from boardroom_client.domain.user import User
from boardroom_client.errors import ApiError
from boardroom_client.ports.notification_port import NotificationPort
from boardroom_client.ports.storage_port import StoragePort
from boardroom_client.sdk.auth_store import AuthStore
from boardroom_client.sdk.campus_store import CampusStore
from boardroom_client.sdk.context import SessionContext
from boardroom_client.sdk.gateway import GatewayClient
from boardroom_client.sdk.reminders import ReminderScheduler
from boardroom_client.services.admin import AdminService
from boardroom_client.services.auth import AuthService, RegisterData
from boardroom_client.services.bookings import BookingsService
from boardroom_client.services.calendar import CalendarService
from boardroom_client.services.campuses import CampusesService
from boardroom_client.services.checkins import CheckInsService
from boardroom_client.services.favorites import FavoritesService
from boardroom_client.services.rooms import RoomsService
from boardroom_client.services.waitlist import WaitlistService

logger = logging.getLogger(__name__)

CONNECTION_FAILED = "Unable to connect. Please try again."


@dataclass
class LoginResult:
    """Outcome of login/register, ready to show to the user."""
    success: bool
    message: Optional[str] = None


class BoardroomClient:
    """
    High-level booking client.

    Example:
        from boardroom_client import BoardroomClient
        from boardroom_client.adapters import VaultStorageAdapter

        client = BoardroomClient(
            storage=VaultStorageAdapter(token="..."),
            on_session_expired=show_login_screen,
        )
        client.restore()

        result = await client.login("alice@example.com", "Secret123")
        rooms = await client.rooms.list()

        await client.logout()
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        storage: Optional[StoragePort] = None,
        preferences: Optional[StoragePort] = None,
        notifications: Optional[NotificationPort] = None,
        on_session_expired: Optional[Callable[[], None]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client with adapters.

        Args:
            config: Client configuration (default: from environment)
            storage: Secure storage for the session (default: in-memory)
            preferences: Storage for non-sensitive state such as the selected campus
                (default: same as storage)
            notifications: Notification provider for booking reminders (default: in-memory)
            on_session_expired: Called when the session ends because it could not be refreshed
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.config = config or ClientConfig.from_env()
        storage = storage or MemoryStorageAdapter()

        self.context = SessionContext()
        self.auth_store = AuthStore(storage)
        self.campus_store = CampusStore(preferences or storage, self.context)
        self.gateway = GatewayClient(self.config, self.context, transport=transport)

        # Late-bound so the gateway never imports the stores
        self.context.bind_auth_state(lambda: self.auth_store)
        self.context.bind_navigation_reset(on_session_expired)

        self.auth = AuthService(self.gateway)
        self.rooms = RoomsService(self.gateway)
        self.bookings = BookingsService(self.gateway)
        self.waitlist = WaitlistService(self.gateway)
        self.checkins = CheckInsService(self.gateway)
        self.favorites = FavoritesService(self.gateway)
        self.campuses = CampusesService(self.gateway)
        self.admin = AdminService(self.gateway)
        self.calendar = CalendarService(self.gateway)

        self.reminders = ReminderScheduler(
            notifications or MemoryNotificationAdapter(),
            minutes_before=self.config.reminder_minutes,
        )

    @property
    def user(self) -> Optional[User]:
        return self.auth_store.user

    @property
    def is_authenticated(self) -> bool:
        return self.auth_store.is_authenticated

    def restore(self):
        """Load the persisted session and campus selection."""
        session = self.auth_store.hydrate()
        self.campus_store.hydrate()

        if session.is_authenticated:
            expires_at = session.access_token_expires_at()
            if expires_at is not None:
                logger.info(f"Restored session, access token expires at {expires_at.isoformat()}")
            else:
                logger.info("Restored session")

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Log in and store the session.

        Backend and network errors are turned into an unsuccessful result.
        """
        try:
            response = await self.auth.login(email, password)
        except ApiError as e:
            return LoginResult(success=False, message=e.message)
        except httpx.TransportError as e:
            logger.warning(f"Login request failed: {e}")
            return LoginResult(success=False, message=CONNECTION_FAILED)

        if response.success and response.data:
            data = response.data
            self.auth_store.login(data.user, data.tokens.access_token, data.tokens.refresh_token)
            return LoginResult(success=True)

        return LoginResult(success=False, message=response.message or "Login failed")

    async def register(self, data: RegisterData) -> LoginResult:
        """
        Register a new account.

        Raises:
            ValidationError: If the form fails local checks
        """
        try:
            response = await self.auth.register(data)
        except ApiError as e:
            return LoginResult(success=False, message=e.message)
        except httpx.TransportError as e:
            logger.warning(f"Registration request failed: {e}")
            return LoginResult(success=False, message=CONNECTION_FAILED)

        if response.success:
            return LoginResult(success=True, message=response.message)
        return LoginResult(success=False, message=response.message or "Registration failed")

    async def logout(self):
        """Revoke the refresh token if possible; always clear the local session."""
        refresh_token = self.auth_store.refresh_token
        try:
            if refresh_token:
                await self.auth.logout(refresh_token)
        except (ApiError, httpx.TransportError) as e:
            logger.info(f"Logout request failed, clearing session anyway: {e}")
        finally:
            self.auth_store.logout()

    def select_campus(self, campus: Optional[Campus]):
        """Scope following requests to a campus (SUPER_ADMIN)."""
        self.campus_store.select(campus)

    async def aclose(self):
        await self.gateway.aclose()

    async def __aenter__(self) -> "BoardroomClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
