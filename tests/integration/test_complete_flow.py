"""
Integration tests for the complete session flow.

Tests: restore -> login -> authenticated calls -> silent refresh ->
campus scoping -> logout, against an in-process fake backend.
"""

import json

import httpx
import pytest

from boardroom_client import BoardroomClient, ClientConfig
from boardroom_client.adapters import MemoryStorageAdapter
from boardroom_client.domain.campus import Campus
from boardroom_client.errors import ApiError, ValidationError
from boardroom_client.sdk.auth_store import AUTH_STORAGE_KEY
from boardroom_client.services.auth import RegisterData

USER = {
    "id": "usr_1",
    "email": "alice@example.com",
    "firstName": "Alice",
    "lastName": "Smith",
    "role": "SUPER_ADMIN",
}


class FakeBookingBackend:
    """
    Minimal backend: issues A1/R1 on login, rotates to A2/R2 on refresh,
    and can expire the current access token on demand.
    """

    def __init__(self):
        self.active_access = None
        self.active_refresh = None
        self.revoked = []
        self.calls = []
        self.offline = False

    def expire_access_token(self):
        self.active_access = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if self.offline:
            raise httpx.ConnectError("network unreachable")

        path = request.url.path.removeprefix("/api/v1")
        body = json.loads(request.content) if request.content else None
        self.calls.append((request.method, path, dict(request.headers)))

        if path == "/auth/login":
            if body["password"] != "Secret123":
                return httpx.Response(401, json={"success": False, "message": "Invalid credentials"})
            self.active_access, self.active_refresh = "A1", "R1"
            return httpx.Response(200, json={
                "success": True,
                "data": {"user": USER, "tokens": {"accessToken": "A1", "refreshToken": "R1"}},
            })

        if path == "/auth/register":
            return httpx.Response(201, json={
                "success": True,
                "message": "Registration successful. Awaiting approval.",
            })

        if path == "/auth/refresh":
            if body["refreshToken"] != self.active_refresh:
                return httpx.Response(401, json={"success": False, "message": "Invalid refresh token"})
            self.active_access, self.active_refresh = "A2", "R2"
            return httpx.Response(200, json={
                "success": True,
                "data": {"accessToken": "A2", "refreshToken": "R2"},
            })

        if request.headers.get("Authorization") != f"Bearer {self.active_access}":
            return httpx.Response(401, json={"success": False, "message": "Token expired"})

        if path == "/auth/logout":
            self.revoked.append(body["refreshToken"])
            return httpx.Response(200, json={"success": True, "message": "Logged out"})

        if path == "/rooms":
            campus = request.headers.get("X-Campus-Id")
            rooms = [{"id": "room_1", "name": "Everest", "capacity": 8, "campusId": campus or "campus-1"}]
            return httpx.Response(200, json={"success": True, "data": rooms})

        return httpx.Response(404, json={"success": False, "message": "Not found"})

    def paths(self):
        return [path for _, path, _ in self.calls]


@pytest.fixture
def backend():
    return FakeBookingBackend()


@pytest.fixture
def storage():
    return MemoryStorageAdapter()


@pytest.fixture
def expired_sessions():
    return []


@pytest.fixture
def client(backend, storage, expired_sessions):
    return BoardroomClient(
        config=ClientConfig(api_url="https://api.test/api/v1"),
        storage=storage,
        on_session_expired=lambda: expired_sessions.append(True),
        transport=httpx.MockTransport(backend),
    )


class TestCompleteFlow:
    """Session lifecycle through BoardroomClient."""

    @pytest.mark.asyncio
    async def test_login_and_list_rooms(self, client, backend, storage):
        result = await client.login("alice@example.com", "Secret123")

        assert result.success
        assert client.is_authenticated
        assert client.user.full_name == "Alice Smith"
        assert json.loads(storage.get_item(AUTH_STORAGE_KEY))["accessToken"] == "A1"

        rooms = await client.rooms.list()
        assert rooms.data[0].name == "Everest"

    @pytest.mark.asyncio
    async def test_invalid_credentials(self, client, backend, expired_sessions):
        result = await client.login("alice@example.com", "wrong")

        assert not result.success
        assert result.message == "Invalid credentials"
        assert not client.is_authenticated
        assert backend.paths() == ["/auth/login"]
        assert expired_sessions == [True]

    @pytest.mark.asyncio
    async def test_login_offline(self, client, backend):
        backend.offline = True

        result = await client.login("alice@example.com", "Secret123")

        assert not result.success
        assert result.message == "Unable to connect. Please try again."

    @pytest.mark.asyncio
    async def test_silent_refresh(self, client, backend, storage, expired_sessions):
        """Test that an expired access token is refreshed once and the call succeeds."""
        await client.login("alice@example.com", "Secret123")
        backend.expire_access_token()

        rooms = await client.rooms.list()

        assert rooms.success
        assert backend.paths() == ["/auth/login", "/rooms", "/auth/refresh", "/rooms"]
        assert client.auth_store.access_token == "A2"
        assert client.auth_store.refresh_token == "R2"
        assert json.loads(storage.get_item(AUTH_STORAGE_KEY))["refreshToken"] == "R2"
        assert expired_sessions == []

    @pytest.mark.asyncio
    async def test_revoked_refresh_token_ends_session(self, client, backend, storage, expired_sessions):
        await client.login("alice@example.com", "Secret123")
        backend.expire_access_token()
        backend.active_refresh = "someone-else"

        with pytest.raises(ApiError) as exc_info:
            await client.rooms.list()

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Token expired"
        assert not client.is_authenticated
        assert storage.get_item(AUTH_STORAGE_KEY) is None
        assert expired_sessions == [True]

    @pytest.mark.asyncio
    async def test_campus_selection_scopes_requests(self, client, backend):
        await client.login("alice@example.com", "Secret123")
        client.select_campus(Campus(id="campus-9", name="South", code="S9"))

        rooms = await client.rooms.list()

        assert rooms.data[0].campus_id == "campus-9"
        assert backend.calls[-1][2]["x-campus-id"] == "campus-9"

        client.select_campus(None)
        await client.rooms.list()
        assert "x-campus-id" not in backend.calls[-1][2]

    @pytest.mark.asyncio
    async def test_logout_revokes_refresh_token(self, client, backend, storage):
        await client.login("alice@example.com", "Secret123")

        await client.logout()

        assert backend.revoked == ["R1"]
        assert not client.is_authenticated
        assert storage.get_item(AUTH_STORAGE_KEY) is None

    @pytest.mark.asyncio
    async def test_logout_clears_session_when_offline(self, client, backend, storage):
        await client.login("alice@example.com", "Secret123")
        backend.offline = True

        await client.logout()

        assert not client.is_authenticated
        assert storage.get_item(AUTH_STORAGE_KEY) is None

    @pytest.mark.asyncio
    async def test_restore_after_restart(self, backend, storage):
        """Test that a second client picks up the persisted session and campus."""
        first = BoardroomClient(
            config=ClientConfig(api_url="https://api.test/api/v1"),
            storage=storage,
            transport=httpx.MockTransport(backend),
        )
        await first.login("alice@example.com", "Secret123")
        first.select_campus(Campus(id="campus-9", name="South", code="S9"))
        await first.aclose()

        async with BoardroomClient(
            config=ClientConfig(api_url="https://api.test/api/v1"),
            storage=storage,
            transport=httpx.MockTransport(backend),
        ) as second:
            second.restore()

            assert second.is_authenticated
            assert second.user.id == "usr_1"
            assert second.campus_store.selected_campus.id == "campus-9"

            await second.rooms.list()
            assert backend.calls[-1][2]["authorization"] == "Bearer A1"
            assert backend.calls[-1][2]["x-campus-id"] == "campus-9"

    @pytest.mark.asyncio
    async def test_register(self, client):
        result = await client.register(RegisterData(
            email="bob@example.com",
            password="Secret123",
            first_name="Bob",
            last_name="Jones",
            campus_id="campus-1",
        ))

        assert result.success
        assert result.message == "Registration successful. Awaiting approval."

    @pytest.mark.asyncio
    async def test_register_rejects_weak_password(self, client, backend):
        with pytest.raises(ValidationError):
            await client.register(RegisterData(
                email="bob@example.com",
                password="weak",
                first_name="Bob",
                last_name="Jones",
                campus_id="campus-1",
            ))

        assert backend.calls == []
